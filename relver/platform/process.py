"""Subprocess execution with Result-based error handling.

Usage:
    match run(["git", "tag"], cwd=repo_path, timeout=30.0):
        case Ok(stdout):
            print(stdout)
        case Err(error):
            print(f"Failed: {error.stderr}")
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

from relver.core.result import Err, Ok, Result

__all__ = ["ProcessError", "run"]


@dataclass(frozen=True, slots=True)
class ProcessError:
    """Error from a failed subprocess execution.

    Attributes:
        command: The command that was executed.
        returncode: Exit code of the process (-1 if it never ran or timed out).
        stdout: Standard output (may be empty).
        stderr: Standard error, or a description of why the process did not run.
    """

    command: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    def __str__(self) -> str:
        cmd_str = " ".join(self.command[:3])
        if len(self.command) > 3:
            cmd_str += " ..."
        return f"{cmd_str} failed (exit {self.returncode})"


def run(
    cmd: list[str],
    cwd: Path,
    *,
    timeout: float | None = None,
) -> Result[str, ProcessError]:
    """Execute a command and return its stdout or an error.

    Args:
        cmd: Command and arguments to execute.
        cwd: Working directory for the command.
        timeout: Maximum seconds to wait (None for no limit).

    Returns:
        Ok(stdout) on exit code 0, Err(ProcessError) otherwise.
    """
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as e:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=-1,
                stdout=e.stdout if isinstance(e.stdout, str) else "",
                stderr=f"Command timed out after {timeout}s",
            )
        )
    except OSError as e:
        # Missing executable or cwd
        return Err(ProcessError(command=tuple(cmd), returncode=-1, stdout="", stderr=str(e)))

    if proc.returncode != 0:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=proc.returncode,
                stdout=proc.stdout,
                stderr=proc.stderr,
            )
        )

    return Ok(proc.stdout)
