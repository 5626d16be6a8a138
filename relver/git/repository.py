"""Git repository abstraction.

This module provides the Repository class, an explicit handle on one
checkout. Every git command runs with ``-C <path>`` so nothing depends on
the process working directory. Fallible operations return Result types.

Usage:
    repo = Repository(Path("/path/to/repo"))

    match repo.merged_tags():
        case Ok(tags):
            for tag in tags:
                print(tag)
        case Err(e):
            print(f"Error: {e.message}")
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from relver.core.result import Err, Ok, Result
from relver.platform.process import ProcessError
from relver.platform.process import run as run_process

_GIT_TIMEOUT_SECONDS = 30.0

__all__ = [
    "GitError",
    "Repository",
]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git command that failed
        message: Error message
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1


class Repository:
    """Git repository handle.

    Attributes:
        path: Path to the repository root (or any directory inside it)
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def __repr__(self) -> str:
        return f"Repository({str(self.path)!r})"

    def merged_tags(self, ref: str = "HEAD") -> Result[list[str], GitError]:
        """List tags whose commit is reachable from ``ref``.

        Runs `git tag --merged <ref>`. Git lists tags in ascending refname
        order; that order is kept.

        Returns:
            Ok(list of tag names) on success
            Err(GitError) on failure (not a repository, no commits, ...)
        """
        command = f"tag --merged {ref}"
        result = self._run(["tag", "--merged", ref])
        match result:
            case Err(e):
                return Err(_git_error(command, e, "git tag failed"))
            case Ok(stdout):
                return Ok([ln.strip() for ln in stdout.splitlines() if ln.strip()])

    def tag_commit(self, tag: str) -> Result[str, GitError]:
        """Resolve a tag to the hash of the commit it points to.

        Annotated tags are peeled to their commit.

        Returns:
            Ok(commit hash) on success
            Err(GitError) if the tag does not exist or git fails
        """
        command = f"rev-list -1 {tag}"
        result = self._run(["rev-list", "-1", f"refs/tags/{tag}"])
        match result:
            case Err(e):
                return Err(_git_error(command, e, "git rev-list failed"))
            case Ok(stdout):
                sha = stdout.strip()
                if not sha:
                    return Err(GitError(command=command, message=f"tag has no commit: {tag}"))
                return Ok(sha)

    def is_valid_tag_name(self, name: str) -> bool:
        """Check a tag name with `git check-ref-format`.

        Returns False if the name is rejected or git cannot run.
        """
        return isinstance(self._run(["check-ref-format", f"refs/tags/{name}"]), Ok)

    def _run(self, args: list[str]) -> Result[str, ProcessError]:
        """Run a git command in this repository."""
        return run_process(
            ["git", "-C", str(self.path), *args],
            cwd=self.path,
            timeout=_GIT_TIMEOUT_SECONDS,
        )


def _git_error(command: str, error: ProcessError, fallback: str) -> GitError:
    return GitError(
        command=command,
        message=error.stderr.strip() or error.stdout.strip() or fallback,
        returncode=error.returncode,
    )
