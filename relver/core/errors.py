"""Exit codes for the command line.

Values are used as process exit codes and should remain stable:
- 0: Success (including "no release found")
- 1: User error (bad tag format, unreadable config)
- 2: Environment error (missing repository, git failed)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands."""

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
