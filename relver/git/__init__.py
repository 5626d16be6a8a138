"""Git operations module.

Usage:
    from relver.git import Repository

    repo = Repository(Path("/path/to/repo"))
    tags = repo.merged_tags()
"""

from relver.git.repository import GitError, Repository

__all__ = [
    "GitError",
    "Repository",
]
