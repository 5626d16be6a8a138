"""Last release lookup.

The last release is the highest semantic version among the tags that are
reachable from HEAD and match the tag template. Tags on branches that were
never merged into the current checkout are invisible.

Usage:
    match get_last_release(Repository(path), "v${version}", RichLogger()):
        case Ok(record) if not record.is_empty:
            print(record.version, record.git_head)
        case Ok(_):
            print("first release")
        case Err(e):
            print(f"git failed: {e.message}")
"""

from __future__ import annotations

from dataclasses import dataclass

import semver

from relver.core.result import Err, Ok, Result
from relver.git.repository import GitError, Repository
from relver.output.logger import LoggerProtocol
from relver.release.template import compile_tag_template, tag_version

__all__ = ["ReleaseRecord", "get_last_release"]


@dataclass(frozen=True, slots=True)
class ReleaseRecord:
    """The last release, or the empty record when there is none.

    Attributes:
        git_head: Hash of the commit the tag points to
        git_tag: Tag name as stored in the repository
        version: Semantic version encoded in the tag
    """

    git_head: str | None = None
    git_tag: str | None = None
    version: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.git_tag is None

    def as_dict(self) -> dict[str, str]:
        if self.git_head is None or self.git_tag is None or self.version is None:
            return {}
        return {"gitHead": self.git_head, "gitTag": self.git_tag, "version": self.version}


def get_last_release(
    repo: Repository,
    template: str,
    logger: LoggerProtocol,
) -> Result[ReleaseRecord, GitError]:
    """Find the highest released version reachable from HEAD.

    Args:
        repo: Repository to inspect
        template: Tag template containing ``${version}`` once
        logger: Receives exactly one message per successful lookup

    Returns:
        Ok(ReleaseRecord) - empty when no tag matches
        Err(GitError) if listing tags or resolving the commit fails
    """
    pattern = compile_tag_template(template)

    tags_result = repo.merged_tags()
    if isinstance(tags_result, Err):
        return tags_result

    candidates: list[tuple[str, semver.Version]] = []
    for tag in tags_result.value:
        version = tag_version(pattern, tag)
        if version is not None:
            candidates.append((tag, version))

    if not candidates:
        logger.log("No git tag version found")
        return Ok(ReleaseRecord())

    # max() keeps the first of equal versions, i.e. git's tag listing order
    git_tag, version = max(candidates, key=lambda c: c[1])

    head_result = repo.tag_commit(git_tag)
    if isinstance(head_result, Err):
        return head_result

    logger.log("Found git tag %s associated with version %s", git_tag, str(version))
    return Ok(ReleaseRecord(git_head=head_result.value, git_tag=git_tag, version=str(version)))
