"""Tag name templates.

A template such as ``v${version}`` or ``pkg/${version}`` describes how a
version is embedded in a tag name. Everything around the placeholder is
literal text and is escaped before it becomes part of a regex, so
templates like ``(.+)/${version}/(a-z)`` match only tags spelled exactly
that way.
"""

from __future__ import annotations

import re

import semver

from relver.core.result import Err, Ok, Result
from relver.git.repository import Repository
from relver.release.errors import ReleaseError

__all__ = [
    "TEMPLATE_PLACEHOLDER",
    "compile_tag_template",
    "format_tag",
    "tag_version",
    "validate_tag_format",
]

TEMPLATE_PLACEHOLDER = "${version}"

# semver.org 2.0.0 grammar, unanchored and without capture groups
_SEMVER_PATTERN = (
    r"(?:0|[1-9]\d*)\.(?:0|[1-9]\d*)\.(?:0|[1-9]\d*)"
    r"(?:-(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*)?"
    r"(?:\+[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*)?"
)

_SAMPLE_VERSION = "1.0.0"


def compile_tag_template(template: str) -> re.Pattern[str]:
    """Compile a tag template into an anchored pattern.

    The first placeholder becomes the named group ``version``; all other
    text, including any further placeholder, is matched literally.
    """
    prefix, placeholder, suffix = template.partition(TEMPLATE_PLACEHOLDER)
    if not placeholder:
        return re.compile(re.escape(template))
    return re.compile(
        f"{re.escape(prefix)}(?P<version>{_SEMVER_PATTERN}){re.escape(suffix)}"
    )


def tag_version(pattern: re.Pattern[str], tag: str) -> semver.Version | None:
    """Extract the semantic version a tag encodes.

    Returns None if the tag does not match the template or the captured
    text is not a valid semantic version.
    """
    m = pattern.fullmatch(tag)
    if m is None:
        return None
    captured = m.groupdict().get("version")
    if captured is None:
        return None
    try:
        return semver.Version.parse(captured)
    except ValueError:
        return None


def format_tag(template: str, version: str) -> str:
    """Render the tag name for a version."""
    return template.replace(TEMPLATE_PLACEHOLDER, version, 1)


def validate_tag_format(template: str, repo: Repository) -> Result[str, ReleaseError]:
    """Check that a template can name release tags.

    The template must contain the placeholder exactly once, and the tag it
    produces for a sample version must be a valid git ref name.
    """
    count = template.count(TEMPLATE_PLACEHOLDER)
    if count != 1:
        return Err(
            ReleaseError(
                kind="invalid_tag_format",
                message=(
                    f"tag format must contain {TEMPLATE_PLACEHOLDER} exactly once "
                    f"(found {count}): {template!r}"
                ),
                hint='e.g. "v${version}"',
            )
        )

    sample = format_tag(template, _SAMPLE_VERSION)
    if not repo.is_valid_tag_name(sample):
        return Err(
            ReleaseError(
                kind="invalid_tag_format",
                message=f"tag format does not produce a valid git tag name: {sample!r}",
                hint="see `git help check-ref-format`",
            )
        )

    return Ok(template)
