"""Release lookup: tag templates and the last release resolver."""

from __future__ import annotations

from relver.release.errors import ReleaseError
from relver.release.last_release import ReleaseRecord, get_last_release
from relver.release.template import (
    TEMPLATE_PLACEHOLDER,
    compile_tag_template,
    format_tag,
    tag_version,
    validate_tag_format,
)

__all__ = [
    "ReleaseError",
    "ReleaseRecord",
    "TEMPLATE_PLACEHOLDER",
    "compile_tag_template",
    "format_tag",
    "get_last_release",
    "tag_version",
    "validate_tag_format",
]
