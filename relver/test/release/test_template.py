"""Tests for relver.release.template."""

from __future__ import annotations

from unittest.mock import MagicMock

import semver

from relver.core.result import Err, Ok
from relver.git.repository import Repository
from relver.release.template import (
    compile_tag_template,
    format_tag,
    tag_version,
    validate_tag_format,
)


class TestCompileTagTemplate:
    """Tests for compile_tag_template."""

    def test_prefix(self) -> None:
        pattern = compile_tag_template("v${version}")
        assert tag_version(pattern, "v1.2.3") == semver.Version(1, 2, 3)
        assert tag_version(pattern, "1.2.3") is None

    def test_anchored_both_ends(self) -> None:
        pattern = compile_tag_template("v${version}")
        assert tag_version(pattern, "xv1.2.3") is None
        assert tag_version(pattern, "v1.2.3x") is None

    def test_metacharacters_are_literal(self) -> None:
        pattern = compile_tag_template("(.+)/${version}/(a-z)")
        assert tag_version(pattern, "(.+)/1.0.0/(a-z)") == semver.Version(1, 0, 0)
        assert tag_version(pattern, "abc/1.0.0/b") is None

    def test_dot_is_not_a_wildcard(self) -> None:
        pattern = compile_tag_template("release.${version}")
        assert tag_version(pattern, "release.1.0.0") is not None
        assert tag_version(pattern, "releaseX1.0.0") is None

    def test_version_followed_by_hyphenated_suffix(self) -> None:
        pattern = compile_tag_template("2.0.0-${version}-bar.1")
        assert tag_version(pattern, "2.0.0-1.0.0-bar.1") == semver.Version(1, 0, 0)

    def test_prerelease_and_build(self) -> None:
        pattern = compile_tag_template("v${version}")
        version = tag_version(pattern, "v1.0.0-rc.1+build.5")
        assert version is not None
        assert str(version) == "1.0.0-rc.1+build.5"

    def test_invalid_versions_rejected(self) -> None:
        pattern = compile_tag_template("v${version}")
        assert tag_version(pattern, "v2.0.x") is None
        assert tag_version(pattern, "v3.0") is None
        assert tag_version(pattern, "v01.0.0") is None
        assert tag_version(pattern, "foo") is None

    def test_missing_placeholder_never_yields_version(self) -> None:
        pattern = compile_tag_template("release")
        assert tag_version(pattern, "release") is None


class TestFormatTag:
    """Tests for format_tag."""

    def test_format(self) -> None:
        assert format_tag("v${version}", "1.2.3") == "v1.2.3"
        assert format_tag("pkg/${version}-x", "0.1.0") == "pkg/0.1.0-x"


def make_repo(valid: bool = True) -> MagicMock:
    repo = MagicMock(spec=Repository)
    repo.is_valid_tag_name.return_value = valid
    return repo


class TestValidateTagFormat:
    """Tests for validate_tag_format."""

    def test_valid(self) -> None:
        repo = make_repo()
        assert validate_tag_format("v${version}", repo) == Ok("v${version}")
        repo.is_valid_tag_name.assert_called_once_with("v1.0.0")

    def test_missing_placeholder(self) -> None:
        result = validate_tag_format("v1", make_repo())
        assert isinstance(result, Err)
        assert result.error.kind == "invalid_tag_format"
        assert "exactly once" in result.error.message

    def test_duplicate_placeholder(self) -> None:
        result = validate_tag_format("${version}-${version}", make_repo())
        assert isinstance(result, Err)
        assert "found 2" in result.error.message

    def test_invalid_ref_name(self) -> None:
        result = validate_tag_format("v ${version}", make_repo(valid=False))
        assert isinstance(result, Err)
        assert "'v 1.0.0'" in result.error.message
        assert result.error.hint is not None
