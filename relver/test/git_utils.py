"""Helpers that build throwaway git repositories for tests."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


def _git(path: Path, *args: str) -> str:
    proc = subprocess.run(
        ["git", "-C", str(path), *args],
        capture_output=True,
        text=True,
        check=True,
    )
    return proc.stdout.strip()


def git_repo(path: Path) -> Path:
    """Initialise a repository with a local identity and signing disabled."""
    path.mkdir(parents=True, exist_ok=True)
    _git(path, "init", "-q")
    _git(path, "config", "user.name", "relver tests")
    _git(path, "config", "user.email", "tests@relver.invalid")
    _git(path, "config", "commit.gpgsign", "false")
    _git(path, "config", "tag.gpgsign", "false")
    return path


def git_commits(path: Path, messages: list[str]) -> list[str]:
    """Create one empty commit per message and return their hashes in order."""
    hashes: list[str] = []
    for message in messages:
        _git(path, "commit", "-q", "--allow-empty", "--no-verify", "-m", message)
        hashes.append(_git(path, "rev-parse", "HEAD"))
    return hashes


def git_tag_version(path: Path, tag: str, *, annotated: bool = False) -> None:
    """Tag HEAD."""
    if annotated:
        _git(path, "tag", "-a", "-m", tag, tag)
    else:
        _git(path, "tag", tag)


def git_checkout(path: Path, branch: str, *, create: bool = True) -> None:
    if create:
        _git(path, "checkout", "-q", "-b", branch)
    else:
        _git(path, "checkout", "-q", branch)


def git_current_branch(path: Path) -> str:
    return _git(path, "rev-parse", "--abbrev-ref", "HEAD")
