"""last-release command - print the last released version of a repository."""

from __future__ import annotations

import json
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from relver.core.config import CONFIG_FILE_NAME, Config, load_config
from relver.core.errors import ErrorCode
from relver.core.result import Err
from relver.git.repository import Repository
from relver.output.logger import RichLogger
from relver.release.last_release import get_last_release
from relver.release.template import validate_tag_format

_console = Console(highlight=False)


def _exit(err: str, *, code: ErrorCode) -> NoReturn:
    typer.echo(f"error: {err}", err=True)
    raise typer.Exit(code=int(code))


def _load_config(repo: Repository, config_path: Path | None) -> Config:
    path = config_path if config_path is not None else repo.path / CONFIG_FILE_NAME
    if config_path is None and not path.exists():
        return Config()

    result = load_config(path)
    if isinstance(result, Err):
        _exit(result.error.message, code=ErrorCode.USER_ERROR)
    return result.value


def last_release(
    tag_format: str | None = typer.Option(
        None,
        "--tag-format",
        "-t",
        help="Tag template, e.g. 'v${version}' (overrides relver.toml)",
    ),
    repo_path: Path = typer.Option(
        Path("."),
        "--repo",
        help="Repository to inspect",
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        help=f"Config file (default: <repo>/{CONFIG_FILE_NAME})",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the release record as JSON."),
) -> None:
    """Show the highest released version reachable from HEAD."""
    try:
        repo = Repository(repo_path.expanduser().resolve())
    except OSError as e:
        _exit(f"invalid --repo: {e}", code=ErrorCode.USER_ERROR)
    if not repo.path.is_dir():
        _exit(f"repository not found: {repo.path}", code=ErrorCode.ENV_ERROR)

    config = _load_config(repo, config_path)
    template = tag_format if tag_format is not None else config.tag_format

    valid = validate_tag_format(template, repo)
    if isinstance(valid, Err):
        _exit(valid.error.pretty(), code=ErrorCode.USER_ERROR)

    # Keep stdout clean for the JSON document
    logger = RichLogger(stderr=as_json)
    result = get_last_release(repo, template, logger)
    if isinstance(result, Err):
        _exit(
            f"git {result.error.command}: {result.error.message}",
            code=ErrorCode.ENV_ERROR,
        )

    record = result.value
    if as_json:
        typer.echo(json.dumps(record.as_dict()))
        return

    for key, value in record.as_dict().items():
        _console.print(f"[bold]{key}[/]: {escape(value)}")
