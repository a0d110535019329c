from __future__ import annotations

import os
from pathlib import Path

import typer

from autocmd import __version__
from autocmd.cli.commands.pr import comment, label, pr_body, pr_check, pr_status
from autocmd.cli.commands.publish import canary, changelog, latest, next_, release, shipit
from autocmd.cli.commands.setup import info, version
from autocmd.core.config import (
    ENV_CONFIG,
    ENV_GITHUB_API,
    ENV_OWNER,
    ENV_PLUGINS,
    ENV_REPO,
)
from autocmd.core.errors import ErrorCode


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# Setup
app.command()(info)
app.command()(version)
# Release
app.command()(changelog)
app.command()(release)
app.command()(shipit)
app.command()(latest)
app.command("next")(next_)
app.command()(canary)
# Pull request interaction
app.command()(label)
app.command("pr-status")(pr_status)
app.command("pr-check")(pr_check)
app.command("pr-body")(pr_body)
app.command()(comment)


def _show_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=int(ErrorCode.OK))


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    show_version: bool = typer.Option(
        False,
        "--version",
        callback=_show_version,
        is_eager=True,
        help="Show version and exit.",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        help="Config file (default: ./.autocmd.toml)",
    ),
    repo: str | None = typer.Option(None, "--repo", help="Repository name"),
    owner: str | None = typer.Option(None, "--owner", help="Repository owner"),
    github_api: str | None = typer.Option(None, "--github-api", help="GitHub API base URL"),
    plugins: list[str] | None = typer.Option(
        None,
        "--plugins",
        help="auto plugin (repeatable or comma separated)",
    ),
) -> None:
    del show_version
    # Global options reach build_context() as AUTOCMD_* variables, the same
    # ones a CI job would export. auto subprocesses inherit them as well.
    if config is not None:
        os.environ[ENV_CONFIG] = str(config.expanduser())
    if repo:
        os.environ[ENV_REPO] = repo
    if owner:
        os.environ[ENV_OWNER] = owner
    if github_api:
        os.environ[ENV_GITHUB_API] = github_api
    if plugins:
        os.environ[ENV_PLUGINS] = ",".join(plugins)


def main() -> None:
    app()
