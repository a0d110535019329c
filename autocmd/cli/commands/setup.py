from __future__ import annotations

import typer

from autocmd.cli.commands._helpers import echo_output, exit_on_error
from autocmd.cli.context import build_context


def info(
    list_plugins: bool = typer.Option(False, "--list-plugins", help="List available plugins"),
) -> None:
    """Show information about the project and auto setup."""
    ctx = build_context()
    echo_output(exit_on_error(ctx.manager.info(list_plugins=list_plugins), ctx))


def version(
    only_publish_with_release_label: bool = typer.Option(
        False,
        "--only-publish-with-release-label",
        help="Only bump when a PR carries the release label",
    ),
    from_ref: str = typer.Option("", "--from", help="Git ref to start the calculation from"),
) -> None:
    """Print the version bump auto computes for unreleased changes."""
    ctx = build_context()
    bump = exit_on_error(
        ctx.manager.version(
            only_publish_with_release_label=only_publish_with_release_label,
            from_ref=from_ref,
        ),
        ctx,
    )
    echo_output(bump)
