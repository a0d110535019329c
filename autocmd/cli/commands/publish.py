"""Changelog, release and promotion commands."""

from __future__ import annotations

import typer

from autocmd.cli.commands._helpers import exit_on_error
from autocmd.cli.context import build_context

_DRY_RUN_HELP = "Report what auto would do without changing anything"


def changelog(
    dry_run: bool = typer.Option(False, "--dry-run", help=_DRY_RUN_HELP),
    no_version_prefix: bool = typer.Option(
        False, "--no-version-prefix", help="Do not prefix versions with 'v'"
    ),
    name: str = typer.Option("", "--name", help="Git author name for the commit"),
    email: str = typer.Option("", "--email", help="Git author email for the commit"),
    from_ref: str = typer.Option("", "--from", help="Git ref to start the changelog from"),
    to: str = typer.Option("", "--to", help="Git ref to end the changelog at"),
    title: str = typer.Option("", "--title", help="Changelog section title"),
    message: str = typer.Option("", "--message", help="Commit message"),
    base_branch: str = typer.Option("", "--base-branch", help="Branch to treat as the base"),
) -> None:
    """Prepend release notes to CHANGELOG.md."""
    ctx = build_context()
    exit_on_error(
        ctx.manager.changelog(
            dry_run=dry_run,
            no_version_prefix=no_version_prefix,
            name=name,
            email=email,
            from_ref=from_ref,
            to=to,
            title=title,
            message=message,
            base_branch=base_branch,
        ),
        ctx,
    )
    ctx.console.success("auto changelog")


def release(
    dry_run: bool = typer.Option(False, "--dry-run", help=_DRY_RUN_HELP),
    no_version_prefix: bool = typer.Option(
        False, "--no-version-prefix", help="Do not prefix versions with 'v'"
    ),
    name: str = typer.Option("", "--name", help="Git author name for the commit"),
    email: str = typer.Option("", "--email", help="Git author email for the commit"),
    from_ref: str = typer.Option("", "--from", help="Git ref to start the release notes from"),
    use_version: str = typer.Option("", "--use-version", help="Release this exact version"),
    base_branch: str = typer.Option("", "--base-branch", help="Branch to treat as the base"),
    pre_release: bool = typer.Option(False, "--pre-release", help="Mark as a pre-release"),
) -> None:
    """Create a GitHub release."""
    ctx = build_context()
    exit_on_error(
        ctx.manager.release(
            dry_run=dry_run,
            no_version_prefix=no_version_prefix,
            name=name,
            email=email,
            from_ref=from_ref,
            use_version=use_version,
            base_branch=base_branch,
            pre_release=pre_release,
        ),
        ctx,
    )
    ctx.console.success("auto release")


def shipit(
    dry_run: bool = typer.Option(False, "--dry-run", help=_DRY_RUN_HELP),
    base_branch: str = typer.Option("", "--base-branch", help="Branch to treat as the base"),
    only_graduate_with_release_label: bool = typer.Option(
        False,
        "--only-graduate-with-release-label",
        help="Only graduate prereleases that carry the release label",
    ),
) -> None:
    """Run the full release for the current branch."""
    ctx = build_context()
    exit_on_error(
        ctx.manager.shipit(
            dry_run=dry_run,
            base_branch=base_branch,
            only_graduate_with_release_label=only_graduate_with_release_label,
        ),
        ctx,
    )
    ctx.console.success("auto shipit")


def latest(
    dry_run: bool = typer.Option(False, "--dry-run", help=_DRY_RUN_HELP),
    base_branch: str = typer.Option("", "--base-branch", help="Branch to treat as the base"),
) -> None:
    """Publish a latest release."""
    ctx = build_context()
    exit_on_error(ctx.manager.latest(dry_run=dry_run, base_branch=base_branch), ctx)
    ctx.console.success("auto latest")


def next_(
    dry_run: bool = typer.Option(False, "--dry-run", help=_DRY_RUN_HELP),
    message: str = typer.Option("", "--message", help="Commit message"),
) -> None:
    """Publish a prerelease from the next branch."""
    ctx = build_context()
    exit_on_error(ctx.manager.next(dry_run=dry_run, message=message), ctx)
    ctx.console.success("auto next")


def canary(
    dry_run: bool = typer.Option(False, "--dry-run", help=_DRY_RUN_HELP),
    pr: int = typer.Option(0, "--pr", help="Pull request number (ignored unless > 0)"),
    build: str = typer.Option("", "--build", help="Build identifier"),
    message: str = typer.Option("", "--message", help="Canary comment message"),
    force: bool = typer.Option(False, "--force", help="Publish even outside a PR build"),
) -> None:
    """Publish a canary release."""
    ctx = build_context()
    exit_on_error(
        ctx.manager.canary(dry_run=dry_run, pr=pr, build=build, message=message, force=force),
        ctx,
    )
    ctx.console.success("auto canary")
