"""Pull request interaction commands."""

from __future__ import annotations

import typer

from autocmd.auto.commands import PrState
from autocmd.cli.commands._helpers import echo_output, exit_on_error
from autocmd.cli.context import build_context

_DRY_RUN_HELP = "Report what auto would do without changing anything"
_PR_HELP = "Pull request number (ignored unless > 0)"
_CONTEXT_HELP = "Context used to identify the status, check or comment"


def label(
    pr: int = typer.Option(0, "--pr", help=_PR_HELP),
) -> None:
    """Print the release label of a pull request."""
    ctx = build_context()
    echo_output(exit_on_error(ctx.manager.label(pr=pr), ctx))


def pr_status(
    dry_run: bool = typer.Option(False, "--dry-run", help=_DRY_RUN_HELP),
    pr: int = typer.Option(0, "--pr", help=_PR_HELP),
    context: str = typer.Option("", "--context", help=_CONTEXT_HELP),
    url: str = typer.Option("", "--url", help="URL the status links to"),
    sha: str = typer.Option("", "--sha", help="Commit to attach the status to"),
    state: PrState | None = typer.Option(None, "--state", help="Status state"),
    description: str = typer.Option("", "--description", help="Status description"),
) -> None:
    """Set a commit status on a pull request."""
    ctx = build_context()
    exit_on_error(
        ctx.manager.pr_status(
            dry_run=dry_run,
            pr=pr,
            context=context,
            url=url,
            sha=sha,
            state=state,
            description=description,
        ),
        ctx,
    )
    ctx.console.success("auto pr-status")


def pr_check(
    dry_run: bool = typer.Option(False, "--dry-run", help=_DRY_RUN_HELP),
    pr: int = typer.Option(0, "--pr", help=_PR_HELP),
    context: str = typer.Option("", "--context", help=_CONTEXT_HELP),
    url: str = typer.Option("", "--url", help="URL the check links to"),
) -> None:
    """Check that a pull request carries valid labels."""
    ctx = build_context()
    echo_output(
        exit_on_error(
            ctx.manager.pr_check(dry_run=dry_run, pr=pr, context=context, url=url),
            ctx,
        )
    )


def pr_body(
    dry_run: bool = typer.Option(False, "--dry-run", help=_DRY_RUN_HELP),
    pr: int = typer.Option(0, "--pr", help=_PR_HELP),
    context: str = typer.Option("", "--context", help=_CONTEXT_HELP),
    message: str = typer.Option("", "--message", help="Text placed in the PR body"),
) -> None:
    """Update a section of a pull request body."""
    ctx = build_context()
    exit_on_error(
        ctx.manager.pr_body(dry_run=dry_run, pr=pr, context=context, message=message),
        ctx,
    )
    ctx.console.success("auto pr-body")


def comment(
    dry_run: bool = typer.Option(False, "--dry-run", help=_DRY_RUN_HELP),
    pr: int = typer.Option(0, "--pr", help=_PR_HELP),
    context: str = typer.Option("", "--context", help=_CONTEXT_HELP),
    message: str = typer.Option("", "--message", help="Comment text"),
    edit: bool = typer.Option(False, "--edit", help="Edit the existing comment for this context"),
    delete: bool = typer.Option(False, "--delete", help="Delete the comment for this context"),
) -> None:
    """Comment on a pull request."""
    ctx = build_context()
    exit_on_error(
        ctx.manager.comment(
            dry_run=dry_run,
            pr=pr,
            context=context,
            message=message,
            edit=edit,
            delete=delete,
        ),
        ctx,
    )
    ctx.console.success("auto comment")
