"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import typer

from autocmd.auto.errors import AutoError
from autocmd.core.errors import ErrorCode
from autocmd.core.result import Err, Result
from autocmd.output.console import ConsoleProtocol, Style

if TYPE_CHECKING:
    from autocmd.cli.context import CLIContext


T = TypeVar("T")


def error_code_for(error: AutoError) -> ErrorCode:
    if error.kind == "subprocess_failed":
        return ErrorCode.COMMAND_ERROR
    return ErrorCode.ENV_ERROR


def report_error(error: AutoError, console: ConsoleProtocol) -> None:
    console.error(error.message)
    if error.stdout.strip():
        console.print(error.stdout.rstrip(), Style.DIM)
    if error.hint:
        console.print(f"hint: {error.hint}", Style.DIM)


def exit_on_error[T](result: Result[T, AutoError], ctx: CLIContext) -> T:
    """Return the Ok value, or report the error and exit.

    The exit code follows the error kind: environment problems exit with
    ENV_ERROR, a failing auto command with COMMAND_ERROR.
    """
    if isinstance(result, Err):
        report_error(result.error, ctx.console)
        raise typer.Exit(code=int(error_code_for(result.error)))
    return result.value


def echo_output(stdout: str) -> None:
    """Write auto's captured output to stdout without the trailing newline."""
    text = stdout.rstrip("\n")
    if text:
        typer.echo(text)
