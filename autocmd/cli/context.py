from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import typer

from autocmd.auto.manager import AutoCommandManager, create_command_manager
from autocmd.cli.commands._helpers import error_code_for, report_error
from autocmd.core.config import Config, apply_env_overrides, config_path, load_config_or_default
from autocmd.core.errors import ErrorCode
from autocmd.core.result import Err
from autocmd.output.console import ConsoleProtocol, RichConsole, Style


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    console: ConsoleProtocol
    manager: AutoCommandManager


def build_context() -> CLIContext:
    console = RichConsole()
    cwd = Path.cwd()

    path = config_path(cwd)
    config_result = load_config_or_default(path)
    if isinstance(config_result, Err):
        console.error(config_result.error.message)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))
    config = apply_env_overrides(config_result.value, os.environ)
    if path.exists():
        console.print(f"Loaded config from {path}", Style.DIM)

    manager_result = create_command_manager(
        repo=config.repo,
        owner=config.owner,
        github_api=config.github_api,
        plugins=config.plugins,
        console=console,
        cwd=cwd,
        env=config.env,
    )
    if isinstance(manager_result, Err):
        report_error(manager_result.error, console)
        raise typer.Exit(code=int(error_code_for(manager_result.error)))

    return CLIContext(config=config, console=console, manager=manager_result.value)
