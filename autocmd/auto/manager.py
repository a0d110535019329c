"""Typed front end to the auto CLI.

``create_command_manager`` locates auto, checks its version and returns an
``AutoCommandManager`` bound to an immutable ``InvokerConfig``. Every
operation runs exactly one auto process:

    result = create_command_manager(repo="project", owner="org", cwd=root, console=console)
    if isinstance(result, Ok):
        manager = result.value
        match manager.version(from_ref="v1.0.0"):
            case Ok(bump):
                print(bump.strip())
            case Err(error):
                print(error.message)
"""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from autocmd.auto import commands
from autocmd.auto.commands import PrState
from autocmd.auto.discovery import AutoExecutable, discover_auto
from autocmd.auto.errors import AutoError
from autocmd.auto.version import check_minimum_version, parse_version_output
from autocmd.core.result import Err, Ok, Result
from autocmd.output.console import ConsoleProtocol, Style
from autocmd.platform.process import ProcessOutput
from autocmd.platform.process import run as run_process

__all__ = [
    "AutoCommandManager",
    "AutoOutput",
    "InvokerConfig",
    "create_command_manager",
]

AutoOutput = ProcessOutput


def _empty_overlay() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class InvokerConfig:
    """Everything an invocation needs, fixed at initialization.

    Attributes:
        executable: Resolved auto command
        global_args: Arguments prepended to every invocation
        env: Variables overlaid on the process environment (overlay wins)
        cwd: Working directory for auto
    """

    executable: AutoExecutable
    global_args: tuple[str, ...] = ()
    env: Mapping[str, str] = field(default_factory=_empty_overlay)
    cwd: Path = field(default_factory=Path.cwd)

    def command_line(self, args: Sequence[str]) -> list[str]:
        return [*self.executable.argv, *self.global_args, *args]

    def merged_env(self) -> dict[str, str]:
        env = dict(os.environ)
        env.update(self.env)
        return env


class AutoCommandManager:
    """Runs auto subcommands for a fixed repository configuration."""

    def __init__(self, config: InvokerConfig, console: ConsoleProtocol) -> None:
        self._config = config
        self._console = console

    @property
    def config(self) -> InvokerConfig:
        return self._config

    def exec_auto(
        self,
        args: Sequence[str],
        *,
        allow_all_exit_codes: bool = False,
    ) -> Result[AutoOutput, AutoError]:
        """Run auto with the global args followed by ``args``.

        A non-zero exit code is an error unless ``allow_all_exit_codes`` is set.
        """
        cmd = self._config.command_line(args)
        self._console.print(f"$ {' '.join(cmd)}", Style.DIM)

        result = run_process(
            cmd,
            cwd=self._config.cwd,
            env=self._config.merged_env(),
            allow_all_exit_codes=allow_all_exit_codes,
        )
        if isinstance(result, Err):
            error = result.error
            return Err(
                AutoError(
                    kind="subprocess_failed",
                    message=f"auto {args[0] if args else ''} failed (exit {error.returncode})",
                    hint=error.stderr.strip() or None,
                    exit_code=error.returncode,
                    stdout=error.stdout,
                )
            )
        return Ok(result.value)

    def _stdout(self, args: list[str]) -> Result[str, AutoError]:
        result = self.exec_auto(args)
        if isinstance(result, Err):
            return result
        return Ok(result.value.stdout)

    def _run(self, args: list[str]) -> Result[None, AutoError]:
        """Run an operation whose output is a report, not a value.

        The captured stdout (dry-run plans, release notes) goes to the console.
        """
        result = self.exec_auto(args)
        if isinstance(result, Err):
            return result
        report = result.value.stdout.rstrip("\n")
        if report:
            self._console.print(report)
        return Ok(None)

    # Setup

    def info(self, *, list_plugins: bool = False) -> Result[str, AutoError]:
        return self._stdout(commands.info_args(list_plugins=list_plugins))

    # Release

    def version(
        self,
        *,
        only_publish_with_release_label: bool = False,
        from_ref: str = "",
    ) -> Result[str, AutoError]:
        """Return the version bump auto computes (``major``, ``minor``, ...)."""
        return self._stdout(
            commands.version_args(
                only_publish_with_release_label=only_publish_with_release_label,
                from_ref=from_ref,
            )
        )

    def changelog(
        self,
        *,
        dry_run: bool = False,
        no_version_prefix: bool = False,
        name: str = "",
        email: str = "",
        from_ref: str = "",
        to: str = "",
        title: str = "",
        message: str = "",
        base_branch: str = "",
    ) -> Result[None, AutoError]:
        return self._run(
            commands.changelog_args(
                dry_run=dry_run,
                no_version_prefix=no_version_prefix,
                name=name,
                email=email,
                from_ref=from_ref,
                to=to,
                title=title,
                message=message,
                base_branch=base_branch,
            )
        )

    def release(
        self,
        *,
        dry_run: bool = False,
        no_version_prefix: bool = False,
        name: str = "",
        email: str = "",
        from_ref: str = "",
        use_version: str = "",
        base_branch: str = "",
        pre_release: bool = False,
    ) -> Result[None, AutoError]:
        return self._run(
            commands.release_args(
                dry_run=dry_run,
                no_version_prefix=no_version_prefix,
                name=name,
                email=email,
                from_ref=from_ref,
                use_version=use_version,
                base_branch=base_branch,
                pre_release=pre_release,
            )
        )

    def shipit(
        self,
        *,
        dry_run: bool = False,
        base_branch: str = "",
        only_graduate_with_release_label: bool = False,
    ) -> Result[None, AutoError]:
        return self._run(
            commands.shipit_args(
                dry_run=dry_run,
                base_branch=base_branch,
                only_graduate_with_release_label=only_graduate_with_release_label,
            )
        )

    def latest(self, *, dry_run: bool = False, base_branch: str = "") -> Result[None, AutoError]:
        return self._run(commands.latest_args(dry_run=dry_run, base_branch=base_branch))

    def next(self, *, dry_run: bool = False, message: str = "") -> Result[None, AutoError]:
        return self._run(commands.next_args(dry_run=dry_run, message=message))

    def canary(
        self,
        *,
        dry_run: bool = False,
        pr: int = 0,
        build: str = "",
        message: str = "",
        force: bool = False,
    ) -> Result[None, AutoError]:
        return self._run(
            commands.canary_args(dry_run=dry_run, pr=pr, build=build, message=message, force=force)
        )

    # Pull request interaction

    def label(self, *, pr: int = 0) -> Result[str, AutoError]:
        return self._stdout(commands.label_args(pr=pr))

    def pr_status(
        self,
        *,
        dry_run: bool = False,
        pr: int = 0,
        context: str = "",
        url: str = "",
        sha: str = "",
        state: PrState | None = None,
        description: str = "",
    ) -> Result[None, AutoError]:
        return self._run(
            commands.pr_status_args(
                dry_run=dry_run,
                pr=pr,
                context=context,
                url=url,
                sha=sha,
                state=state,
                description=description,
            )
        )

    def pr_check(
        self,
        *,
        dry_run: bool = False,
        pr: int = 0,
        context: str = "",
        url: str = "",
    ) -> Result[str, AutoError]:
        return self._stdout(
            commands.pr_check_args(dry_run=dry_run, pr=pr, context=context, url=url)
        )

    def pr_body(
        self,
        *,
        dry_run: bool = False,
        pr: int = 0,
        context: str = "",
        message: str = "",
    ) -> Result[None, AutoError]:
        return self._run(
            commands.pr_body_args(dry_run=dry_run, pr=pr, context=context, message=message)
        )

    def comment(
        self,
        *,
        dry_run: bool = False,
        pr: int = 0,
        context: str = "",
        message: str = "",
        edit: bool = False,
        delete: bool = False,
    ) -> Result[None, AutoError]:
        return self._run(
            commands.comment_args(
                dry_run=dry_run,
                pr=pr,
                context=context,
                message=message,
                edit=edit,
                delete=delete,
            )
        )

    def check_version(self) -> Result[None, AutoError]:
        """Fail if auto reports a version below the supported minimum.

        Multi-line ``--version`` output is not checked.
        """
        self._console.print("Getting auto version", Style.DIM)
        output = self.exec_auto(["--version"])
        if isinstance(output, Err):
            return output

        parsed = parse_version_output(output.value.stdout)
        if isinstance(parsed, Err):
            return parsed
        if parsed.value is None:
            self._console.warning("auto --version printed several lines; skipping version check")
            return Ok(None)

        checked = check_minimum_version(parsed.value, command=self._config.executable.display)
        if isinstance(checked, Err):
            return checked
        self._console.print(f"auto version {checked.value}", Style.DIM)
        return Ok(None)


def create_command_manager(
    *,
    repo: str = "",
    owner: str = "",
    github_api: str = "",
    plugins: Sequence[str] = (),
    console: ConsoleProtocol,
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> Result[AutoCommandManager, AutoError]:
    """Locate auto, verify its version and return a ready manager."""
    executable = discover_auto()
    if isinstance(executable, Err):
        return executable
    console.print(f"Using {executable.value.display}", Style.DIM)

    config = InvokerConfig(
        executable=executable.value,
        global_args=tuple(commands.global_args(repo, owner, github_api, plugins)),
        env=MappingProxyType(dict(env or {})),
        cwd=cwd if cwd is not None else Path.cwd(),
    )
    manager = AutoCommandManager(config, console)

    checked = manager.check_version()
    if isinstance(checked, Err):
        return checked
    return Ok(manager)
