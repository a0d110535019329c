"""Argument vectors for auto subcommands.

Each builder returns the command-specific part of the argument vector. A flag
is only emitted when its input is set: a non-empty string, a strictly
positive PR number or a true boolean. Values always follow their flag as a
separate element.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum

__all__ = [
    "AutoCommand",
    "PrState",
    "canary_args",
    "changelog_args",
    "comment_args",
    "global_args",
    "info_args",
    "label_args",
    "latest_args",
    "next_args",
    "pr_body_args",
    "pr_check_args",
    "pr_status_args",
    "release_args",
    "shipit_args",
    "version_args",
]


class AutoCommand(StrEnum):
    # Setup
    INFO = "info"
    # Publishing
    VERSION = "version"
    CHANGELOG = "changelog"
    RELEASE = "release"
    SHIPIT = "shipit"
    LATEST = "latest"
    NEXT = "next"
    CANARY = "canary"
    # Pull request interaction
    LABEL = "label"
    PR_STATUS = "pr-status"
    PR_CHECK = "pr-check"
    PR_BODY = "pr-body"
    COMMENT = "comment"


class PrState(StrEnum):
    PENDING = "pending"
    SUCCESS = "success"
    ERROR = "error"
    FAILURE = "failure"


def global_args(repo: str, owner: str, github_api: str, plugins: Sequence[str]) -> list[str]:
    """Arguments prepended to every auto invocation."""
    args: list[str] = []
    if repo:
        args += ["--repo", repo]
    if owner:
        args += ["--owner", owner]
    if github_api:
        args += ["--githubApi", github_api]
    if plugins:
        args += ["--plugins", f"[{' '.join(plugins)}]"]
    return args


def _add_pr(args: list[str], pr: int) -> None:
    if pr > 0:
        args += ["--pr", str(pr)]


def _add_changelog_release_common(
    args: list[str],
    *,
    dry_run: bool,
    no_version_prefix: bool,
    name: str,
    email: str,
    from_ref: str,
) -> None:
    if dry_run:
        args.append("--dry-run")
    if no_version_prefix:
        args.append("--no-version-prefix")
    if name:
        args += ["--name", name]
    if email:
        args += ["--email", email]
    if from_ref:
        args += ["--from", from_ref]


def _add_pr_common(args: list[str], *, dry_run: bool, pr: int, context: str) -> None:
    if dry_run:
        args.append("--dry-run")
    _add_pr(args, pr)
    if context:
        args += ["--context", context]


def info_args(*, list_plugins: bool = False) -> list[str]:
    args = [AutoCommand.INFO.value]
    if list_plugins:
        args.append("--list-plugins")
    return args


def version_args(*, only_publish_with_release_label: bool = False, from_ref: str = "") -> list[str]:
    # Written as a literal rather than AutoCommand.VERSION; kept that way.
    args = ["version"]
    if only_publish_with_release_label:
        args.append("--only-publish-with-release-label")
    if from_ref:
        args += ["--from", from_ref]
    return args


def changelog_args(
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
) -> list[str]:
    args = [AutoCommand.CHANGELOG.value]
    _add_changelog_release_common(
        args,
        dry_run=dry_run,
        no_version_prefix=no_version_prefix,
        name=name,
        email=email,
        from_ref=from_ref,
    )
    if to:
        args += ["--to", to]
    if title:
        args += ["--title", title]
    if message:
        args += ["--message", message]
    if base_branch:
        args += ["--base-branch", base_branch]
    return args


def release_args(
    *,
    dry_run: bool = False,
    no_version_prefix: bool = False,
    name: str = "",
    email: str = "",
    from_ref: str = "",
    use_version: str = "",
    base_branch: str = "",
    pre_release: bool = False,
) -> list[str]:
    args = [AutoCommand.RELEASE.value]
    _add_changelog_release_common(
        args,
        dry_run=dry_run,
        no_version_prefix=no_version_prefix,
        name=name,
        email=email,
        from_ref=from_ref,
    )
    if use_version:
        args += ["--use-version", use_version]
    if base_branch:
        args += ["--base-branch", base_branch]
    if pre_release:
        args.append("--pre-release")
    return args


def shipit_args(
    *,
    dry_run: bool = False,
    base_branch: str = "",
    only_graduate_with_release_label: bool = False,
) -> list[str]:
    args = [AutoCommand.SHIPIT.value]
    if dry_run:
        args.append("--dry-run")
    if base_branch:
        args += ["--base-branch", base_branch]
    if only_graduate_with_release_label:
        args.append("--only-graduate-with-release-label")
    return args


def latest_args(*, dry_run: bool = False, base_branch: str = "") -> list[str]:
    args = [AutoCommand.LATEST.value]
    if dry_run:
        args.append("--dry-run")
    if base_branch:
        args += ["--base-branch", base_branch]
    return args


def next_args(*, dry_run: bool = False, message: str = "") -> list[str]:
    args = [AutoCommand.NEXT.value]
    if dry_run:
        args.append("--dry-run")
    if message:
        args += ["--message", message]
    return args


def canary_args(
    *,
    dry_run: bool = False,
    pr: int = 0,
    build: str = "",
    message: str = "",
    force: bool = False,
) -> list[str]:
    args = [AutoCommand.CANARY.value]
    if dry_run:
        args.append("--dry-run")
    _add_pr(args, pr)
    if build:
        args += ["--build", build]
    if message:
        args += ["--message", message]
    if force:
        args.append("--force")
    return args


def label_args(*, pr: int = 0) -> list[str]:
    args = [AutoCommand.LABEL.value]
    _add_pr(args, pr)
    return args


def pr_status_args(
    *,
    dry_run: bool = False,
    pr: int = 0,
    context: str = "",
    url: str = "",
    sha: str = "",
    state: PrState | None = None,
    description: str = "",
) -> list[str]:
    args = [AutoCommand.PR_STATUS.value]
    _add_pr_common(args, dry_run=dry_run, pr=pr, context=context)
    if url:
        args += ["--url", url]
    if sha:
        args += ["--sha", sha]
    if state:
        args += ["--state", state.value]
    if description:
        args += ["--description", description]
    return args


def pr_check_args(
    *,
    dry_run: bool = False,
    pr: int = 0,
    context: str = "",
    url: str = "",
) -> list[str]:
    args = [AutoCommand.PR_CHECK.value]
    _add_pr_common(args, dry_run=dry_run, pr=pr, context=context)
    if url:
        args += ["--url", url]
    return args


def pr_body_args(
    *,
    dry_run: bool = False,
    pr: int = 0,
    context: str = "",
    message: str = "",
) -> list[str]:
    args = [AutoCommand.PR_BODY.value]
    _add_pr_common(args, dry_run=dry_run, pr=pr, context=context)
    if message:
        args += ["--message", message]
    return args


def comment_args(
    *,
    dry_run: bool = False,
    pr: int = 0,
    context: str = "",
    message: str = "",
    edit: bool = False,
    delete: bool = False,
) -> list[str]:
    args = [AutoCommand.COMMENT.value]
    _add_pr_common(args, dry_run=dry_run, pr=pr, context=context)
    if message:
        args += ["--message", message]
    if edit:
        args.append("--edit")
    if delete:
        args.append("--delete")
    return args
