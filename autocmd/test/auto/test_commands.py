"""Tests for autocmd.auto.commands argument builders."""

from __future__ import annotations

import pytest

from autocmd.auto.commands import (
    AutoCommand,
    PrState,
    canary_args,
    changelog_args,
    comment_args,
    global_args,
    info_args,
    label_args,
    latest_args,
    next_args,
    pr_body_args,
    pr_check_args,
    pr_status_args,
    release_args,
    shipit_args,
    version_args,
)


class TestEnums:
    def test_tokens(self) -> None:
        assert [c.value for c in AutoCommand] == [
            "info",
            "version",
            "changelog",
            "release",
            "shipit",
            "latest",
            "next",
            "canary",
            "label",
            "pr-status",
            "pr-check",
            "pr-body",
            "comment",
        ]

    def test_pr_states(self) -> None:
        assert {s.value for s in PrState} == {"pending", "success", "error", "failure"}


class TestGlobalArgs:
    def test_all_present_in_fixed_order(self) -> None:
        args = global_args("project", "org", "https://api.github.com", ["npm", "released"])
        assert args == [
            "--repo",
            "project",
            "--owner",
            "org",
            "--githubApi",
            "https://api.github.com",
            "--plugins",
            "[npm released]",
        ]

    def test_all_absent(self) -> None:
        assert global_args("", "", "", []) == []

    @pytest.mark.parametrize(
        ("repo", "owner", "api", "plugins", "expected"),
        [
            ("project", "", "", [], ["--repo", "project"]),
            ("", "org", "", [], ["--owner", "org"]),
            ("", "", "https://ghe/api", [], ["--githubApi", "https://ghe/api"]),
            ("", "", "", ["npm"], ["--plugins", "[npm]"]),
            ("project", "", "", ["npm"], ["--repo", "project", "--plugins", "[npm]"]),
        ],
    )
    def test_absent_inputs_omit_their_pair(
        self, repo: str, owner: str, api: str, plugins: list[str], expected: list[str]
    ) -> None:
        assert global_args(repo, owner, api, plugins) == expected


class TestSetupAndVersion:
    def test_info(self) -> None:
        assert info_args() == ["info"]
        assert info_args(list_plugins=True) == ["info", "--list-plugins"]

    def test_version_uses_literal_token(self) -> None:
        assert version_args() == ["version"]
        assert version_args(only_publish_with_release_label=True, from_ref="v1.2.0") == [
            "version",
            "--only-publish-with-release-label",
            "--from",
            "v1.2.0",
        ]


class TestChangelogRelease:
    def test_release_scenario(self) -> None:
        args = release_args(
            dry_run=True,
            name="bot",
            email="bot@x.com",
            from_ref="v1.0.0",
            use_version="",
            base_branch="",
            pre_release=False,
        )
        assert args == [
            "release",
            "--dry-run",
            "--name",
            "bot",
            "--email",
            "bot@x.com",
            "--from",
            "v1.0.0",
        ]

    def test_release_all_flags(self) -> None:
        args = release_args(
            dry_run=True,
            no_version_prefix=True,
            name="bot",
            email="bot@x.com",
            from_ref="v1.0.0",
            use_version="2.0.0",
            base_branch="main",
            pre_release=True,
        )
        assert args == [
            "release",
            "--dry-run",
            "--no-version-prefix",
            "--name",
            "bot",
            "--email",
            "bot@x.com",
            "--from",
            "v1.0.0",
            "--use-version",
            "2.0.0",
            "--base-branch",
            "main",
            "--pre-release",
        ]

    def test_changelog_all_flags(self) -> None:
        args = changelog_args(
            dry_run=True,
            no_version_prefix=True,
            name="bot",
            email="bot@x.com",
            from_ref="v1.0.0",
            to="v1.1.0",
            title="Release notes",
            message="update changelog",
            base_branch="main",
        )
        assert args == [
            "changelog",
            "--dry-run",
            "--no-version-prefix",
            "--name",
            "bot",
            "--email",
            "bot@x.com",
            "--from",
            "v1.0.0",
            "--to",
            "v1.1.0",
            "--title",
            "Release notes",
            "--message",
            "update changelog",
            "--base-branch",
            "main",
        ]

    def test_defaults_emit_only_the_token(self) -> None:
        assert changelog_args() == ["changelog"]
        assert release_args() == ["release"]


class TestPromotion:
    def test_shipit(self) -> None:
        assert shipit_args() == ["shipit"]
        assert shipit_args(
            dry_run=True, base_branch="main", only_graduate_with_release_label=True
        ) == ["shipit", "--dry-run", "--base-branch", "main", "--only-graduate-with-release-label"]

    def test_latest(self) -> None:
        assert latest_args() == ["latest"]
        assert latest_args(dry_run=True, base_branch="main") == [
            "latest",
            "--dry-run",
            "--base-branch",
            "main",
        ]

    def test_next(self) -> None:
        assert next_args() == ["next"]
        assert next_args(dry_run=True, message="%v") == ["next", "--dry-run", "--message", "%v"]

    def test_canary_all_flags(self) -> None:
        assert canary_args(dry_run=True, pr=7, build="123", message="try it", force=True) == [
            "canary",
            "--dry-run",
            "--pr",
            "7",
            "--build",
            "123",
            "--message",
            "try it",
            "--force",
        ]

    @pytest.mark.parametrize("pr", [0, -1, -42])
    def test_canary_non_positive_pr_omitted(self, pr: int) -> None:
        assert canary_args(pr=pr, build="9") == ["canary", "--build", "9"]


class TestPullRequest:
    def test_label(self) -> None:
        assert label_args(pr=15) == ["label", "--pr", "15"]
        assert label_args(pr=0) == ["label"]

    def test_pr_status_all_flags(self) -> None:
        args = pr_status_args(
            dry_run=True,
            pr=3,
            context="ci",
            url="https://ci.example.com/3",
            sha="abc123",
            state=PrState.PENDING,
            description="building",
        )
        assert args == [
            "pr-status",
            "--dry-run",
            "--pr",
            "3",
            "--context",
            "ci",
            "--url",
            "https://ci.example.com/3",
            "--sha",
            "abc123",
            "--state",
            "pending",
            "--description",
            "building",
        ]

    def test_pr_status_without_state(self) -> None:
        assert pr_status_args(sha="abc") == ["pr-status", "--sha", "abc"]

    def test_pr_check(self) -> None:
        assert pr_check_args(pr=3, url="https://ci") == ["pr-check", "--pr", "3", "--url", "https://ci"]

    def test_pr_body(self) -> None:
        assert pr_body_args(dry_run=True, context="docs", message="hi") == [
            "pr-body",
            "--dry-run",
            "--context",
            "docs",
            "--message",
            "hi",
        ]

    def test_comment_scenario(self) -> None:
        args = comment_args(
            dry_run=False, pr=42, context="ci", message="done", edit=False, delete=True
        )
        assert args == ["comment", "--pr", "42", "--context", "ci", "--message", "done", "--delete"]

    def test_comment_edit(self) -> None:
        assert comment_args(pr=-5, message="m", edit=True) == ["comment", "--message", "m", "--edit"]


@pytest.mark.parametrize(
    "args",
    [
        changelog_args(),
        release_args(),
        shipit_args(),
        latest_args(),
        next_args(),
        canary_args(),
        label_args(),
        pr_status_args(),
        pr_check_args(),
        pr_body_args(),
        comment_args(),
        version_args(),
        info_args(),
    ],
)
def test_defaults_never_emit_flags(args: list[str]) -> None:
    assert len(args) == 1
    assert not args[0].startswith("--")
