"""Tests for autocmd.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from autocmd.core.config import (
    DEFAULT_CONFIG_FILE,
    ENV_CONFIG,
    ENV_GITHUB_API,
    ENV_OWNER,
    ENV_PLUGINS,
    ENV_REPO,
    Config,
    apply_env_overrides,
    config_path,
    load_config,
    load_config_or_default,
    split_plugins,
)
from autocmd.core.result import Err, Ok


FULL_TOML = """
[auto]
repo = "project"
owner = "org"
github_api = "https://ghe.example.com/api/v3"
plugins = ["npm", "released", " "]

[env]
GH_TOKEN = "secret"
"""


class TestConfigDefaults:
    def test_defaults_are_empty(self) -> None:
        config = Config()
        assert config.repo == ""
        assert config.owner == ""
        assert config.github_api == ""
        assert config.plugins == ()
        assert config.env == {}

    def test_frozen(self) -> None:
        config = Config()
        with pytest.raises(AttributeError):
            config.repo = "other"  # type: ignore[misc]


class TestFromDict:
    def test_reads_auto_and_env_tables(self) -> None:
        config = Config.from_dict(
            {
                "auto": {"repo": " project ", "owner": "org", "plugins": ["npm"]},
                "env": {"NPM_TOKEN": "t"},
            }
        )
        assert config.repo == "project"
        assert config.owner == "org"
        assert config.github_api == ""
        assert config.plugins == ("npm",)
        assert config.env == {"NPM_TOKEN": "t"}

    def test_rejects_non_list_plugins(self) -> None:
        with pytest.raises(ValueError, match="plugins"):
            Config.from_dict({"auto": {"plugins": "npm"}})

    def test_rejects_non_string_env(self) -> None:
        with pytest.raises(ValueError, match="env.DEBUG"):
            Config.from_dict({"env": {"DEBUG": 1}})


class TestLoadConfig:
    def test_load_full_file(self, tmp_path: Path) -> None:
        path = tmp_path / DEFAULT_CONFIG_FILE
        path.write_text(FULL_TOML, encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Ok)
        config = result.value
        assert config.repo == "project"
        assert config.github_api == "https://ghe.example.com/api/v3"
        assert config.plugins == ("npm", "released")
        assert config.env == {"GH_TOKEN": "secret"}

    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_config(tmp_path / "missing.toml")
        assert isinstance(result, Err)
        assert "not found" in result.error.message

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / DEFAULT_CONFIG_FILE
        path.write_text("[auto\nrepo = ", encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Err)
        assert "Invalid TOML" in result.error.message
        assert result.error.path == path

    def test_invalid_structure(self, tmp_path: Path) -> None:
        path = tmp_path / DEFAULT_CONFIG_FILE
        path.write_text('[auto]\nplugins = "npm"\n', encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Err)
        assert "Invalid config structure" in result.error.message

    def test_or_default_when_absent(self, tmp_path: Path) -> None:
        result = load_config_or_default(tmp_path / DEFAULT_CONFIG_FILE)
        assert result == Ok(Config())

    def test_or_default_still_reports_broken_file(self, tmp_path: Path) -> None:
        path = tmp_path / DEFAULT_CONFIG_FILE
        path.write_text("not = [toml", encoding="utf-8")
        assert isinstance(load_config_or_default(path), Err)


class TestEnvOverrides:
    def test_env_wins_over_file(self) -> None:
        base = Config(repo="file-repo", owner="file-owner", plugins=("npm",))
        env = {
            ENV_REPO: "env-repo",
            ENV_GITHUB_API: "https://api.example.com",
            ENV_PLUGINS: "git-tag, slack,",
        }

        config = apply_env_overrides(base, env)

        assert config.repo == "env-repo"
        assert config.owner == "file-owner"
        assert config.github_api == "https://api.example.com"
        assert config.plugins == ("git-tag", "slack")

    def test_empty_values_do_not_override(self) -> None:
        base = Config(owner="org")
        assert apply_env_overrides(base, {ENV_OWNER: ""}) == base

    def test_split_plugins(self) -> None:
        assert split_plugins("npm,released") == ("npm", "released")
        assert split_plugins(" , ") == ()


class TestConfigPath:
    def test_default_in_cwd(self, tmp_path: Path) -> None:
        assert config_path(tmp_path, {}) == tmp_path / DEFAULT_CONFIG_FILE

    def test_env_override(self, tmp_path: Path) -> None:
        custom = tmp_path / "ci" / "auto.toml"
        assert config_path(tmp_path, {ENV_CONFIG: str(custom)}) == custom
