"""Typed configuration loading and access.

Configuration comes from a TOML file (``.autocmd.toml`` by default) and is
then overridden by ``AUTOCMD_*`` environment variables:

    [auto]
    repo = "project"
    owner = "org"
    github_api = "https://api.github.com"
    plugins = ["npm", "released"]

    [env]
    GH_TOKEN = "..."
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_str_list, get_table

__all__ = [
    "Config",
    "ConfigError",
    "DEFAULT_CONFIG_FILE",
    "ENV_CONFIG",
    "ENV_REPO",
    "ENV_OWNER",
    "ENV_GITHUB_API",
    "ENV_PLUGINS",
    "apply_env_overrides",
    "config_path",
    "load_config",
    "load_config_or_default",
    "split_plugins",
]

DEFAULT_CONFIG_FILE = ".autocmd.toml"

ENV_CONFIG = "AUTOCMD_CONFIG"
ENV_REPO = "AUTOCMD_REPO"
ENV_OWNER = "AUTOCMD_OWNER"
ENV_GITHUB_API = "AUTOCMD_GITHUB_API"
ENV_PLUGINS = "AUTOCMD_PLUGINS"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


def _empty_env() -> dict[str, str]:
    return {}


@dataclass(frozen=True, slots=True)
class Config:
    """Settings used to build the auto invoker.

    Attributes:
        repo: Repository name passed as ``--repo``
        owner: Repository owner passed as ``--owner``
        github_api: GitHub API base URL passed as ``--githubApi``
        plugins: Plugin identifiers passed as ``--plugins``
        env: Environment overlay applied on top of the process environment
    """

    repo: str = ""
    owner: str = ""
    github_api: str = ""
    plugins: tuple[str, ...] = ()
    env: dict[str, str] = field(default_factory=_empty_env)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML).

        Raises:
            ValueError: If a value has the wrong type.
        """
        auto: StrDict = get_table(data, "auto") or {}
        env_table: StrDict = get_table(data, "env") or {}

        plugins: list[str] = []
        if "plugins" in auto:
            parsed = get_str_list(auto, "plugins")
            if parsed is None:
                raise ValueError("auto.plugins must be a list of strings")
            plugins = parsed

        env: dict[str, str] = {}
        for key, value in env_table.items():
            if not isinstance(value, str):
                raise ValueError(f"env.{key} must be a string")
            env[key] = value

        return cls(
            repo=get_str(auto, "repo") or "",
            owner=get_str(auto, "owner") or "",
            github_api=get_str(auto, "github_api") or "",
            plugins=tuple(plugins),
            env=env,
        )


def split_plugins(raw: str) -> tuple[str, ...]:
    """Split a comma separated plugin list, dropping blanks."""
    return tuple(p for p in (part.strip() for part in raw.split(",")) if p)


def apply_env_overrides(config: Config, environ: Mapping[str, str] | None = None) -> Config:
    """Return ``config`` with ``AUTOCMD_*`` variables applied on top."""
    env = os.environ if environ is None else environ

    updated = config
    repo = env.get(ENV_REPO)
    if repo:
        updated = replace(updated, repo=repo.strip())
    owner = env.get(ENV_OWNER)
    if owner:
        updated = replace(updated, owner=owner.strip())
    github_api = env.get(ENV_GITHUB_API)
    if github_api:
        updated = replace(updated, github_api=github_api.strip())
    plugins = env.get(ENV_PLUGINS)
    if plugins:
        updated = replace(updated, plugins=split_plugins(plugins))
    return updated


def config_path(cwd: Path, environ: Mapping[str, str] | None = None) -> Path:
    """Resolve the config file location (``AUTOCMD_CONFIG`` wins)."""
    env = os.environ if environ is None else environ
    override = env.get(ENV_CONFIG)
    if override:
        return Path(override).expanduser()
    return cwd / DEFAULT_CONFIG_FILE


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to the config file

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except ValueError as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path) -> Result[Config, ConfigError]:
    """Load config from ``path``, or the default config if the file is absent.

    A file that exists but cannot be parsed is still an error.
    """
    if not path.exists():
        return Ok(Config())
    return load_config(path)
