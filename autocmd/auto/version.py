"""Parsing and checking the version reported by ``auto --version``."""

from __future__ import annotations

import re
from dataclasses import dataclass

from autocmd.auto.errors import AutoError
from autocmd.core.result import Err, Ok, Result

__all__ = [
    "MINIMUM_AUTO_VERSION",
    "SemVer",
    "check_minimum_version",
    "extract_version",
    "parse_version_output",
]


_SEARCH_RE = re.compile(r"\d+\.\d+(\.\d+)?")
_VALID_RE = re.compile(r"^(0|[1-9]\d*)\.(0|[1-9]\d*)(?:\.(0|[1-9]\d*))?$")


@dataclass(frozen=True, slots=True, order=True)
class SemVer:
    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


MINIMUM_AUTO_VERSION = SemVer(9, 25, 0)


def _parse_semver(text: str) -> SemVer | None:
    m = _VALID_RE.match(text)
    if m is None:
        return None
    patch = m.group(3)
    return SemVer(int(m.group(1)), int(m.group(2)), int(patch) if patch is not None else 0)


def extract_version(line: str) -> Result[SemVer, AutoError]:
    """Extract the first ``major.minor[.patch]`` substring of ``line``.

    A missing patch component reads as 0. Components with leading zeros are
    not valid versions.
    """
    m = _SEARCH_RE.search(line)
    parsed = _parse_semver(m.group(0)) if m is not None else None
    if parsed is None:
        return Err(
            AutoError(
                kind="version_unparseable",
                message="Unable to determine the auto version",
                hint=line or None,
            )
        )
    return Ok(parsed)


def parse_version_output(stdout: str) -> Result[SemVer | None, AutoError]:
    """Parse captured ``--version`` output.

    Returns Ok(None) when the output spans several lines (diagnostic banners
    from the launcher), in which case the version check is skipped.
    """
    text = stdout.strip()
    if "\n" in text:
        return Ok(None)
    return extract_version(text)


def check_minimum_version(
    version: SemVer,
    *,
    command: str,
    minimum: SemVer = MINIMUM_AUTO_VERSION,
) -> Result[SemVer, AutoError]:
    if version < minimum:
        return Err(
            AutoError(
                kind="version_too_old",
                message=(
                    f"Minimum required auto version is {minimum}. "
                    f"Your auto ('{command}') is {version}"
                ),
                hint="Upgrade auto: npm install --save-dev auto@latest",
            )
        )
    return Ok(version)
