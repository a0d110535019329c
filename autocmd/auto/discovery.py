"""Locating the auto executable.

Candidates are tried in a fixed order: the ``npx`` launcher (which loads auto
on demand), then an ``auto`` binary installed on PATH.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path

from autocmd.auto.errors import AutoError
from autocmd.core.result import Err, Ok, Result

__all__ = [
    "AUTO_STRATEGIES",
    "AutoExecutable",
    "DiscoveryStrategy",
    "discover_auto",
]


@dataclass(frozen=True, slots=True)
class DiscoveryStrategy:
    """One way of launching auto.

    Attributes:
        binary: Executable name looked up on PATH
        prefix_args: Arguments placed between the binary and auto's own args
    """

    binary: str
    prefix_args: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class AutoExecutable:
    """A resolved auto command.

    Attributes:
        path: Resolved path of the binary
        prefix_args: Launcher arguments (``("auto",)`` for npx)
    """

    path: Path
    prefix_args: tuple[str, ...] = ()

    @property
    def argv(self) -> list[str]:
        return [str(self.path), *self.prefix_args]

    @property
    def display(self) -> str:
        return " ".join(self.argv)


AUTO_STRATEGIES: tuple[DiscoveryStrategy, ...] = (
    DiscoveryStrategy(binary="npx", prefix_args=("auto",)),
    DiscoveryStrategy(binary="auto"),
)


def discover_auto(
    strategies: tuple[DiscoveryStrategy, ...] = AUTO_STRATEGIES,
) -> Result[AutoExecutable, AutoError]:
    """Return the first strategy whose binary resolves on PATH."""
    for strategy in strategies:
        found = shutil.which(strategy.binary)
        if found:
            return Ok(AutoExecutable(path=Path(found), prefix_args=strategy.prefix_args))

    tried = " or ".join(s.binary for s in strategies)
    return Err(
        AutoError(
            kind="executable_not_found",
            message=f"Unable to locate executable file for either {tried}",
            hint="Install Node.js (for npx) or the auto binary: https://intuit.github.io/auto/",
        )
    )
