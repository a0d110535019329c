"""Wrapper around the auto release-automation CLI."""

from .commands import AutoCommand, PrState
from .discovery import AutoExecutable, discover_auto
from .errors import AutoError
from .manager import AutoCommandManager, AutoOutput, InvokerConfig, create_command_manager
from .version import MINIMUM_AUTO_VERSION, SemVer

__all__ = [
    "AutoCommand",
    "AutoCommandManager",
    "AutoError",
    "AutoExecutable",
    "AutoOutput",
    "InvokerConfig",
    "MINIMUM_AUTO_VERSION",
    "PrState",
    "SemVer",
    "create_command_manager",
    "discover_auto",
]
