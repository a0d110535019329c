"""Platform abstraction layer."""

from .process import (
    ProcessError,
    ProcessOutput,
    run,
)

__all__ = [
    "ProcessError",
    "ProcessOutput",
    "run",
]
