"""Result type for explicit error handling.

Every fallible call in autocmd returns either ``Ok(value)`` or ``Err(error)``
instead of raising. Callers branch on the variant:

    match manager.label(pr=42):
        case Ok(label):
            print(label)
        case Err(error):
            print(f"auto label failed: {error.message}")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful result holding ``value``."""

    value: T


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failed result holding ``error``."""

    error: E


type Result[T, E] = Ok[T] | Err[E]
