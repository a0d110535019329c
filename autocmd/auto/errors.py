from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

type AutoErrorKind = Literal[
    "executable_not_found",
    "version_unparseable",
    "version_too_old",
    "subprocess_failed",
]


@dataclass(frozen=True, slots=True)
class AutoError:
    kind: AutoErrorKind
    message: str
    hint: str | None = None
    exit_code: int | None = None
    stdout: str = ""
