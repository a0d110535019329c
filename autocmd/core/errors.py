"""Exit codes for the autocmd CLI.

Stable process exit codes:
- 0: Success
- 1: User error (bad options, invalid config file)
- 2: Environment error (auto missing or too old)
- 3: Command error (auto exited with a non-zero status)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands."""

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    COMMAND_ERROR = 3
