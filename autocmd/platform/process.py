"""Subprocess execution with Result-based error handling.

Wraps subprocess.run so callers get the exit code and captured stdout back
as a value instead of handling CalledProcessError:

    result = run(["auto", "--version"], cwd=Path("."))
    match result:
        case Ok(output):
            print(output.stdout)
        case Err(error):
            print(f"Failed: {error}")
"""

from __future__ import annotations

import subprocess
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from autocmd.core.result import Err, Ok, Result

__all__ = ["ProcessError", "ProcessOutput", "run"]


@dataclass(frozen=True, slots=True)
class ProcessOutput:
    """Output of a finished subprocess.

    Attributes:
        exit_code: The exit code of the process.
        stdout: Everything the process wrote to standard output, in order.
    """

    exit_code: int
    stdout: str


@dataclass(frozen=True, slots=True)
class ProcessError:
    """Error from a failed subprocess execution.

    Attributes:
        command: The command that was executed.
        returncode: The exit code of the process (-1 if it could not start).
        stdout: Standard output (may be empty).
        stderr: Launch error message; empty when the process ran, since its
            stderr streams to the terminal.
    """

    command: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    def __str__(self) -> str:
        cmd_str = " ".join(self.command[:3])
        if len(self.command) > 3:
            cmd_str += " ..."
        return f"{cmd_str} failed (exit {self.returncode})"


def run(
    cmd: list[str],
    cwd: Path,
    env: Mapping[str, str] | None = None,
    *,
    allow_all_exit_codes: bool = False,
) -> Result[ProcessOutput, ProcessError]:
    """Execute a command and return its exit code and stdout.

    stdout is captured; stderr is inherited so progress and warnings from
    the child reach the terminal as they happen.

    Args:
        cmd: Command and arguments to execute.
        cwd: Working directory for the command.
        env: Full environment for the child (uses current env if None).
        allow_all_exit_codes: Return Ok for non-zero exit codes too.

    Returns:
        Ok(ProcessOutput) on success, Err(ProcessError) on failure.
    """
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            env=dict(env) if env is not None else None,
            stdout=subprocess.PIPE,
            stderr=None,
            text=True,
            check=False,
        )
    except OSError as e:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=-1,
                stdout="",
                stderr=str(e),
            )
        )

    if proc.returncode != 0 and not allow_all_exit_codes:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=proc.returncode,
                stdout=proc.stdout,
                stderr="",
            )
        )

    return Ok(ProcessOutput(exit_code=proc.returncode, stdout=proc.stdout))
