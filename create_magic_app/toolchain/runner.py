"""External process execution.

The orchestrator never spawns processes directly; it goes through a
``ProcessRunner`` so tests can swap in a fake that records invocations.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

COMMAND_NOT_EXECUTABLE = 126
COMMAND_NOT_FOUND = 127


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one external command."""

    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class ProcessRunner(Protocol):
    async def run(
        self,
        command: str,
        args: list[str] | tuple[str, ...] = (),
        cwd: str | Path | None = None,
        stream: bool = False,
    ) -> CommandResult: ...


class SubprocessRunner:
    """``ProcessRunner`` backed by ``asyncio.create_subprocess_exec``.

    There is no timeout: a command that never exits blocks the run.
    """

    async def run(
        self,
        command: str,
        args: list[str] | tuple[str, ...] = (),
        cwd: str | Path | None = None,
        stream: bool = False,
    ) -> CommandResult:
        """Run *command* with *args* and wait for it to exit.

        Args:
            command: Executable name, resolved through ``PATH``.
            args: Arguments passed after the executable.
            cwd: Working directory for the child process.
            stream: When ``True`` the child inherits the console and the
                returned stdout/stderr are empty.

        Returns:
            A ``CommandResult``. A process that cannot be started is
            reported as exit code 127 (not found) or 126 (permission
            denied) with the OS error in stderr, instead of raising.
        """
        pipe = None if stream else asyncio.subprocess.PIPE
        try:
            process = await asyncio.create_subprocess_exec(
                command,
                *args,
                stdout=pipe,
                stderr=pipe,
                cwd=str(cwd) if cwd else None,
            )
        except FileNotFoundError as exc:
            return CommandResult(COMMAND_NOT_FOUND, "", f"{command}: {exc}")
        except PermissionError as exc:
            return CommandResult(COMMAND_NOT_EXECUTABLE, "", f"{command}: {exc}")

        stdout_bytes, stderr_bytes = await process.communicate()
        return CommandResult(
            process.returncode or 0,
            (stdout_bytes or b"").decode("utf-8", errors="replace").strip(),
            (stderr_bytes or b"").decode("utf-8", errors="replace").strip(),
        )


def format_command(command: str, args: list[str] | tuple[str, ...] = ()) -> str:
    """Render an argv as a single display string."""
    return " ".join([command, *args])
