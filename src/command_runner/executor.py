"""Process execution: run a shell command and capture its output.

Commands run under the shell with no timeout; the caller awaits completion.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Protocol

logger = logging.getLogger(__name__)


class CommandError(Exception):
    """The command could not be started."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class CommandResult:
    """Captured outcome of one command."""

    command: str
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def failure_message(self) -> str:
        """Single-line description of a failed run."""
        message = f"Command failed: {self.command} (exit code {self.returncode})"
        detail = next(
            (line.strip() for line in reversed(self.stderr.splitlines()) if line.strip()),
            "",
        )
        return f"{message}: {detail}" if detail else message


class CommandRunner(Protocol):
    async def run(self, command: str) -> CommandResult: ...


def _decode(data: bytes | None) -> str:
    return (data or b"").decode("utf-8", errors="replace")


class ShellRunner:
    """Runs commands through the system shell via asyncio subprocesses.

    Args:
        shell: Shell executable to use instead of the platform default.
    """

    def __init__(self, shell: str | None = None):
        self._shell = shell

    async def run(self, command: str) -> CommandResult:
        kwargs = {"executable": self._shell} if self._shell else {}
        logger.debug("Starting command: %s", command)
        try:
            proc = await asyncio.create_subprocess_shell(
                command,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                **kwargs,
            )
        except OSError as e:
            raise CommandError(e.strerror or str(e)) from e
        stdout, stderr = await proc.communicate()
        result = CommandResult(
            command=command,
            returncode=proc.returncode if proc.returncode is not None else -1,
            stdout=_decode(stdout),
            stderr=_decode(stderr),
        )
        logger.info("Command finished (exit %d): %s", result.returncode, command)
        return result
