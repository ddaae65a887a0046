"""Clipboard access through pyperclip, or an explicitly configured command."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from typing import Protocol

import pyperclip

logger = logging.getLogger(__name__)


class ClipboardError(Exception):
    """Copying to the clipboard failed."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class Clipboard(Protocol):
    async def copy(self, text: str) -> None: ...


class SystemClipboard:
    """Copies text with pyperclip, or by piping it into ``command`` when set.

    Args:
        command: argv of a program that reads the text on stdin. Overrides
            pyperclip's platform detection.
    """

    def __init__(self, command: Sequence[str] | None = None):
        self._command = list(command) if command else None

    async def copy(self, text: str) -> None:
        if self._command:
            await self._copy_with_command(self._command, text)
            return
        try:
            # pyperclip blocks on its helper process; keep it off the event loop.
            await asyncio.to_thread(pyperclip.copy, text)
        except pyperclip.PyperclipException as e:
            raise ClipboardError(str(e)) from e
        logger.debug("Copied %d characters with pyperclip", len(text))

    async def _copy_with_command(self, argv: list[str], text: str) -> None:
        try:
            proc = await asyncio.create_subprocess_exec(
                *argv,
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise ClipboardError(f"{argv[0]}: {e.strerror or e}") from e
        _, stderr = await proc.communicate(text.encode("utf-8"))
        if proc.returncode != 0:
            detail = (stderr or b"").decode("utf-8", errors="replace").strip()
            raise ClipboardError(detail or f"{argv[0]} exited with status {proc.returncode}")
        logger.debug("Copied %d characters with %s", len(text), argv[0])
