"""App lifecycle management for Textual in-process tests.

Creates CommandRunnerApp instances wired with fake collaborators and manages
run_test() lifecycle. State isolation: every call creates a fresh app.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable

from textual.pilot import Pilot

from command_runner.catalog import Catalog
from command_runner.tui.app import CommandRunnerApp
from tests.harness.builders import FakeClipboard, FakeRunner, make_catalog


@asynccontextmanager
async def run_app(
    *,
    catalog: Catalog | None = None,
    runner: FakeRunner | None = None,
    clipboard: FakeClipboard | None = None,
    output_max_lines: int | None = None,
    size: tuple[int, int] = (120, 40),
    message_hook: Callable | None = None,
) -> AsyncIterator[tuple[Pilot, CommandRunnerApp]]:
    """Create and run a CommandRunnerApp in test mode.

    Yields (pilot, app). The fakes are reachable as app.dispatcher collaborators
    and through the arguments the caller passed in.
    """
    app = CommandRunnerApp(
        catalog if catalog is not None else make_catalog(),
        runner=runner if runner is not None else FakeRunner(),
        clipboard=clipboard if clipboard is not None else FakeClipboard(),
        output_max_lines=output_max_lines,
    )

    async with app.run_test(size=size, message_hook=message_hook) as pilot:
        # Ensure on_mount processing has completed
        await pilot.pause()
        yield pilot, app
