"""Textual in-process test harness for command-runner.

Re-exports all public API for convenient imports:
    from tests.harness import run_app, press_and_settle, FakeRunner, ...
"""

from tests.harness.app_runner import run_app
from tests.harness.interactions import (
    press_and_settle,
    press_sequence,
    click_and_settle,
    wait_for_dispatches,
)
from tests.harness.assertions import active_panels, focused_panel, item_names
from tests.harness.messages import MessageCapture
from tests.harness.builders import (
    FakeClipboard,
    FakeRunner,
    make_catalog,
    make_catalog_dict,
)

__all__ = [
    "run_app",
    "press_and_settle",
    "press_sequence",
    "click_and_settle",
    "wait_for_dispatches",
    "active_panels",
    "focused_panel",
    "item_names",
    "MessageCapture",
    "FakeClipboard",
    "FakeRunner",
    "make_catalog",
    "make_catalog_dict",
]
