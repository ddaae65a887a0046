"""End-to-end menu behavior using the Textual in-process harness."""

import pytest

from command_runner.catalog import parse_catalog
from command_runner.tui.panel_registry import Panel
from tests.harness import (
    FakeRunner,
    MessageCapture,
    active_panels,
    click_and_settle,
    focused_panel,
    item_names,
    press_and_settle,
    press_sequence,
    run_app,
    wait_for_dispatches,
)

pytestmark = pytest.mark.textual


async def test_initial_state():
    async with run_app() as (pilot, app):
        assert app.focus_controller.current_focus() is Panel.CATEGORIES
        assert focused_panel(app) is Panel.CATEGORIES
        assert active_panels(app) == [Panel.CATEGORIES]
        assert item_names(app) == ["status", "log", "foo"]
        assert app.output_log.lines() == []


async def test_tab_cycles_focus_and_wraps():
    async with run_app() as (pilot, app):
        seen = []
        for _ in range(3):
            await press_and_settle(pilot, "tab")
            seen.append(app.focus_controller.current_focus())
            # [LAW:single-enforcer] Exactly one panel holds focus and the active style.
            assert active_panels(app) == [seen[-1]]
            assert focused_panel(app) is seen[-1]
        assert seen == [Panel.ITEMS, Panel.OUTPUT, Panel.CATEGORIES]


async def test_confirming_category_moves_focus_to_items():
    async with run_app() as (pilot, app):
        await press_sequence(pilot, ["down", "enter"])
        assert app.selection.category_index == 1
        assert app.selection.item_index == 0
        assert item_names(app) == ["Clear output", "Mystery"]
        assert app.focus_controller.current_focus() is Panel.ITEMS
        assert focused_panel(app) is Panel.ITEMS
        assert active_panels(app) == [Panel.ITEMS]


async def test_highlighting_a_category_does_not_switch_items():
    async with run_app() as (pilot, app):
        await press_and_settle(pilot, "down")
        assert item_names(app) == ["status", "log", "foo"]
        assert app.selection.category_index == 0


async def test_git_status_scenario():
    catalog = parse_catalog(
        {
            "categories": [
                {
                    "name": "Git",
                    "items": [{"name": "status", "type": "command", "command": "git status"}],
                }
            ]
        }
    )
    runner = FakeRunner()
    runner.succeed("git status", stdout="clean\n")
    async with run_app(catalog=catalog, runner=runner) as (pilot, app):
        await press_sequence(pilot, ["enter", "enter"])
        await wait_for_dispatches(pilot)
        assert runner.calls == ["git status"]
        assert app.output_log.lines() == ["$ git status", "clean"]
        assert app.redraw_count == 2
        assert app.query_one("#output-panel")._rendered_total == 2


async def test_item_selection_with_vi_keys():
    runner = FakeRunner()
    async with run_app(runner=runner) as (pilot, app):
        await press_sequence(pilot, ["enter", "j", "enter"])
        await wait_for_dispatches(pilot)
        assert runner.calls == ["git log --oneline"]
        await press_sequence(pilot, ["k", "enter"])
        await wait_for_dispatches(pilot)
        assert runner.calls == ["git log --oneline", "git status"]


async def test_copy_item():
    async with run_app() as (pilot, app):
        await press_sequence(pilot, ["enter", "down", "down", "enter"])
        await wait_for_dispatches(pilot)
        assert app.output_log.lines() == ["Copied to clipboard: foo"]


async def test_clear_output_item():
    async with run_app() as (pilot, app):
        app.output_log.append_many(["a", "b"])
        app.redraw_output()
        await press_sequence(pilot, ["down", "enter", "enter"])
        await wait_for_dispatches(pilot)
        assert app.output_log.lines() == []
        assert app.query_one("#output-panel")._generation == 1


async def test_empty_category_dispatches_nothing():
    runner = FakeRunner()
    async with run_app(runner=runner) as (pilot, app):
        await press_sequence(pilot, ["down", "down", "enter"])
        assert item_names(app) == []
        assert app.focus_controller.current_focus() is Panel.ITEMS
        await press_and_settle(pilot, "enter")
        await wait_for_dispatches(pilot)
        assert runner.calls == []
        assert app.output_log.lines() == []


async def test_navigation_continues_while_command_runs():
    runner = FakeRunner()
    gate = runner.gate("git status")
    runner.succeed("git status", stdout="clean")
    async with run_app(runner=runner) as (pilot, app):
        await press_sequence(pilot, ["enter", "enter"])
        assert app.output_log.lines() == ["$ git status"]

        await press_and_settle(pilot, "tab")
        assert app.focus_controller.current_focus() is Panel.OUTPUT

        gate.set()
        await wait_for_dispatches(pilot)
        assert app.output_log.lines() == ["$ git status", "clean"]


async def test_concurrent_dispatches_interleave_in_completion_order():
    runner = FakeRunner()
    first = runner.gate("git status")
    second = runner.gate("git log --oneline")
    runner.succeed("git status", stdout="one")
    runner.succeed("git log --oneline", stdout="two")
    async with run_app(runner=runner) as (pilot, app):
        await press_sequence(pilot, ["enter", "enter", "down", "enter"])
        assert app.output_log.lines() == ["$ git status", "$ git log --oneline"]

        second.set()
        await pilot.pause()
        first.set()
        await wait_for_dispatches(pilot)
        assert app.output_log.lines() == [
            "$ git status",
            "$ git log --oneline",
            "two",
            "one",
        ]


async def test_mouse_focus_keeps_controller_in_sync():
    capture = MessageCapture()
    async with run_app(message_hook=capture) as (pilot, app):
        await click_and_settle(pilot, "#output-panel")
        assert app.focus_controller.current_focus() is Panel.OUTPUT
        assert active_panels(app) == [Panel.OUTPUT]
        assert capture.of_type("PanelFocusGained")


@pytest.mark.parametrize("key", ["q", "escape", "ctrl+c"])
async def test_quit_keys_exit_with_success(key):
    async with run_app() as (pilot, app):
        calls = []
        app.exit = lambda **kwargs: calls.append(kwargs)
        await press_and_settle(pilot, key)
        assert calls == [{"return_code": 0}]


async def test_output_ring_buffer_configuration():
    async with run_app(output_max_lines=2) as (pilot, app):
        app.output_log.append_many(["1", "2", "3"])
        app.redraw_output()
        assert app.output_log.lines() == ["2", "3"]


async def test_item_list_refills_with_literal_names():
    async with run_app() as (pilot, app):
        items = app.query_one("#items-panel")
        items.set_names(["[bold]x[/bold]", "y"])
        await pilot.pause()
        assert item_names(app) == ["[bold]x[/bold]", "y"]
        assert items.highlighted == 0

        items.set_names([])
        await pilot.pause()
        assert item_names(app) == []
        assert items.highlighted is None
