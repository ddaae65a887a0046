"""Main TUI application using Textual.

// [LAW:locality-or-seam] Thin coordinator. State lives in FocusController,
//   SelectionCursor and OutputLog; decisions live in event_handlers; the
//   dispatcher owns command/clipboard side effects.
// [LAW:single-enforcer] handle_menu_event is the single event loop entry:
//   every key, list selection and focus change becomes a MenuEvent there.
"""

import logging
from typing import Optional

from textual.app import App, ComposeResult
from textual.containers import Horizontal
from textual.css.query import NoMatches
from textual.widgets import OptionList

import command_runner.tui.event_handlers
import command_runner.tui.key_config
from command_runner.catalog import Catalog
from command_runner.clipboard import Clipboard, SystemClipboard
from command_runner.dispatcher import ActionDispatcher
from command_runner.executor import CommandRunner, ShellRunner
from command_runner.output_log import OutputLog
from command_runner.tui.events import (
    CategoryChanged,
    DispatchItem,
    Effect,
    ExitApp,
    FocusCycled,
    FocusPanel,
    HighlightMoved,
    ItemChosen,
    MenuEvent,
    MoveHighlight,
    PanelFocused,
    Quit,
    ShowItems,
)
from command_runner.tui.focus import FocusController
from command_runner.tui.panel_registry import PANEL_CSS_IDS, PANEL_ORDER, Panel
from command_runner.tui.selection import SelectionCursor
from command_runner.tui.widgets import MenuList, OutputView, PanelFocusGained, StatusBar

logger = logging.getLogger(__name__)


class CommandRunnerApp(App):
    """Three-panel command menu: categories, items, output."""

    TITLE = "Command Runner"

    CSS = """
    #panels {
        height: 1fr;
    }

    #categories-panel {
        width: 20%;
    }

    #items-panel {
        width: 30%;
    }
    """

    def __init__(
        self,
        catalog: Catalog,
        runner: Optional[CommandRunner] = None,
        clipboard: Optional[Clipboard] = None,
        output_max_lines: Optional[int] = None,
    ):
        super().__init__()
        self.catalog = catalog
        self.focus_controller = FocusController()
        self.selection = SelectionCursor(catalog)
        self.output_log = OutputLog(output_max_lines)
        self.dispatcher = ActionDispatcher(
            self.output_log,
            runner if runner is not None else ShellRunner(),
            clipboard if clipboard is not None else SystemClipboard(),
            request_redraw=self.redraw_output,
        )
        self.redraw_count = 0
        self._output_max_lines = output_max_lines

        # [LAW:dataflow-not-control-flow] Effect application as a lookup table.
        self._effect_appliers = {
            ShowItems: self._apply_show_items,
            FocusPanel: self._apply_focus_panel,
            MoveHighlight: self._apply_move_highlight,
            DispatchItem: self._apply_dispatch_item,
            ExitApp: self._apply_exit,
        }
        self._selection_events = {
            Panel.CATEGORIES: lambda index: CategoryChanged(index),
            Panel.ITEMS: lambda index: ItemChosen(self.selection.category_index, index),
        }

    # ─── Widget accessors ──────────────────────────────────────────────

    def _query_safe(self, selector):
        try:
            return self.query_one(selector)
        except NoMatches:
            return None

    def _get_panel(self, panel: Panel):
        return self._query_safe("#" + PANEL_CSS_IDS[panel])

    def _get_output(self) -> Optional[OutputView]:
        return self._get_panel(Panel.OUTPUT)

    # ─── Lifecycle ─────────────────────────────────────────────────────

    def compose(self) -> ComposeResult:
        with Horizontal(id="panels"):
            yield MenuList(Panel.CATEGORIES, [c.name for c in self.catalog.categories])
            yield MenuList(Panel.ITEMS)
            yield OutputView(max_lines=self._output_max_lines)
        yield StatusBar()

    def on_mount(self) -> None:
        categories = self._get_panel(Panel.CATEGORIES)
        if self.catalog.categories:
            categories.highlighted = 0
            self._apply_effects([
                ShowItems(0, tuple(item.name for item in self.selection.active_items()))
            ])
        self._apply_effects([FocusPanel(self.focus_controller.set_focus(Panel.CATEGORIES))])
        logger.info("UI started with %d categories", len(self.catalog))

    # ─── Event loop ────────────────────────────────────────────────────

    def handle_menu_event(self, event: MenuEvent) -> list[Effect]:
        """Run ``event`` through the handlers and apply the resulting effects in order."""
        effects = command_runner.tui.event_handlers.handle(
            event, self.focus_controller, self.selection
        )
        self._apply_effects(effects)
        return effects

    def _apply_effects(self, effects: list[Effect]) -> None:
        for effect in effects:
            self._effect_appliers[type(effect)](effect)

    def _apply_show_items(self, effect: ShowItems) -> None:
        items = self._get_panel(Panel.ITEMS)
        if items is not None:
            items.set_names(effect.names)

    def _apply_focus_panel(self, effect: FocusPanel) -> None:
        # [LAW:single-enforcer] Clear every panel before marking the new one.
        for panel in PANEL_ORDER:
            widget = self._get_panel(panel)
            if widget is not None:
                widget.set_class(False, "-active")
        target = self._get_panel(effect.panel)
        if target is None:
            return
        target.set_class(True, "-active")
        if effect.grab:
            target.focus()

    def _apply_move_highlight(self, effect: MoveHighlight) -> None:
        widget = self._get_panel(effect.panel)
        if widget is not None:
            widget.move_highlight(effect.delta)

    def _apply_dispatch_item(self, effect: DispatchItem) -> None:
        # Each dispatch is its own worker; outputs land in completion order.
        self.run_worker(
            self.dispatcher.dispatch(effect.item),
            name=f"dispatch:{effect.item.name}",
            group="dispatch",
            exclusive=False,
            exit_on_error=False,
        )

    def _apply_exit(self, effect: ExitApp) -> None:
        logger.info("Exiting")
        self.exit(return_code=effect.return_code)

    def redraw_output(self) -> None:
        """Mirror the output log into the output panel."""
        self.redraw_count += 1
        view = self._get_output()
        if view is not None:
            view.sync(self.output_log)

    # ─── Input ─────────────────────────────────────────────────────────

    async def on_key(self, event) -> None:
        """// [LAW:single-enforcer] on_key is the sole app-level key dispatcher.

        Keys the focused list handles itself (enter, arrows) never reach the
        keymap; prevent_default keeps Textual's own tab/escape bindings out.
        """
        action_name = command_runner.tui.key_config.KEYMAP.get(event.key)
        if action_name:
            event.prevent_default()
            event.stop()
            await self.run_action(action_name)

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        event.stop()
        make_event = self._selection_events.get(getattr(event.option_list, "panel", None))
        if make_event is not None:
            self.handle_menu_event(make_event(event.option_index))

    def on_panel_focus_gained(self, message: PanelFocusGained) -> None:
        message.stop()
        widget = self._get_panel(message.panel)
        # Stale when focus already moved on before this message was handled.
        if widget is None or self.screen.focused is not widget:
            return
        self.handle_menu_event(PanelFocused(message.panel))

    def action_cycle_focus(self) -> None:
        self.handle_menu_event(FocusCycled())

    def action_move_highlight(self, delta: int) -> None:
        self.handle_menu_event(HighlightMoved(delta))

    async def action_quit(self) -> None:
        self.handle_menu_event(Quit())
