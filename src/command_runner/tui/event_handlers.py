"""Event handling logic - functions from (event, focus, cursor) to effects.

Handlers update the focus controller and selection cursor and return the
ordered effects the app must apply. They never touch widgets, so each one can
be exercised without a running terminal.
"""

import logging
from collections.abc import Callable

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
from command_runner.tui.panel_registry import Panel
from command_runner.tui.selection import SelectionCursor

logger = logging.getLogger(__name__)

EventHandler = Callable[[MenuEvent, FocusController, SelectionCursor], list[Effect]]


def handle_category_changed(event: CategoryChanged, focus, cursor) -> list[Effect]:
    """Switch the active category; confirming from the category panel moves focus to items.

    ShowItems comes first so the item panel is refilled before anything redraws.
    """
    try:
        cursor.select_category(event.index)
    except IndexError:
        logger.debug("Ignoring out-of-range category %d", event.index)
        return []
    effects: list[Effect] = [
        ShowItems(event.index, tuple(item.name for item in cursor.active_items()))
    ]
    if focus.current_focus() is Panel.CATEGORIES:
        effects.append(FocusPanel(focus.set_focus(Panel.ITEMS)))
    return effects


def handle_item_chosen(event: ItemChosen, focus, cursor) -> list[Effect]:
    """Resolve the confirmed item in the active category and dispatch it."""
    if event.category_index != cursor.category_index:
        logger.debug(
            "Item chosen for stale category %d (active %d)",
            event.category_index,
            cursor.category_index,
        )
        return []
    try:
        cursor.select_item(event.item_index)
    except IndexError:
        return []
    item = cursor.active_item()
    return [DispatchItem(item)] if item is not None else []


def handle_focus_cycled(event: FocusCycled, focus, cursor) -> list[Effect]:
    return [FocusPanel(focus.cycle_focus())]


def handle_panel_focused(event: PanelFocused, focus, cursor) -> list[Effect]:
    # [LAW:dataflow-not-control-flow] Re-assert only when state actually changes.
    if focus.current_focus() is event.panel:
        return []
    return [FocusPanel(focus.set_focus(event.panel), grab=False)]


def handle_highlight_moved(event: HighlightMoved, focus, cursor) -> list[Effect]:
    return [MoveHighlight(focus.current_focus(), event.delta)]


def handle_quit(event: Quit, focus, cursor) -> list[Effect]:
    return [ExitApp(0)]


# [LAW:dataflow-not-control-flow] Dispatch table keyed by event class.
EVENT_HANDLERS: dict[type, EventHandler] = {
    CategoryChanged: handle_category_changed,
    ItemChosen: handle_item_chosen,
    FocusCycled: handle_focus_cycled,
    PanelFocused: handle_panel_focused,
    HighlightMoved: handle_highlight_moved,
    Quit: handle_quit,
}


def handle(event: MenuEvent, focus: FocusController, cursor: SelectionCursor) -> list[Effect]:
    """Route ``event`` to its handler. Unknown event types produce no effects."""
    handler = EVENT_HANDLERS.get(type(event))
    if handler is None:
        logger.debug("No handler for %s", type(event).__name__)
        return []
    return handler(event, focus, cursor)
