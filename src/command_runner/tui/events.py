"""Menu input events and the effects their handlers produce.

// [LAW:one-source-of-truth] The class IS the type; no event_type string field.

Input widgets translate user actions into events; event_handlers turns each
event into an ordered list of effects which the app applies.
"""

from __future__ import annotations

from dataclasses import dataclass

from command_runner.catalog import CatalogItem
from command_runner.tui.panel_registry import Panel


# ─── Events ───────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class MenuEvent:
    """Base class for all menu input events."""


@dataclass(frozen=True)
class CategoryChanged(MenuEvent):
    """A category was confirmed (enter or click) in the category panel."""

    index: int


@dataclass(frozen=True)
class ItemChosen(MenuEvent):
    """An item was confirmed in the item panel."""

    category_index: int
    item_index: int


@dataclass(frozen=True)
class FocusCycled(MenuEvent):
    """Move focus to the next panel."""


@dataclass(frozen=True)
class PanelFocused(MenuEvent):
    """A panel took focus outside the keymap, e.g. by mouse click."""

    panel: Panel


@dataclass(frozen=True)
class HighlightMoved(MenuEvent):
    """Move the highlight within the focused panel (-1 up, +1 down)."""

    delta: int


@dataclass(frozen=True)
class Quit(MenuEvent):
    """Leave the application."""


# ─── Effects ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Effect:
    """Base class for effects requested by event handlers."""


@dataclass(frozen=True)
class ShowItems(Effect):
    """Replace the item panel contents with the given category's item names."""

    category_index: int
    names: tuple[str, ...]


@dataclass(frozen=True)
class FocusPanel(Effect):
    """Make ``panel`` the single active panel.

    ``grab`` is False when the widget already holds input focus and only the
    active-panel styling needs to follow.
    """

    panel: Panel
    grab: bool = True


@dataclass(frozen=True)
class MoveHighlight(Effect):
    panel: Panel
    delta: int


@dataclass(frozen=True)
class DispatchItem(Effect):
    item: CatalogItem


@dataclass(frozen=True)
class ExitApp(Effect):
    return_code: int = 0
