"""Panel registry: single source of truth for the three menu panels.

// [LAW:one-source-of-truth] Panel order, CSS ids and titles live here.
// Focus cycling follows PANEL_ORDER.

Pure data with no dependencies on other project modules.
"""

from dataclasses import dataclass
from enum import Enum


class Panel(Enum):
    CATEGORIES = "categories"
    ITEMS = "items"
    OUTPUT = "output"


@dataclass(frozen=True)
class PanelSpec:
    """Specification for a focusable panel."""

    panel: Panel
    css_id: str     # "categories-panel"
    title: str      # border title


# [LAW:one-source-of-truth] Ordered list of panels, left to right
PANEL_REGISTRY: list[PanelSpec] = [
    PanelSpec(Panel.CATEGORIES, "categories-panel", "Categories"),
    PanelSpec(Panel.ITEMS, "items-panel", "Items"),
    PanelSpec(Panel.OUTPUT, "output-panel", "Output"),
]

# Derived, kept in sync automatically
PANEL_ORDER = [s.panel for s in PANEL_REGISTRY]
PANEL_CSS_IDS = {s.panel: s.css_id for s in PANEL_REGISTRY}
PANEL_TITLES = {s.panel: s.title for s in PANEL_REGISTRY}
