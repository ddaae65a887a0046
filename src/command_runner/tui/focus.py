"""Focus controller: which panel receives directional and confirm input.

States are the registry panels; ``cycle_focus`` walks PANEL_ORDER and wraps.
There is no terminal state.
"""

from command_runner.tui.panel_registry import PANEL_ORDER, Panel


def next_panel(panel: Panel) -> Panel:
    """Pure transition for the cyclic "next panel" command."""
    idx = PANEL_ORDER.index(panel)
    return PANEL_ORDER[(idx + 1) % len(PANEL_ORDER)]


class FocusController:
    def __init__(self, initial: Panel = Panel.CATEGORIES):
        self._focus = initial

    def current_focus(self) -> Panel:
        return self._focus

    def cycle_focus(self) -> Panel:
        self._focus = next_panel(self._focus)
        return self._focus

    def set_focus(self, target: Panel) -> Panel:
        self._focus = target
        return self._focus
