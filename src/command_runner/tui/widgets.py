"""Panel widgets: category and item lists, the output view and the status bar."""

from collections.abc import Sequence

from rich.text import Text
from textual.message import Message
from textual.widgets import OptionList, RichLog, Static
from textual.widgets.option_list import Option

import command_runner.tui.key_config
from command_runner.output_log import OutputLog
from command_runner.tui.panel_registry import PANEL_CSS_IDS, PANEL_TITLES, Panel


class PanelFocusGained(Message):
    """Posted by a panel widget whenever it receives input focus."""

    def __init__(self, panel: Panel) -> None:
        self.panel = panel
        super().__init__()


def _make_options(names: Sequence[str]) -> list[Option]:
    # Text prompts keep brackets in names from being read as markup.
    # Module-level: OptionList keeps its own ``_options`` list attribute.
    return [Option(Text(name)) for name in names]


class MenuList(OptionList):
    """Selectable list of names for the category or item panel.

    The active panel carries the ``-active`` class; exactly one panel has it.
    """

    DEFAULT_CSS = """
    MenuList {
        height: 1fr;
        border: round blue;
        padding: 0 1;
    }

    MenuList:focus, MenuList.-active {
        border: round green;
    }
    """

    def __init__(self, panel: Panel, names: Sequence[str] = ()):
        super().__init__(*_make_options(names), id=PANEL_CSS_IDS[panel])
        self.panel = panel
        self.border_title = f" {PANEL_TITLES[panel]} "

    def set_names(self, names: Sequence[str]) -> None:
        """Replace all entries and highlight the first one."""
        self.clear_options()
        self.add_options(_make_options(names))
        self.highlighted = 0 if names else None

    def move_highlight(self, delta: int) -> None:
        if delta > 0:
            self.action_cursor_down()
        elif delta < 0:
            self.action_cursor_up()

    def on_focus(self) -> None:
        self.post_message(PanelFocusGained(self.panel))


class OutputView(RichLog):
    """Renders an OutputLog, drawing only lines not yet shown.

    // [LAW:one-source-of-truth] The OutputLog holds the transcript; this view
    // only mirrors it when sync() is called.
    """

    DEFAULT_CSS = """
    OutputView {
        height: 1fr;
        width: 1fr;
        border: round blue;
        padding: 0 1;
    }

    OutputView:focus, OutputView.-active {
        border: round green;
    }
    """

    def __init__(self, max_lines: int | None = None):
        super().__init__(
            highlight=False,
            markup=False,
            wrap=True,
            max_lines=max_lines,
            id=PANEL_CSS_IDS[Panel.OUTPUT],
        )
        self.panel = Panel.OUTPUT
        self.border_title = f" {PANEL_TITLES[Panel.OUTPUT]} "
        self._rendered_total = 0
        self._generation = 0

    def sync(self, output_log: OutputLog) -> None:
        """Bring the view up to date with ``output_log``."""
        lines = output_log.lines()
        if output_log.generation != self._generation:
            self.clear()
            self._generation = output_log.generation
            self._rendered_total = output_log.total_appended - len(lines)
        pending = output_log.total_appended - self._rendered_total
        for line in lines[max(0, len(lines) - pending):]:
            self.write(Text(line))
        self._rendered_total = output_log.total_appended

    def move_highlight(self, delta: int) -> None:
        if delta > 0:
            self.scroll_down(animate=False)
        elif delta < 0:
            self.scroll_up(animate=False)

    def on_focus(self) -> None:
        self.post_message(PanelFocusGained(self.panel))


class StatusBar(Static):
    """One-line key help docked at the bottom."""

    DEFAULT_CSS = """
    StatusBar {
        dock: bottom;
        height: 1;
        width: 100%;
        background: blue;
        color: white;
    }
    """

    def __init__(self):
        super().__init__(Text(command_runner.tui.key_config.status_text()))
