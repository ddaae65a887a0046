"""Key → semantic action mapping and status bar text.

All app-level keyboard input routes through CommandRunnerApp.on_key.
Enter and up/down are left to the focused list widget, which posts its own
selection and highlight messages.
"""

# [LAW:one-source-of-truth] Key→action mapping. Values name CommandRunnerApp actions.
KEYMAP: dict[str, str] = {
    "tab": "cycle_focus",
    "j": "move_highlight(1)",
    "k": "move_highlight(-1)",
    "q": "quit",
    "escape": "quit",
    "ctrl+c": "quit",
}

# [LAW:one-source-of-truth] Status bar display.
# Format: list of (key, description) tuples.
STATUS_KEYS: list[tuple[str, str]] = [
    ("↑↓/jk", "Navigate"),
    ("Tab", "Switch Panel"),
    ("Enter", "Select"),
    ("q", "Quit"),
]


def status_text() -> str:
    return " | ".join(f"{key}: {desc}" for key, desc in STATUS_KEYS)
