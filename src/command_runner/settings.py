"""Settings file I/O for command-runner.

Manages a JSON settings file at XDG_CONFIG_HOME/command-runner/settings.json.
Recognized keys: catalog_path, output_max_lines, shell, clipboard_command.

Import as: import command_runner.settings
"""

import json
import logging
import os
import shlex
import tempfile
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

CATALOG_ENV_VAR = "COMMAND_RUNNER_CATALOG"
DEFAULT_CATALOG_NAME = "commands.json"


def get_config_dir() -> Path:
    """Return the command-runner config directory (XDG_CONFIG_HOME, default ~/.config)."""
    config_home = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(config_home) / "command-runner"


def get_config_path() -> Path:
    """Return path to settings file."""
    return get_config_dir() / "settings.json"


def load_settings() -> dict:
    """Load settings from JSON file. Returns empty dict on missing/corrupt file."""
    path = get_config_path()
    # [LAW:dataflow-not-control-flow] Always attempt read; empty dict is the "no data" value.
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Ignoring unreadable settings file %s: %s", path, e)
        return {}
    return data if isinstance(data, dict) else {}


def save_settings(data: dict) -> None:
    """Atomic write of settings dict to JSON file.

    Creates parent directories if needed. Writes to temp file then renames
    to avoid partial writes on crash.
    """
    path = get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
            f.write("\n")
        os.replace(tmp_path, path)
    except Exception:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise


def load_setting(key: str, default=None):
    """Load a single setting by key. Returns default if absent."""
    return load_settings().get(key, default)


def save_setting(key: str, value) -> None:
    """Save a single setting by key (merge into existing settings)."""
    data = load_settings()
    data[key] = value
    save_settings(data)


def resolve_catalog_path(cli_value: Optional[str] = None) -> Path:
    """Resolve the catalog document path.

    Precedence: CLI flag, COMMAND_RUNNER_CATALOG, settings catalog_path,
    then commands.json in the config directory.
    """
    candidates = (
        cli_value,
        os.environ.get(CATALOG_ENV_VAR),
        load_setting("catalog_path"),
    )
    # [LAW:dataflow-not-control-flow] First non-empty candidate wins.
    chosen = next((c for c in candidates if isinstance(c, str) and c.strip()), None)
    if chosen is None:
        return get_config_dir() / DEFAULT_CATALOG_NAME
    return Path(os.path.expanduser(chosen))


def load_output_max_lines() -> Optional[int]:
    """Optional cap on retained output lines. None (unbounded) unless a positive int is set."""
    value = load_setting("output_max_lines")
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return None
    return value


def load_shell() -> Optional[str]:
    """Shell executable used to run commands. None means the platform default."""
    value = load_setting("shell")
    return value if isinstance(value, str) and value.strip() else None


def load_clipboard_command() -> Optional[list[str]]:
    """Explicit clipboard command argv, or None to use pyperclip."""
    value = load_setting("clipboard_command")
    if isinstance(value, str) and value.strip():
        return shlex.split(value)
    if isinstance(value, list) and value and all(isinstance(v, str) for v in value):
        return list(value)
    return None
