"""Read-only JSON user preferences.

Holds theme, preview, and logging preferences. Nothing is ever written back.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lazystatus"
CONFIG_FILENAME = "config.json"
CONFIG_ENV_VAR = "LAZYSTATUS_CONFIG"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def config_path() -> Path:
    """Return the config file location, honoring ``LAZYSTATUS_CONFIG``."""
    override = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser()
    return CONFIG_PATH


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(config_path().read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _load_str(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str) or not value.strip():
        return None
    return value.strip()


def _load_bool(key: str, default: bool) -> bool:
    """Only explicit booleans are accepted; anything else yields ``default``."""
    value = load_config().get(key)
    return value if isinstance(value, bool) else default


def load_theme_name() -> str | None:
    return _load_str("theme")


def load_style() -> str | None:
    """Load the Pygments style name used for previews."""
    return _load_str("style")


def load_syntax_highlight() -> bool:
    return _load_bool("syntax_highlight", True)


def load_preserve_view_on_refresh() -> bool:
    """Return whether refreshes keep cursor and expansion by path."""
    return _load_bool("preserve_view_on_refresh", False)


def load_preview_max_lines() -> int | None:
    """Load the per-entry preview line cap.

    Booleans, non-integers, and values below one are rejected.
    """
    value = load_config().get("preview_max_lines")
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return None
    return value


def load_log_file() -> Path | None:
    value = _load_str("log_file")
    return Path(value).expanduser() if value else None
