"""Persistent JSON config helpers.

Stores display defaults: branch charset, color preference, and theme name.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .theme import available_theme_names
from .tree.prefix import available_charset_names

APP_NAME = "dirtree"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Write failures are ignored; a read-only config directory must not stop a
    traversal.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def _load_choice(key: str, choices: tuple[str, ...]) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    normalized = value.strip().lower()
    return normalized if normalized in choices else None


def load_charset() -> str | None:
    """Load persisted branch charset name, or ``None`` when unset/invalid."""
    return _load_choice("charset", available_charset_names())


def load_theme_name() -> str | None:
    """Load persisted theme name, or ``None`` when unset/invalid."""
    return _load_choice("theme", available_theme_names())


def load_color_enabled() -> bool:
    """Return persisted color preference.

    Only explicit booleans are accepted; anything else means enabled.
    """
    value = load_config().get("color")
    return value if isinstance(value, bool) else True


def save_display_defaults(
    charset: str | None = None,
    color: bool | None = None,
    theme: str | None = None,
) -> None:
    """Persist the given display defaults, leaving other keys untouched."""
    config = load_config()
    if charset is not None and charset in available_charset_names():
        config["charset"] = charset
    if color is not None:
        config["color"] = bool(color)
    if theme is not None and theme in available_theme_names():
        config["theme"] = theme
    save_config(config)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "load_config",
    "save_config",
    "load_charset",
    "load_theme_name",
    "load_color_enabled",
    "save_display_defaults",
]
