"""ANSI palettes for tree output.

Colors never change the visible text of a row: stripping escape sequences
from a colored line yields exactly the plain line.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TreeTheme:
    """Semantic ANSI palette used by the tree renderer."""

    name: str
    reset: str
    branch: str
    directory: str
    file: str
    size: str
    count: str

    def paint(self, text: str, color: str) -> str:
        if not color or not text:
            return text
        return f"{color}{text}{self.reset}"


PLAIN_THEME = TreeTheme(
    name="plain",
    reset="",
    branch="",
    directory="",
    file="",
    size="",
    count="",
)

DEFAULT_THEME = TreeTheme(
    name="default",
    reset="\033[0m",
    branch="\033[2;38;5;245m",
    directory="\033[1;34m",
    file="\033[38;5;252m",
    size="\033[38;5;109m",
    count="\033[2;38;5;250m",
)

OCEAN_THEME = TreeTheme(
    name="ocean",
    reset="\033[0m",
    branch="\033[2;38;5;31m",
    directory="\033[1;38;5;45m",
    file="\033[38;5;252m",
    size="\033[38;5;73m",
    count="\033[2;38;5;110m",
)

_THEMES = {theme.name: theme for theme in (DEFAULT_THEME, OCEAN_THEME, PLAIN_THEME)}


def available_theme_names() -> tuple[str, ...]:
    return tuple(_THEMES)


def get_theme(name: str | None) -> TreeTheme:
    """Return theme by name, falling back to ``DEFAULT_THEME``."""
    if name is None:
        return DEFAULT_THEME
    return _THEMES.get(name.strip().lower(), DEFAULT_THEME)


__all__ = [
    "TreeTheme",
    "PLAIN_THEME",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "available_theme_names",
    "get_theme",
]
