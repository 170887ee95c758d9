"""Branch glyph sets and indentation prefixes for tree rows."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

BLOCK_WIDTH = 4


@dataclass(frozen=True)
class BranchGlyphs:
    """Four-column blocks used to draw one tree level."""

    name: str
    continuation: str
    blank: str
    tee: str
    corner: str


UNICODE_GLYPHS = BranchGlyphs(
    name="unicode",
    continuation="│   ",
    blank="    ",
    tee="├── ",
    corner="└── ",
)

ASCII_GLYPHS = BranchGlyphs(
    name="ascii",
    continuation="|   ",
    blank="    ",
    tee="|-- ",
    corner="`-- ",
)

_GLYPHS_BY_NAME = {glyphs.name: glyphs for glyphs in (UNICODE_GLYPHS, ASCII_GLYPHS)}


def available_charset_names() -> tuple[str, ...]:
    return tuple(_GLYPHS_BY_NAME)


def glyphs_for_charset(name: str | None) -> BranchGlyphs:
    """Resolve a charset name, falling back to Unicode for unknown names."""
    if name is None:
        return UNICODE_GLYPHS
    return _GLYPHS_BY_NAME.get(name.strip().lower(), UNICODE_GLYPHS)


def format_prefix(
    depth: int,
    ancestor_last_flags: Sequence[bool],
    glyphs: BranchGlyphs = UNICODE_GLYPHS,
) -> str:
    """Return the leading glyphs for an entry at ``depth``.

    Levels ``0..depth-2`` draw a continuation bar unless that ancestor was the
    last of its siblings; level ``depth-1`` draws the corner when the entry
    itself is last, otherwise the tee. Depth 0 has no prefix.
    """
    if depth <= 0:
        return ""
    parts = [
        glyphs.blank if ancestor_last_flags[level] else glyphs.continuation
        for level in range(depth - 1)
    ]
    parts.append(glyphs.corner if ancestor_last_flags[depth - 1] else glyphs.tee)
    return "".join(parts)


__all__ = [
    "BLOCK_WIDTH",
    "BranchGlyphs",
    "UNICODE_GLYPHS",
    "ASCII_GLYPHS",
    "available_charset_names",
    "glyphs_for_charset",
    "format_prefix",
]
