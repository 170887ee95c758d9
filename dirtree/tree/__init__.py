"""Tree traversal and rendering.

- last-sibling flag arena indexed by depth
- prefix glyph formatting
- read-only subtree containment checks
- the depth-first renderer that composes filters, counts, and sizes
"""

from __future__ import annotations

from .ancestry import MAX_DEPTH, AncestorLastFlags
from .prefix import (
    BLOCK_WIDTH,
    ASCII_GLYPHS,
    UNICODE_GLYPHS,
    BranchGlyphs,
    available_charset_names,
    format_prefix,
    glyphs_for_charset,
)
from .containment import file_passes_filter, subtree_has_match, suffix_matches
from .renderer import TreeRenderer, render, render_tree

__all__ = [
    "MAX_DEPTH",
    "BLOCK_WIDTH",
    "AncestorLastFlags",
    "ASCII_GLYPHS",
    "UNICODE_GLYPHS",
    "BranchGlyphs",
    "available_charset_names",
    "format_prefix",
    "glyphs_for_charset",
    "file_passes_filter",
    "subtree_has_match",
    "suffix_matches",
    "TreeRenderer",
    "render",
    "render_tree",
]
