"""Tests for prefix glyph formatting and the last-sibling flag arena."""

from __future__ import annotations

import unittest

from dirtree.errors import DepthLimitExceeded
from dirtree.tree import (
    ASCII_GLYPHS,
    BLOCK_WIDTH,
    MAX_DEPTH,
    UNICODE_GLYPHS,
    AncestorLastFlags,
    format_prefix,
    glyphs_for_charset,
)


class FormatPrefixTests(unittest.TestCase):
    def test_depth_zero_has_no_prefix(self) -> None:
        self.assertEqual(format_prefix(0, [True, False]), "")

    def test_depth_one_uses_corner_for_last_and_tee_otherwise(self) -> None:
        self.assertEqual(format_prefix(1, [True]), "└── ")
        self.assertEqual(format_prefix(1, [False]), "├── ")

    def test_ancestor_levels_draw_bar_unless_ancestor_was_last(self) -> None:
        self.assertEqual(format_prefix(3, [False, True, True]), "│       └── ")
        self.assertEqual(format_prefix(3, [True, False, False]), "    │   ├── ")

    def test_output_is_pure_and_grows_with_depth(self) -> None:
        flags = [False, True, False, True, False]
        for depth in range(len(flags) + 1):
            first = format_prefix(depth, flags)
            second = format_prefix(depth, flags)
            self.assertEqual(first, second)
            self.assertEqual(len(first), BLOCK_WIDTH * depth)
        self.assertEqual(flags, [False, True, False, True, False])

    def test_ascii_glyphs_keep_block_width(self) -> None:
        self.assertEqual(format_prefix(2, [False, True], ASCII_GLYPHS), "|   `-- ")
        self.assertEqual(format_prefix(2, [True, False], ASCII_GLYPHS), "    |-- ")
        for glyphs in (UNICODE_GLYPHS, ASCII_GLYPHS):
            for block in (glyphs.continuation, glyphs.blank, glyphs.tee, glyphs.corner):
                self.assertEqual(len(block), BLOCK_WIDTH)

    def test_glyphs_for_charset_falls_back_to_unicode(self) -> None:
        self.assertIs(glyphs_for_charset("ascii"), ASCII_GLYPHS)
        self.assertIs(glyphs_for_charset(" ASCII "), ASCII_GLYPHS)
        self.assertIs(glyphs_for_charset("klingon"), UNICODE_GLYPHS)
        self.assertIs(glyphs_for_charset(None), UNICODE_GLYPHS)


class AncestorLastFlagsTests(unittest.TestCase):
    def test_default_capacity_matches_known_depth_limit(self) -> None:
        self.assertEqual(AncestorLastFlags().capacity, MAX_DEPTH)

    def test_mark_overwrites_only_its_own_slot(self) -> None:
        flags = AncestorLastFlags(capacity=4)
        flags.mark(0, True)
        flags.mark(1, False)
        flags.mark(1, True)

        self.assertEqual(flags.snapshot(3), (True, True, False))
        self.assertEqual(format_prefix(2, flags), "    └── ")

    def test_mark_beyond_capacity_is_fatal(self) -> None:
        flags = AncestorLastFlags(capacity=2)
        flags.mark(1, True)
        with self.assertRaises(DepthLimitExceeded):
            flags.mark(2, False)


if __name__ == "__main__":
    unittest.main()
