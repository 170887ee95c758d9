"""Tests for suffix matching and read-only subtree containment checks."""

from __future__ import annotations

import io
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirtree.tree import file_passes_filter, subtree_has_match, suffix_matches


class SuffixMatchTests(unittest.TestCase):
    def test_suffix_is_taken_from_last_dot(self) -> None:
        self.assertTrue(suffix_matches("notes.md", ".md"))
        self.assertTrue(suffix_matches("archive.tar.gz", ".gz"))
        self.assertFalse(suffix_matches("archive.tar.gz", ".tar.gz"))
        self.assertFalse(suffix_matches("notes.mdx", ".md"))

    def test_name_without_dot_never_matches(self) -> None:
        self.assertFalse(suffix_matches("Makefile", ".md"))

    def test_bare_extension_name_matches_itself(self) -> None:
        self.assertTrue(suffix_matches(".md", ".md"))

    def test_missing_filter_passes_every_file(self) -> None:
        self.assertTrue(file_passes_filter("Makefile", None))
        self.assertFalse(file_passes_filter("Makefile", ".c"))


class SubtreeHasMatchTests(unittest.TestCase):
    def test_finds_match_in_nested_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            deep = root / "a" / "b" / "c"
            deep.mkdir(parents=True)
            (root / "top.txt").write_text("t", encoding="utf-8")
            (deep / "leaf.md").write_text("m", encoding="utf-8")

            self.assertTrue(subtree_has_match(str(root), ".md"))
            self.assertTrue(subtree_has_match(str(root / "a"), ".md"))
            self.assertFalse(subtree_has_match(str(root), ".py"))

    def test_directories_alone_do_not_count_as_a_match(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "empty" / "nested").mkdir(parents=True)
            (root / "dir.md").mkdir()

            self.assertFalse(subtree_has_match(str(root)))
            self.assertFalse(subtree_has_match(str(root), ".md"))

            (root / "empty" / "nested" / "file").write_text("", encoding="utf-8")
            self.assertTrue(subtree_has_match(str(root)))

    def test_unopenable_directory_is_silent_and_does_not_match(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            stdout = io.StringIO()
            stderr = io.StringIO()
            with mock.patch("sys.stdout", stdout), mock.patch("sys.stderr", stderr):
                result = subtree_has_match(str(Path(tmp) / "missing"), ".md")

            self.assertFalse(result)
            self.assertEqual(stdout.getvalue(), "")
            self.assertEqual(stderr.getvalue(), "")

    def test_memo_records_completed_answers(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "docs").mkdir()
            (root / "docs" / "guide.md").write_text("g", encoding="utf-8")
            (root / "src").mkdir()
            (root / "src" / "main.c").write_text("c", encoding="utf-8")

            memo: dict[str, bool] = {}
            self.assertTrue(subtree_has_match(str(root), ".md", memo=memo))
            self.assertTrue(memo[str(root)])
            self.assertFalse(subtree_has_match(str(root / "src"), ".md", memo=memo))
            self.assertFalse(memo[str(root / "src")])

            with mock.patch("dirtree.tree.containment.open_directory") as open_directory:
                self.assertTrue(subtree_has_match(str(root), ".md", memo=memo))
            open_directory.assert_not_called()


if __name__ == "__main__":
    unittest.main()
