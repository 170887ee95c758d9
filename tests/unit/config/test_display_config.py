"""Tests for persisted display defaults and input sanitization."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirtree import config


class DisplayConfigTests(unittest.TestCase):
    def test_missing_or_malformed_config_reads_as_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("dirtree.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
                config_path.write_text("{not json", encoding="utf-8")
                self.assertEqual(config.load_config(), {})
                config_path.write_text("[1, 2]", encoding="utf-8")
                self.assertEqual(config.load_config(), {})
                self.assertIsNone(config.load_charset())
                self.assertTrue(config.load_color_enabled())

    def test_display_defaults_round_trip(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            with mock.patch("dirtree.config.CONFIG_PATH", config_path):
                config.save_config({"unrelated": 1})
                config.save_display_defaults(charset="ascii", color=False, theme="ocean")

                self.assertEqual(config.load_charset(), "ascii")
                self.assertEqual(config.load_theme_name(), "ocean")
                self.assertFalse(config.load_color_enabled())
                self.assertEqual(config.load_config().get("unrelated"), 1)

    def test_invalid_values_are_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("dirtree.config.CONFIG_PATH", config_path):
                config.save_config({"charset": "braille", "theme": 7, "color": "no"})

                self.assertIsNone(config.load_charset())
                self.assertIsNone(config.load_theme_name())
                self.assertTrue(config.load_color_enabled())

                config.save_display_defaults(charset="braille", theme="neon")
                self.assertEqual(config.load_config().get("charset"), "braille")

    def test_save_config_ignores_unwritable_location(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "blocker"
            blocker.write_text("", encoding="utf-8")
            config_path = blocker / "config.json"
            with mock.patch("dirtree.config.CONFIG_PATH", config_path):
                config.save_config({"charset": "ascii"})
                self.assertEqual(config.load_config(), {})


if __name__ == "__main__":
    unittest.main()
