"""Theme selection and ANSI width helper tests.

Covers colour fallback detection and the measurements used for menu framing.
These keep the plain theme usable where escape codes are unwanted.
"""

from __future__ import annotations

import unittest

from repolauncher.ansi import center_text, display_width, strip_ansi
from repolauncher.ui_theme import DEFAULT_THEME, PLAIN_THEME, color_disabled, resolve_theme


class ThemeSelectionTests(unittest.TestCase):
    def test_resolve_theme_honors_no_color(self) -> None:
        self.assertIs(resolve_theme(), DEFAULT_THEME)
        self.assertIs(resolve_theme(no_color=True), PLAIN_THEME)

    def test_color_disabled_reads_no_color_and_dumb_terminals(self) -> None:
        self.assertFalse(color_disabled({"TERM": "xterm-256color"}))
        self.assertFalse(color_disabled({"NO_COLOR": ""}))
        self.assertTrue(color_disabled({"NO_COLOR": "1"}))
        self.assertTrue(color_disabled({"TERM": "dumb"}))

    def test_plain_theme_has_no_escape_codes(self) -> None:
        for field_name in ("reset", "title", "number", "project", "selected", "key", "dim", "dangerous", "border"):
            self.assertEqual(getattr(PLAIN_THEME, field_name), "")


class DisplayWidthTests(unittest.TestCase):
    def test_escape_codes_do_not_count(self) -> None:
        self.assertEqual(strip_ansi("\033[1;31mred\033[0m"), "red")
        self.assertEqual(display_width("\033[1;31mred\033[0m"), 3)

    def test_wide_characters_count_twice(self) -> None:
        self.assertEqual(display_width("🔍 x"), 4)

    def test_center_text_puts_odd_padding_on_the_right(self) -> None:
        self.assertEqual(center_text("ab", 5), " ab  ")
        self.assertEqual(center_text("toolong", 3), "toolong")


if __name__ == "__main__":
    unittest.main()
