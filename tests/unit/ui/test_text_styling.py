"""Tests for ANSI line shaping, themes, and preview highlighting.

Styled text must clip and pad by display columns while escape sequences pass
through untouched; previews must never carry raw control bytes.
"""

import re
import unittest
from pathlib import Path

from trifm.panes import STYLE_ANCESTOR, STYLE_FILE
from trifm.ui import ansi as ansi_mod
from trifm.ui.highlight import DEFAULT_STYLE, colorize_source, normalize_style, sanitize_terminal_text
from trifm.ui.theme import DEFAULT_THEME, PLAIN_THEME, available_theme_names, normalize_theme_name, resolve_theme

ANSI_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


class AnsiLineTests(unittest.TestCase):
    def test_display_width_ignores_escapes_and_counts_wide_chars(self) -> None:
        self.assertEqual(ansi_mod.display_width("\033[31mab\033[0m"), 2)
        self.assertEqual(ansi_mod.display_width("日本"), 4)
        self.assertEqual(ansi_mod.display_width("a\tb"), 9)

    def test_clip_keeps_escapes_and_stops_before_wide_char_overflow(self) -> None:
        self.assertEqual(ansi_mod.clip_ansi_line("\033[31mabcdef", 3), "\033[31mabc")
        self.assertEqual(ansi_mod.clip_ansi_line("a日本", 2), "a")

    def test_fit_pads_plain_text(self) -> None:
        self.assertEqual(ansi_mod.fit_ansi_line("ab", 4), "ab  ")
        self.assertEqual(ansi_mod.fit_ansi_line("abcdef", 3), "abc")
        self.assertEqual(ansi_mod.fit_ansi_line("abc", 0), "")

    def test_fit_resets_styled_text_before_padding(self) -> None:
        self.assertEqual(ansi_mod.fit_ansi_line("\033[1mab", 3), "\033[1mab\033[0m ")


class ThemeTests(unittest.TestCase):
    def test_unknown_theme_falls_back_to_default(self) -> None:
        self.assertEqual(normalize_theme_name("  OCEAN "), "ocean")
        self.assertEqual(normalize_theme_name("neon"), DEFAULT_THEME.name)
        self.assertEqual(normalize_theme_name(None), DEFAULT_THEME.name)
        self.assertIn("default", available_theme_names())

    def test_no_color_selects_plain_theme(self) -> None:
        self.assertIs(resolve_theme("ocean", no_color=True), PLAIN_THEME)
        self.assertEqual(PLAIN_THEME.entry_color(STYLE_ANCESTOR), "")

    def test_entry_colors(self) -> None:
        self.assertEqual(DEFAULT_THEME.entry_color(STYLE_FILE), DEFAULT_THEME.entry_file)
        self.assertEqual(DEFAULT_THEME.entry_color("unknown"), "")


class HighlightTests(unittest.TestCase):
    def test_sanitize_escapes_control_bytes_but_keeps_common_whitespace(self) -> None:
        sanitized = sanitize_terminal_text("a\tb\nc\rd\x07e\x1bf")

        self.assertEqual(sanitized, "a\tb\nc\rd\\x07e\\x1bf")

    def test_colorize_preserves_text(self) -> None:
        source = "def f(x):\n    return x\n"

        rendered = colorize_source(source, Path("example.py"))

        self.assertEqual(ANSI_RE.sub("", rendered), source)
        self.assertIn("\x1b[", rendered)

    def test_colorize_neutralizes_control_bytes(self) -> None:
        rendered = colorize_source("bell\x07\n", Path("LICENSE"))

        self.assertNotIn("\x07", rendered)
        self.assertIn("\\x07", ANSI_RE.sub("", rendered))

    def test_unknown_style_falls_back_to_default(self) -> None:
        self.assertEqual(normalize_style("no-such-style"), DEFAULT_STYLE)
        self.assertEqual(normalize_style("native"), "native")


if __name__ == "__main__":
    unittest.main()
