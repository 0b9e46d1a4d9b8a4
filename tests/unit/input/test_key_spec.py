"""Configuration key-expression grammar tests."""

from __future__ import annotations

import unittest

from trifm.input import KeySpecError, is_digit_key, parse_key_expression


class ParseKeyExpressionTests(unittest.TestCase):
    def test_single_characters_map_to_themselves(self) -> None:
        for expression in ("j", "J", " ", ".", "~", "é"):
            with self.subTest(expression=expression):
                self.assertEqual(parse_key_expression(expression), expression)

    def test_control_keys(self) -> None:
        self.assertEqual(parse_key_expression("C-f"), "CTRL_F")
        self.assertEqual(parse_key_expression("C-h"), "BACKSPACE")
        self.assertEqual(parse_key_expression("C-m"), "ENTER")
        self.assertEqual(parse_key_expression("C-i"), "TAB")

    def test_meta_keys_keep_case(self) -> None:
        self.assertEqual(parse_key_expression("M-x"), "ALT_x")
        self.assertEqual(parse_key_expression("M-X"), "ALT_X")

    def test_named_keys_are_case_insensitive(self) -> None:
        self.assertEqual(parse_key_expression("PageDown"), "PAGEDOWN")
        self.assertEqual(parse_key_expression("up"), "UP")
        self.assertEqual(parse_key_expression("space"), " ")
        self.assertEqual(parse_key_expression("Esc"), "ESC")

    def test_invalid_expressions(self) -> None:
        for expression in ("", "g g", "C-1", "X-a", "pagesideways"):
            with self.subTest(expression=expression):
                with self.assertRaises(KeySpecError):
                    parse_key_expression(expression)

    def test_digit_keys(self) -> None:
        self.assertTrue(is_digit_key("0"))
        self.assertTrue(is_digit_key("9"))
        self.assertFalse(is_digit_key("a"))
        self.assertFalse(is_digit_key("10"))


if __name__ == "__main__":
    unittest.main()
