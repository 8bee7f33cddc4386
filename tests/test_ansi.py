"""Regression tests for ANSI-aware width measurement and clipping."""

import unittest

from lazystatus import ansi as ansi_mod


class DisplayWidthTests(unittest.TestCase):
    def test_escape_sequences_take_no_columns(self) -> None:
        self.assertEqual(ansi_mod.display_width("\033[33mabc\033[0m"), 3)

    def test_wide_characters_take_two_columns(self) -> None:
        self.assertEqual(ansi_mod.display_width("日本"), 4)

    def test_tabs_expand_to_next_stop(self) -> None:
        self.assertEqual(ansi_mod.display_width("ab\tc"), 9)


class ClipAnsiLineTests(unittest.TestCase):
    def test_clip_keeps_escapes_and_trims_visible_text(self) -> None:
        clipped = ansi_mod.clip_ansi_line("\033[33mabcdef\033[0m", 3)
        self.assertEqual(clipped, "\033[33mabc\033[0m")

    def test_wide_character_that_does_not_fit_is_dropped(self) -> None:
        self.assertEqual(ansi_mod.clip_ansi_line("a日", 2), "a")

    def test_non_positive_width_yields_empty(self) -> None:
        self.assertEqual(ansi_mod.clip_ansi_line("abc", 0), "")

    def test_pad_fills_to_width(self) -> None:
        self.assertEqual(ansi_mod.pad_ansi_line("\033[1mab\033[0m", 4), "\033[1mab\033[0m  ")
        self.assertEqual(ansi_mod.pad_ansi_line("abcdef", 4), "abcdef")


if __name__ == "__main__":
    unittest.main()
