"""Tests for the readable-symbol metric and text helpers."""

from __future__ import annotations

from subsnorm.utils.text import ends_with_punctuation, split_screen_lines, split_words, symbol_count


def test_symbol_count_ignores_punctuation_and_spaces() -> None:
    assert symbol_count("Hello, world!") == 10
    assert symbol_count("...") == 0
    assert symbol_count("   ") == 0


def test_symbol_count_skips_line_break_escape() -> None:
    assert symbol_count("one\\Ntwo") == 6
    assert symbol_count("one\\Ntwo") == symbol_count("one two")


def test_symbol_count_counts_letters_and_decimal_digits_only() -> None:
    assert symbol_count("2024 год") == 7
    assert symbol_count("x²") == 1


def test_good_end_uses_unicode_punctuation() -> None:
    assert ends_with_punctuation("friend,")
    assert ends_with_punctuation("«quote»")
    assert ends_with_punctuation("well-")
    assert not ends_with_punctuation("word")
    assert not ends_with_punctuation("$")
    assert not ends_with_punctuation("")


def test_split_screen_lines_drops_empty_segments() -> None:
    assert split_screen_lines("a\\N\\Nb") == ["a", "b"]
    assert split_screen_lines("single") == ["single"]


def test_split_words_on_any_whitespace() -> None:
    assert split_words(" one\ttwo  three ") == ["one", "two", "three"]
