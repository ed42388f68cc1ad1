"""Utility helpers for text processing."""

from __future__ import annotations

import unicodedata
from typing import List

LINE_BREAK = "\\N"

_SYMBOL_CATEGORIES = frozenset({"Lu", "Ll", "Lt", "Lm", "Lo", "Nd"})


def symbol_count(text: str) -> int:
    """Count readable symbols (letters and decimal digits) in ``text``.

    Manual line breaks are removed before counting, so ``\\N`` never
    contributes its ``N`` to the length.
    """
    return sum(1 for ch in text.replace(LINE_BREAK, "") if unicodedata.category(ch) in _SYMBOL_CATEGORIES)


def ends_with_punctuation(word: str) -> bool:
    """Return True when ``word`` ends on a punctuation character."""
    if not word:
        return False
    return unicodedata.category(word[-1]).startswith("P")


def split_screen_lines(text: str) -> List[str]:
    """Split an event payload on manual line breaks, dropping empty segments."""
    return [part for part in text.split(LINE_BREAK) if part]


def split_words(line: str) -> List[str]:
    return line.split()


__all__ = [
    "LINE_BREAK",
    "symbol_count",
    "ends_with_punctuation",
    "split_screen_lines",
    "split_words",
]
