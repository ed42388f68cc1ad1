"""Pair balanced sub-lines into two-line screens."""

from __future__ import annotations

from typing import Iterable, List, Optional

from ..utils.text import LINE_BREAK


class ScreenBuilder:
    """Collect sub-lines of one source event, two per displayed screen."""

    def __init__(self) -> None:
        self._items: List[str] = []
        self._held: Optional[str] = None

    def add(self, line: str) -> None:
        if self._held is not None:
            self._items.append(self._held + LINE_BREAK + line)
            self._held = None
            return
        self._held = line

    def build(self) -> List[str]:
        if self._held is not None:
            self._items.append(self._held)
            self._held = None
        return list(self._items)


def pair_sub_lines(lines: Iterable[str]) -> List[str]:
    builder = ScreenBuilder()
    for line in lines:
        builder.add(line)
    return builder.build()


__all__ = ["ScreenBuilder", "pair_sub_lines"]
