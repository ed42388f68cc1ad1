"""ASS writer utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List


class ASSWriter:
    """Render the normalized line sequence to disk."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def render(self, lines: Iterable[str]) -> List[str]:
        return [line.rstrip("\r\n") for line in lines]

    def write(self, lines: Iterable[str], target: Path) -> Path:
        rendered = self.render(lines)
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("w", encoding=self._encoding, newline="\n") as handle:
            if rendered:
                handle.write("\n".join(rendered) + "\n")
        return target


__all__ = ["ASSWriter"]
