"""Parsing and rendering of ASS ``Dialogue`` event lines."""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..utils.timing import to_ass_timestamp, to_milliseconds

DIALOGUE_MARKER = "Dialogue"

_DIALOGUE_RE = re.compile(
    r"Dialogue: 0,"
    r"(?P<hs>\d+):(?P<ms>\d+):(?P<ss>\d+)\.(?P<cs>\d+),"
    r"(?P<he>\d+):(?P<me>\d+):(?P<se>\d+)\.(?P<ce>\d+),"
    r"Default,,0,0,0,,(?P<text>.+)"
)


class UnparsableLineError(ValueError):
    """Raised when a dialogue line does not match the expected layout."""


@dataclass(frozen=True, slots=True)
class DialogueEvent:
    """One caption: start/end offsets in milliseconds and the raw payload."""

    start: int
    end: int
    text: str

    @property
    def duration(self) -> int:
        return self.end - self.start


def is_dialogue_line(line: str) -> bool:
    return line.startswith(DIALOGUE_MARKER)


def parse_dialogue(line: str) -> DialogueEvent:
    """Parse a ``Dialogue: 0,...`` line into a :class:`DialogueEvent`."""
    match = _DIALOGUE_RE.match(line)
    if match is None:
        raise UnparsableLineError(f"Line does not match the dialogue layout: {line!r}")
    try:
        start = to_milliseconds(
            int(match.group("hs")), int(match.group("ms")), int(match.group("ss")), int(match.group("cs"))
        )
        end = to_milliseconds(
            int(match.group("he")), int(match.group("me")), int(match.group("se")), int(match.group("ce"))
        )
    except ValueError as exc:
        raise UnparsableLineError(f"Invalid time code in {line!r}: {exc}") from exc
    return DialogueEvent(start=start, end=end, text=match.group("text"))


def format_dialogue(event: DialogueEvent) -> str:
    return (
        f"Dialogue: 0,{to_ass_timestamp(event.start)},{to_ass_timestamp(event.end)},"
        f"Default,,0,0,0,,{event.text}"
    )


__all__ = [
    "DIALOGUE_MARKER",
    "DialogueEvent",
    "UnparsableLineError",
    "format_dialogue",
    "is_dialogue_line",
    "parse_dialogue",
]
