"""ASS subtitle reading and rendering utilities."""

from .dialogue import (
    DIALOGUE_MARKER,
    DialogueEvent,
    UnparsableLineError,
    format_dialogue,
    is_dialogue_line,
    parse_dialogue,
)
from .writer import ASSWriter

__all__ = [
    "DIALOGUE_MARKER",
    "DialogueEvent",
    "UnparsableLineError",
    "format_dialogue",
    "is_dialogue_line",
    "parse_dialogue",
    "ASSWriter",
]
