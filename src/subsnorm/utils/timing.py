"""Time conversion helpers."""

from __future__ import annotations


def to_milliseconds(hours: int, minutes: int, seconds: int, centiseconds: int) -> int:
    """Convert ASS time-code components to an offset in milliseconds."""
    if minutes >= 60 or seconds >= 60:
        raise ValueError(f"Minutes and seconds must be below 60: {minutes}:{seconds}")
    if centiseconds >= 100:
        raise ValueError(f"Centiseconds must be below 100: {centiseconds}")
    return ((hours * 60 + minutes) * 60 + seconds) * 1000 + centiseconds * 10


def to_ass_timestamp(value_ms: int) -> str:
    """Render milliseconds as ``H:MM:SS.mmm``."""
    if value_ms < 0:
        value_ms = 0
    hours, remainder = divmod(value_ms, 3_600_000)
    minutes, remainder = divmod(remainder, 60_000)
    seconds, milliseconds = divmod(remainder, 1000)
    return f"{hours:d}:{minutes:02d}:{seconds:02d}.{milliseconds:03d}"


__all__ = ["to_milliseconds", "to_ass_timestamp"]
