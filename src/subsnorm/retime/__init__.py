"""Event re-timing."""

from .retimer import DegenerateDurationError, EventRetimer, reading_speed, retime

__all__ = ["DegenerateDurationError", "EventRetimer", "reading_speed", "retime"]
