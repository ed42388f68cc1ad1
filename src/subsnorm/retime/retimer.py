"""Re-time a dialogue event across its balanced sub-lines."""

from __future__ import annotations

from typing import List

from ..ass.dialogue import DialogueEvent
from ..logging import get_logger
from ..segment.balancer import GoodEnd, LineBalancer
from ..segment.screens import ScreenBuilder
from ..utils.text import ends_with_punctuation, split_screen_lines, symbol_count

LOGGER = get_logger("retime")


class DegenerateDurationError(ValueError):
    """Raised when an event does not end strictly after it starts."""

    def __init__(self, event: DialogueEvent) -> None:
        super().__init__(f"Event ends at {event.end} ms but starts at {event.start} ms")
        self.event = event


def reading_speed(event: DialogueEvent) -> float:
    """Return the event's reading speed in symbols per second."""
    if event.end <= event.start:
        raise DegenerateDurationError(event)
    return symbol_count(event.text) / (event.duration / 1000)


class EventRetimer:
    """Split an event into screen-sized events at a constant reading speed.

    Each derived event lasts in proportion to its symbol count. Boundaries are
    computed from the cumulative count so that the first event starts at the
    source start, the last one ends at the source end and consecutive events
    touch.
    """

    def __init__(self, max_symbols: int, good_end: GoodEnd = ends_with_punctuation) -> None:
        self._balancer = LineBalancer(max_symbols, good_end)

    def chunks(self, text: str) -> List[str]:
        builder = ScreenBuilder()
        for screen_line in split_screen_lines(text):
            for sub_line in self._balancer.split(screen_line):
                builder.add(sub_line)
        return [chunk for chunk in builder.build() if chunk.strip()]

    def retime(self, event: DialogueEvent) -> List[DialogueEvent]:
        speed = reading_speed(event)
        chunks = self.chunks(event.text)
        counts = [symbol_count(chunk) for chunk in chunks]
        total = sum(counts)
        if total == 0:
            return [event]

        LOGGER.debug("Retiming %d chunk(s) at %.2f symbols/s", len(chunks), speed)
        retimed: List[DialogueEvent] = []
        cursor = event.start
        cumulative = 0
        for chunk, count in zip(chunks, counts):
            cumulative += count
            end = event.start + round(event.duration * cumulative / total)
            retimed.append(DialogueEvent(start=cursor, end=end, text=chunk))
            cursor = end
        return retimed


def retime(
    event: DialogueEvent,
    max_symbols_per_line: int,
    good_end: GoodEnd = ends_with_punctuation,
) -> List[DialogueEvent]:
    """Functional form of :meth:`EventRetimer.retime`."""
    return EventRetimer(max_symbols_per_line, good_end).retime(event)


__all__ = ["DegenerateDurationError", "EventRetimer", "reading_speed", "retime"]
