"""Split screen-lines into balanced sub-lines under a symbol budget."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Callable, List, Optional, Tuple

from ..logging import get_logger
from ..utils.text import ends_with_punctuation, split_words, symbol_count

LOGGER = get_logger("segment.balancer")

GoodEnd = Callable[[str], bool]


@dataclass(frozen=True, slots=True)
class Accumulator:
    """An ordered run of words collected for one sub-line."""

    words: Tuple[str, ...] = ()

    @property
    def symbols(self) -> int:
        return sum(symbol_count(word) for word in self.words)

    @property
    def last(self) -> str:
        return self.words[-1]

    @property
    def text(self) -> str:
        return " ".join(self.words)

    def is_blank(self) -> bool:
        return not self.text.strip()

    def append(self, word: str) -> "Accumulator":
        return Accumulator(self.words + (word,))

    def extend(self, other: "Accumulator") -> "Accumulator":
        return Accumulator(self.words + other.words)


class Phase(enum.Enum):
    ACCUMULATING = "accumulating"
    CLOSING = "closing"
    FINALIZED = "finalized"


@dataclass(frozen=True, slots=True)
class BalancerState:
    """Snapshot of the two accumulator slots and the sub-lines emitted so far.

    ``pending`` holds the word that was rejected by ``current`` while the
    machine is in :attr:`Phase.CLOSING`.
    """

    phase: Phase = Phase.ACCUMULATING
    previous: Optional[Accumulator] = None
    current: Accumulator = Accumulator()
    finalized: Tuple[str, ...] = ()
    pending: Optional[str] = None


def accept_word(
    accumulator: Accumulator,
    word: str,
    limit: int,
    good_end: GoodEnd = ends_with_punctuation,
) -> Optional[Accumulator]:
    """Return ``accumulator`` extended by ``word`` or None when it must close.

    Once the accumulator is two thirds full and already ends on punctuation,
    only another punctuation-terminated word may join it.
    """
    if not accumulator.words:
        return accumulator.append(word)
    length = accumulator.symbols
    if length + symbol_count(word) > limit:
        return None
    if good_end(word) or length < limit * 2 // 3 or not good_end(accumulator.last):
        return accumulator.append(word)
    return None


def merge_into(previous: Accumulator, current: Accumulator, limit: int) -> Optional[Accumulator]:
    """Append ``current`` to ``previous`` when the result fits the budget."""
    if previous.symbols + current.symbols > limit:
        return None
    return previous.extend(current)


def _distance(average: int, first: int, second: int) -> int:
    return max(abs(average - first), abs(average - second))


def rebalance(
    previous: Accumulator,
    current: Accumulator,
    limit: int,
    good_end: GoodEnd = ends_with_punctuation,
) -> Tuple[Accumulator, Accumulator]:
    """Move boundary words from the longer accumulator to the shorter one.

    The direction is fixed up front. Words move one at a time while the donor
    keeps at least one word, the last word of ``previous`` is not a good end,
    the receiver stays within ``limit`` and the distance to the average
    strictly shrinks.
    """
    prev_words = list(previous.words)
    cur_words = list(current.words)
    prev_len = previous.symbols
    cur_len = current.symbols
    average = (prev_len + cur_len) // 2
    distance = _distance(average, cur_len, prev_len)
    towards_current = cur_len < prev_len

    while True:
        donor = prev_words if towards_current else cur_words
        if len(donor) <= 1 or good_end(prev_words[-1]):
            break
        word = prev_words[-1] if towards_current else cur_words[0]
        size = symbol_count(word)
        if towards_current:
            if cur_len + size > limit:
                break
            new_prev, new_cur = prev_len - size, cur_len + size
        else:
            if prev_len + size > limit:
                break
            new_prev, new_cur = prev_len + size, cur_len - size
        new_distance = _distance(average, new_cur, new_prev)
        if new_distance >= distance:
            break
        if towards_current:
            cur_words.insert(0, prev_words.pop())
        else:
            prev_words.append(cur_words.pop(0))
        prev_len, cur_len, distance = new_prev, new_cur, new_distance

    return Accumulator(tuple(prev_words)), Accumulator(tuple(cur_words))


def _finalize(finalized: Tuple[str, ...], accumulator: Optional[Accumulator]) -> Tuple[str, ...]:
    if accumulator is None or accumulator.is_blank():
        return finalized
    return finalized + (accumulator.text,)


class LineBalancer:
    """Split one screen-line into sub-lines that respect a symbol budget."""

    def __init__(self, limit: int, good_end: GoodEnd = ends_with_punctuation) -> None:
        if limit <= 0:
            raise ValueError("Symbol limit must be positive")
        self._limit = limit
        self._good_end = good_end

    def step(self, state: BalancerState, word: str) -> BalancerState:
        """Feed one word into the machine."""
        if state.phase is not Phase.ACCUMULATING:
            raise ValueError(f"Cannot accept words in phase {state.phase.value}")
        accepted = accept_word(state.current, word, self._limit, self._good_end)
        if accepted is not None:
            return replace(state, current=accepted)
        return self.close(replace(state, phase=Phase.CLOSING, pending=word))

    def close(self, state: BalancerState) -> BalancerState:
        """Retire ``current`` and restart accumulation with the pending word.

        Merging into ``previous`` is tried first. Only when it does not fit are
        the two slots rebalanced and ``previous`` finalized.
        """
        if state.phase is not Phase.CLOSING or state.pending is None:
            raise ValueError("close() requires a pending word")
        merged = merge_into(state.previous, state.current, self._limit) if state.previous is not None else None
        if merged is not None:
            previous = merged
            finalized = state.finalized
        else:
            if state.previous is not None:
                balanced_prev, balanced_cur = rebalance(state.previous, state.current, self._limit, self._good_end)
            else:
                balanced_prev, balanced_cur = None, state.current
            finalized = _finalize(state.finalized, balanced_prev)
            previous = balanced_cur
        return BalancerState(
            phase=Phase.ACCUMULATING,
            previous=previous,
            current=Accumulator((state.pending,)),
            finalized=finalized,
        )

    def finish(self, state: BalancerState) -> BalancerState:
        """Rebalance the two open slots and finalize both."""
        if state.phase is not Phase.ACCUMULATING:
            raise ValueError(f"Cannot finish from phase {state.phase.value}")
        previous, current = state.previous, state.current
        if previous is not None and previous.words and current.words:
            previous, current = rebalance(previous, current, self._limit, self._good_end)
        finalized = _finalize(_finalize(state.finalized, previous), current)
        return BalancerState(phase=Phase.FINALIZED, finalized=finalized)

    def split(self, line: str) -> List[str]:
        line = line.strip()
        if not line:
            return []
        if symbol_count(line) <= self._limit:
            return [line]
        state = BalancerState()
        for word in split_words(line):
            state = self.step(state, word)
        state = self.finish(state)
        LOGGER.debug("Split %r into %d sub-lines", line, len(state.finalized))
        return list(state.finalized)


def split_to_limit(line: str, limit: int, good_end: GoodEnd = ends_with_punctuation) -> List[str]:
    """Functional form of :meth:`LineBalancer.split`."""
    return LineBalancer(limit, good_end).split(line)


__all__ = [
    "Accumulator",
    "BalancerState",
    "GoodEnd",
    "LineBalancer",
    "Phase",
    "accept_word",
    "merge_into",
    "rebalance",
    "split_to_limit",
]
