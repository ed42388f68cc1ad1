"""Tests for the line balancer state machine."""

from __future__ import annotations

import pytest

from subsnorm.segment.balancer import (
    Accumulator,
    BalancerState,
    LineBalancer,
    Phase,
    accept_word,
    merge_into,
    rebalance,
    split_to_limit,
)
from subsnorm.utils.text import symbol_count

SAMPLES = [
    "Hello there my friend, how are you today",
    "apple beach cider dance eagle fable grape house igloo joker",
    "We should leave now, before the storm arrives. Nobody wants to be stuck on the road tonight!",
    "short supercalifragilisticexpialidocious end",
    "a b c d e f g h i j k l m n o p q r s t u v w x y z",
]


def test_splits_after_punctuation_near_the_middle() -> None:
    lines = split_to_limit("Hello there my friend, how are you today", 20)
    assert lines == ["Hello there my friend,", "how are you today"]


def test_compliant_line_is_returned_unchanged() -> None:
    line = "Short line"
    assert split_to_limit(line, 42) == [line]
    assert split_to_limit(split_to_limit(line, 42)[0], 42) == [line]


def test_blank_line_yields_nothing() -> None:
    assert split_to_limit("   ", 10) == []


def test_unpunctuated_line_is_balanced_into_two_halves() -> None:
    line = "apple beach cider dance eagle fable grape house igloo joker"
    assert symbol_count(line) == 50
    first, second = split_to_limit(line, 42)
    assert first == "apple beach cider dance eagle"
    assert second == "fable grape house igloo joker"
    assert abs(symbol_count(first) - symbol_count(second)) <= 5


@pytest.mark.parametrize("limit", [5, 10, 20, 30, 42])
@pytest.mark.parametrize("line", SAMPLES)
def test_words_are_conserved_in_order(line: str, limit: int) -> None:
    result = split_to_limit(line, limit)
    assert " ".join(result).split() == line.split()


@pytest.mark.parametrize("limit", [5, 10, 20, 30, 42])
@pytest.mark.parametrize("line", SAMPLES)
def test_sub_lines_respect_budget(line: str, limit: int) -> None:
    for sub_line in split_to_limit(line, limit):
        assert symbol_count(sub_line) <= limit or len(sub_line.split()) == 1


def test_overlong_word_stands_alone() -> None:
    result = split_to_limit("short supercalifragilisticexpialidocious end", 10)
    assert result == ["short", "supercalifragilisticexpialidocious", "end"]


def test_accept_word_rules() -> None:
    assert accept_word(Accumulator(), "x" * 50, 10).words == ("x" * 50,)
    assert accept_word(Accumulator(("abcdefgh",)), "abc", 10) is None
    full = Accumulator(("abcdefgh,",))
    assert accept_word(full, "ij", 12) is None
    assert accept_word(full, "ij.", 12).words == ("abcdefgh,", "ij.")
    assert accept_word(Accumulator(("ab,",)), "cd", 12).words == ("ab,", "cd")


def test_merge_into_respects_limit() -> None:
    previous = Accumulator(("abcdefgh,",))
    assert merge_into(previous, Accumulator(("ij",)), 12).words == ("abcdefgh,", "ij")
    assert merge_into(previous, Accumulator(("ijklm",)), 12) is None


def test_rebalance_stops_at_punctuation_boundary() -> None:
    previous = Accumulator(("one", "two", "three,"))
    current = Accumulator(("x",))
    assert rebalance(previous, current, 40) == (previous, current)


def test_rebalance_with_custom_good_end_predicate() -> None:
    previous = Accumulator(("one", "two", "three,"))
    current = Accumulator(("x",))
    moved_prev, moved_cur = rebalance(previous, current, 40, good_end=lambda word: False)
    assert moved_prev.words == ("one", "two")
    assert moved_cur.words == ("three,", "x")


def test_rebalance_moves_words_into_previous() -> None:
    previous = Accumulator(("ab",))
    current = Accumulator(("cdef", "gh", "ijklmn"))
    moved_prev, moved_cur = rebalance(previous, current, 40)
    assert moved_prev.words == ("ab", "cdef")
    assert moved_cur.words == ("gh", "ijklmn")


def test_rebalance_respects_receiver_limit() -> None:
    previous = Accumulator(("abcdefgh", "ijklm"))
    current = Accumulator(("n",))
    assert rebalance(previous, current, 5) == (previous, current)
    moved_prev, moved_cur = rebalance(previous, current, 40)
    assert moved_prev.words == ("abcdefgh",)
    assert moved_cur.words == ("ijklm", "n")


def test_rebalance_keeps_one_word_per_side() -> None:
    previous = Accumulator(("abcdefgh", "ij"))
    current = Accumulator(("k",))
    moved_prev, moved_cur = rebalance(previous, current, 10)
    assert moved_prev.words == ("abcdefgh",)
    assert moved_cur.words == ("ij", "k")


def test_close_merges_before_finalizing() -> None:
    balancer = LineBalancer(12)
    state = BalancerState()
    state = balancer.step(state, "abcdefgh,")
    state = balancer.step(state, "ij")
    assert state.phase is Phase.ACCUMULATING
    assert state.previous.words == ("abcdefgh,",)
    assert state.current.words == ("ij",)
    assert state.finalized == ()

    state = balancer.step(state, "klmnopqrstu")
    assert state.previous.words == ("abcdefgh,", "ij")
    assert state.current.words == ("klmnopqrstu",)
    assert state.finalized == ()

    state = balancer.finish(state)
    assert state.phase is Phase.FINALIZED
    assert state.finalized == ("abcdefgh, ij", "klmnopqrstu")


def test_close_rebalances_then_finalizes_previous() -> None:
    assert split_to_limit("abcdefg, hi jklmnopq rs", 10) == ["abcdefg,", "hi jklmnopq", "rs"]


def test_state_machine_rejects_out_of_order_transitions() -> None:
    balancer = LineBalancer(10)
    finished = balancer.finish(balancer.step(BalancerState(), "word"))
    with pytest.raises(ValueError):
        balancer.step(finished, "more")
    with pytest.raises(ValueError):
        balancer.close(BalancerState())


def test_limit_must_be_positive() -> None:
    with pytest.raises(ValueError):
        LineBalancer(0)
