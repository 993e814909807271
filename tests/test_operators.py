"""Tests for operators module."""

import logging
import random

import pytest

from lazy_sequences.errors import EmptySequenceError, RuleEvaluationFailure
from lazy_sequences.sources import DiceRolls, FixedSet, counted, unbounded


def _range(start, count):
    return counted(lambda i: start + i, count)


def test_where_and_select_chain():
    """Test chaining filters and projections over records."""
    names = (
        FixedSet()
        .select(lambda record: record.name + "az")
        .where(lambda name: name.startswith("B"))
        .select(lambda name: name.upper())
    )

    assert names.to_list() == ["BAZ"]


def test_where_even_numbers():
    """Test filtering with a named predicate."""

    def is_even(x):
        return x % 2 == 0

    values = _range(0, 11)

    assert values.where(is_even).to_list() == [0, 2, 4, 6, 8, 10]


def test_aggregates():
    """Test the terminal aggregate operations."""
    values = _range(0, 11)

    assert values.first() == 0
    assert values.last() == 10
    assert values.sum() == 55
    assert values.count() == 11
    assert values.first(lambda x: x % 2 == 1) == 1
    assert values.last(lambda x: x < 4) == 3


def test_first_and_last_on_empty_sequence():
    """Test that first and last raise when nothing matches."""
    with pytest.raises(EmptySequenceError):
        _range(0, 0).first()
    with pytest.raises(EmptySequenceError):
        _range(0, 3).last(lambda x: x > 10)


def test_first_stops_pulling_once_answered():
    """Test that first computes only the elements it needs."""
    evaluations = []
    sequence = unbounded(lambda: evaluations.append(1) or len(evaluations))

    assert sequence.first(lambda x: x == 3) == 3
    assert len(evaluations) == 3


def test_composition_is_deferred():
    """Test that building a query evaluates nothing."""
    evaluations = []

    def rule(index):
        evaluations.append(index)
        return index

    query = counted(rule, 10).where(lambda x: x % 2 == 0).select(str).order_descending().take(2)

    assert evaluations == []
    assert query.to_list() == ["8", "6"]
    assert len(evaluations) == 10


def test_take_never_runs_ahead():
    """Test that take does not request the element after its limit."""
    evaluations = []
    sequence = unbounded(lambda: evaluations.append(1) or len(evaluations))

    assert sequence.take(3).to_list() == [1, 2, 3]
    assert len(evaluations) == 3

    evaluations.clear()
    assert sequence.take(0).to_list() == []
    assert evaluations == []


def test_skip():
    """Test dropping leading elements."""
    assert _range(0, 5).skip(2).to_list() == [2, 3, 4]
    assert _range(0, 2).skip(5).to_list() == []


@pytest.mark.parametrize("operator", ["take", "skip"])
def test_negative_counts_rejected(operator):
    """Test that negative take/skip counts are rejected at construction."""
    with pytest.raises(ValueError):
        getattr(_range(0, 3), operator)(-1)


def test_order_and_order_descending():
    """Test sorting with and without a key."""
    values = counted(lambda i: [3, 1, 2][i], 3)

    assert values.order().to_list() == [1, 2, 3]
    assert values.order_descending().to_list() == [3, 2, 1]
    assert FixedSet().order_descending(key=lambda r: r.name).select(lambda r: r.name).to_list() == [
        "C",
        "B",
        "A",
    ]


def test_lazy_dice_query_matches_sorted_rolls():
    """Test ordering and limiting a stochastic source with a fixed seed."""
    rng = random.Random(12345)
    rolls = []
    while not rolls or rolls[-1] != 6:
        rolls.append(rng.randint(1, 6))

    top = DiceRolls(seed=12345).order_descending().take(5)

    assert top.to_list() == sorted(rolls, reverse=True)[:5]
    assert top.to_list()[0] == 6


def test_upstream_failure_propagates_once_wrapped():
    """Test that a failure in the source reaches the consumer unchanged."""
    query = counted(lambda i: 1 // (1 - i), 3).select(lambda x: x * 2)

    with pytest.raises(RuleEvaluationFailure) as exc_info:
        query.to_list()

    assert exc_info.value.source == "CountedSequence"
    assert isinstance(exc_info.value.__cause__, ZeroDivisionError)


def test_selector_failure_is_wrapped():
    """Test that a failing selector is reported by the mapped sequence."""
    query = _range(0, 3).select(lambda x: {}[x])

    with pytest.raises(RuleEvaluationFailure) as exc_info:
        query.to_list()

    assert exc_info.value.source == "MappedSequence"
    assert isinstance(exc_info.value.__cause__, KeyError)


def test_operators_inherit_source_logger(caplog):
    """Test that composed sequences log through their source's logger."""
    custom = logging.getLogger("tests.query")
    caplog.set_level(logging.DEBUG, logger="tests.query")

    query = counted(lambda i: i, 3, logger=custom).where(lambda x: x > 0).order_descending()

    assert query.to_list() == [2, 1]
    assert any("Buffering FilteredSequence" in r.getMessage() for r in caplog.records if r.name == "tests.query")
