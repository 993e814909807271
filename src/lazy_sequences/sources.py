"""Concrete sequence sources and the termination policies they use."""

import logging
import random
from typing import Any, Callable, Iterable, Iterator, Optional

from .models import NamedRecord
from .sequence import LazySequence


class CountedSequence(LazySequence):
    """
    Exactly ``count`` elements, element ``i`` computed as ``rule(i)``.

    Single Responsibility: Fixed-count termination.
    """

    def __init__(self, rule: Callable[[int], Any], count: int, logger: Optional[logging.Logger] = None):
        if count < 0:
            raise ValueError("count must not be negative")
        super().__init__(logger)
        self.rule = rule
        self.count = count

    def _produce(self) -> Iterator[Any]:
        for index in range(self.count):
            yield self.rule(index)


class StopAfterSequence(LazySequence):
    """
    Draws from ``rule`` until ``predicate`` accepts a value.

    The accepted value is still yielded; completion is signalled on the
    following ``advance``. If the predicate never accepts, the sequence is
    unbounded.
    """

    def __init__(
        self,
        rule: Callable[[], Any],
        predicate: Callable[[Any], bool],
        logger: Optional[logging.Logger] = None,
    ):
        super().__init__(logger)
        self.rule = rule
        self.predicate = predicate

    def _start_rule(self) -> Callable[[], Any]:
        """Rule for one traversal. Override to give each traversal its own state."""
        return self.rule

    def _produce(self) -> Iterator[Any]:
        rule = self._start_rule()
        while True:
            value = rule()
            stop = self.predicate(value)
            yield value
            if stop:
                return


class UnboundedSequence(LazySequence):
    """Calls ``rule`` forever. Bound it with ``take``."""

    def __init__(self, rule: Callable[[], Any], logger: Optional[logging.Logger] = None):
        super().__init__(logger)
        self.rule = rule

    def _produce(self) -> Iterator[Any]:
        while True:
            yield self.rule()


class UnfoldSequence(LazySequence):
    """``initial``, ``step(initial)``, ``step(step(initial))`` and so on, forever."""

    def __init__(self, initial: Any, step: Callable[[Any], Any], logger: Optional[logging.Logger] = None):
        super().__init__(logger)
        self.initial = initial
        self.step = step

    def _produce(self) -> Iterator[Any]:
        state = self.initial
        while True:
            yield state
            state = self.step(state)


def counted(rule: Callable[[int], Any], count: int, logger: Optional[logging.Logger] = None) -> CountedSequence:
    return CountedSequence(rule, count, logger)


def stop_after(
    rule: Callable[[], Any],
    predicate: Callable[[Any], bool],
    logger: Optional[logging.Logger] = None,
) -> StopAfterSequence:
    return StopAfterSequence(rule, predicate, logger)


def unbounded(rule: Callable[[], Any], logger: Optional[logging.Logger] = None) -> UnboundedSequence:
    return UnboundedSequence(rule, logger)


def unfold(initial: Any, step: Callable[[Any], Any], logger: Optional[logging.Logger] = None) -> UnfoldSequence:
    return UnfoldSequence(initial, step, logger)


class IntegerWalk(LazySequence):
    """
    Yields 1 through 5, logging a marker as each stretch of the body runs.

    The markers show that code between two elements only runs when the
    next element is requested.
    """

    def _produce(self) -> Iterator[int]:
        self._logger.info("A")
        yield 1
        self._logger.info("B")
        yield 2
        self._logger.info("C")
        yield 3
        self._logger.info("D")
        yield from range(4, 6)


class DiceRolls(StopAfterSequence):
    """
    Rolls a die until the sentinel face comes up.

    Each traversal seeds its own ``random.Random``, so traversals with a
    fixed seed are reproducible and independent. ``seed=None`` draws from
    system entropy on every traversal.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        sides: int = 6,
        sentinel: int = 6,
        logger: Optional[logging.Logger] = None,
    ):
        if sides < 1:
            raise ValueError("sides must be positive")
        if not 1 <= sentinel <= sides:
            raise ValueError(f"sentinel must be between 1 and {sides}")
        super().__init__(rule=None, predicate=self._is_sentinel, logger=logger)
        self.seed = seed
        self.sides = sides
        self.sentinel = sentinel

    def _start_rule(self) -> Callable[[], int]:
        rng = random.Random(self.seed)
        return lambda: rng.randint(1, self.sides)

    def _is_sentinel(self, value: int) -> bool:
        return value == self.sentinel


class ReplaySequence(LazySequence):
    """Replays already materialised values, so one draw can be traversed many times."""

    def __init__(self, values: Iterable[Any], logger: Optional[logging.Logger] = None):
        super().__init__(logger)
        self.values = tuple(values)

    def _produce(self) -> Iterator[Any]:
        yield from self.values


_DEFAULT = object()


class FixedSet(LazySequence):
    """
    Up to three records, skipping members that are ``None``.

    Members left unspecified default to records named "A", "B" and "C".
    """

    def __init__(
        self,
        a: Any = _DEFAULT,
        b: Any = _DEFAULT,
        c: Any = _DEFAULT,
        logger: Optional[logging.Logger] = None,
    ):
        super().__init__(logger)
        self.a = NamedRecord("A") if a is _DEFAULT else a
        self.b = NamedRecord("B") if b is _DEFAULT else b
        self.c = NamedRecord("C") if c is _DEFAULT else c

    def _produce(self) -> Iterator[NamedRecord]:
        if self.a is not None:
            yield self.a
        if self.b is not None:
            yield self.b
        if self.c is not None:
            yield self.c
