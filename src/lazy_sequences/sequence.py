"""Lazy sequence base class and per-traversal cursors."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterator, List, Optional, Tuple

from .errors import CursorStateError, EmptySequenceError, RuleEvaluationFailure


class CursorState(str, Enum):
    """Lifecycle of a single traversal."""

    READY = "ready"
    EXHAUSTED = "exhausted"
    FAILED = "failed"


@dataclass
class Cursor:
    """Opaque state of one traversal.

    A cursor belongs to the consumer that started it. Sharing one between
    consumers makes them steal elements from each other.
    """

    source: "LazySequence" = field(repr=False)
    iterator: Iterator[Any] = field(repr=False)
    position: int = 0
    state: CursorState = CursorState.READY

    @property
    def done(self) -> bool:
        return self.state is not CursorState.READY


class LazySequence:
    """
    Base class for sequences that compute elements only when asked.

    Subclasses implement ``_produce`` as a generator function. Constructing a
    sequence runs nothing; every call to ``start_traversal`` creates a new
    generator, so traversals never share state.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)

    @property
    def name(self) -> str:
        return type(self).__name__

    def _produce(self) -> Iterator[Any]:
        raise NotImplementedError

    def start_traversal(self) -> Cursor:
        """
        Begin a new, independent traversal.

        Returns:
            Cursor positioned before the first element
        """
        # Calling a generator function does not execute its body.
        return Cursor(source=self, iterator=self._produce())

    def advance(self, cursor: Cursor) -> Tuple[Any, bool]:
        """
        Compute the next element of a traversal.

        Args:
            cursor: Cursor returned by ``start_traversal`` on this sequence

        Returns:
            ``(value, False)`` for each element, then ``(None, True)`` once
            the traversal is complete (and on every call after that)

        Raises:
            RuleEvaluationFailure: The rule raised while computing the element
            CursorStateError: The cursor failed earlier or belongs elsewhere
        """
        if cursor.source is not self:
            raise CursorStateError(f"Cursor was started by {cursor.source.name}, not {self.name}")
        if cursor.state is CursorState.FAILED:
            raise CursorStateError(
                f"Traversal of {self.name} failed at element {cursor.position} and cannot be reused"
            )
        if cursor.state is CursorState.EXHAUSTED:
            return None, True

        try:
            value = next(cursor.iterator)
        except StopIteration:
            cursor.state = CursorState.EXHAUSTED
            self._logger.debug(f"{self.name} completed after {cursor.position} elements")
            return None, True
        except RuleEvaluationFailure:
            # Upstream failure in a composed sequence, already wrapped.
            cursor.state = CursorState.FAILED
            raise
        except Exception as exc:
            cursor.state = CursorState.FAILED
            self._logger.error(f"{self.name} rule failed at element {cursor.position}: {exc}")
            raise RuleEvaluationFailure(self.name, cursor.position) from exc

        cursor.position += 1
        return value, False

    def __iter__(self) -> Iterator[Any]:
        cursor = self.start_traversal()
        while True:
            value, done = self.advance(cursor)
            if done:
                return
            yield value

    def __repr__(self) -> str:
        return f"<{self.name}>"

    # Lazy composition

    def where(self, predicate: Callable[[Any], bool]) -> "LazySequence":
        """Keep only elements for which ``predicate`` is true."""
        from .operators import FilteredSequence

        return FilteredSequence(self, predicate, logger=self._logger)

    def select(self, selector: Callable[[Any], Any]) -> "LazySequence":
        """Transform every element with ``selector``."""
        from .operators import MappedSequence

        return MappedSequence(self, selector, logger=self._logger)

    def take(self, count: int) -> "LazySequence":
        """Stop after ``count`` elements without pulling any further upstream."""
        from .operators import TakenSequence

        return TakenSequence(self, count, logger=self._logger)

    def skip(self, count: int) -> "LazySequence":
        """Drop the first ``count`` elements."""
        from .operators import SkippedSequence

        return SkippedSequence(self, count, logger=self._logger)

    def order(self, key: Optional[Callable[[Any], Any]] = None) -> "LazySequence":
        """Sort ascending. The upstream is buffered when traversal starts."""
        from .operators import OrderedSequence

        return OrderedSequence(self, key=key, logger=self._logger)

    def order_descending(self, key: Optional[Callable[[Any], Any]] = None) -> "LazySequence":
        """Sort descending. The upstream is buffered when traversal starts."""
        from .operators import OrderedSequence

        return OrderedSequence(self, key=key, descending=True, logger=self._logger)

    # Terminal operations, each runs one full or partial traversal

    def to_list(self) -> List[Any]:
        return list(self)

    def count(self) -> int:
        return sum(1 for _ in self)

    def sum(self) -> Any:
        return sum(self)

    def first(self, predicate: Optional[Callable[[Any], bool]] = None) -> Any:
        """
        Return the first element, or the first one matching ``predicate``.

        Only as many elements as needed are computed.

        Raises:
            EmptySequenceError: No element (or no matching element) exists
        """
        for value in self:
            if predicate is None or predicate(value):
                return value
        raise EmptySequenceError(f"{self.name} has no matching element")

    def last(self, predicate: Optional[Callable[[Any], bool]] = None) -> Any:
        """
        Return the last element, or the last one matching ``predicate``.

        Raises:
            EmptySequenceError: No element (or no matching element) exists
        """
        found = False
        result = None
        for value in self:
            if predicate is None or predicate(value):
                found = True
                result = value
        if not found:
            raise EmptySequenceError(f"{self.name} has no matching element")
        return result
