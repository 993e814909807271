"""Lazy operators that wrap one sequence in another."""

import logging
from itertools import islice
from typing import Any, Callable, Iterator, Optional

from .sequence import LazySequence


class FilteredSequence(LazySequence):
    """Elements of the source that satisfy a predicate."""

    def __init__(
        self,
        source: LazySequence,
        predicate: Callable[[Any], bool],
        logger: Optional[logging.Logger] = None,
    ):
        super().__init__(logger)
        self.source = source
        self.predicate = predicate

    def _produce(self) -> Iterator[Any]:
        for value in self.source:
            if self.predicate(value):
                yield value


class MappedSequence(LazySequence):
    """Elements of the source passed through a selector."""

    def __init__(
        self,
        source: LazySequence,
        selector: Callable[[Any], Any],
        logger: Optional[logging.Logger] = None,
    ):
        super().__init__(logger)
        self.source = source
        self.selector = selector

    def _produce(self) -> Iterator[Any]:
        for value in self.source:
            yield self.selector(value)


class TakenSequence(LazySequence):
    """
    At most ``count`` elements of the source.

    Bounds unbounded sources. ``islice`` stops before requesting element
    ``count + 1``, so the source never runs ahead.
    """

    def __init__(self, source: LazySequence, count: int, logger: Optional[logging.Logger] = None):
        if count < 0:
            raise ValueError("count must not be negative")
        super().__init__(logger)
        self.source = source
        self.count = count

    def _produce(self) -> Iterator[Any]:
        yield from islice(self.source, self.count)


class SkippedSequence(LazySequence):
    """The source without its first ``count`` elements."""

    def __init__(self, source: LazySequence, count: int, logger: Optional[logging.Logger] = None):
        if count < 0:
            raise ValueError("count must not be negative")
        super().__init__(logger)
        self.source = source
        self.count = count

    def _produce(self) -> Iterator[Any]:
        yield from islice(self.source, self.count, None)


class OrderedSequence(LazySequence):
    """
    The source sorted by ``key``.

    Sorting needs every element, so the first ``advance`` drains the source.
    Building the sequence still computes nothing. Never use on an unbounded
    source without a ``take`` upstream.
    """

    def __init__(
        self,
        source: LazySequence,
        key: Optional[Callable[[Any], Any]] = None,
        descending: bool = False,
        logger: Optional[logging.Logger] = None,
    ):
        super().__init__(logger)
        self.source = source
        self.key = key
        self.descending = descending

    def _produce(self) -> Iterator[Any]:
        self._logger.debug(f"Buffering {self.source.name} for ordering")
        yield from sorted(self.source, key=self.key, reverse=self.descending)
