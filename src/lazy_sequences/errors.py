"""Exceptions raised by lazy sequence sources."""


class SequenceError(Exception):
    """Base class for all lazy sequence errors."""


class RuleEvaluationFailure(SequenceError):
    """The rule computing the next value raised instead of producing one.

    The original exception is chained as ``__cause__``. The traversal that
    raised it is left in the failed state and cannot be advanced again.
    """

    def __init__(self, source: str, position: int):
        self.source = source
        self.position = position
        super().__init__(f"Rule of {source} failed while producing element {position}")


class CursorStateError(SequenceError):
    """A cursor was advanced after its traversal failed."""


class EmptySequenceError(SequenceError):
    """A terminal operation needed an element but the traversal produced none."""


class SchemaMismatchError(SequenceError):
    """A block of rows cannot be stored under the schema the output file uses."""
