"""Protocol definitions for dependency inversion."""

from typing import Any, Protocol, Tuple, runtime_checkable


@runtime_checkable
class SequenceProtocol(Protocol):
    """Anything that can be walked lazily, one ``advance`` at a time."""

    def start_traversal(self) -> Any:
        """Return a fresh, independent cursor."""
        ...

    def advance(self, cursor: Any) -> Tuple[Any, bool]:
        """Produce the next value as ``(value, done)``."""
        ...
