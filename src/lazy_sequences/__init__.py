"""Lazy sequences - sources that compute elements only when asked."""

__version__ = "0.1.0"

from .errors import (
    CursorStateError,
    EmptySequenceError,
    RuleEvaluationFailure,
    SchemaMismatchError,
    SequenceError,
)
from .fake_records import FakeRecords
from .frames import dataframe_blocks, row_batches, to_arrow_table, to_dataframe
from .models import NamedRecord, WriteStatistics
from .protocols import SequenceProtocol
from .sequence import Cursor, CursorState, LazySequence
from .sources import (
    CountedSequence,
    DiceRolls,
    FixedSet,
    IntegerWalk,
    ReplaySequence,
    StopAfterSequence,
    UnboundedSequence,
    UnfoldSequence,
    counted,
    stop_after,
    unbounded,
    unfold,
)
from .writers import ParquetSequenceWriter

__all__ = [
    # Core
    "SequenceProtocol",
    "LazySequence",
    "Cursor",
    "CursorState",
    # Sources
    "CountedSequence",
    "StopAfterSequence",
    "UnboundedSequence",
    "UnfoldSequence",
    "counted",
    "stop_after",
    "unbounded",
    "unfold",
    "IntegerWalk",
    "ReplaySequence",
    "DiceRolls",
    "FixedSet",
    "FakeRecords",
    # Models
    "NamedRecord",
    "WriteStatistics",
    # Consumers
    "to_dataframe",
    "to_arrow_table",
    "dataframe_blocks",
    "row_batches",
    "ParquetSequenceWriter",
    # Errors
    "SequenceError",
    "RuleEvaluationFailure",
    "CursorStateError",
    "EmptySequenceError",
    "SchemaMismatchError",
]
