"""Data models shared across the package."""

import uuid
from dataclasses import dataclass, field


@dataclass(frozen=True)
class NamedRecord:
    """A named item with a unique identifier."""

    name: str
    id: uuid.UUID = field(default_factory=uuid.uuid4)


@dataclass
class WriteStatistics:
    """Statistics for write operations."""

    total_rows: int = 0
    total_batches: int = 0
    file_size_bytes: int = 0
    elapsed_time: float = 0.0
