"""Consumers that materialise a traversal into pandas and pyarrow structures."""

import dataclasses
import logging
import uuid
from typing import Any, Dict, Iterable, Iterator, List, Mapping

import pandas as pd
import pyarrow as pa

logger = logging.getLogger(__name__)


def _to_row(value: Any) -> Dict[str, Any]:
    """Turn one element into a row: dataclasses and mappings spread into columns."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        row = dataclasses.asdict(value)
    elif isinstance(value, Mapping):
        row = dict(value)
    else:
        row = {"value": value}
    return {key: str(item) if isinstance(item, uuid.UUID) else item for key, item in row.items()}


def _rows(sequence: Iterable[Any]) -> List[Dict[str, Any]]:
    return [_to_row(value) for value in sequence]


def to_dataframe(sequence: Iterable[Any]) -> pd.DataFrame:
    """Run one traversal and collect it into a DataFrame.

    Args:
        sequence: Lazy sequence (or any iterable) to materialise

    Returns:
        pandas DataFrame with one row per element
    """
    df = pd.DataFrame(_rows(sequence))
    logger.debug(f"Materialised {len(df):,} rows into a DataFrame")
    return df


def to_arrow_table(sequence: Iterable[Any]) -> pa.Table:
    """Run one traversal and collect it into a PyArrow table."""
    table = pa.Table.from_pylist(_rows(sequence))
    logger.debug(
        f"Materialised PyArrow table with {table.num_rows:,} rows and {table.num_columns} columns"
    )
    return table


def row_batches(sequence: Iterable[Any], block_size: int = 1000) -> Iterator[List[Dict[str, Any]]]:
    """Run one traversal, yielding lists of at most ``block_size`` rows.

    Only one batch is held in memory at a time, so unbounded sources are
    fine as long as the consumer stops pulling batches.

    Args:
        sequence: Lazy sequence (or any iterable) to materialise
        block_size: Maximum rows per batch

    Yields:
        Lists of row dictionaries
    """
    if block_size <= 0:
        raise ValueError("block_size must be positive")

    batch: List[Dict[str, Any]] = []
    for value in sequence:
        batch.append(_to_row(value))
        if len(batch) >= block_size:
            yield batch
            batch = []

    # Remaining rows
    if batch:
        yield batch


def dataframe_blocks(sequence: Iterable[Any], block_size: int = 1000) -> Iterator[pd.DataFrame]:
    """Run one traversal, yielding DataFrames of at most ``block_size`` rows."""
    for block_num, batch in enumerate(row_batches(sequence, block_size), 1):
        logger.info(f"Created DataFrame block {block_num} with {len(batch)} rows")
        yield pd.DataFrame(batch)
