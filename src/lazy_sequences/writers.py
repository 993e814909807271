"""Parquet sink that stores one traversal of a lazy sequence."""

import logging
import time
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import pyarrow as pa
import pyarrow.parquet as pq

from .errors import SchemaMismatchError
from .frames import row_batches
from .models import WriteStatistics


class ParquetSequenceWriter:
    """
    Traverses a sequence once and stores it as a Parquet file.

    Every block of ``block_size`` elements becomes one row group. The file
    schema is either given up front or taken from the first block; all
    later blocks are cast to it, so a column that is nullable in one block
    and fully populated in the next still lands in a single file.
    """

    def __init__(
        self,
        output_path: Path,
        compression: str = "snappy",
        block_size: int = 1000,
        schema: Optional[pa.Schema] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Args:
            output_path: Path to output Parquet file
            compression: Compression codec
            block_size: Elements per row group
            schema: File schema; inferred from the first block when omitted.
                Pass one when early blocks may hold only nulls in a column.
            logger: Logger instance
        """
        if block_size <= 0:
            raise ValueError("block_size must be positive")
        self.output_path = Path(output_path)
        self.compression = compression
        self.block_size = block_size
        self.schema = schema
        self._logger = logger or logging.getLogger(__name__)

    def write(self, sequence: Iterable[Any]) -> WriteStatistics:
        """
        Run one traversal and write it block by block.

        Nothing is created on disk when the traversal is empty.

        Args:
            sequence: Lazy sequence (or any iterable) to store

        Returns:
            WriteStatistics with operation details

        Raises:
            SchemaMismatchError: A block cannot be cast to the file schema
        """
        start_time = time.time()
        stats = WriteStatistics()
        schema = self.schema
        parquet_writer: Optional[pq.ParquetWriter] = None

        try:
            for rows in row_batches(sequence, self.block_size):
                table = self._to_table(rows, schema, stats.total_batches + 1)
                if parquet_writer is None:
                    schema = table.schema
                    parquet_writer = pq.ParquetWriter(
                        str(self.output_path), schema, compression=self.compression
                    )
                parquet_writer.write_table(table)
                stats.total_rows += table.num_rows
                stats.total_batches += 1
                self._logger.debug(
                    f"Row group {stats.total_batches}: {table.num_rows} rows (total: {stats.total_rows})"
                )
        finally:
            if parquet_writer is not None:
                parquet_writer.close()

        stats.elapsed_time = time.time() - start_time
        if self.output_path.exists() and parquet_writer is not None:
            stats.file_size_bytes = self.output_path.stat().st_size

        self._logger.info(
            f"Wrote {stats.total_rows} rows in {stats.total_batches} row groups to {self.output_path}"
        )
        return stats

    def _to_table(self, rows: List[Dict[str, Any]], schema: Optional[pa.Schema], block_num: int) -> pa.Table:
        table = pa.Table.from_pylist(rows)
        if schema is None or table.schema.equals(schema):
            return table
        try:
            return table.cast(schema)
        except (ValueError, pa.ArrowNotImplementedError) as exc:
            raise SchemaMismatchError(
                f"Block {block_num} has schema {table.schema} which cannot be cast to {schema}"
            ) from exc
