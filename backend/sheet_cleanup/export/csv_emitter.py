"""
CSV emitter - deterministic CSV generation with Polars.

- write_csv(include_header=False, separator=',', quote_style='necessary', line_terminator='\n')
- Header written as the first record so duplicate names survive
- UTF-8, no BOM

Byte-identical on repeated runs (idempotent).
"""
import logging

import polars as pl

from sheet_cleanup.core.exceptions import TableWriteError
from sheet_cleanup.core.table import CleanedTable, frame_from_rows

from .base import TableEmitter

logger = logging.getLogger(__name__)


class CSVEmitter(TableEmitter):
    """Emits the cleaned table as comma-separated text."""

    media_type = "text/csv"
    extension = ".csv"

    def emit(self, table: CleanedTable) -> bytes:
        if table.width == 0:
            # No columns: one empty record per line
            return b"\n" * (1 + len(table))

        frame = frame_from_rows([table.header, *table.rows], table.width)
        try:
            text = frame.write_csv(
                include_header=False,
                separator=",",
                quote_style="necessary",
                line_terminator="\n",
            )
        except pl.exceptions.PolarsError as e:
            raise TableWriteError(f"Failed to write CSV: {e}") from e

        logger.debug(f"Emitted CSV: {len(table)} rows × {table.width} columns")
        return text.encode("utf-8")
