"""
CSV loader built on Polars.

Every cell is read as text: schema inference is disabled and missing cells
become empty strings.
"""
import io
import logging

import polars as pl

from sheet_cleanup.core.exceptions import TableParseError
from sheet_cleanup.core.table import Table, column_name

from .base import TableLoader

logger = logging.getLogger(__name__)


class CSVLoader(TableLoader):
    """
    Load comma-separated text.

    - UTF-8 only
    - Double-quote quoting; doubled quotes escape; newlines allowed in quotes
    - Blank lines before the header are skipped
    - Rows longer than the header are truncated, shorter ones padded
    """

    suffixes = (".csv",)

    def load(self, data: bytes) -> Table:
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise TableParseError(f"CSV file is not valid UTF-8: {e}") from e

        text = text.lstrip("\r\n")
        if not text:
            logger.info("CSV payload is empty")
            return Table.empty()

        try:
            raw = pl.read_csv(
                io.BytesIO(text.encode("utf-8")),
                has_header=False,
                infer_schema=False,
                quote_char='"',
                truncate_ragged_lines=True,
            )
        except (pl.exceptions.PolarsError, ValueError) as e:
            raise TableParseError(f"Failed to parse CSV: {e}") from e

        raw = raw.rename({old: column_name(i) for i, old in enumerate(raw.columns)}).fill_null("")

        header = ["" if value is None else value for value in raw.row(0)]
        body = raw.slice(1)

        logger.info(f"Loaded CSV: {body.height} rows × {len(header)} columns")
        return Table(header=header, frame=body)
