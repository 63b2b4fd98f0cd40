"""
Row deduplication rule.
"""
import logging

import polars as pl

from sheet_cleanup.core.table import column_name
from ..base import ChangeType, CleaningResult, CleaningRule, WorkingTable
from ..config import CleaningConfig

logger = logging.getLogger(__name__)

KEY_SEPARATOR = "|"


class DedupeRule(CleaningRule):
    """
    Keep only the first row for each dedup key.

    The key joins the raw cells of the ``dedupe_keys`` columns with "|".
    Key columns are resolved against the full header, so they need not be
    part of the selection. Unknown key names are ignored; if none resolve,
    no deduplication happens.
    """

    def __init__(self, config: CleaningConfig):
        self.config = config

    @property
    def name(self) -> str:
        return "Deduplication"

    @property
    def priority(self) -> int:
        return 40  # Before transforms: keys use raw values

    @property
    def description(self) -> str:
        return "Drop rows repeating an earlier row's key columns"

    def clean(self, table: WorkingTable) -> CleaningResult:
        header_index = table.header_index()
        key_positions = [
            header_index[name] for name in self.config.dedupe_keys if name in header_index
        ]

        if not key_positions:
            result = CleaningResult(table=table)
            result.stats["key_columns"] = 0
            result.stats["rows_dropped"] = 0
            return result

        before = table.frame.height
        key = pl.concat_str(
            [pl.col(column_name(i)) for i in key_positions],
            separator=KEY_SEPARATOR,
        )
        frame = table.frame.filter(key.is_first_distinct())

        result = CleaningResult(table=table.with_frame(frame))
        dropped = before - frame.height
        if dropped:
            result.add_change(
                ChangeType.ROW_DROPPED,
                f"Dropped {dropped} duplicate rows",
                {"rows_dropped": dropped, "keys": [table.header[i] for i in key_positions]},
            )
            logger.debug("Dropped %s duplicate rows", dropped)

        result.stats["key_columns"] = len(key_positions)
        result.stats["rows_dropped"] = dropped
        return result
