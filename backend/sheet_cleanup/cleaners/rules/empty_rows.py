"""
Empty row removal rule.
"""
import logging

import polars as pl

from sheet_cleanup.transform.normalizers import is_blank
from ..base import ChangeType, CleaningResult, CleaningRule, WorkingTable
from ..config import CleaningConfig

logger = logging.getLogger(__name__)


class EmptyRowRule(CleaningRule):
    """
    Drop rows that are blank across every selected column.

    Uses raw values judged blank after trimming. With nothing selected, every row
    counts as blank.
    """

    def __init__(self, config: CleaningConfig):
        self.config = config

    @property
    def name(self) -> str:
        return "Empty Row Removal"

    @property
    def priority(self) -> int:
        return 30  # After the selection is final

    @property
    def description(self) -> str:
        return "Drop rows with no non-blank value in the selected columns"

    def clean(self, table: WorkingTable) -> CleaningResult:
        columns = table.selected_columns()
        before = table.frame.height

        if columns:
            has_content = pl.any_horizontal(
                [~pl.col(c).map_elements(is_blank, return_dtype=pl.Boolean) for c in columns]
            )
            frame = table.frame.filter(has_content)
        else:
            frame = table.frame.clear()

        result = CleaningResult(table=table.with_frame(frame))
        dropped = before - frame.height
        if dropped:
            result.add_change(
                ChangeType.ROW_DROPPED,
                f"Dropped {dropped} empty rows",
                {"rows_dropped": dropped},
            )
            logger.debug("Dropped %s empty rows", dropped)

        result.stats["rows_dropped"] = dropped
        return result
