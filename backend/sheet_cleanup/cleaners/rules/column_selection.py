"""
Column selection and empty-column pruning rules.

Resolves the user's requested column names against the header, in the
user's order, and optionally drops selected columns with no content.
"""
import logging

import polars as pl

from sheet_cleanup.core.table import column_name
from sheet_cleanup.transform.normalizers import is_blank
from ..base import ChangeType, CleaningResult, CleaningRule, WorkingTable
from ..config import CleaningConfig

logger = logging.getLogger(__name__)


class ColumnSelectionRule(CleaningRule):
    """
    Resolve requested column names into header positions.

    Matching is exact and case-sensitive. Duplicate header names resolve to
    their first occurrence. Unknown names are ignored.
    """

    def __init__(self, config: CleaningConfig):
        self.config = config

    @property
    def name(self) -> str:
        return "Column Selection"

    @property
    def priority(self) -> int:
        return 10  # Everything else works on the selection

    @property
    def description(self) -> str:
        return "Keep the requested columns in the requested order"

    def clean(self, table: WorkingTable) -> CleaningResult:
        header_index = table.header_index()

        selection = []
        for requested in self.config.columns:
            position = header_index.get(requested)
            if position is None:
                logger.debug("Requested column '%s' not found in header", requested)
                continue
            selection.append(position)

        result = CleaningResult(table=table.with_selection(selection))

        for requested in self.config.columns:
            if requested not in header_index:
                result.add_change(
                    ChangeType.COLUMN_IGNORED,
                    f"Requested column '{requested}' is not in the header",
                    {"column": requested},
                )

        result.stats["columns_requested"] = len(self.config.columns)
        result.stats["columns_selected"] = len(selection)
        return result


class EmptyColumnRule(CleaningRule):
    """
    Drop selected columns whose body cells are all blank.

    Blankness is judged on raw values after stripping whitespace, over every
    body row, before any row is dropped.
    """

    def __init__(self, config: CleaningConfig):
        self.config = config

    @property
    def name(self) -> str:
        return "Empty Column Removal"

    @property
    def priority(self) -> int:
        return 20

    @property
    def description(self) -> str:
        return "Drop selected columns with no non-blank values"

    def clean(self, table: WorkingTable) -> CleaningResult:
        columns = table.selected_columns()
        if columns:
            has_content = table.frame.select(
                [(~pl.col(c).map_elements(is_blank, return_dtype=pl.Boolean)).any().alias(c) for c in columns]
            ).row(0, named=True)
        else:
            has_content = {}

        kept = [i for i in table.selection if has_content.get(column_name(i))]
        result = CleaningResult(table=table.with_selection(kept))

        dropped = [i for i in dict.fromkeys(table.selection) if not has_content.get(column_name(i))]
        for position in dropped:
            header_name = table.header[position]
            result.add_change(
                ChangeType.COLUMN_DROPPED,
                f"Dropped empty column '{header_name}'",
                {"column": header_name, "position": position},
            )

        result.stats["columns_dropped"] = len(dropped)
        if dropped:
            logger.info("Dropped %s empty columns", len(dropped))
        return result
