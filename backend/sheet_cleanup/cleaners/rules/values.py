"""
Value transformation rules.

Trims and collapses whitespace, folds case and normalizes dates in the
selected columns, then optionally canonicalizes currency, numbers and
booleans.
"""
from __future__ import annotations

import logging
from functools import partial

import polars as pl

from sheet_cleanup.core.table import column_name
from sheet_cleanup.transform.normalizers import normalize_type, transform_value
from ..base import ChangeType, CleaningResult, CleaningRule, WorkingTable
from ..config import CleaningConfig

logger = logging.getLogger(__name__)


def _apply(table: WorkingTable, result_name: str, build_expr) -> CleaningResult:
    """Rewrite each selected column with ``build_expr`` and log what changed."""
    positions = list(dict.fromkeys(table.selection))
    columns = [column_name(i) for i in positions]
    frame = table.frame.with_columns([build_expr(pl.col(c)).alias(c) for c in columns])

    result = CleaningResult(table=table.with_frame(frame))
    values_cleaned = 0
    columns_cleaned = 0
    for position, c in zip(positions, columns):
        changed = int((table.frame[c] != frame[c]).sum())
        if changed == 0:
            continue
        columns_cleaned += 1
        values_cleaned += changed
        header_name = table.header[position]
        result.add_change(
            ChangeType.VALUE_MODIFIED,
            f"{result_name} changed {changed} values in column '{header_name}'",
            {"column": header_name, "values_modified": changed},
        )

    result.stats["columns_cleaned"] = columns_cleaned
    result.stats["values_cleaned"] = values_cleaned
    return result


class ValueTransformRule(CleaningRule):
    """
    Apply the cell transforms to every selected column.

    Order per cell: trim, collapse whitespace, case folding, ISO dates.
    Each cell goes through ``transform_value``.
    """

    def __init__(self, config: CleaningConfig):
        self.config = config

    @property
    def name(self) -> str:
        return "Value Transformation"

    @property
    def priority(self) -> int:
        return 50

    @property
    def description(self) -> str:
        return "Trim, collapse whitespace, fold case and normalize dates"

    def _build_expr(self, expr: pl.Expr) -> pl.Expr:
        return expr.map_elements(partial(transform_value, config=self.config), return_dtype=pl.String)

    def clean(self, table: WorkingTable) -> CleaningResult:
        result = _apply(table, self.name, self._build_expr)
        if result.stats["values_cleaned"]:
            logger.info(
                "Transformed %s values across %s columns",
                result.stats["values_cleaned"],
                result.stats["columns_cleaned"],
            )
        return result


class TypeNormalizationRule(CleaningRule):
    """
    Canonicalize currency amounts, grouped numbers and yes/no booleans.

    Examples:
    - "$1,234.50" → "1234.50"
    - "YES" → "true"
    - "1,000" → "1000"
    """

    def __init__(self, config: CleaningConfig):
        self.config = config

    @property
    def name(self) -> str:
        return "Type Normalization"

    @property
    def priority(self) -> int:
        return 60  # After value transforms

    @property
    def description(self) -> str:
        return "Normalize currency, numbers and booleans"

    def clean(self, table: WorkingTable) -> CleaningResult:
        return _apply(
            table,
            self.name,
            lambda expr: expr.map_elements(normalize_type, return_dtype=pl.String),
        )
