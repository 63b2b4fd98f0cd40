"""
Email and URL validation rules.

With removal enabled, a row with any invalid value in the selected columns
is dropped. Without it, invalid values are only counted.
"""
import logging
from abc import abstractmethod
from typing import Callable

import polars as pl

from sheet_cleanup.transform.normalizers import is_valid_email, is_valid_url
from ..base import ChangeType, CleaningResult, CleaningRule, WorkingTable
from ..config import CleaningConfig

logger = logging.getLogger(__name__)


class ValidationRule(CleaningRule):
    """Check every selected cell with ``validator``; optionally drop failing rows."""

    label = "value"

    def __init__(self, config: CleaningConfig, remove_invalid: bool):
        self.config = config
        self.remove_invalid = remove_invalid

    @property
    @abstractmethod
    def validator(self) -> Callable[[str], bool]:
        """Cell check; True means valid."""
        pass

    def clean(self, table: WorkingTable) -> CleaningResult:
        columns = table.selected_columns()
        if not columns or table.frame.height == 0:
            result = CleaningResult(table=table)
            result.stats["invalid_values"] = 0
            result.stats["rows_dropped"] = 0
            return result

        validity = table.frame.select(
            [pl.col(c).map_elements(self.validator, return_dtype=pl.Boolean).alias(c) for c in columns]
        )
        invalid_values = sum(validity.select([(~pl.col(c)).sum() for c in columns]).row(0))
        row_is_valid = validity.select(pl.all_horizontal(columns)).to_series()

        frame = table.frame
        if self.remove_invalid:
            frame = frame.filter(row_is_valid)

        result = CleaningResult(table=table.with_frame(frame))
        dropped = table.frame.height - frame.height

        if dropped:
            result.add_change(
                ChangeType.ROW_DROPPED,
                f"Dropped {dropped} rows with invalid {self.label} values",
                {"rows_dropped": dropped},
            )
        elif invalid_values:
            result.add_warning(f"Found {invalid_values} invalid {self.label} values (kept)")

        result.stats["invalid_values"] = invalid_values
        result.stats["rows_dropped"] = dropped
        logger.debug("%s: %s invalid values, %s rows dropped", self.name, invalid_values, dropped)
        return result


class EmailValidationRule(ValidationRule):
    """Validate email shape in the selected columns."""

    label = "email"

    @property
    def validator(self) -> Callable[[str], bool]:
        return is_valid_email

    @property
    def name(self) -> str:
        return "Email Validation"

    @property
    def priority(self) -> int:
        return 70  # After all value rewriting

    @property
    def description(self) -> str:
        return "Check email addresses; drop rows with invalid ones if enabled"


class UrlValidationRule(ValidationRule):
    """Validate URLs in the selected columns."""

    label = "URL"

    @property
    def validator(self) -> Callable[[str], bool]:
        return is_valid_url

    @property
    def name(self) -> str:
        return "URL Validation"

    @property
    def priority(self) -> int:
        return 80

    @property
    def description(self) -> str:
        return "Check URLs; drop rows with invalid ones if enabled"
