"""
Configuration for data cleaning operations.

Defines which columns to keep, which transforms to run and the output format.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List


class TextCase(str, Enum):
    """Case folding applied to every emitted cell."""
    NONE = "none"
    LOWER = "lower"
    UPPER = "upper"
    TITLE = "title"


class DateFormat(str, Enum):
    """Date normalization applied to every emitted cell."""
    NONE = "none"
    ISO = "iso"


class OutputFormat(str, Enum):
    """Serialization of the cleaned table."""
    CSV = "csv"
    XLSX = "xlsx"


@dataclass
class CleaningConfig:
    """
    Configuration for data cleaning.

    Controls the column selection, which rules are enabled and the output
    format.
    """

    # ==================== Column Selection ====================

    columns: List[str] = field(default_factory=list)  # Output order follows this list

    # ==================== Value Cleaning ====================

    trim: bool = True
    collapse_spaces: bool = True  # "a   b" → "a b"
    text_case: TextCase = TextCase.NONE
    date_format: DateFormat = DateFormat.NONE
    normalize_types: bool = False  # Currency, numbers, booleans

    # ==================== Row/Column Management ====================

    dedupe_keys: List[str] = field(default_factory=list)  # Empty disables dedup
    drop_empty_rows: bool = True
    drop_empty_cols: bool = True

    # ==================== Validation ====================

    validate_email: bool = False
    remove_invalid_emails: bool = False
    validate_url: bool = False
    remove_invalid_urls: bool = False

    # ==================== Output Settings ====================

    output_format: OutputFormat = OutputFormat.CSV
    keep_order: bool = True  # Placeholder: user order is always kept

    @classmethod
    def identity(cls, columns: List[str]) -> "CleaningConfig":
        """
        Create config with every transform and filter disabled.

        Cleaning with this config only projects ``columns``.
        """
        return cls(
            columns=list(columns),
            trim=False,
            collapse_spaces=False,
            drop_empty_rows=False,
            drop_empty_cols=False,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "columns": list(self.columns),
            "trim": self.trim,
            "collapse_spaces": self.collapse_spaces,
            "text_case": self.text_case.value,
            "date_format": self.date_format.value,
            "normalize_types": self.normalize_types,
            "dedupe_keys": list(self.dedupe_keys),
            "drop_empty_rows": self.drop_empty_rows,
            "drop_empty_cols": self.drop_empty_cols,
            "validate_email": self.validate_email,
            "remove_invalid_emails": self.remove_invalid_emails,
            "validate_url": self.validate_url,
            "remove_invalid_urls": self.remove_invalid_urls,
            "output_format": self.output_format.value,
        }
