"""
Cleaning report generation.

Tracks what was cleaned for logging and transparency.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Tuple, Any
from datetime import datetime


@dataclass
class CleaningReport:
    """
    Report of cleaning operations performed.

    Tracks all changes made to the data for audit trail and transparency.
    """

    # Shape information (rows, columns)
    original_shape: Tuple[int, int] = (0, 0)
    cleaned_shape: Tuple[int, int] = (0, 0)

    # Requested columns missing from the header
    columns_ignored: List[str] = field(default_factory=list)

    # Selected columns dropped because they were empty
    columns_dropped: List[str] = field(default_factory=list)

    # Per-rule statistics
    rule_stats: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    # All changes made (detailed log)
    changes: List[Dict[str, Any]] = field(default_factory=list)

    # Warnings/issues encountered
    warnings: List[str] = field(default_factory=list)

    # Metadata
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())
    config_used: Dict[str, Any] = field(default_factory=dict)

    @property
    def rows_removed(self) -> int:
        """Number of body rows removed."""
        return self.original_shape[0] - self.cleaned_shape[0]

    def add_rule_stats(self, rule_name: str, stats: Dict[str, Any]):
        """Add statistics for a rule execution."""
        self.rule_stats[rule_name] = stats

    def add_change(self, change: Dict[str, Any]):
        """Add a change to the log."""
        self.changes.append(change)

    def add_warning(self, warning: str):
        """Add a warning."""
        self.warnings.append(warning)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "timestamp": self.timestamp,
            "original_shape": {"rows": self.original_shape[0], "columns": self.original_shape[1]},
            "cleaned_shape": {"rows": self.cleaned_shape[0], "columns": self.cleaned_shape[1]},
            "summary": {
                "rows_removed": self.rows_removed,
                "columns_ignored": len(self.columns_ignored),
                "columns_dropped": len(self.columns_dropped),
                "warnings_count": len(self.warnings),
            },
            "columns_ignored": self.columns_ignored,
            "columns_dropped": self.columns_dropped,
            "rule_stats": self.rule_stats,
            "changes": self.changes,
            "warnings": self.warnings,
            "config_used": self.config_used,
        }

    def to_summary(self) -> str:
        """One-line summary for request logs."""
        return (
            f"{self.original_shape[0]}x{self.original_shape[1]} -> "
            f"{self.cleaned_shape[0]}x{self.cleaned_shape[1]} "
            f"({self.rows_removed} rows removed, "
            f"{len(self.columns_dropped)} empty columns dropped, "
            f"{len(self.columns_ignored)} unknown columns ignored)"
        )
