"""
Base classes and interfaces for data cleaning.

This module provides the abstract base class for all cleaning rules,
the working table the rules operate on, and data structures for tracking
cleaning results and changes.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional
from enum import Enum
import polars as pl

from sheet_cleanup.core.table import column_name


class ChangeType(Enum):
    """Types of changes that can be made during cleaning."""
    COLUMN_IGNORED = "column_ignored"
    COLUMN_DROPPED = "column_dropped"
    VALUE_MODIFIED = "value_modified"
    ROW_DROPPED = "row_dropped"


@dataclass
class Change:
    """Represents a single change made during cleaning."""
    change_type: ChangeType
    description: str
    details: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "type": self.change_type.value,
            "description": self.description,
            "details": self.details
        }


@dataclass
class WorkingTable:
    """
    Table state passed from rule to rule.

    ``frame`` keeps every source column (raw until a transform rule rewrites
    a selected one) so later rules can still read columns outside the
    selection, e.g. dedup keys. ``selection`` is the ordered list of header
    positions to emit; it may repeat a position.
    """
    header: List[str]
    frame: pl.DataFrame
    selection: List[int] = field(default_factory=list)

    def header_index(self) -> Dict[str, int]:
        """Map each header name to its first position."""
        index: Dict[str, int] = {}
        for position, name in enumerate(self.header):
            index.setdefault(name, position)
        return index

    def selected_columns(self) -> List[str]:
        """Frame column names of the selection, without repeats."""
        seen = dict.fromkeys(column_name(i) for i in self.selection)
        return list(seen)

    def with_frame(self, frame: pl.DataFrame) -> "WorkingTable":
        return replace(self, frame=frame)

    def with_selection(self, selection: List[int]) -> "WorkingTable":
        return replace(self, selection=list(selection))


@dataclass
class CleaningResult:
    """
    Result of a cleaning rule execution.

    Contains the updated working table plus metadata about what changed.
    """
    table: WorkingTable
    changes: List[Change] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    stats: Dict[str, Any] = field(default_factory=dict)

    def add_change(self, change_type: ChangeType, description: str, details: Optional[Dict[str, Any]] = None):
        """Convenience method to add a change."""
        self.changes.append(Change(
            change_type=change_type,
            description=description,
            details=details or {}
        ))

    def add_warning(self, message: str):
        """Convenience method to add a warning."""
        self.warnings.append(message)

    def to_dict(self) -> dict:
        """Convert to dictionary (excludes the table)."""
        return {
            "changes": [c.to_dict() for c in self.changes],
            "warnings": self.warnings,
            "stats": self.stats
        }


class CleaningRule(ABC):
    """
    Abstract base class for all cleaning rules.

    Each rule performs a specific cleaning operation and returns
    a CleaningResult with the updated working table and change log.
    """

    @abstractmethod
    def clean(self, table: WorkingTable) -> CleaningResult:
        """
        Clean the table according to this rule's logic.

        Args:
            table: Working table to clean

        Returns:
            CleaningResult with the updated table and metadata
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of this rule."""
        pass

    @property
    def priority(self) -> int:
        """
        Execution priority (lower number = runs earlier).

        Default is 50. Override to control execution order.
        Column selection must run first (< 20).
        """
        return 50

    @property
    def description(self) -> str:
        """Description of what this rule does."""
        return ""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: {self.name} (priority={self.priority})>"
