"""
Cleaning rules, one operation per module.
"""
from .column_selection import ColumnSelectionRule, EmptyColumnRule
from .empty_rows import EmptyRowRule
from .dedupe import DedupeRule
from .values import ValueTransformRule, TypeNormalizationRule
from .validation import EmailValidationRule, UrlValidationRule

__all__ = [
    "ColumnSelectionRule",
    "EmptyColumnRule",
    "EmptyRowRule",
    "DedupeRule",
    "ValueTransformRule",
    "TypeNormalizationRule",
    "EmailValidationRule",
    "UrlValidationRule",
]
