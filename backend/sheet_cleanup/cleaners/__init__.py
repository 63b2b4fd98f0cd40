"""
Data cleaning module for uploaded spreadsheets.

Provides the rule-based engine that selects, filters and transforms columns.
"""
from .data_cleaner import DataCleaner
from .config import CleaningConfig, DateFormat, OutputFormat, TextCase
from .report import CleaningReport
from .base import CleaningRule, CleaningResult, Change, ChangeType, WorkingTable

__all__ = [
    "DataCleaner",
    "CleaningConfig",
    "CleaningReport",
    "CleaningRule",
    "CleaningResult",
    "Change",
    "ChangeType",
    "DateFormat",
    "OutputFormat",
    "TextCase",
    "WorkingTable",
]
