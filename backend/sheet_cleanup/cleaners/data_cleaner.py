"""
Main data cleaning orchestrator using Polars.

Runs cleaning rules in priority order over a Table view, projects the
selected columns and generates a report.
"""
from typing import List, Tuple, Optional
import polars as pl
import logging

from sheet_cleanup.core.table import CleanedTable, Table, column_name
from .base import ChangeType, CleaningRule, CleaningResult, WorkingTable
from .config import CleaningConfig
from .report import CleaningReport


logger = logging.getLogger(__name__)


class DataCleaner:
    """
    Orchestrates data cleaning operations.

    Runs multiple cleaning rules in priority order and tracks all changes.
    Stateless between calls apart from the registered rules, so one cleaner
    per request is the expected usage.
    """

    def __init__(self, config: Optional[CleaningConfig] = None):
        """
        Initialize the data cleaner.

        Args:
            config: Cleaning configuration. If None, uses default config.
        """
        self.config = config or CleaningConfig()
        self.rules: List[CleaningRule] = []

    def register_rule(self, rule: CleaningRule):
        """
        Register a cleaning rule.

        Args:
            rule: Cleaning rule to register
        """
        self.rules.append(rule)
        # Sort rules by priority (lower = earlier)
        self.rules.sort(key=lambda r: r.priority)

    def register_rules(self, rules: List[CleaningRule]):
        """
        Register multiple cleaning rules.

        Args:
            rules: List of rules to register
        """
        for rule in rules:
            self.register_rule(rule)

    def clean(self, table: Table) -> Tuple[CleanedTable, CleaningReport]:
        """
        Clean a table using registered rules.

        Args:
            table: Input table view

        Returns:
            Tuple of (cleaned table, cleaning report)
        """
        report = CleaningReport(
            original_shape=(len(table), table.width),
            config_used=self.config.to_dict()
        )

        working = WorkingTable(header=list(table.header), frame=table.frame)

        logger.info(f"Starting data cleaning with {len(self.rules)} rules")

        for rule in self.rules:
            logger.debug(f"Running rule: {rule.name} (priority={rule.priority})")

            result: CleaningResult = rule.clean(working)
            working = result.table

            for change in result.changes:
                report.add_change(change.to_dict())
                if change.change_type == ChangeType.COLUMN_IGNORED:
                    report.columns_ignored.append(change.details["column"])
                elif change.change_type == ChangeType.COLUMN_DROPPED:
                    report.columns_dropped.append(change.details["column"])

            for warning in result.warnings:
                report.add_warning(f"[{rule.name}] {warning}")

            if result.stats:
                report.add_rule_stats(rule.name, result.stats)

            logger.debug(f"Rule '{rule.name}' completed: {len(result.changes)} changes, {len(result.warnings)} warnings")

        cleaned = self._project(working)
        report.cleaned_shape = (len(cleaned), cleaned.width)

        logger.info(f"Cleaning completed: {report.original_shape} -> {report.cleaned_shape}")

        return cleaned, report

    def clean_with_default_rules(self, table: Table) -> Tuple[CleanedTable, CleaningReport]:
        """
        Clean a table using the rules enabled by the config.

        This is a convenience method that automatically registers
        appropriate rules based on the config.

        Args:
            table: Input table view

        Returns:
            Tuple of (cleaned table, cleaning report)
        """
        # Import rules here to avoid circular imports (rules use the normalizers,
        # which import this package's config)
        from .rules import (
            ColumnSelectionRule,
            DedupeRule,
            EmailValidationRule,
            EmptyColumnRule,
            EmptyRowRule,
            TypeNormalizationRule,
            UrlValidationRule,
            ValueTransformRule,
        )

        self.register_rule(ColumnSelectionRule(self.config))
        self.register_rule(ValueTransformRule(self.config))

        if self.config.drop_empty_cols:
            self.register_rule(EmptyColumnRule(self.config))

        if self.config.drop_empty_rows:
            self.register_rule(EmptyRowRule(self.config))

        if self.config.dedupe_keys:
            self.register_rule(DedupeRule(self.config))

        if self.config.normalize_types:
            self.register_rule(TypeNormalizationRule(self.config))

        if self.config.validate_email:
            self.register_rule(EmailValidationRule(self.config, self.config.remove_invalid_emails))

        if self.config.validate_url:
            self.register_rule(UrlValidationRule(self.config, self.config.remove_invalid_urls))

        return self.clean(table)

    @staticmethod
    def _project(working: WorkingTable) -> CleanedTable:
        """Emit the selected columns in selection order."""
        header = [working.header[i] for i in working.selection]
        if not working.selection:
            return CleanedTable(header=header, rows=[[] for _ in range(working.frame.height)])

        projected = working.frame.select(
            [pl.col(column_name(i)).alias(f"out_{p}") for p, i in enumerate(working.selection)]
        )
        return CleanedTable(header=header, rows=[list(row) for row in projected.iter_rows()])

    def __repr__(self) -> str:
        return f"<DataCleaner: {len(self.rules)} rules registered>"
