"""
Output writers for cleaned tables.
"""
from sheet_cleanup.cleaners.config import OutputFormat

from .base import TableEmitter
from .csv_emitter import CSVEmitter
from .xlsx_emitter import XLSXEmitter

EMITTERS = {
    OutputFormat.CSV: CSVEmitter,
    OutputFormat.XLSX: XLSXEmitter,
}


def get_emitter(output_format: OutputFormat) -> TableEmitter:
    """Return the emitter for ``output_format``."""
    return EMITTERS[output_format]()


__all__ = ["TableEmitter", "CSVEmitter", "XLSXEmitter", "EMITTERS", "get_emitter"]
