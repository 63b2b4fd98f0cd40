"""
XLSX emitter built on openpyxl.

Writes a single "Cleaned" sheet. Every cell is stored as a string: no
number, date or formula inference.
"""
import io
import logging

from openpyxl import Workbook
from openpyxl.cell.cell import TYPE_STRING

from sheet_cleanup.core.exceptions import TableWriteError
from sheet_cleanup.core.table import CleanedTable

from .base import TableEmitter

logger = logging.getLogger(__name__)

SHEET_TITLE = "Cleaned"


class XLSXEmitter(TableEmitter):
    """Emits the cleaned table as an Excel workbook."""

    media_type = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    extension = ".xlsx"

    def emit(self, table: CleanedTable) -> bytes:
        workbook = Workbook()
        sheet = workbook.active
        sheet.title = SHEET_TITLE

        try:
            for row_idx, values in enumerate([table.header, *table.rows], start=1):
                for col_idx, value in enumerate(values, start=1):
                    cell = sheet.cell(row=row_idx, column=col_idx, value="" if value is None else value)
                    # openpyxl would otherwise store "=..." as a formula
                    cell.data_type = TYPE_STRING

            buffer = io.BytesIO()
            workbook.save(buffer)
        except Exception as e:
            raise TableWriteError(f"Failed to write workbook: {e}") from e
        finally:
            workbook.close()

        logger.debug(f"Emitted workbook: {len(table)} rows × {table.width} columns")
        return buffer.getvalue()
