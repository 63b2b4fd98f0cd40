"""
Excel loader built on openpyxl.

Reads the first worksheet only. Formula cells expose their cached value;
nothing is recalculated.
"""
import io
import logging
from datetime import date, datetime, time
from typing import Any, List

from openpyxl import load_workbook

from sheet_cleanup.core.exceptions import TableParseError
from sheet_cleanup.core.table import Table, frame_from_rows

from .base import TableLoader

logger = logging.getLogger(__name__)


def cell_text(value: Any) -> str:
    """
    Render a cell value as text.

    - None → ""
    - True/False → "TRUE"/"FALSE"
    - Midnight datetimes → "2024-03-04"; other dates and times → ISO text
    - Everything else → str(value)
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, datetime):
        if value.time() == time(0, 0):
            return value.date().isoformat()
        return value.isoformat(sep=" ")
    if isinstance(value, (date, time)):
        return value.isoformat()
    return str(value)


def _fit(row: List[str], width: int) -> List[str]:
    """Pad with empty strings or truncate to ``width``."""
    if len(row) >= width:
        return row[:width]
    return row + [""] * (width - len(row))


class ExcelLoader(TableLoader):
    """
    Load the first sheet of an .xlsx workbook.

    Legacy .xls uploads are routed here too; openpyxl cannot open them and
    the failure is reported as a parse error.
    """

    suffixes = (".xlsx", ".xls")

    def load(self, data: bytes) -> Table:
        try:
            workbook = load_workbook(io.BytesIO(data), data_only=True)
        except Exception as e:
            raise TableParseError(f"Failed to open workbook: {e}") from e

        try:
            if not workbook.worksheets:
                return Table.empty()
            sheet = workbook.worksheets[0]

            rows = sheet.iter_rows(min_row=1, max_row=sheet.max_row, values_only=True)
            first = next(rows, None)
            if first is None:
                return Table.empty()

            header = [cell_text(v) for v in first]
            while header and first[len(header) - 1] is None:
                header.pop()
            if not header:
                logger.info("First sheet has no header row")
                return Table.empty()

            width = len(header)
            body = [_fit([cell_text(v) for v in row], width) for row in rows]
        finally:
            workbook.close()

        logger.info(f"Loaded sheet '{sheet.title}': {len(body)} rows × {width} columns")
        return Table(header=header, frame=frame_from_rows(body, width))
