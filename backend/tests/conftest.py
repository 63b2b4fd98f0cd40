"""
Shared fixtures for cleaning tests.

Builds Table views from inline CSV text and in-memory workbooks.
"""
import csv
import io
from typing import Callable, List

import pytest
from openpyxl import Workbook

from sheet_cleanup.cleaners import CleaningConfig, DataCleaner
from sheet_cleanup.core.table import CleanedTable, Table
from sheet_cleanup.loaders import CSVLoader


S1_CSV = "name,age,city\n  Alice  ,30, New   York\nBob, 25 ,Paris\n"


def build_xlsx(rows: List[list], extra_sheets: dict = None) -> bytes:
    """Write ``rows`` to the first sheet of a new workbook and return its bytes."""
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = "Data"
    for row in rows:
        sheet.append(row)
    for title, sheet_rows in (extra_sheets or {}).items():
        extra = workbook.create_sheet(title)
        for row in sheet_rows:
            extra.append(row)
    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


def parse_csv(data: bytes) -> List[List[str]]:
    """Parse emitted CSV bytes into records."""
    return list(csv.reader(io.StringIO(data.decode("utf-8"))))


@pytest.fixture
def csv_table() -> Callable[[str], Table]:
    """Factory: CSV text -> Table."""
    return lambda text: CSVLoader().load(text.encode("utf-8"))


@pytest.fixture
def clean_csv(csv_table) -> Callable[..., CleanedTable]:
    """Factory: clean CSV text with config keyword arguments."""
    def _clean(text: str, **config) -> CleanedTable:
        cleaned, _ = DataCleaner(CleaningConfig(**config)).clean_with_default_rules(csv_table(text))
        return cleaned
    return _clean


@pytest.fixture
def s1_csv() -> str:
    """Three-column people file with messy whitespace."""
    return S1_CSV


@pytest.fixture
def xlsx_factory() -> Callable[..., bytes]:
    """Factory: rows -> .xlsx bytes."""
    return build_xlsx


@pytest.fixture
def csv_records() -> Callable[[bytes], List[List[str]]]:
    """Factory: emitted CSV bytes -> records."""
    return parse_csv
