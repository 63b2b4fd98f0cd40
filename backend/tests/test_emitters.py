"""
Tests for the CSV and XLSX emitters.

Validates:
- Header first, then rows, in order
- RFC 4180 quoting where needed, LF line endings, no BOM
- XLSX "Cleaned" sheet with string cells only
- Writing then re-reading yields the same table
"""
import hashlib
import io

import pytest
from openpyxl import load_workbook

from sheet_cleanup.cleaners import CleaningConfig, DataCleaner, OutputFormat
from sheet_cleanup.core.table import CleanedTable
from sheet_cleanup.export import CSVEmitter, XLSXEmitter, get_emitter
from sheet_cleanup.export.xlsx_emitter import SHEET_TITLE
from sheet_cleanup.loaders import CSVLoader, ExcelLoader


@pytest.fixture
def people():
    return CleanedTable(header=["city", "name"], rows=[["New York", "Alice"], ["Paris", "Bob"]])


@pytest.fixture
def awkward():
    """Values needing quoting, plus blanks and formula-looking text."""
    return CleanedTable(
        header=["a", "a", "note"],
        rows=[
            ['x, "y"', "", "=1+1"],
            ["line1\nline2", " lead", "30"],
        ],
    )


class TestCSVEmitter:
    """Tests for CSVEmitter."""

    def test_header_then_rows(self, people, csv_records):
        """Test record order and content."""
        data = CSVEmitter().emit(people)
        assert csv_records(data) == [["city", "name"], ["New York", "Alice"], ["Paris", "Bob"]]

    def test_plain_text_unquoted(self, people):
        """Test simple values need no quotes and lines end with LF."""
        data = CSVEmitter().emit(people)
        assert data.startswith(b"city,name\n")
        assert b"\r\n" not in data
        assert not data.startswith(b"\xef\xbb\xbf")

    def test_quoting(self, awkward, csv_records):
        """Test commas, quotes and newlines survive a parse."""
        data = CSVEmitter().emit(awkward)
        assert csv_records(data) == [awkward.header, *awkward.rows]
        assert b'"x, ""y"""' in data

    def test_header_only(self, csv_records):
        """Test a table without rows emits just the header."""
        data = CSVEmitter().emit(CleanedTable(header=["a", "b"], rows=[]))
        assert data == b"a,b\n"

    def test_zero_width(self):
        """Test a table without columns emits one empty record per row."""
        assert CSVEmitter().emit(CleanedTable(header=[], rows=[[], []])) == b"\n\n\n"
        assert CSVEmitter().emit(CleanedTable(header=[], rows=[])) == b"\n"

    def test_determinism(self, awkward):
        """Test repeated writes are byte-identical."""
        digests = {hashlib.sha256(CSVEmitter().emit(awkward)).hexdigest() for _ in range(3)}
        assert len(digests) == 1


class TestXLSXEmitter:
    """Tests for XLSXEmitter."""

    def _sheet(self, data: bytes):
        return load_workbook(io.BytesIO(data)).active

    def test_single_cleaned_sheet(self, people):
        """Test the workbook has one sheet named Cleaned."""
        workbook = load_workbook(io.BytesIO(XLSXEmitter().emit(people)))
        assert workbook.sheetnames == [SHEET_TITLE]

    def test_values(self, people):
        """Test header in row 1 and rows below it."""
        sheet = self._sheet(XLSXEmitter().emit(people))
        values = [list(row) for row in sheet.iter_rows(values_only=True)]
        assert values == [["city", "name"], ["New York", "Alice"], ["Paris", "Bob"]]

    def test_all_cells_are_strings(self, awkward):
        """Test numbers and formulas are stored as text."""
        sheet = self._sheet(XLSXEmitter().emit(awkward))
        assert sheet["C2"].value == "=1+1"
        assert sheet["C2"].data_type == "s"
        assert sheet["C3"].value == "30"
        assert sheet["C3"].data_type == "s"


class TestGetEmitter:
    """Tests for get_emitter."""

    def test_dispatch(self):
        """Test each output format has an emitter."""
        assert isinstance(get_emitter(OutputFormat.CSV), CSVEmitter)
        assert isinstance(get_emitter(OutputFormat.XLSX), XLSXEmitter)

    def test_metadata(self):
        """Test media types and extensions."""
        assert CSVEmitter.media_type == "text/csv"
        assert CSVEmitter.extension == ".csv"
        assert XLSXEmitter.extension == ".xlsx"
        assert XLSXEmitter.media_type.endswith("spreadsheetml.sheet")


class TestRoundTrip:
    """Re-reading emitted output and projecting every column gives the same table."""

    @pytest.mark.parametrize("emitter,loader", [
        (CSVEmitter(), CSVLoader()),
        (XLSXEmitter(), ExcelLoader()),
    ])
    def test_identity_clean(self, awkward, emitter, loader):
        """Test emit, load and identity clean reproduce the rows."""
        table = loader.load(emitter.emit(awkward))
        assert table.header == awkward.header

        # Duplicate names resolve to the first position, so project by the unique names
        config = CleaningConfig.identity(["note"])
        cleaned, _ = DataCleaner(config).clean_with_default_rules(table)
        assert cleaned.rows == [[row[2]] for row in awkward.rows]
        assert [table.row(i) for i in range(len(table))] == awkward.rows

    def test_cleaned_output_round_trips(self, clean_csv, s1_csv):
        """Test cleaned CSV output re-cleans to itself with an identity config."""
        cleaned = clean_csv(s1_csv, columns=["city", "name"])
        table = CSVLoader().load(CSVEmitter().emit(cleaned))
        again, _ = DataCleaner(CleaningConfig.identity(table.header)).clean_with_default_rules(table)
        assert again == cleaned
