"""
Tests for the cell-level normalizers.

Validates:
- Transform order (trim, collapse, case, date)
- Idempotency (transform(transform(x)) == transform(x))
- Type normalization rules
- Email and URL validation
"""
import pytest

from sheet_cleanup.cleaners.config import CleaningConfig, DateFormat, TextCase
from sheet_cleanup.transform.normalizers import (
    is_blank,
    is_valid_email,
    is_valid_url,
    normalize_type,
    parse_date,
    to_iso_date_or_same,
    to_title_case,
    transform_value,
)


class TestTransformValue:
    """Tests for transform_value."""

    def test_defaults_trim_and_collapse(self):
        """Test default config trims and collapses whitespace."""
        config = CleaningConfig()
        assert transform_value("  Alice  ", config) == "Alice"
        assert transform_value(" New   York", config) == "New York"

    def test_collapse_after_trim(self):
        """Test interior tabs and newlines become single spaces."""
        assert transform_value(" a\t\n b ", CleaningConfig()) == "a b"

    def test_collapse_without_trim(self):
        """Test edge whitespace runs collapse to one space when trim is off."""
        config = CleaningConfig(trim=False)
        assert transform_value("  a   b  ", config) == " a b "

    def test_everything_disabled_is_identity(self):
        """Test identity config leaves values untouched."""
        config = CleaningConfig.identity(["x"])
        assert transform_value("  a \t b ", config) == "  a \t b "

    def test_none_is_empty(self):
        """Test missing values become empty strings."""
        assert transform_value(None, CleaningConfig()) == ""

    def test_lower_and_upper(self):
        """Test full-string case folding."""
        assert transform_value("MiXeD Case", CleaningConfig(text_case=TextCase.LOWER)) == "mixed case"
        assert transform_value("MiXeD Case", CleaningConfig(text_case=TextCase.UPPER)) == "MIXED CASE"

    def test_title_case(self):
        """Test title case after collapsing."""
        config = CleaningConfig(text_case=TextCase.TITLE)
        assert transform_value("  jane   DOE ", config) == "Jane Doe"

    def test_iso_date(self):
        """Test dates are normalized when enabled."""
        config = CleaningConfig(date_format=DateFormat.ISO)
        assert transform_value(" 3/4/2024 ", config) == "2024-03-04"
        assert transform_value("hello", config) == "hello"

    def test_date_untouched_by_default(self):
        """Test dates are left alone without date_format."""
        assert transform_value("3/4/2024", CleaningConfig()) == "3/4/2024"

    @pytest.mark.parametrize("value", [
        "  Alice  ",
        " a\t\tb ",
        "mIxEd   words here",
        "3/4/2024",
        "25/12/2024",
        "",
    ])
    def test_idempotency(self, value):
        """Test that transforming twice gives the same result."""
        config = CleaningConfig(text_case=TextCase.TITLE, date_format=DateFormat.ISO)
        once = transform_value(value, config)
        assert transform_value(once, config) == once


class TestToTitleCase:
    """Tests for to_title_case."""

    def test_tokens_capitalized(self):
        """Test first letter upper, rest lower."""
        assert to_title_case("hello wORLD") == "Hello World"

    def test_empty(self):
        """Test empty string is returned as is."""
        assert to_title_case("") == ""

    def test_splits_on_single_spaces(self):
        """Test runs of spaces are preserved (empty tokens)."""
        assert to_title_case("a  b") == "A  B"

    def test_non_letters(self):
        """Test tokens starting with digits or symbols."""
        assert to_title_case("3RD o'NEIL") == "3rd O'neil"

    def test_trailing_empty_tokens_dropped(self):
        """Test trailing spaces do not survive title casing."""
        assert to_title_case("a b ") == "A B"
        assert to_title_case(" a  ") == " A"
        assert to_title_case("   ") == ""


class TestIsoDate:
    """Tests for to_iso_date_or_same."""

    def test_month_first_wins(self):
        """Test ambiguous dates are read month-first."""
        assert to_iso_date_or_same("3/4/2024") == "2024-03-04"

    def test_day_first_fallback(self):
        """Test day-first when month-first is impossible."""
        assert to_iso_date_or_same("25/12/2024") == "2024-12-25"
        assert to_iso_date_or_same("13/1/2024") == "2024-01-13"

    def test_year_first(self):
        """Test year-first with single-digit parts."""
        assert to_iso_date_or_same("2024-3-4") == "2024-03-04"

    def test_iso_is_noop(self):
        """Test already-normalized dates round-trip."""
        assert to_iso_date_or_same("2024-03-04") == "2024-03-04"
        assert to_iso_date_or_same("1999-12-31") == "1999-12-31"

    def test_iso_with_offset(self):
        """Test ISO dates with a zone designator."""
        assert to_iso_date_or_same("2024-03-04Z") == "2024-03-04"
        assert to_iso_date_or_same("2024-03-04+01:00") == "2024-03-04"

    def test_day_clamped_to_month_end(self):
        """Test days 29-31 past the month end resolve to its last day."""
        assert to_iso_date_or_same("4/31/2024") == "2024-04-30"
        assert to_iso_date_or_same("2/30/2024") == "2024-02-29"
        assert to_iso_date_or_same("2/29/2023") == "2023-02-28"
        assert to_iso_date_or_same("31/4/2024") == "2024-04-30"
        assert to_iso_date_or_same("2024-02-30") == "2024-02-29"

    def test_out_of_range_unchanged(self):
        """Test days above 31 or months above 12 are left alone."""
        assert to_iso_date_or_same("4/32/2024") == "4/32/2024"
        assert to_iso_date_or_same("13/13/2024") == "13/13/2024"
        assert to_iso_date_or_same("2024-13-01") == "2024-13-01"
        assert to_iso_date_or_same("0/0/2024") == "0/0/2024"

    def test_zoned_iso_not_clamped(self):
        """Test ISO dates with a zone designator must be real dates."""
        assert to_iso_date_or_same("2024-02-30Z") == "2024-02-30Z"

    def test_unparseable_unchanged(self):
        """Test non-dates are returned unchanged."""
        assert to_iso_date_or_same("tomorrow") == "tomorrow"
        assert to_iso_date_or_same("") == ""
        assert parse_date("3/4/24") is None


class TestNormalizeType:
    """Tests for normalize_type."""

    def test_currency(self):
        """Test currency symbol and grouping are stripped."""
        assert normalize_type("$1,234.50") == "1234.50"
        assert normalize_type("£5") == "5"
        assert normalize_type("€1,000") == "1000"

    def test_booleans(self):
        """Test yes/no/true/false are canonicalized."""
        assert normalize_type("YES") == "true"
        assert normalize_type("True") == "true"
        assert normalize_type("no") == "false"
        assert normalize_type("FALSE") == "false"

    def test_grouped_numbers(self):
        """Test grouping commas are removed."""
        assert normalize_type("1,000") == "1000"
        assert normalize_type("-1,234,567.8") == "-1234567.8"
        assert normalize_type("42") == "42"

    def test_passthrough(self):
        """Test non-matching values pass through."""
        assert normalize_type("abc") == "abc"
        assert normalize_type("1,00") == "1,00"
        assert normalize_type("y") == "y"

    def test_trims(self):
        """Test values are trimmed first."""
        assert normalize_type("  42  ") == "42"
        assert normalize_type("   ") == ""

    def test_idempotency(self):
        """Test that normalizing twice gives the same result."""
        for value in ["$1,234.50", "YES", "1,000", "abc"]:
            once = normalize_type(value)
            assert normalize_type(once) == once


class TestIsValidEmail:
    """Tests for is_valid_email."""

    def test_empty_is_valid(self):
        """Test empty values are vacuously valid."""
        assert is_valid_email("")
        assert is_valid_email(None)

    def test_valid(self):
        """Test well-formed addresses."""
        assert is_valid_email("a@b.co")
        assert is_valid_email("first.last+tag@mail.example.org")
        assert is_valid_email("user_1%x@sub-domain.io")

    def test_invalid(self):
        """Test malformed addresses."""
        assert not is_valid_email("not-an-email")
        assert not is_valid_email("a@b.c")
        assert not is_valid_email("a b@c.com")
        assert not is_valid_email("@example.com")
        assert not is_valid_email("a@b.co\n")


class TestIsValidUrl:
    """Tests for is_valid_url."""

    def test_empty_is_valid(self):
        """Test empty values are vacuously valid."""
        assert is_valid_url("")
        assert is_valid_url(None)

    def test_valid(self):
        """Test absolute URLs."""
        assert is_valid_url("https://example.com/path?q=1")
        assert is_valid_url("http://localhost:8080")
        assert is_valid_url("ftp://files.example.org/pub")

    def test_invalid(self):
        """Test values without a scheme."""
        assert not is_valid_url("not a url")
        assert not is_valid_url("example.com")
        assert not is_valid_url("/relative/path")

    def test_parser_specific_cases(self):
        """Test cases decided by the URL parser: any scheme, no raw spaces."""
        assert is_valid_url("foo:bar")
        assert not is_valid_url("http://a b")


class TestIsBlank:
    """Tests for is_blank."""

    def test_blank(self):
        """Test empty and whitespace-only values, including control separators."""
        assert is_blank("")
        assert is_blank(None)
        assert is_blank(" \t\r\n")
        assert is_blank("\x1f\x1c")
        assert is_blank("\u00a0\u3000")

    def test_not_blank(self):
        assert not is_blank(" x ")
        assert not is_blank("0")
