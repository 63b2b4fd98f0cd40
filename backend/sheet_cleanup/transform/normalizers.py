"""
Cell-level normalizers and validators.

Pure functions with no I/O. Every cell the cleaning engine emits goes through
``transform_value``; ``normalize_type`` and the validators run afterwards when
the configuration asks for them.

All transforms are idempotent: transform(transform(x)) == transform(x).
"""
import calendar
import re
from datetime import date
from typing import Optional

from pydantic import AnyUrl, TypeAdapter, ValidationError

from sheet_cleanup.cleaners.config import CleaningConfig, DateFormat, TextCase


_WHITESPACE_RUN = re.compile(r"\s+")

_CURRENCY_NUMBER = re.compile(r"[$€£]\s?[-+]?([0-9]{1,3}(,[0-9]{3})*|[0-9]+)(\.[0-9]+)?")
_CURRENCY_STRIP = re.compile(r"[$€£,]")
_PLAIN_NUMBER = re.compile(r"[-+]?([0-9]{1,3}(,[0-9]{3})*|[0-9]+)(\.[0-9]+)?")

_EMAIL = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")

# ISO extended local date with an optional zone designator, e.g. 2024-03-04Z
_ISO_DATE = re.compile(r"(\d{4}-\d{2}-\d{2})(?:Z|[+-]\d{2}:\d{2}(?::\d{2})?)?")

# Tried in order; month-first wins for ambiguous values like 3/4/2024.
# Day-of-month may run to 31 and is clamped to the month's last day.
DATE_PATTERNS = (
    re.compile(r"(?P<month>[0-9]{1,2})/(?P<day>[0-9]{1,2})/(?P<year>[0-9]{4})"),  # US: 3/4/2024
    re.compile(r"(?P<day>[0-9]{1,2})/(?P<month>[0-9]{1,2})/(?P<year>[0-9]{4})"),  # EU: 25/12/2024
    re.compile(r"(?P<year>[0-9]{4})-(?P<month>[0-9]{1,2})-(?P<day>[0-9]{1,2})"),  # 2024-3-4
)

_URL_ADAPTER = TypeAdapter(AnyUrl)


def transform_value(value: Optional[str], config: CleaningConfig) -> str:
    """
    Apply the configured cell transforms in their fixed order.

    Order: trim, whitespace collapse, case folding, ISO date normalization.

    Args:
        value: Raw cell text (None is treated as empty)
        config: Cleaning configuration

    Returns:
        Transformed cell text
    """
    v = "" if value is None else value
    if config.trim:
        v = v.strip()
    if config.collapse_spaces:
        v = collapse_whitespace(v)

    if config.text_case == TextCase.LOWER:
        v = v.lower()
    elif config.text_case == TextCase.UPPER:
        v = v.upper()
    elif config.text_case == TextCase.TITLE:
        v = to_title_case(v)

    if config.date_format == DateFormat.ISO:
        v = to_iso_date_or_same(v)
    return v


def is_blank(value: Optional[str]) -> bool:
    """True when nothing is left after trimming."""
    return not value or not value.strip()


def collapse_whitespace(value: str) -> str:
    """Replace every run of whitespace with a single space."""
    return _WHITESPACE_RUN.sub(" ", value)


def to_title_case(value: str) -> str:
    """
    Title-case space-separated tokens.

    Splits on single spaces, so "a  b" keeps its empty token and stays
    "A  B". Trailing empty tokens are dropped: "a b " → "A B".
    """
    if not value:
        return value
    parts = value.split(" ")
    while parts and not parts[-1]:
        parts.pop()
    return " ".join(p[:1].upper() + p[1:].lower() if p else p for p in parts)


def _resolve_date(year: int, month: int, day: int) -> Optional[date]:
    """Build a date, clamping days 29-31 to the end of the month."""
    if year < 1 or not 1 <= month <= 12 or not 1 <= day <= 31:
        return None
    return date(year, month, min(day, calendar.monthrange(year, month)[1]))


def parse_date(value: str) -> Optional[date]:
    """
    Parse a date using the supported patterns.

    Examples:
        "4/31/2024" → 2024-04-30 (clamped)
        "4/32/2024" → None

    Returns:
        The parsed date, or None when no pattern matches
    """
    for pattern in DATE_PATTERNS:
        match = pattern.fullmatch(value)
        if not match:
            continue
        parsed = _resolve_date(int(match["year"]), int(match["month"]), int(match["day"]))
        if parsed:
            return parsed

    # Strict: no clamping for ISO dates with a zone designator
    match = _ISO_DATE.fullmatch(value)
    if match:
        try:
            return date.fromisoformat(match.group(1))
        except ValueError:
            return None
    return None


def to_iso_date_or_same(value: str) -> str:
    """
    Reformat a recognized date as YYYY-MM-DD.

    Idempotent: to_iso_date_or_same("2024-03-04") == "2024-03-04"
    Unrecognized values are returned unchanged.
    """
    parsed = parse_date(value)
    return parsed.isoformat() if parsed else value


def normalize_type(value: Optional[str]) -> str:
    """
    Canonicalize currency amounts, numbers and booleans.

    Rules (in order):
    - "$1,234.50" → "1234.50" (symbol and grouping removed)
    - yes/true → "true", no/false → "false" (case-insensitive)
    - "1,000" → "1000"
    - Anything else is returned trimmed but otherwise unchanged

    The currency branch does not return early: the stripped value continues
    through the boolean and number checks.
    """
    s = "" if value is None else value.strip()
    if not s:
        return s
    if _CURRENCY_NUMBER.fullmatch(s):
        s = _CURRENCY_STRIP.sub("", s)

    lowered = s.lower()
    if lowered in ("true", "yes"):
        return "true"
    if lowered in ("false", "no"):
        return "false"

    if _PLAIN_NUMBER.fullmatch(s):
        return s.replace(",", "")
    return s


def is_valid_email(value: Optional[str]) -> bool:
    """Check email shape. Empty values are vacuously valid."""
    if not value:
        return True
    return _EMAIL.fullmatch(value) is not None


def is_valid_url(value: Optional[str]) -> bool:
    """Check that the value parses as an absolute URL. Empty values are valid."""
    if not value:
        return True
    try:
        _URL_ADAPTER.validate_python(value)
    except ValidationError:
        return False
    return True
