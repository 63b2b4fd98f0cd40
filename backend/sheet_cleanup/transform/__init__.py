"""
Cell-level transforms applied while cleaning.
"""
from .normalizers import (
    transform_value,
    is_blank,
    normalize_type,
    is_valid_email,
    is_valid_url,
    to_title_case,
    to_iso_date_or_same,
)

__all__ = [
    "transform_value",
    "is_blank",
    "normalize_type",
    "is_valid_email",
    "is_valid_url",
    "to_title_case",
    "to_iso_date_or_same",
]
