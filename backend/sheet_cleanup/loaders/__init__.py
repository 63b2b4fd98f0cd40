"""
Input adapters turning uploaded bytes into Table views.
"""
from typing import Optional

from sheet_cleanup.core.exceptions import InvalidRequestError

from .base import TableLoader
from .csv_loader import CSVLoader
from .excel_loader import ExcelLoader

LOADERS = (CSVLoader, ExcelLoader)


def get_loader(filename: Optional[str]) -> TableLoader:
    """
    Pick the loader for an uploaded file by its (case-insensitive) suffix.

    Raises:
        InvalidRequestError: If no loader handles the suffix
    """
    for loader_cls in LOADERS:
        loader = loader_cls()
        if filename and loader.handles(filename):
            return loader
    raise InvalidRequestError("Unsupported file type")


__all__ = ["TableLoader", "get_loader", "CSVLoader", "ExcelLoader", "LOADERS"]
