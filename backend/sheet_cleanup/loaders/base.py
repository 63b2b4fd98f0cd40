"""
Loader interface shared by the input adapters.
"""
from abc import ABC, abstractmethod
from typing import Tuple

from sheet_cleanup.core.table import Table


class TableLoader(ABC):
    """Reads an uploaded payload into a Table view."""

    #: Lower-case filename suffixes handled by this loader
    suffixes: Tuple[str, ...] = ()

    @abstractmethod
    def load(self, data: bytes) -> Table:
        """
        Parse the payload.

        Args:
            data: Entire uploaded file

        Returns:
            Table whose header is the first row of the file

        Raises:
            TableParseError: If the payload cannot be read
        """
        pass

    def handles(self, filename: str) -> bool:
        return filename.lower().endswith(self.suffixes)

