"""
Emitter interface for cleaned tables.
"""
from abc import ABC, abstractmethod

from sheet_cleanup.core.table import CleanedTable


class TableEmitter(ABC):
    """Serializes a cleaned table to bytes."""

    #: Response media type
    media_type: str = "application/octet-stream"

    #: Filename extension, including the dot
    extension: str = ""

    @abstractmethod
    def emit(self, table: CleanedTable) -> bytes:
        """
        Serialize the table.

        Raises:
            TableWriteError: If serialization fails
        """
        pass
