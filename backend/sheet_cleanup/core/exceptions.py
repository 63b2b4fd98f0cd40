"""
Error taxonomy for the cleanup pipeline.

Messages are user-facing: the API returns them verbatim as plain text.
"""


class SheetCleanupError(Exception):
    """Base class for all cleanup errors."""
    pass


class InvalidRequestError(SheetCleanupError):
    """Raised when the request cannot be processed (client error)."""
    pass


class TableParseError(SheetCleanupError):
    """Raised when an uploaded file cannot be read as a table."""
    pass


class TableWriteError(SheetCleanupError):
    """Raised when the cleaned table cannot be serialized."""
    pass
