"""
Clean service: wires loaders, the cleaning engine and emitters together.

Synchronous and stateless; the API runs it in a worker thread.
"""
import logging
import re
from dataclasses import dataclass
from pathlib import PurePosixPath, PureWindowsPath
from typing import List, Optional

from sheet_cleanup.cleaners import CleaningReport, DataCleaner
from sheet_cleanup.core.exceptions import InvalidRequestError
from sheet_cleanup.export import TableEmitter, get_emitter
from sheet_cleanup.loaders import get_loader
from sheet_cleanup.schemas.clean import CleanOptions

logger = logging.getLogger(__name__)

_KNOWN_SUFFIX = re.compile(r"\.(xlsx|xls|csv)$", re.IGNORECASE)

DEFAULT_FILENAME = "file"


@dataclass
class CleanedFile:
    """Serialized cleaning output ready to be sent back."""
    content: bytes
    media_type: str
    filename: str
    report: CleaningReport


def base_filename(filename: Optional[str]) -> str:
    """Strip any client-side directory components from an uploaded filename."""
    if not filename:
        return DEFAULT_FILENAME
    name = PureWindowsPath(PurePosixPath(filename).name).name
    return name or DEFAULT_FILENAME


def output_filename(filename: Optional[str], emitter: TableEmitter) -> str:
    """
    Derive the download name: "cleaned_" + base name with the output extension.

    Examples:
        ("report.XLSX", csv) → "cleaned_report.csv"
        ("data.csv", xlsx) → "cleaned_data.xlsx"
    """
    name = base_filename(filename)
    stem = _KNOWN_SUFFIX.sub("", name)
    return f"cleaned_{stem}{emitter.extension}"


class CleanService:
    """Runs one upload through the cleaning pipeline."""

    def clean_upload(self, filename: Optional[str], data: bytes, options: CleanOptions) -> CleanedFile:
        """
        Clean an uploaded file.

        Args:
            filename: Uploaded filename (selects the loader)
            data: Uploaded bytes
            options: Decoded form options

        Returns:
            CleanedFile with the serialized output

        Raises:
            InvalidRequestError: No columns requested, or unsupported file type
            TableParseError: The upload cannot be read
            TableWriteError: The output cannot be written
        """
        if not options.columns:
            raise InvalidRequestError("No columns provided")

        loader = get_loader(filename)
        config = options.to_config()

        table = loader.load(data)
        cleaned, report = DataCleaner(config).clean_with_default_rules(table)

        emitter = get_emitter(config.output_format)
        content = emitter.emit(cleaned)

        logger.info(f"Cleaned '{base_filename(filename)}': {report.to_summary()}")
        if report.columns_ignored:
            logger.debug(f"Ignored unknown columns: {report.columns_ignored}")

        return CleanedFile(
            content=content,
            media_type=emitter.media_type,
            filename=output_filename(filename, emitter),
            report=report,
        )

    def read_headers(self, filename: Optional[str], data: bytes) -> List[str]:
        """
        Return the header row of an uploaded file.

        Raises:
            InvalidRequestError: Unsupported file type
            TableParseError: The upload cannot be read
        """
        table = get_loader(filename).load(data)
        return table.header
