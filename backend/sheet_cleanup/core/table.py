"""
Table structures shared by the loaders, the cleaning engine and the emitters.

Body cells live in a Polars DataFrame of string columns. Columns are named
by position rather than by header text, so duplicate or blank header names
never collide.
"""
from dataclasses import dataclass, field
from typing import Iterator, List

import polars as pl


def column_name(index: int) -> str:
    """Positional name of the frame column holding header position ``index``."""
    return f"c{index}"


def empty_frame(width: int) -> pl.DataFrame:
    """Zero-row frame with ``width`` positional string columns."""
    return pl.DataFrame(schema={column_name(i): pl.String for i in range(width)})


def frame_from_rows(rows: List[List[str]], width: int) -> pl.DataFrame:
    """Build a positional string frame from rows already aligned to ``width``."""
    schema = {column_name(i): pl.String for i in range(width)}
    if not rows:
        return pl.DataFrame(schema=schema)
    return pl.DataFrame(rows, schema=schema, orient="row")


@dataclass
class Table:
    """
    Uniform view over an uploaded file: header plus indexed body rows.

    The frame has exactly ``len(header)`` columns and contains no nulls.
    """
    header: List[str]
    frame: pl.DataFrame

    @classmethod
    def empty(cls) -> "Table":
        return cls(header=[], frame=empty_frame(0))

    @property
    def width(self) -> int:
        return len(self.header)

    def __len__(self) -> int:
        return self.frame.height

    def row(self, index: int) -> List[str]:
        """Body row ``index`` as a list of cells."""
        return list(self.frame.row(index))

    def iter_rows(self) -> Iterator[List[str]]:
        for row in self.frame.iter_rows():
            yield list(row)


@dataclass
class CleanedTable:
    """Output of the cleaning engine: header plus rows of equal width."""
    header: List[str]
    rows: List[List[str]] = field(default_factory=list)

    @property
    def width(self) -> int:
        return len(self.header)

    def __len__(self) -> int:
        return len(self.rows)
