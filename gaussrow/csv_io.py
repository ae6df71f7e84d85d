"""Reading and writing numeric matrices as delimited text files."""

from __future__ import annotations

import math
import re
from os import PathLike
from typing import Union

import numpy as np

__all__ = ["CsvError", "read_matrix", "write_matrix"]

PathType = Union[str, "PathLike[str]"]

_NUMBER_PREFIX = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class CsvError(ValueError):
    """Raised when a delimited file does not hold a well-formed matrix."""


def _parse_cell(cell: str) -> float:
    """Parse the leading number of a cell; trailing text is ignored."""
    match = _NUMBER_PREFIX.match(cell.lstrip())
    if match is None:
        raise CsvError(f"Error converting string to double: {cell}")
    token = match.group(0)
    value = float(token)
    if math.isinf(value) and not token.lstrip("+-").lower().startswith("inf"):
        raise CsvError(f"Error converting string to double: {cell}")
    return value


def _split_cells(line: str, delimiter: str) -> list[str]:
    if not line:
        return []
    cells = line.split(delimiter)
    if cells and cells[-1] == "":
        cells.pop()
    return cells


def read_matrix(filename: PathType, delimiter: str = ",") -> np.ndarray:
    """Read a delimited text file into a 2-D float array.

    Blank lines are skipped. An empty file gives a 0x0 array.
    Raises OSError if the file cannot be opened and CsvError on bad data.
    """
    rows: list[list[float]] = []
    with open(filename, encoding="utf-8") as handle:
        for raw_line in handle:
            line = raw_line.rstrip("\n")
            row = [_parse_cell(cell) for cell in _split_cells(line, delimiter)]
            if row:
                rows.append(row)

    if not rows:
        return np.zeros((0, 0))

    width = len(rows[0])
    if any(len(row) != width for row in rows[1:]):
        raise CsvError("Inconsistent number of columns in CSV file")
    return np.array(rows, dtype=float)


def _format_value(value: float) -> str:
    return format(float(value), "g")


def write_matrix(filename: PathType, matrix, delimiter: str = ",") -> None:
    """Write a 2-D matrix as delimited text, one row per line."""
    data = np.asarray(matrix, dtype=float)
    if data.ndim != 2:
        raise ValueError("matrix must be two-dimensional")
    with open(filename, "w", encoding="utf-8") as handle:
        for row in data:
            handle.write(delimiter.join(_format_value(v) for v in row))
            handle.write("\n")