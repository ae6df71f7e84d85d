"""Gaussian elimination on augmented matrices."""

from __future__ import annotations

import enum
import sys
from os import PathLike
from typing import Union

import numpy as np

from gaussrow.csv_io import read_matrix, write_matrix

__all__ = [
    "SolutionKind",
    "triangle_form",
    "back_substitute",
    "classify",
    "gauss",
    "solve_file",
]

PathType = Union[str, "PathLike[str]"]


class SolutionKind(enum.Enum):
    """How many solutions a reduced system has."""

    UNIQUE = "One solution"
    INFINITE = "Infinite solutions"
    INCONSISTENT = "No solutions, inconsistent system"


def _augmented_copy(matrix) -> np.ndarray:
    data = np.array(matrix, dtype=float, copy=True)
    if data.ndim != 2:
        raise ValueError("matrix must be two-dimensional")
    rows, cols = data.shape
    if rows > 0 and cols < 1:
        raise ValueError("augmented matrix needs at least one column")
    return data


def triangle_form(matrix) -> np.ndarray:
    """Return the row-echelon form of an augmented n x (m+1) matrix.

    Uses partial pivoting; each pivot row is scaled so its pivot is 1.
    Columns without a non-zero pivot candidate are skipped.
    """
    m = _augmented_copy(matrix)
    rows, cols = m.shape
    for i in range(min(rows, cols - 1)):
        max_row = i + int(np.argmax(np.abs(m[i:, i])))
        if m[max_row, i] == 0:
            continue
        if max_row != i:
            m[[i, max_row]] = m[[max_row, i]]
        m[i] /= m[i, i]
        m[i + 1:] -= np.outer(m[i + 1:, i], m[i])
    return m


def back_substitute(matrix) -> np.ndarray:
    """Clear the entries above each row's leading coefficient."""
    m = _augmented_copy(matrix)
    rows = m.shape[0]
    for i in reversed(range(rows)):
        nonzero = np.flatnonzero(m[i, :-1])
        if nonzero.size == 0:
            continue
        pivot = nonzero[0]
        m[:i] -= np.outer(m[:i, pivot], m[i])
    return m


def classify(matrix) -> SolutionKind:
    """Classify a reduced augmented matrix by its number of solutions."""
    m = np.asarray(matrix, dtype=float)
    if m.ndim != 2:
        raise ValueError("matrix must be two-dimensional")
    if m.shape[0] == 0:
        return SolutionKind.UNIQUE
    if m.shape[1] < 1:
        raise ValueError("augmented matrix needs at least one column")
    finite = True
    counts = np.count_nonzero(m[:, :-1], axis=1)
    for count, rhs in zip(counts, m[:, -1]):
        if count < 1 and rhs != 0:
            return SolutionKind.INCONSISTENT
        if count > 1:
            finite = False
    return SolutionKind.UNIQUE if finite else SolutionKind.INFINITE


def gauss(matrix) -> tuple[np.ndarray, SolutionKind]:
    """Reduce an augmented matrix and report what kind of solution it has.

    The input is left untouched; the reduced matrix is returned alongside
    the classification. For a unique solution the last column holds it.
    """
    reduced = back_substitute(triangle_form(matrix))
    return reduced, classify(reduced)


def _format_matrix(matrix: np.ndarray) -> str:
    entries = [[format(float(v), "g") for v in row] for row in matrix]
    width = max((len(e) for row in entries for e in row), default=0)
    return "\n".join(" ".join(e.rjust(width) for e in row) for row in entries)


def solve_file(
    filename: PathType,
    delimiter: str = ",",
    output: PathType = "GaussSolver.csv",
) -> SolutionKind:
    """Solve the system stored in a delimited file and write the result.

    The input and reduced matrices are printed to standard output along
    with the classification message.
    """
    matrix = read_matrix(filename, delimiter)
    print(_format_matrix(matrix))
    reduced, kind = gauss(matrix)
    stream = sys.stdout if kind is SolutionKind.UNIQUE else sys.stderr
    print(kind.value, file=stream)
    print(_format_matrix(reduced))
    write_matrix(output, reduced, delimiter)
    return kind