"""Command-line entry point for solving a linear system from a file."""

from __future__ import annotations

import argparse
import sys

from gaussrow.csv_io import CsvError
from gaussrow.solver import solve_file

__all__ = ["main"]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gaussrow",
        description="Solve a linear system stored as an augmented matrix.",
    )
    parser.add_argument("filename", nargs="?", help="input .csv file")
    parser.add_argument("delimiter", nargs="?", help="single-character delimiter")
    parser.add_argument(
        "-o", "--output", default="GaussSolver.csv", help="result file"
    )
    return parser


def main(argv=None) -> int:
    """Run the solver; prompt for missing arguments. Returns an exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    filename = args.filename
    if filename is None:
        words = input("Enter a filename .csv: ").split()
        if not words:
            parser.error("a filename is required")
        filename = words[0]

    delimiter = args.delimiter
    if delimiter is None:
        delimiter = input("Enter a delimiter: ").strip()[:1] or ","
    elif len(delimiter) != 1:
        parser.error("the delimiter must be a single character")

    try:
        solve_file(filename, delimiter, args.output)
    except (OSError, CsvError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())