"""Gaussian elimination for augmented matrices read from and written to delimited files."""

__version__ = "0.1.0"
__all__ = ["csv_io", "solver", "cli"]