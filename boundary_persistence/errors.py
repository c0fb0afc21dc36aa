# boundary_persistence/errors.py
"""
Exception hierarchy.

Every error derives from a built-in exception as well, so callers that
already catch ``ValueError`` / ``IndexError`` / ``KeyError`` keep working.
"""

from __future__ import annotations

from typing import Optional

__all__ = [
    "PersistenceError",
    "MalformedMatrixError",
    "ColumnIndexError",
    "InvalidColumnError",
    "DegenerateMatrixError",
    "MissingIndexError",
    "DimensionMismatchError",
]


class PersistenceError(Exception):
    """Base class for all errors raised by boundary_persistence."""


class MalformedMatrixError(PersistenceError, ValueError):
    """A text matrix (or function file) could not be parsed into a valid matrix."""

    def __init__(self, message: str, *, line: Optional[int] = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class ColumnIndexError(PersistenceError, IndexError):
    """Column index outside [0, n_columns)."""

    def __init__(self, column: int, n_columns: int):
        self.column = column
        self.n_columns = n_columns
        super().__init__(f"Column index {column} out of range for matrix with {n_columns} columns.")


class InvalidColumnError(PersistenceError, ValueError):
    """Row indices passed to set_column are not ascending, unique and in range."""


class DegenerateMatrixError(PersistenceError, ValueError):
    """The matrix cannot be processed by the requested transform or algorithm."""


class MissingIndexError(PersistenceError, KeyError):
    """A pairing references an index the filtration does not describe."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""


class DimensionMismatchError(PersistenceError, ValueError):
    """A pair (c, k) of the pairing does not go from dimension d to d + 1 in the filtration."""
