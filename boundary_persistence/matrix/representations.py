# boundary_persistence/matrix/representations.py
from __future__ import annotations

from typing import Iterable, List, Optional, Protocol, Tuple, Union

import numpy as np

from ..errors import ColumnIndexError, InvalidColumnError

__all__ = [
    "ColumnRepresentation",
    "SparseColumns",
    "DenseColumns",
    "REPRESENTATIONS",
    "as_representation",
    "validate_indices",
]


# ============================================================
# Column storage interface
# ============================================================

class ColumnRepresentation(Protocol):
    """
    Column storage of a square matrix over Z2.

    Column j is an ascending sequence of row indices; its largest entry is
    the pivot. All column arguments must lie in [0, n_columns).
    """
    name: str

    def set_num_columns(self, n: int) -> None:
        ...

    def get_num_columns(self) -> int:
        ...

    def set_column(self, column: int, indices: Iterable[int]) -> None:
        ...

    def get_column(self, column: int) -> List[int]:
        ...

    def clear_column(self, column: int) -> None:
        ...

    def add_columns(self, source: int, target: int) -> None:
        ...

    def get_maximum_index(self, column: int) -> Tuple[int, bool]:
        ...

    def column_size(self, column: int) -> int:
        ...

    def get_dimension(self, column: Optional[int] = None) -> int:
        ...

    def num_entries(self) -> int:
        ...

    def copy(self) -> "ColumnRepresentation":
        ...


def validate_indices(indices: Iterable[int], n_columns: int) -> np.ndarray:
    """
    Return indices as an ascending int64 array, or raise InvalidColumnError
    if they are not strictly ascending, non-negative and below n_columns.
    """
    arr = np.asarray(list(indices) if not isinstance(indices, np.ndarray) else indices)
    if arr.size == 0:
        return np.empty(0, dtype=np.int64)
    if arr.ndim != 1:
        raise InvalidColumnError(f"Column indices must be 1D; got shape {arr.shape}.")
    if not np.issubdtype(arr.dtype, np.integer):
        raise InvalidColumnError(f"Column indices must be integers; got dtype {arr.dtype}.")

    arr = arr.astype(np.int64, copy=True)
    if arr[0] < 0:
        raise InvalidColumnError(f"Negative row index {int(arr[0])}.")
    if arr[-1] >= n_columns:
        raise InvalidColumnError(
            f"Row index {int(arr[-1])} out of range for matrix with {n_columns} columns."
        )
    if arr.size > 1 and np.any(np.diff(arr) <= 0):
        raise InvalidColumnError(f"Row indices must be strictly ascending; got {arr.tolist()}.")
    return arr


def column_dimension(size: int) -> int:
    """Number of boundary facets minus one; an empty column has dimension 0."""
    return size - 1 if size > 0 else 0


# ============================================================
# Sparse: one ascending index array per column
# ============================================================

class SparseColumns:
    """List-of-arrays storage. Column addition is a sorted symmetric difference."""
    name = "sparse"

    def __init__(self, n: int = 0):
        self._columns: List[np.ndarray] = []
        self.set_num_columns(n)

    def _check(self, column: int) -> int:
        j = int(column)
        if not (0 <= j < len(self._columns)):
            raise ColumnIndexError(j, len(self._columns))
        return j

    def set_num_columns(self, n: int) -> None:
        n = int(n)
        if n < 0:
            raise ValueError(f"Number of columns must be nonnegative; got {n}.")
        self._columns = [np.empty(0, dtype=np.int64) for _ in range(n)]

    def get_num_columns(self) -> int:
        return len(self._columns)

    def set_column(self, column: int, indices: Iterable[int]) -> None:
        j = self._check(column)
        self._columns[j] = validate_indices(indices, len(self._columns))

    def get_column(self, column: int) -> List[int]:
        return self._columns[self._check(column)].tolist()

    def clear_column(self, column: int) -> None:
        self._columns[self._check(column)] = np.empty(0, dtype=np.int64)

    def add_columns(self, source: int, target: int) -> None:
        s = self._check(source)
        t = self._check(target)
        self._columns[t] = np.setxor1d(self._columns[t], self._columns[s], assume_unique=True)

    def get_maximum_index(self, column: int) -> Tuple[int, bool]:
        col = self._columns[self._check(column)]
        if col.size == 0:
            return -1, False
        return int(col[-1]), True

    def column_size(self, column: int) -> int:
        return int(self._columns[self._check(column)].size)

    def get_dimension(self, column: Optional[int] = None) -> int:
        if column is not None:
            return column_dimension(self.column_size(column))
        return max((column_dimension(c.size) for c in self._columns), default=0)

    def num_entries(self) -> int:
        return int(sum(c.size for c in self._columns))

    def copy(self) -> "SparseColumns":
        out = SparseColumns(0)
        out._columns = [c.copy() for c in self._columns]
        return out


# ============================================================
# Dense: (n, n) uint8 bit matrix, column j is M[:, j]
# ============================================================

class DenseColumns:
    """
    Dense Z2 storage. Column addition is a vectorized XOR of two columns,
    which is fast for small, fairly full matrices.
    """
    name = "dense"

    def __init__(self, n: int = 0):
        self._M = np.zeros((0, 0), dtype=np.uint8)
        self.set_num_columns(n)

    def _check(self, column: int) -> int:
        j = int(column)
        if not (0 <= j < self._M.shape[1]):
            raise ColumnIndexError(j, self._M.shape[1])
        return j

    def set_num_columns(self, n: int) -> None:
        n = int(n)
        if n < 0:
            raise ValueError(f"Number of columns must be nonnegative; got {n}.")
        self._M = np.zeros((n, n), dtype=np.uint8)

    def get_num_columns(self) -> int:
        return int(self._M.shape[1])

    def set_column(self, column: int, indices: Iterable[int]) -> None:
        j = self._check(column)
        rows = validate_indices(indices, self._M.shape[0])
        self._M[:, j] = 0
        self._M[rows, j] = 1

    def get_column(self, column: int) -> List[int]:
        return np.flatnonzero(self._M[:, self._check(column)]).tolist()

    def clear_column(self, column: int) -> None:
        self._M[:, self._check(column)] = 0

    def add_columns(self, source: int, target: int) -> None:
        s = self._check(source)
        t = self._check(target)
        self._M[:, t] ^= self._M[:, s]

    def get_maximum_index(self, column: int) -> Tuple[int, bool]:
        nz = np.flatnonzero(self._M[:, self._check(column)])
        if nz.size == 0:
            return -1, False
        return int(nz[-1]), True

    def column_size(self, column: int) -> int:
        return int(self._M[:, self._check(column)].sum())

    def get_dimension(self, column: Optional[int] = None) -> int:
        if column is not None:
            return column_dimension(self.column_size(column))
        if self._M.shape[1] == 0:
            return 0
        sizes = self._M.sum(axis=0, dtype=np.int64)
        return column_dimension(int(sizes.max()))

    def num_entries(self) -> int:
        return int(self._M.sum())

    def copy(self) -> "DenseColumns":
        out = DenseColumns(0)
        out._M = self._M.copy()
        return out


REPRESENTATIONS = {
    "sparse": SparseColumns,
    "dense": DenseColumns,
}


def as_representation(rep: Union[str, ColumnRepresentation, None]) -> ColumnRepresentation:
    """Convert a representation name (or None) into an empty storage object."""
    if rep is None:
        return SparseColumns()
    if isinstance(rep, str):
        try:
            return REPRESENTATIONS[rep]()
        except KeyError:
            raise ValueError(
                f"Unknown representation {rep!r}; expected one of {sorted(REPRESENTATIONS)}."
            ) from None
    if hasattr(rep, "add_columns") and hasattr(rep, "get_maximum_index"):
        return rep
    raise TypeError(f"Cannot use {type(rep).__name__} as a column representation.")
