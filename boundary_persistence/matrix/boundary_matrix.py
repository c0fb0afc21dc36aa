# boundary_persistence/matrix/boundary_matrix.py
from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np

from .representations import ColumnRepresentation, as_representation

__all__ = ["BoundaryMatrix"]

Representation = Union[str, ColumnRepresentation, None]


class BoundaryMatrix:
    """
    Square Z2 boundary matrix in column form.

    Column j lists (ascending) the earlier simplices that are facets of
    simplex j. The matrix additionally records whether it is the dual
    (anti-transposed) matrix of some filtration; reduction algorithms read
    that flag to translate pivots back into original indices.

    Reductions mutate a BoundaryMatrix in place. Use :meth:`copy` first if
    the unreduced matrix is still needed.
    """

    def __init__(self, n_columns: int = 0, *, representation: Representation = "sparse"):
        self._representation = as_representation(representation)
        if int(n_columns) != self._representation.get_num_columns():
            self._representation.set_num_columns(int(n_columns))
        self._dualized = False

    @classmethod
    def from_columns(
        cls,
        columns: Sequence[Iterable[int]],
        *,
        dualized: bool = False,
        representation: Representation = "sparse",
    ) -> "BoundaryMatrix":
        M = cls(len(columns), representation=representation)
        for j, col in enumerate(columns):
            M.set_column(j, col)
        M.set_dualized(dualized)
        return M

    # ----------------------------
    # Column store passthrough
    # ----------------------------

    @property
    def representation(self) -> ColumnRepresentation:
        return self._representation

    def set_num_columns(self, n: int) -> None:
        self._representation.set_num_columns(n)

    def get_num_columns(self) -> int:
        return self._representation.get_num_columns()

    def __len__(self) -> int:
        return self.get_num_columns()

    def get_maximum_index(self, column: int) -> Tuple[int, bool]:
        return self._representation.get_maximum_index(column)

    def add_columns(self, source: int, target: int) -> None:
        self._representation.add_columns(source, target)

    def set_column(self, column: int, indices: Iterable[int]) -> None:
        self._representation.set_column(column, indices)

    def get_column(self, column: int) -> List[int]:
        return self._representation.get_column(column)

    def clear_column(self, column: int) -> None:
        self._representation.clear_column(column)

    def get_dimension(self, column: Optional[int] = None) -> int:
        """
        Dimension of one column (number of entries minus one, 0 if empty),
        or the maximum over all columns when ``column`` is None.
        """
        return self._representation.get_dimension(column)

    def num_entries(self) -> int:
        return self._representation.num_entries()

    # ----------------------------
    # Dualization flag
    # ----------------------------

    def set_dualized(self, value: bool = True) -> None:
        self._dualized = bool(value)

    def is_dualized(self) -> bool:
        return self._dualized

    # ----------------------------
    # Values / comparison
    # ----------------------------

    def copy(self) -> "BoundaryMatrix":
        out = BoundaryMatrix.__new__(BoundaryMatrix)
        out._representation = self._representation.copy()
        out._dualized = self._dualized
        return out

    def columns(self) -> List[List[int]]:
        return [self.get_column(j) for j in range(self.get_num_columns())]

    def to_dense(self) -> np.ndarray:
        n = self.get_num_columns()
        D = np.zeros((n, n), dtype=np.uint8)
        for j in range(n):
            D[self.get_column(j), j] = 1
        return D

    def check_acyclic(self) -> bool:
        """True iff every row index is strictly below its column index."""
        for j in range(self.get_num_columns()):
            pivot, valid = self.get_maximum_index(j)
            if valid and pivot >= j:
                return False
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundaryMatrix):
            return NotImplemented
        return self._dualized == other._dualized and self.columns() == other.columns()

    def __str__(self) -> str:
        lines = []
        for col in self.columns():
            lines.append(" ".join(str(i) for i in col) if col else "-")
        return "".join(line + "\n" for line in lines)

    def __repr__(self) -> str:
        return (
            f"BoundaryMatrix(n_columns={self.get_num_columns()}, "
            f"representation={self._representation.name!r}, dualized={self._dualized})"
        )
