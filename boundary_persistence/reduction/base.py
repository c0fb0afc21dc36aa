# boundary_persistence/reduction/base.py
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..matrix.boundary_matrix import BoundaryMatrix

__all__ = ["ReductionStats", "ReductionAlgorithm", "new_lookup_table"]


@dataclass
class ReductionStats:
    """Counters collected during one reduction call."""
    algorithm: str
    n_columns: int
    column_additions: int = 0
    columns_cleared: int = 0

    def to_text(self) -> str:
        return (
            "\n"
            + "=" * 12
            + f" Reduction ({self.algorithm}) "
            + "=" * 12
            + "\n\n"
            + f"Columns:          {self.n_columns}\n"
            + f"Column additions: {self.column_additions}\n"
            + f"Columns cleared:  {self.columns_cleared}\n"
            + "\n"
            + "=" * 44
            + "\n"
        )


def new_lookup_table(n: int) -> np.ndarray:
    """pivot row -> reduced column owning it, -1 where no column owns the row."""
    return np.full(int(n), -1, dtype=np.int64)


class ReductionAlgorithm:
    """
    Base class for in-place Z2 column reductions.

    Calling an instance on a BoundaryMatrix mutates the matrix until every
    non-empty column has a distinct pivot, and returns ReductionStats.
    """
    name: str = "base"

    def __call__(self, M: BoundaryMatrix) -> ReductionStats:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
