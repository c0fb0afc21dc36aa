# boundary_persistence/reduction/twist.py
from __future__ import annotations

import logging
from typing import List

import numpy as np

from ..errors import DegenerateMatrixError
from ..matrix.boundary_matrix import BoundaryMatrix
from .base import ReductionAlgorithm, ReductionStats, new_lookup_table

__all__ = ["TwistReduction", "column_grades"]

logger = logging.getLogger(__name__)


def column_grades(M: BoundaryMatrix) -> np.ndarray:
    """
    Cell dimension of every column.

    A cell with an empty boundary has dimension 0; otherwise its dimension is
    one more than the largest dimension among its facets. This only depends on
    the matrix, so cubical complexes are graded as well as simplicial ones.

    For a dualized matrix, column c lists the cofacets of cell N-1-c, so c is
    a facet of every row in it. Walking the columns from right to left settles
    each grade before it is pushed onto the rows.
    """
    n = M.get_num_columns()
    grades = np.zeros(n, dtype=np.int64)
    dualized = M.is_dualized()
    for j in (range(n - 1, -1, -1) if dualized else range(n)):
        rows = M.get_column(j)
        if not rows:
            continue
        if rows[-1] >= j:
            raise DegenerateMatrixError(
                f"Column {j} has row {rows[-1]} at or below the diagonal; "
                "twist reduction needs a strictly upper triangular matrix."
            )
        if dualized:
            grades[rows] = np.maximum(grades[rows], grades[j] + 1)
        else:
            grades[j] = int(grades[rows].max()) + 1
    return grades


class TwistReduction(ReductionAlgorithm):
    """
    Reduction with clearing.

    Columns are reduced one dimension at a time, ordered so that a column is
    always visited after every column whose pivot may land on it: highest
    dimension first for boundary matrices, lowest first for dualized
    (coboundary) matrices. Once column j settles on pivot i, column i is
    known to reduce to zero and is cleared without doing the work.

    Columns are only ever added to columns on their right, so the pairing is
    identical to StandardReduction for the boundary matrix of any filtered
    cell complex. A matrix whose grading would force a column into one on its
    left raises DegenerateMatrixError. Clearing assumes the square of the
    matrix is zero; that is not checked here.
    """
    name = "twist"

    def __call__(self, M: BoundaryMatrix) -> ReductionStats:
        n = M.get_num_columns()
        lookup = new_lookup_table(n)
        stats = ReductionStats(algorithm=self.name, n_columns=n)

        grades = column_grades(M)
        order: List[int] = sorted(set(grades.tolist()), reverse=not M.is_dualized())

        for grade in order:
            for j in np.flatnonzero(grades == grade).tolist():
                pivot, valid = M.get_maximum_index(j)
                while valid and lookup[pivot] >= 0:
                    if lookup[pivot] > j:
                        raise DegenerateMatrixError(
                            f"Column {j} (dimension {grade}) shares pivot {pivot} with column "
                            f"{int(lookup[pivot])} on its right; the matrix is not graded by cell "
                            "dimension. Use the standard reduction instead."
                        )
                    M.add_columns(int(lookup[pivot]), j)
                    stats.column_additions += 1
                    pivot, valid = M.get_maximum_index(j)

                if valid:
                    lookup[pivot] = j
                    if M.representation.column_size(pivot) > 0:
                        M.clear_column(pivot)
                        stats.columns_cleared += 1

        logger.debug(
            "Twist reduction: n_columns=%d, column_additions=%d, columns_cleared=%d",
            n,
            stats.column_additions,
            stats.columns_cleared,
        )
        return stats
