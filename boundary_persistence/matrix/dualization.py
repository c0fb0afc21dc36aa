# boundary_persistence/matrix/dualization.py
"""
Anti-transpose of a boundary matrix.

For a filtration with N simplices, the entry "r is a facet of i" becomes
"N-1-i is a facet of N-1-r" in the dual matrix. The result is the
coboundary matrix of the reversed filtration, so reducing it yields the
persistent cohomology pairing, which agrees with the homology pairing once
indices are mapped back through idx -> N-1-idx.
"""

from __future__ import annotations

import logging
from typing import List

from ..errors import DegenerateMatrixError
from .boundary_matrix import BoundaryMatrix
from .representations import REPRESENTATIONS

__all__ = ["dualize"]

logger = logging.getLogger(__name__)


def dualize(M: BoundaryMatrix) -> BoundaryMatrix:
    """
    Return the anti-transpose of M as a new, independently owned matrix.

    The dualized flag of the result is the negation of M's flag, so
    ``dualize(dualize(M)) == M`` including the flag.
    """
    n = M.get_num_columns()
    if n == 0:
        raise DegenerateMatrixError("Cannot dualize a matrix with zero columns.")

    dual_columns: List[List[int]] = [[] for _ in range(n)]

    # Visiting source columns from right to left emits rows N-1-i in
    # ascending order, so no per-column sort is needed.
    for i in range(n - 1, -1, -1):
        row = n - 1 - i
        for r in M.get_column(i):
            dual_columns[n - 1 - r].append(row)

    rep_cls = REPRESENTATIONS.get(M.representation.name)
    D = BoundaryMatrix(n, representation=rep_cls() if rep_cls is not None else None)
    for j, col in enumerate(dual_columns):
        if col:
            D.set_column(j, col)
    D.set_dualized(not M.is_dualized())

    logger.debug("Dualized matrix: n_columns=%d, n_entries=%d", n, D.num_entries())
    return D
