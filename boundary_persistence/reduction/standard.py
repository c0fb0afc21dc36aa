# boundary_persistence/reduction/standard.py
from __future__ import annotations

import logging

from ..matrix.boundary_matrix import BoundaryMatrix
from .base import ReductionAlgorithm, ReductionStats, new_lookup_table

__all__ = ["StandardReduction"]

logger = logging.getLogger(__name__)


class StandardReduction(ReductionAlgorithm):
    """
    Left-to-right reduction.

    Column j is repeatedly added with the earlier column that owns its
    current pivot, until the column is empty or its pivot is unowned.
    Every addition lowers the pivot of column j, so the loop terminates.
    """
    name = "standard"

    def __call__(self, M: BoundaryMatrix) -> ReductionStats:
        n = M.get_num_columns()
        lookup = new_lookup_table(n)
        stats = ReductionStats(algorithm=self.name, n_columns=n)

        for j in range(n):
            pivot, valid = M.get_maximum_index(j)
            while valid and lookup[pivot] >= 0:
                M.add_columns(int(lookup[pivot]), j)
                stats.column_additions += 1
                pivot, valid = M.get_maximum_index(j)

            if valid:
                lookup[pivot] = j

        logger.debug(
            "Standard reduction: n_columns=%d, column_additions=%d",
            n,
            stats.column_additions,
        )
        return stats
