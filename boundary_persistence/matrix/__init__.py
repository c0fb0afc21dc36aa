"""
Boundary matrices over Z2: column storage, the matrix façade, and dualization.
"""

from __future__ import annotations

from .boundary_matrix import BoundaryMatrix
from .dualization import dualize
from .representations import (
    ColumnRepresentation,
    DenseColumns,
    SparseColumns,
    as_representation,
)

__all__ = [
    "BoundaryMatrix",
    "dualize",
    "ColumnRepresentation",
    "DenseColumns",
    "SparseColumns",
    "as_representation",
]
