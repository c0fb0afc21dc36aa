"""
Z2 boundary-matrix reductions and the persistence pairings they produce.
"""

from __future__ import annotations

from .base import ReductionAlgorithm, ReductionStats
from .pairing import (
    ALGORITHMS,
    PersistencePairing,
    as_algorithm,
    compute_persistence_pairs,
    pairing_from_reduced_matrix,
)
from .standard import StandardReduction
from .twist import TwistReduction, column_grades

__all__ = [
    "ReductionAlgorithm",
    "ReductionStats",
    "StandardReduction",
    "TwistReduction",
    "column_grades",
    "ALGORITHMS",
    "PersistencePairing",
    "as_algorithm",
    "compute_persistence_pairs",
    "pairing_from_reduced_matrix",
]
