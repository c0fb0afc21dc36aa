from __future__ import annotations

"""
Public API re-exports for boundary_persistence.

Import style:
    from boundary_persistence.api import BoundaryMatrix, compute_persistence_pairs, make_persistence_diagrams, ...

Notes
-----
- This file is curated (not a dump of every internal helper).
- Optional integrations (gudhi, persim) import their libraries lazily, so
  re-exporting them here does not require those packages.
"""

# ----------------------------
# Boundary matrices
# ----------------------------
from .matrix import (
    BoundaryMatrix,
    ColumnRepresentation,
    DenseColumns,
    SparseColumns,
    dualize,
)

# ----------------------------
# Reduction / pairing
# ----------------------------
from .reduction import (
    PersistencePairing,
    ReductionAlgorithm,
    ReductionStats,
    StandardReduction,
    TwistReduction,
    compute_persistence_pairs,
)

# ----------------------------
# Diagrams
# ----------------------------
from .diagrams import (
    DiagramSummary,
    PersistenceDiagram,
    Point,
    diagrams_to_arrays,
    infinity_for,
    make_persistence_diagrams,
    plot_diagrams,
    summarize_diagrams,
)

# ----------------------------
# Filtrations (complex boundary)
# ----------------------------
from .topology import (
    Filtration,
    Simplex,
    from_simplex_tree,
    make_boundary_matrix,
    to_simplex_tree,
)

# ----------------------------
# I/O
# ----------------------------
from .io import (
    dumps_matrix,
    load_function,
    load_matrix,
    loads_matrix,
    save_matrix,
)

# ----------------------------
# Configuration / pipeline
# ----------------------------
from .config import DiagramConfig, ReductionConfig
from .pipeline import compute_filtration_pairing, compute_persistence_diagrams

# ----------------------------
# Errors
# ----------------------------
from .errors import (
    ColumnIndexError,
    DegenerateMatrixError,
    DimensionMismatchError,
    InvalidColumnError,
    MalformedMatrixError,
    MissingIndexError,
    PersistenceError,
)

__all__ = [
    # matrices
    "BoundaryMatrix",
    "ColumnRepresentation",
    "DenseColumns",
    "SparseColumns",
    "dualize",
    # reduction
    "PersistencePairing",
    "ReductionAlgorithm",
    "ReductionStats",
    "StandardReduction",
    "TwistReduction",
    "compute_persistence_pairs",
    # diagrams
    "DiagramSummary",
    "PersistenceDiagram",
    "Point",
    "diagrams_to_arrays",
    "infinity_for",
    "make_persistence_diagrams",
    "plot_diagrams",
    "summarize_diagrams",
    # filtrations
    "Filtration",
    "Simplex",
    "from_simplex_tree",
    "make_boundary_matrix",
    "to_simplex_tree",
    # io
    "dumps_matrix",
    "load_function",
    "load_matrix",
    "loads_matrix",
    "save_matrix",
    # config / pipeline
    "DiagramConfig",
    "ReductionConfig",
    "compute_filtration_pairing",
    "compute_persistence_diagrams",
    # errors
    "ColumnIndexError",
    "DegenerateMatrixError",
    "DimensionMismatchError",
    "InvalidColumnError",
    "MalformedMatrixError",
    "MissingIndexError",
    "PersistenceError",
]
