"""
The filtration boundary: simplices in filtration order, their values and
dimensions, and the boundary matrix they induce.
"""

from __future__ import annotations

from .combinatorics import canon_simplex, facets, simplex_dim
from .filtration import Filtration, Simplex, make_boundary_matrix
from .gudhi_adapter import from_simplex_tree, to_simplex_tree

__all__ = [
    "canon_simplex",
    "facets",
    "simplex_dim",
    "Filtration",
    "Simplex",
    "make_boundary_matrix",
    "from_simplex_tree",
    "to_simplex_tree",
]
