# boundary_persistence/io/function.py
"""
Sublevel-set filtration of a sampled 1D function.

A file of whitespace-separated values f_0 .. f_{n-1} is read as a path
graph: vertex k enters at f_k and edge (k, k+1) at max(f_k, f_{k+1}).
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import List, Sequence, Tuple, Union

from ..errors import MalformedMatrixError
from ..matrix.boundary_matrix import BoundaryMatrix
from ..topology.combinatorics import canon_edge
from ..topology.filtration import Filtration, Simplex, make_boundary_matrix

__all__ = ["function_filtration", "loads_function", "load_function"]

logger = logging.getLogger(__name__)


def function_filtration(values: Sequence[float]) -> Filtration:
    """
    Filtration of the path graph carrying ``values`` on its vertices.

    Simplices are ordered by value; on ties vertices come before edges and
    otherwise the construction order (vertices, then edges left to right) is kept.
    """
    f = [float(v) for v in values]
    if not f:
        raise MalformedMatrixError("No function values given.")
    if not all(math.isfinite(v) for v in f):
        raise MalformedMatrixError("Function values must be finite.")

    simplices: List[Simplex] = [Simplex((k,), f[k]) for k in range(len(f))]
    simplices += [
        Simplex(canon_edge(k, k + 1), max(f[k], f[k + 1])) for k in range(len(f) - 1)
    ]
    return Filtration.by_value(simplices)


def loads_function(text: str) -> Tuple[BoundaryMatrix, Filtration]:
    values: List[float] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        for tok in line.split():
            try:
                values.append(float(tok))
            except ValueError:
                raise MalformedMatrixError(f"Expected a function value; got {tok!r}.", line=lineno) from None

    filtration = function_filtration(values)
    return make_boundary_matrix(filtration), filtration


def load_function(path: Union[str, Path]) -> Tuple[BoundaryMatrix, Filtration]:
    """
    Read function values from a file and return the boundary matrix of the
    sublevel-set filtration together with the filtration itself.
    """
    path = Path(path)
    M, filtration = loads_function(path.read_text())
    logger.info(
        "Loaded function from %s: n_values=%d, n_columns=%d",
        path,
        sum(1 for s in filtration if s.dimension == 0),
        M.get_num_columns(),
    )
    return M, filtration
