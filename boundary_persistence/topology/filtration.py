# boundary_persistence/topology/filtration.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Union

import numpy as np

from ..matrix.boundary_matrix import BoundaryMatrix
from .combinatorics import Simp, canon_simplex, facets, simplex_dim

__all__ = ["Simplex", "Filtration", "make_boundary_matrix"]


@dataclass(frozen=True)
class Simplex:
    """A simplex given by its vertex ids, with the filtration value it enters at."""
    vertices: Simp
    value: float = 0.0

    def __post_init__(self) -> None:
        sig = canon_simplex(self.vertices)
        if not sig:
            raise ValueError("A simplex needs at least one vertex.")
        if len(set(sig)) != len(sig):
            raise ValueError(f"Simplex {sig} has repeated vertices.")
        object.__setattr__(self, "vertices", sig)

    @property
    def dimension(self) -> int:
        return simplex_dim(self.vertices)

    def facets(self) -> List[Simp]:
        return facets(self.vertices)

    def __len__(self) -> int:
        return len(self.vertices)


SimplexLike = Union[Simplex, Sequence[int]]


class Filtration:
    """
    Simplices in filtration order; the position of a simplex is its index
    in the boundary matrix.

    Every facet of a simplex must occur earlier in the sequence. This is the
    only information the reduction layer needs from a simplicial complex:
    per index, the ascending facet indices, the dimension and the value.
    """

    def __init__(self, simplices: Iterable[SimplexLike]):
        self._simplices: List[Simplex] = []
        self._index: Dict[Simp, int] = {}
        self._boundaries: List[List[int]] = []

        for s in simplices:
            simplex = s if isinstance(s, Simplex) else Simplex(tuple(s))
            sig = simplex.vertices
            if sig in self._index:
                raise ValueError(f"Simplex {sig} occurs twice in the filtration.")

            boundary = []
            for face in simplex.facets():
                k = self._index.get(face)
                if k is None:
                    raise ValueError(
                        f"Facet {face} of simplex {sig} does not occur before it in the filtration."
                    )
                boundary.append(k)

            self._index[sig] = len(self._simplices)
            self._simplices.append(simplex)
            self._boundaries.append(sorted(boundary))

    @classmethod
    def from_simplices(
        cls,
        simplices: Iterable[Sequence[int]],
        values: Optional[Iterable[float]] = None,
    ) -> "Filtration":
        sigs = [canon_simplex(s) for s in simplices]
        if values is None:
            return cls(Simplex(sig) for sig in sigs)
        vals = [float(v) for v in values]
        if len(vals) != len(sigs):
            raise ValueError(f"Got {len(vals)} values for {len(sigs)} simplices.")
        return cls(Simplex(sig, v) for sig, v in zip(sigs, vals))

    @classmethod
    def by_value(cls, simplices: Iterable[Simplex]) -> "Filtration":
        """Order simplices by (value, dimension), keeping input order on ties."""
        ordered = sorted(simplices, key=lambda s: (s.value, s.dimension))
        return cls(ordered)

    # ----------------------------
    # Per-index queries
    # ----------------------------

    def __len__(self) -> int:
        return len(self._simplices)

    def __getitem__(self, i: int) -> Simplex:
        return self._simplices[i]

    def __iter__(self) -> Iterator[Simplex]:
        return iter(self._simplices)

    def index(self, sig: Iterable[int]) -> int:
        return self._index[canon_simplex(sig)]

    def boundary(self, i: int) -> List[int]:
        return list(self._boundaries[i])

    def dimension(self, i: int) -> int:
        return self._simplices[i].dimension

    def value(self, i: int) -> float:
        return self._simplices[i].value

    def max_dimension(self) -> int:
        return max((s.dimension for s in self._simplices), default=0)

    def values(self) -> np.ndarray:
        return np.array([s.value for s in self._simplices], dtype=float)

    def dimensions(self) -> np.ndarray:
        return np.array([s.dimension for s in self._simplices], dtype=np.int64)

    def is_monotone(self) -> bool:
        """True iff values never decrease along the filtration order."""
        v = self.values()
        return bool(np.all(np.diff(v) >= 0)) if v.size > 1 else True

    def __repr__(self) -> str:
        return f"Filtration(n_simplices={len(self)}, max_dimension={self.max_dimension()})"


def make_boundary_matrix(filtration: Filtration, *, representation: Any = "sparse") -> BoundaryMatrix:
    """Boundary matrix whose column i lists the facet indices of simplex i."""
    M = BoundaryMatrix(len(filtration), representation=representation)
    for i in range(len(filtration)):
        boundary = filtration.boundary(i)
        if boundary:
            M.set_column(i, boundary)
    return M
