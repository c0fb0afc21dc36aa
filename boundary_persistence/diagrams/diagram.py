# boundary_persistence/diagrams/diagram.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Optional

import numpy as np

__all__ = ["Point", "PersistenceDiagram", "infinity_for"]


def infinity_for(dtype: Any) -> Any:
    """
    Death value used for essential classes: a true infinity for floating
    dtypes, the largest representable value for integer dtypes.
    """
    dt = np.dtype(dtype)
    if np.issubdtype(dt, np.floating):
        return dt.type(np.inf)
    if np.issubdtype(dt, np.integer):
        return dt.type(np.iinfo(dt).max)
    raise TypeError(f"Diagram coordinates must be a floating or integer dtype; got {dt}.")


@dataclass(frozen=True, order=True)
class Point:
    """A (birth, death) point; ordered lexicographically."""
    x: Any
    y: Any

    @property
    def persistence(self) -> Any:
        return self.y - self.x

    def is_unpaired(self, infinity: Any = np.inf) -> bool:
        return bool(self.y == infinity)


class PersistenceDiagram:
    """
    Multiset of persistence points for one homological dimension.

    Essential (unpaired) classes are stored with death equal to
    ``infinity_for(dtype)``. Filtering operations work in place and never
    happen implicitly; call remove_diagonal / remove_unpaired /
    remove_duplicates as needed.
    """

    def __init__(
        self,
        points: Iterable[Any] = (),
        *,
        dimension: int = 0,
        dtype: Any = np.float64,
    ):
        self._dtype = np.dtype(dtype)
        self._infinity = infinity_for(self._dtype)
        self.dimension = int(dimension)
        self._points: List[Point] = []
        for p in points:
            if isinstance(p, Point):
                self.add(p.x, p.y)
            else:
                self.add(*p)

    # ----------------------------
    # Attributes
    # ----------------------------

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def infinity(self) -> Any:
        return self._infinity

    @property
    def points(self) -> List[Point]:
        return list(self._points)

    # ----------------------------
    # Modification
    # ----------------------------

    def _coerce(self, v: Any) -> Any:
        fractional = isinstance(v, (float, np.floating)) and not float(v).is_integer()
        if fractional and self._dtype.kind in "iu":
            raise ValueError(
                f"Value {v!r} is not integral and cannot be stored in a {self._dtype} diagram; "
                "use a float dtype."
            )
        return self._dtype.type(v)

    def add(self, x: Any, y: Optional[Any] = None) -> None:
        """
        Add (x, y), or the essential point (x, inf) when y is omitted.

        Integer diagrams refuse non-integral floats rather than truncating them.
        """
        bx = self._coerce(x)
        dy = self._infinity if y is None else self._coerce(y)
        if bx > dy:
            raise ValueError(f"Birth {bx} exceeds death {dy}; diagram points need birth <= death.")
        self._points.append(Point(bx, dy))

    def merge(self, other: "PersistenceDiagram") -> None:
        """Append all points of other, keeping duplicates."""
        for p in other:
            if other.is_unpaired(p):
                self.add(p.x)
            else:
                self.add(p.x, p.y)

    def remove_diagonal(self) -> None:
        """Remove points with zero persistence (birth == death)."""
        self._points = [p for p in self._points if p.x != p.y]

    def remove_unpaired(self) -> None:
        """Remove essential points."""
        self._points = [p for p in self._points if not self.is_unpaired(p)]

    def remove_duplicates(self) -> None:
        """Keep one copy of each point. Points end up sorted by (birth, death)."""
        self._points = sorted(set(self._points))

    def copy(self) -> "PersistenceDiagram":
        out = PersistenceDiagram(dimension=self.dimension, dtype=self._dtype)
        out._points = list(self._points)
        return out

    # ----------------------------
    # Queries
    # ----------------------------

    def is_unpaired(self, p: Point) -> bool:
        return p.is_unpaired(self._infinity)

    def betti(self) -> int:
        """Number of essential points."""
        return sum(1 for p in self._points if self.is_unpaired(p))

    def size(self) -> int:
        return len(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def empty(self) -> bool:
        return not self._points

    def to_array(self) -> np.ndarray:
        """(n, 2) array of (birth, death) in the diagram dtype."""
        if not self._points:
            return np.empty((0, 2), dtype=self._dtype)
        return np.array([(p.x, p.y) for p in self._points], dtype=self._dtype)

    def persistence(self) -> np.ndarray:
        """Lifetimes (death - birth) as floats; essential points give inf."""
        A = self.to_array().astype(np.float64)
        lifetimes = A[:, 1] - A[:, 0]
        essential = np.array([self.is_unpaired(p) for p in self._points], dtype=bool)
        if essential.size:
            lifetimes[essential] = np.inf
        return lifetimes

    def total_persistence(self) -> float:
        """Sum of lifetimes over paired points."""
        return float(sum(float(p.persistence) for p in self._points if not self.is_unpaired(p)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PersistenceDiagram):
            return NotImplemented
        return self.dimension == other.dimension and self._points == other._points

    def to_text(self) -> str:
        return "".join(f"{p.x}\t{p.y}\n" for p in self._points)

    def __repr__(self) -> str:
        return (
            f"PersistenceDiagram(dimension={self.dimension}, n_points={len(self._points)}, "
            f"betti={self.betti()}, dtype={self._dtype})"
        )
