# boundary_persistence/diagrams/conversion.py
"""
Persistence pairing -> persistence diagrams.

The pairing speaks in matrix indices; the filtration supplies, for each
index, the dimension and filtration value of the simplex behind it.
Pairings computed from a dualized matrix are already mapped back to the
original indices (see reduction.pairing), so both kinds convert the same way.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Mapping, Protocol, Sequence, Tuple, Union

import numpy as np

from ..errors import DimensionMismatchError, MissingIndexError
from ..reduction.pairing import PersistencePairing
from .diagram import PersistenceDiagram

__all__ = [
    "FiltrationLike",
    "make_persistence_diagrams",
    "diagrams_to_arrays",
    "plot_diagrams",
]

logger = logging.getLogger(__name__)


class FiltrationLike(Protocol):
    """index -> (dimension, value), as provided by topology.Filtration."""

    def __len__(self) -> int:
        ...

    def dimension(self, i: int) -> int:
        ...

    def value(self, i: int) -> Any:
        ...


IndexMap = Union[FiltrationLike, Mapping[int, Tuple[int, Any]], Sequence[Tuple[int, Any]]]


def _as_lookup(filtration: IndexMap) -> Tuple[Callable[[int], Tuple[int, Any]], List[int]]:
    """Return (lookup, dimensions seen) for any supported index map."""
    if hasattr(filtration, "dimension") and hasattr(filtration, "value"):
        n = len(filtration)

        def lookup(i: int) -> Tuple[int, Any]:
            if not (0 <= i < n):
                raise KeyError(i)
            return int(filtration.dimension(i)), filtration.value(i)

        dims = [int(filtration.dimension(i)) for i in range(n)]
        return lookup, dims

    if isinstance(filtration, Mapping):
        def lookup(i: int) -> Tuple[int, Any]:
            d, v = filtration[i]
            return int(d), v

        return lookup, [int(d) for d, _ in filtration.values()]

    entries = list(filtration)

    def lookup(i: int) -> Tuple[int, Any]:
        if not (0 <= i < len(entries)):
            raise KeyError(i)
        d, v = entries[i]
        return int(d), v

    return lookup, [int(d) for d, _ in entries]


def make_persistence_diagrams(
    pairing: PersistencePairing,
    filtration: IndexMap,
    *,
    dtype: Any = np.float64,
) -> List[PersistenceDiagram]:
    """
    One diagram per dimension 0..max_dimension of the filtration.

    A pair (c, k) adds (value(c), value(k)) to the diagram of dimension(c);
    an unpaired index u adds the essential point (value(u), inf).

    Raises
    ------
    MissingIndexError
        If the filtration does not describe exactly the indices
        0..n_columns-1 of the pairing.
    DimensionMismatchError
        If a pair (c, k) does not have dimension(k) == dimension(c) + 1.
    """
    lookup, dims = _as_lookup(filtration)

    n = pairing.n_columns
    if isinstance(filtration, Mapping):
        missing = [i for i in range(n) if i not in filtration]
        if missing:
            raise MissingIndexError(
                f"Index map lacks {len(missing)} of the pairing's {n} indices "
                f"(first missing: {missing[0]})."
            )
    if len(dims) != n:
        raise MissingIndexError(
            f"Pairing covers {n} indices but the filtration describes {len(dims)}."
        )

    def entry(i: int) -> Tuple[int, Any]:
        try:
            return lookup(i)
        except (KeyError, IndexError):
            raise MissingIndexError(
                f"Index {i} of the pairing is missing from the filtration "
                f"({len(dims)} entries)."
            ) from None

    max_dim = max(dims, default=0)
    diagrams = [PersistenceDiagram(dimension=d, dtype=dtype) for d in range(max_dim + 1)]

    for c, k in pairing.pairs:
        d, birth = entry(c)
        dk, death = entry(k)
        if dk != d + 1:
            raise DimensionMismatchError(
                f"Pair ({c}, {k}) joins dimensions {d} and {dk}; a destroyer must be "
                "one dimension above its creator."
            )
        diagrams[d].add(birth, death)

    for u in pairing.unpaired:
        d, birth = entry(u)
        diagrams[d].add(birth)

    logger.debug(
        "Converted pairing to %d diagrams: betti=%s",
        len(diagrams),
        [D.betti() for D in diagrams],
    )
    return diagrams


def diagrams_to_arrays(
    diagrams: Sequence[PersistenceDiagram],
    *,
    as_float: bool = False,
) -> List[np.ndarray]:
    """
    List of (n, 2) arrays indexed by dimension, the ``dgms`` layout of ripser/persim.

    With ``as_float=True`` every array is float and essential points die at inf,
    whatever sentinel the diagram dtype uses.
    """
    out: List[np.ndarray] = []
    for D in sorted(diagrams, key=lambda D: D.dimension):
        while len(out) < D.dimension:
            out.append(np.empty((0, 2), dtype=float if as_float else D.dtype))
        A = D.to_array()
        if as_float:
            A = A.astype(float)
            A[np.isinf(D.persistence()), 1] = np.inf
        out.append(A)
    return out


def plot_diagrams(diagrams: Sequence[PersistenceDiagram], **kwargs):
    """
    Plot diagrams with persim.

    Imports persim lazily so importing this module doesn't require persim.
    """
    from persim import plot_diagrams as _plot  # type: ignore  # lazy import

    dgms = diagrams_to_arrays(diagrams, as_float=True)
    kwargs.setdefault("labels", [f"$H_{d}$" for d in range(len(dgms))])
    return _plot(dgms, **kwargs)
