# boundary_persistence/reduction/pairing.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Tuple, Type, Union

import numpy as np

from ..errors import DegenerateMatrixError
from ..matrix.boundary_matrix import BoundaryMatrix
from .base import ReductionAlgorithm, ReductionStats
from .standard import StandardReduction
from .twist import TwistReduction

__all__ = [
    "Pair",
    "PersistencePairing",
    "ALGORITHMS",
    "as_algorithm",
    "pairing_from_reduced_matrix",
    "compute_persistence_pairs",
]

logger = logging.getLogger(__name__)

Pair = Tuple[int, int]

ALGORITHMS: Dict[str, Type[ReductionAlgorithm]] = {
    "standard": StandardReduction,
    "twist": TwistReduction,
}


# ============================================================
# Pairing value
# ============================================================

@dataclass(frozen=True)
class PersistencePairing:
    """
    Result of a reduction, in original filtration indices.

    pairs    : (creator, destroyer) with creator < destroyer, sorted by creator
    unpaired : essential indices, ascending
    """
    pairs: Tuple[Pair, ...]
    unpaired: Tuple[int, ...]
    n_columns: int

    @classmethod
    def from_iterables(
        cls,
        pairs: Iterable[Pair],
        unpaired: Iterable[int],
        n_columns: int,
    ) -> "PersistencePairing":
        return cls(
            pairs=tuple(sorted((int(c), int(d)) for c, d in pairs)),
            unpaired=tuple(sorted(int(u) for u in unpaired)),
            n_columns=int(n_columns),
        )

    def __len__(self) -> int:
        return len(self.pairs)

    def __iter__(self) -> Iterator[Pair]:
        return iter(self.pairs)

    def __contains__(self, item: object) -> bool:
        return item in self.pairs

    def creators(self) -> Tuple[int, ...]:
        return tuple(c for c, _ in self.pairs)

    def destroyers(self) -> Tuple[int, ...]:
        return tuple(d for _, d in self.pairs)

    def is_total(self) -> bool:
        """Every index in [0, n_columns) occurs exactly once as creator, destroyer or unpaired."""
        seen = [*self.creators(), *self.destroyers(), *self.unpaired]
        return len(seen) == self.n_columns and sorted(seen) == list(range(self.n_columns))

    def to_array(self) -> np.ndarray:
        if not self.pairs:
            return np.empty((0, 2), dtype=np.int64)
        return np.asarray(self.pairs, dtype=np.int64)

    def to_text(self) -> str:
        lines = [f"{c}\t{d}" for c, d in self.pairs]
        lines += [f"{u}\t-" for u in self.unpaired]
        return "".join(line + "\n" for line in lines)


# ============================================================
# Algorithm selection
# ============================================================

def as_algorithm(
    algorithm: Union[str, ReductionAlgorithm, Type[ReductionAlgorithm], None],
) -> ReductionAlgorithm:
    if algorithm is None:
        return TwistReduction()
    if isinstance(algorithm, str):
        try:
            return ALGORITHMS[algorithm]()
        except KeyError:
            raise ValueError(
                f"Unknown reduction algorithm {algorithm!r}; expected one of {sorted(ALGORITHMS)}."
            ) from None
    if isinstance(algorithm, type) and issubclass(algorithm, ReductionAlgorithm):
        return algorithm()
    if isinstance(algorithm, ReductionAlgorithm):
        return algorithm
    raise TypeError(f"Cannot use {type(algorithm).__name__} as a reduction algorithm.")


# ============================================================
# Pairing extraction
# ============================================================

def pairing_from_reduced_matrix(R: BoundaryMatrix) -> PersistencePairing:
    """
    Read the pairing off a reduced matrix: every non-empty column j gives the
    pair (pivot(j), j). Dual pairs (i, j) are reported as (N-1-j, N-1-i).
    """
    n = R.get_num_columns()
    roles = np.zeros(n, dtype=np.int64)
    pairs = []

    for j in range(n):
        i, valid = R.get_maximum_index(j)
        if not valid:
            continue
        pairs.append((i, j))
        roles[i] += 1
        roles[j] += 1

    if np.any(roles > 1):
        bad = np.flatnonzero(roles > 1).tolist()
        raise DegenerateMatrixError(
            f"Indices {bad} are both creator and destroyer; the matrix is not the boundary "
            "matrix of a filtration (its square is nonzero)."
        )

    unpaired = np.flatnonzero(roles == 0).tolist()

    if R.is_dualized():
        pairs = [(n - 1 - j, n - 1 - i) for i, j in pairs]
        unpaired = [n - 1 - u for u in unpaired]

    return PersistencePairing.from_iterables(pairs, unpaired, n)


def compute_persistence_pairs(
    M: BoundaryMatrix,
    algorithm: Union[str, ReductionAlgorithm, Type[ReductionAlgorithm], None] = "twist",
    *,
    copy: bool = False,
    return_stats: bool = False,
) -> Union[PersistencePairing, Tuple[PersistencePairing, ReductionStats]]:
    """
    Reduce M and return its persistence pairing.

    Parameters
    ----------
    M : BoundaryMatrix
        Reduced in place unless ``copy=True``.
    algorithm : {"twist", "standard"} or ReductionAlgorithm
    copy : bool
        Reduce a duplicate and leave M untouched.
    return_stats : bool
        Also return the ReductionStats of the run.
    """
    reducer = as_algorithm(algorithm)
    R: BoundaryMatrix = M.copy() if copy else M

    stats = reducer(R)
    pairing = pairing_from_reduced_matrix(R)

    logger.debug(
        "Pairing (%s%s): n_pairs=%d, n_unpaired=%d",
        reducer.name,
        ", dualized" if R.is_dualized() else "",
        len(pairing.pairs),
        len(pairing.unpaired),
    )

    if return_stats:
        return pairing, stats
    return pairing
