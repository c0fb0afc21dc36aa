# combinatorics.py
from typing import Iterable, List, Tuple

Simp = Tuple[int, ...]
Edge = Tuple[int, int]


def canon_simplex(sig: Iterable[int]) -> Simp:
    return tuple(sorted(int(x) for x in sig))


def simplex_dim(sig: Simp) -> int:
    return len(sig) - 1


def canon_edge(a: int, b: int) -> Edge:
    return (a, b) if a < b else (b, a)


def facets(sig: Simp) -> List[Simp]:
    """Codimension-1 faces of a canonical simplex, in lexicographic order."""
    if len(sig) <= 1:
        return []
    return sorted(sig[:i] + sig[i + 1:] for i in range(len(sig)))
