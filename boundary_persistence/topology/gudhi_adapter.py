# boundary_persistence/topology/gudhi_adapter.py
from __future__ import annotations

from .filtration import Filtration, Simplex

__all__ = ["from_simplex_tree", "to_simplex_tree"]


def from_simplex_tree(st) -> Filtration:
    """
    Filtration from a gudhi.SimplexTree, in the tree's own filtration order
    (by value, faces before cofaces on ties).
    """
    return Filtration(Simplex(tuple(int(v) for v in sig), float(f)) for sig, f in st.get_filtration())


def to_simplex_tree(filtration: Filtration) -> "gudhi.SimplexTree":
    """
    Build a Gudhi SimplexTree holding every simplex of the filtration at its value.
    """
    try:
        import gudhi as gd  # type: ignore
    except Exception as e:
        raise ImportError("to_simplex_tree requires `gudhi`. Install with `pip install gudhi`.") from e

    st = gd.SimplexTree()
    for simplex in filtration:
        st.insert(list(simplex.vertices), filtration=float(simplex.value))
    return st
