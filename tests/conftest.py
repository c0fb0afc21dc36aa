"""Shared fixtures: the filled triangle and random clique-complex filtrations."""

from itertools import combinations

import numpy as np
import pytest

from boundary_persistence.topology import Filtration, Simplex, make_boundary_matrix

TRIANGLE = [(0,), (1,), (2,), (0, 1), (0, 2), (1, 2), (0, 1, 2)]
TRIANGLE_VALUES = [0.0, 0.0, 0.0, 1.0, 1.0, 2.0, 3.0]
TRIANGLE_COLUMNS = [[], [], [], [0, 1], [0, 2], [1, 2], [3, 4, 5]]


def random_clique_filtration(seed: int, n_vertices: int = 7, p: float = 0.5, max_dim: int = 3) -> Filtration:
    """
    Clique complex of a random graph. Every simplex enters strictly after
    its facets, so ordering by value gives a valid filtration.
    """
    rng = np.random.default_rng(seed)
    values = {(v,): float(rng.uniform(0.0, 1.0)) for v in range(n_vertices)}

    edges = [e for e in combinations(range(n_vertices), 2) if rng.uniform() < p]
    for e in edges:
        values[e] = max(values[(e[0],)], values[(e[1],)]) + float(rng.uniform(0.0, 0.5))

    for k in range(3, max_dim + 2):
        for sig in combinations(range(n_vertices), k):
            faces = [sig[:i] + sig[i + 1:] for i in range(k)]
            if all(f in values for f in faces):
                values[sig] = max(values[f] for f in faces) + float(rng.uniform(0.0, 0.5))

    return Filtration.by_value(Simplex(sig, v) for sig, v in values.items())


@pytest.fixture
def triangle() -> Filtration:
    return Filtration.from_simplices(TRIANGLE, values=TRIANGLE_VALUES)


@pytest.fixture
def triangle_matrix(triangle):
    return make_boundary_matrix(triangle)


@pytest.fixture(params=range(8))
def random_filtration(request) -> Filtration:
    return random_clique_filtration(seed=request.param)
