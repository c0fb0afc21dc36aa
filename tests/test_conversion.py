"""Tests for pairing -> diagram conversion."""

import numpy as np
import pytest

from boundary_persistence.diagrams import diagrams_to_arrays, make_persistence_diagrams
from boundary_persistence.errors import DimensionMismatchError, MissingIndexError
from boundary_persistence.matrix import BoundaryMatrix, dualize
from boundary_persistence.reduction import PersistencePairing, compute_persistence_pairs
from boundary_persistence.topology import Filtration, make_boundary_matrix

from conftest import TRIANGLE


class TestFilledTriangleDiagrams:
    @pytest.mark.parametrize("algorithm", ["standard", "twist"])
    def test_diagrams(self, triangle, triangle_matrix, algorithm):
        pairing = compute_persistence_pairs(triangle_matrix, algorithm)
        D0, D1, D2 = make_persistence_diagrams(pairing, triangle)

        assert [D.dimension for D in (D0, D1, D2)] == [0, 1, 2]
        assert sorted((float(p.x), float(p.y)) for p in D0) == [(0.0, 1.0), (0.0, 1.0), (0.0, np.inf)]
        assert [(float(p.x), float(p.y)) for p in D1] == [(2.0, 3.0)]
        assert D2.empty()
        assert [D.betti() for D in (D0, D1, D2)] == [1, 0, 0]

    def test_unvalued_triangle_has_one_finite_class(self):
        K = Filtration.from_simplices(TRIANGLE)
        pairing = compute_persistence_pairs(make_boundary_matrix(K))
        D0 = make_persistence_diagrams(pairing, K)[0]
        D0.remove_duplicates()
        finite = [p for p in D0 if not D0.is_unpaired(p)]
        assert len(finite) == 1
        assert D0.betti() == 1

    def test_dual_reduction_gives_same_diagrams(self, triangle, triangle_matrix):
        primal = make_persistence_diagrams(
            compute_persistence_pairs(triangle_matrix, copy=True), triangle
        )
        dual = make_persistence_diagrams(compute_persistence_pairs(dualize(triangle_matrix)), triangle)
        assert dual == primal

    def test_integer_coordinates(self, triangle_matrix):
        pairing = compute_persistence_pairs(triangle_matrix)
        index_map = {i: (d, v) for i, (d, v) in enumerate([(0, 0), (0, 0), (0, 0), (1, 1), (1, 1), (1, 2), (2, 3)])}
        D0 = make_persistence_diagrams(pairing, index_map, dtype=np.int64)[0]
        assert D0.betti() == 1
        assert max(p.y for p in D0) == np.iinfo(np.int64).max


class TestIndexMaps:
    def test_sequence_map(self):
        pairing = PersistencePairing.from_iterables([(1, 2)], [0], 3)
        D0, D1 = make_persistence_diagrams(pairing, [(0, 0.0), (0, 0.5), (1, 0.75)])
        assert [(p.x, p.y) for p in D0] == [(0.5, 0.75), (0.0, np.inf)]
        assert D1.empty()

    def test_missing_index(self):
        pairing = PersistencePairing.from_iterables([(1, 3)], [0, 2], 4)
        with pytest.raises(MissingIndexError):
            make_persistence_diagrams(pairing, [(0, 0.0), (0, 0.0), (0, 0.0)])

    def test_missing_index_in_mapping_is_key_error(self):
        pairing = PersistencePairing.from_iterables([], [0, 5], 6)
        with pytest.raises(KeyError):
            make_persistence_diagrams(pairing, {0: (0, 0.0)})

    def test_missing_index_in_filtration(self, triangle):
        pairing = PersistencePairing.from_iterables([(1, 7)], [0], 8)
        with pytest.raises(MissingIndexError):
            make_persistence_diagrams(pairing, triangle)


    def test_pairing_from_a_smaller_matrix(self, triangle):
        pairing = compute_persistence_pairs(BoundaryMatrix.from_columns([[], [], [0, 1]]))
        with pytest.raises(MissingIndexError):
            make_persistence_diagrams(pairing, triangle)

    def test_mapping_with_extra_indices(self):
        pairing = PersistencePairing.from_iterables([(1, 2)], [0], 3)
        index_map = {0: (0, 0.0), 1: (0, 0.5), 2: (1, 0.75), 3: (1, 1.0)}
        with pytest.raises(MissingIndexError):
            make_persistence_diagrams(pairing, index_map)

    def test_pair_must_raise_dimension_by_one(self):
        pairing = PersistencePairing.from_iterables([(1, 2)], [0], 3)
        with pytest.raises(DimensionMismatchError):
            make_persistence_diagrams(pairing, [(0, 0.0), (0, 0.5), (2, 0.75)])

class TestArrays:
    def test_diagrams_to_arrays(self, triangle, triangle_matrix):
        diagrams = make_persistence_diagrams(compute_persistence_pairs(triangle_matrix), triangle)
        dgms = diagrams_to_arrays(diagrams)
        assert [A.shape for A in dgms] == [(3, 2), (1, 2), (0, 2)]

    def test_as_float_replaces_sentinels(self, triangle_matrix, triangle):
        pairing = compute_persistence_pairs(triangle_matrix)
        diagrams = make_persistence_diagrams(pairing, triangle, dtype=np.int32)
        dgms = diagrams_to_arrays(diagrams, as_float=True)
        assert dgms[0].dtype == np.float64
        assert np.isinf(dgms[0][:, 1]).sum() == 1
