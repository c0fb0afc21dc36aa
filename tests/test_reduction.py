"""
Tests for the standard and twist reductions and the pairings they produce.

Run:
    python -m pytest tests/test_reduction.py -v
"""

import pytest

from boundary_persistence.errors import DegenerateMatrixError
from boundary_persistence.matrix import BoundaryMatrix, dualize
from boundary_persistence.reduction import (
    PersistencePairing,
    StandardReduction,
    TwistReduction,
    as_algorithm,
    column_grades,
    compute_persistence_pairs,
)
from boundary_persistence.topology import make_boundary_matrix

from conftest import TRIANGLE_COLUMNS

ALGORITHMS = ["standard", "twist"]
REPRESENTATIONS = ["sparse", "dense"]


# ============================================================
# Worked example: the filled triangle
# ============================================================

class TestFilledTriangle:
    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    @pytest.mark.parametrize("representation", REPRESENTATIONS)
    def test_pairing(self, algorithm, representation):
        M = BoundaryMatrix.from_columns(TRIANGLE_COLUMNS, representation=representation)
        pairing = compute_persistence_pairs(M, algorithm)
        assert pairing.pairs == ((1, 3), (2, 4), (5, 6))
        assert pairing.unpaired == (0,)
        assert pairing.is_total()

    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    def test_dualized_pairing_maps_back(self, algorithm):
        D = dualize(BoundaryMatrix.from_columns(TRIANGLE_COLUMNS))
        pairing = compute_persistence_pairs(D, algorithm)
        assert pairing.pairs == ((1, 3), (2, 4), (5, 6))
        assert pairing.unpaired == (0,)

    def test_standard_reduced_matrix(self):
        M = BoundaryMatrix.from_columns(TRIANGLE_COLUMNS)
        stats = StandardReduction()(M)
        assert M.columns() == [[], [], [], [0, 1], [0, 2], [], [3, 4, 5]]
        assert stats.column_additions == 2
        assert stats.columns_cleared == 0

    def test_twist_clears_creators(self):
        M = BoundaryMatrix.from_columns(TRIANGLE_COLUMNS)
        stats = TwistReduction()(M)
        # column 5 is the pivot of column 6 and gets cleared before it is reduced
        assert M.get_column(5) == []
        assert stats.columns_cleared == 1
        assert stats.column_additions == 0

    def test_twist_on_dual_grades(self):
        D = dualize(BoundaryMatrix.from_columns(TRIANGLE_COLUMNS))
        assert column_grades(D).tolist() == [2, 1, 1, 1, 0, 0, 0]


# ============================================================
# Properties on random simplicial filtrations
# ============================================================

class TestPairingProperties:
    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    def test_totality(self, random_filtration, algorithm):
        pairing = compute_persistence_pairs(make_boundary_matrix(random_filtration), algorithm)
        assert pairing.n_columns == len(random_filtration)
        assert pairing.is_total()
        assert all(c < d for c, d in pairing.pairs)

    def test_standard_equals_twist(self, random_filtration):
        M = make_boundary_matrix(random_filtration)
        assert compute_persistence_pairs(M, "standard", copy=True) == compute_persistence_pairs(
            M, "twist", copy=True
        )

    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    def test_dual_equals_primal(self, random_filtration, algorithm):
        M = make_boundary_matrix(random_filtration)
        primal = compute_persistence_pairs(M, "standard", copy=True)
        assert compute_persistence_pairs(dualize(M), algorithm) == primal

    def test_dense_equals_sparse(self, random_filtration):
        sparse = make_boundary_matrix(random_filtration, representation="sparse")
        dense = make_boundary_matrix(random_filtration, representation="dense")
        assert compute_persistence_pairs(sparse, "twist") == compute_persistence_pairs(dense, "twist")

    def test_pairs_join_consecutive_dimensions(self, random_filtration):
        pairing = compute_persistence_pairs(make_boundary_matrix(random_filtration))
        for c, d in pairing.pairs:
            assert random_filtration.dimension(d) == random_filtration.dimension(c) + 1

    def test_twist_does_less_work(self, random_filtration):
        M = make_boundary_matrix(random_filtration)
        _, standard = compute_persistence_pairs(M, "standard", copy=True, return_stats=True)
        _, twist = compute_persistence_pairs(M, "twist", copy=True, return_stats=True)
        assert twist.column_additions <= standard.column_additions


# ============================================================
# Edge cases
# ============================================================

class TestEdgeCases:
    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    def test_discrete_points_are_all_essential(self, algorithm):
        M = BoundaryMatrix(5)
        pairing = compute_persistence_pairs(M, algorithm)
        assert pairing.pairs == ()
        assert pairing.unpaired == (0, 1, 2, 3, 4)
        assert pairing.is_total()

    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    def test_empty_matrix(self, algorithm):
        pairing = compute_persistence_pairs(BoundaryMatrix(0), algorithm)
        assert pairing == PersistencePairing((), (), 0)

    def test_reduction_mutates_in_place(self):
        M = BoundaryMatrix.from_columns(TRIANGLE_COLUMNS)
        compute_persistence_pairs(M, "standard")
        assert M.get_column(5) == []

    def test_copy_leaves_input_untouched(self):
        M = BoundaryMatrix.from_columns(TRIANGLE_COLUMNS)
        compute_persistence_pairs(M, "twist", copy=True)
        assert M.columns() == TRIANGLE_COLUMNS

    def test_nonzero_square_is_rejected(self):
        # 1 is the pivot of column 2 and also has a pivot itself
        M = BoundaryMatrix.from_columns([[], [0], [1]])
        with pytest.raises(DegenerateMatrixError):
            compute_persistence_pairs(M, "standard")

    def test_twist_rejects_column_sharing_a_pivot_with_a_later_one(self):
        # column 4 is graded above column 3 but both end on row 2
        M = BoundaryMatrix.from_columns([[], [0], [], [2], [1, 2]])
        with pytest.raises(DegenerateMatrixError):
            compute_persistence_pairs(M, "twist")

    def test_twist_rejects_rows_below_the_diagonal(self):
        M = BoundaryMatrix.from_columns([[1], []])
        with pytest.raises(DegenerateMatrixError):
            column_grades(M)


# ============================================================
# Cell complexes: the filled square
# ============================================================

SQUARE_COLUMNS = [[], [], [], [], [0, 1], [1, 2], [2, 3], [0, 3], [4, 5, 6, 7]]


class TestFilledSquare:
    def test_grades_follow_cell_dimension(self):
        M = BoundaryMatrix.from_columns(SQUARE_COLUMNS)
        assert column_grades(M).tolist() == [0, 0, 0, 0, 1, 1, 1, 1, 2]
        assert column_grades(dualize(M)).tolist() == [2, 1, 1, 1, 1, 0, 0, 0, 0]

    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    @pytest.mark.parametrize("representation", REPRESENTATIONS)
    @pytest.mark.parametrize("dual", [False, True])
    def test_pairing(self, algorithm, representation, dual):
        M = BoundaryMatrix.from_columns(SQUARE_COLUMNS, representation=representation)
        if dual:
            M = dualize(M)
        pairing = compute_persistence_pairs(M, algorithm)
        assert pairing.pairs == ((1, 4), (2, 5), (3, 6), (7, 8))
        assert pairing.unpaired == (0,)
        assert pairing.is_total()

    def test_twist_clears_the_square_edge(self):
        M = BoundaryMatrix.from_columns(SQUARE_COLUMNS)
        stats = TwistReduction()(M)
        assert M.get_column(7) == []
        assert stats.columns_cleared == 1
        assert stats.column_additions == 0


class TestAlgorithmSelection:
    def test_by_name(self):
        assert isinstance(as_algorithm("standard"), StandardReduction)
        assert isinstance(as_algorithm("twist"), TwistReduction)
        assert isinstance(as_algorithm(None), TwistReduction)

    def test_by_class_and_instance(self):
        assert isinstance(as_algorithm(StandardReduction), StandardReduction)
        algo = TwistReduction()
        assert as_algorithm(algo) is algo

    def test_unknown(self):
        with pytest.raises(ValueError):
            as_algorithm("chunk")
        with pytest.raises(TypeError):
            as_algorithm(3)


class TestPersistencePairing:
    def test_canonical_order(self):
        p = PersistencePairing.from_iterables([(5, 6), (1, 3)], [4, 0], 6)
        assert p.pairs == ((1, 3), (5, 6))
        assert p.unpaired == (0, 4)
        assert (1, 3) in p
        assert len(p) == 2
        assert p.creators() == (1, 5)
        assert p.destroyers() == (3, 6)

    def test_is_total_detects_gaps(self):
        assert not PersistencePairing.from_iterables([(1, 3)], [0], 4).is_total()
        assert not PersistencePairing.from_iterables([(1, 3)], [0, 2, 3], 4).is_total()

    def test_to_array_and_text(self):
        p = PersistencePairing.from_iterables([(1, 3)], [0, 2], 4)
        assert p.to_array().tolist() == [[1, 3]]
        assert p.to_text() == "1\t3\n0\t-\n2\t-\n"
