# boundary_persistence/pipeline.py
from __future__ import annotations

import logging
from typing import List, Optional

from .config import DiagramConfig, ReductionConfig
from .diagrams.conversion import make_persistence_diagrams
from .diagrams.diagram import PersistenceDiagram
from .matrix.dualization import dualize
from .reduction.pairing import PersistencePairing, compute_persistence_pairs
from .topology.filtration import Filtration, make_boundary_matrix

__all__ = ["compute_filtration_pairing", "compute_persistence_diagrams"]

logger = logging.getLogger(__name__)


def compute_filtration_pairing(
    filtration: Filtration,
    *,
    reduction: Optional[ReductionConfig] = None,
) -> PersistencePairing:
    """Build the boundary matrix of a filtration and reduce it."""
    cfg = ReductionConfig() if reduction is None else reduction

    M = make_boundary_matrix(filtration, representation=cfg.representation)
    if cfg.dualize:
        M = dualize(M)

    return compute_persistence_pairs(M, cfg.algorithm)


def compute_persistence_diagrams(
    filtration: Filtration,
    *,
    reduction: Optional[ReductionConfig] = None,
    diagrams: Optional[DiagramConfig] = None,
) -> List[PersistenceDiagram]:
    """
    Persistence diagrams of a filtration, one per dimension 0..max_dimension.

    Parameters
    ----------
    filtration : Filtration
        Simplices in filtration order.
    reduction : ReductionConfig, optional
        Algorithm, storage and dualization (default: twist, sparse, primal).
    diagrams : DiagramConfig, optional
        Coordinate dtype and post-filters (default: float64, no filtering).

    Returns
    -------
    list of PersistenceDiagram
    """
    dcfg = DiagramConfig() if diagrams is None else diagrams

    pairing = compute_filtration_pairing(filtration, reduction=reduction)
    out = make_persistence_diagrams(pairing, filtration, dtype=dcfg.dtype)

    for D in out:
        if dcfg.remove_diagonal:
            D.remove_diagonal()
        if dcfg.remove_unpaired:
            D.remove_unpaired()
        if dcfg.remove_duplicates:
            D.remove_duplicates()

    logger.debug(
        "Computed %d diagrams for %d simplices: betti=%s",
        len(out),
        len(filtration),
        [D.betti() for D in out],
    )
    return out
