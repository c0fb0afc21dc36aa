# boundary_persistence/diagrams/summary.py
"""
Plain-text summary of a list of persistence diagrams.

Provides a stable `to_text` rendering for logging / unit tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from .diagram import PersistenceDiagram

__all__ = ["DimensionSummary", "DiagramSummary", "summarize_diagrams"]


@dataclass(frozen=True)
class DimensionSummary:
    dimension: int
    n_points: int
    betti: int
    total_persistence: float
    max_persistence: float


@dataclass(frozen=True)
class DiagramSummary:
    rows: Tuple[DimensionSummary, ...]

    @property
    def betti_numbers(self) -> List[int]:
        return [r.betti for r in self.rows]

    def to_text(self, *, decimals: int = 4) -> str:
        r = int(decimals)
        lines = [
            "",
            "=" * 12 + " Persistence Diagrams " + "=" * 12,
            "",
            f"{'dim':>3}  {'points':>6}  {'betti':>5}  {'total pers.':>12}  {'max pers.':>10}",
        ]
        for row in self.rows:
            lines.append(
                f"{row.dimension:>3}  {row.n_points:>6}  {row.betti:>5}  "
                f"{row.total_persistence:>12.{r}f}  {row.max_persistence:>10.{r}f}"
            )
        lines += ["", "=" * 46, ""]
        return "\n".join(lines)


def summarize_diagrams(diagrams: Sequence[PersistenceDiagram]) -> DiagramSummary:
    """Per-dimension point counts, Betti numbers and finite persistence statistics."""
    rows = []
    for D in sorted(diagrams, key=lambda D: D.dimension):
        lifetimes = D.persistence()
        finite = lifetimes[np.isfinite(lifetimes)]
        rows.append(
            DimensionSummary(
                dimension=D.dimension,
                n_points=len(D),
                betti=D.betti(),
                total_persistence=float(finite.sum()) if finite.size else 0.0,
                max_persistence=float(finite.max()) if finite.size else 0.0,
            )
        )
    return DiagramSummary(rows=tuple(rows))
