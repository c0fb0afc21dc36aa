# boundary_persistence/config.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

import numpy as np

from .diagrams.diagram import infinity_for
from .matrix.representations import REPRESENTATIONS
from .reduction.pairing import ALGORITHMS

__all__ = ["ReductionConfig", "DiagramConfig"]


@dataclass(frozen=True)
class ReductionConfig:
    """
    How a boundary matrix is reduced.

    Notes
    -----
    - dualize=True reduces the anti-transposed (coboundary) matrix instead;
      the resulting pairing is mapped back to the original indices, so the
      diagrams are the same either way.
    - "dense" storage only pays off for small, fairly full matrices.
    """
    algorithm: Literal["standard", "twist"] = "twist"
    dualize: bool = False
    representation: Literal["sparse", "dense"] = "sparse"

    def __post_init__(self) -> None:
        if self.algorithm not in ALGORITHMS:
            raise ValueError(f"algorithm must be one of {sorted(ALGORITHMS)}; got {self.algorithm!r}.")
        if self.representation not in REPRESENTATIONS:
            raise ValueError(
                f"representation must be one of {sorted(REPRESENTATIONS)}; got {self.representation!r}."
            )


@dataclass(frozen=True)
class DiagramConfig:
    """
    Post-processing applied to every diagram, in the order
    remove_diagonal -> remove_unpaired -> remove_duplicates.
    """
    remove_diagonal: bool = False
    remove_unpaired: bool = False
    remove_duplicates: bool = False

    # coordinate type; integer dtypes store essential deaths as iinfo(dtype).max
    dtype: Any = np.float64

    def __post_init__(self) -> None:
        try:
            infinity_for(self.dtype)
        except TypeError as e:
            raise ValueError(str(e)) from e
