"""
Persistence diagrams: the point container, conversion from pairings, and summaries.
"""

from __future__ import annotations

from .conversion import diagrams_to_arrays, make_persistence_diagrams, plot_diagrams
from .diagram import PersistenceDiagram, Point, infinity_for
from .summary import DiagramSummary, DimensionSummary, summarize_diagrams

__all__ = [
    "PersistenceDiagram",
    "Point",
    "infinity_for",
    "make_persistence_diagrams",
    "diagrams_to_arrays",
    "plot_diagrams",
    "DiagramSummary",
    "DimensionSummary",
    "summarize_diagrams",
]
