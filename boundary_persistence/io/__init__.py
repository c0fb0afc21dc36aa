"""
Readers and writers: the boundary-matrix text format and 1D function files.
"""

from __future__ import annotations

from .function import function_filtration, load_function, loads_function
from .matrix_text import dumps_matrix, load_matrix, loads_matrix, save_matrix

__all__ = [
    "dumps_matrix",
    "load_matrix",
    "loads_matrix",
    "save_matrix",
    "function_filtration",
    "load_function",
    "loads_function",
]
