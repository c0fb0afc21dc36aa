# boundary_persistence/io/matrix_text.py
"""
Text format for boundary matrices.

One line per column, in index order:
  - space-separated ascending row indices, or
  - a single ``-`` for an empty column.
There is no header; the number of lines is the number of columns.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Union

from ..errors import MalformedMatrixError
from ..matrix.boundary_matrix import BoundaryMatrix

__all__ = ["loads_matrix", "load_matrix", "dumps_matrix", "save_matrix"]

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _parse_line(line: str, j: int, lineno: int) -> List[int]:
    tokens = line.split()
    if tokens == ["-"]:
        return []

    rows: List[int] = []
    for tok in tokens:
        try:
            r = int(tok)
        except ValueError:
            raise MalformedMatrixError(f"Expected a row index or '-'; got {tok!r}.", line=lineno) from None
        if r < 0:
            raise MalformedMatrixError(f"Negative row index {r}.", line=lineno)
        if rows and r <= rows[-1]:
            raise MalformedMatrixError(
                f"Row indices must be strictly ascending; {r} follows {rows[-1]}.", line=lineno
            )
        rows.append(r)

    if rows and rows[-1] >= j:
        raise MalformedMatrixError(
            f"Column {j} references row {rows[-1]}; boundaries may only reference earlier columns.",
            line=lineno,
        )
    return rows


def loads_matrix(text: str, *, representation: Any = "sparse") -> BoundaryMatrix:
    """
    Parse a boundary matrix from text.

    Trailing blank lines are ignored; any other blank line, non-integer token,
    descending or duplicate index, or index not below its column raises
    MalformedMatrixError.
    """
    lines = text.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        raise MalformedMatrixError("Matrix text is empty.")

    columns: List[List[int]] = []
    for j, line in enumerate(lines):
        if not line.strip():
            raise MalformedMatrixError("Blank line; empty columns are written as '-'.", line=j + 1)
        columns.append(_parse_line(line, j, j + 1))

    return BoundaryMatrix.from_columns(columns, representation=representation)


def load_matrix(path: PathLike, *, representation: Any = "sparse") -> BoundaryMatrix:
    path = Path(path)
    M = loads_matrix(path.read_text(), representation=representation)
    logger.info("Loaded boundary matrix from %s: n_columns=%d", path, M.get_num_columns())
    return M


def dumps_matrix(M: BoundaryMatrix) -> str:
    return str(M)


def save_matrix(M: BoundaryMatrix, path: PathLike) -> None:
    path = Path(path)
    path.write_text(dumps_matrix(M))
    logger.info("Stored boundary matrix to %s: n_columns=%d", path, M.get_num_columns())
