"""Console display of matrices for debugging."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from matstats.stats.columns import ArrayLike, as_matrix


def format_matrix(
    matrix: ArrayLike, dim_i: int, dim_j: int, precision: int = 5, width: int = 2
) -> str:
    """Render one line per row, each value as ``%{width}.{precision}f`` plus a space."""
    values = as_matrix(matrix, dim_i, dim_j)
    lines = []
    for row in values:
        lines.append("".join(f"{value:{width}.{precision}f} " for value in row) + "\n")
    return "".join(lines)


def print_matrix(
    matrix: ArrayLike,
    dim_i: int,
    dim_j: int,
    stream: Optional[TextIO] = None,
    precision: int = 5,
    width: int = 2,
) -> None:
    out = stream if stream is not None else sys.stdout
    out.write(format_matrix(matrix, dim_i, dim_j, precision=precision, width=width))
