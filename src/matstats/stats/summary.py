"""Standardization pipeline built on the column statistics."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from matstats.stats.columns import (
    ArrayLike,
    MatrixShapeError,
    as_matrix,
    compute_mean,
    compute_std,
    remove_mean_per_column,
    rescale_in_place,
)


def standardize(
    matrix: ArrayLike, dim_i: int, dim_j: int
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Center each column and divide by its sample std.

    Returns ``(z, mean, std)`` with ``z`` flat. Columns with zero spread are
    divided by 1.0 instead.
    """
    mean = compute_mean(matrix, dim_i, dim_j)
    std = compute_std(matrix, mean, dim_i, dim_j)
    centered = remove_mean_per_column(matrix, mean, dim_i, dim_j)
    scale = np.where(std == 0, 1.0, std)
    z = (centered.reshape(dim_i, dim_j) / scale).reshape(-1)
    return z, mean, std


def restandardize(
    matrix: ArrayLike,
    new_mean: float,
    new_stddev: float,
    dim_i: int,
    dim_j: int,
    legacy_row_stride: bool = False,
) -> np.ndarray:
    z, _, _ = standardize(matrix, dim_i, dim_j)
    return rescale_in_place(z, new_mean, new_stddev, dim_i, dim_j, legacy_row_stride=legacy_row_stride)


def column_summary(
    matrix: ArrayLike,
    dim_i: int,
    dim_j: int,
    columns: Optional[Sequence[str]] = None,
) -> pd.DataFrame:
    """Per-column mean, sample std, min and max as a DataFrame."""
    values = as_matrix(matrix, dim_i, dim_j)
    if columns is None:
        columns = [f"col_{j}" for j in range(dim_j)]
    elif len(columns) != dim_j:
        raise MatrixShapeError(f"Got {len(columns)} column names for {dim_j} columns.")
    mean = compute_mean(values, dim_i, dim_j)
    std = compute_std(values, mean, dim_i, dim_j)
    return pd.DataFrame(
        {
            "mean": mean,
            "std": std,
            "min": values.min(axis=0),
            "max": values.max(axis=0),
        },
        index=pd.Index(list(columns), name="column"),
    )
