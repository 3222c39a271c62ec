"""Column statistics over flat row-major matrices.

A matrix is any array-like holding ``dim_i * dim_j`` values laid out row by
row, so element ``(i, j)`` lives at offset ``i * dim_j + j``. A flat list, a
1-D array or a ``(dim_i, dim_j)`` array are all accepted.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Union

import numpy as np

ArrayLike = Union[np.ndarray, Sequence[float]]

logger = logging.getLogger(__name__)


class MatrixShapeError(ValueError):
    """Raised when dimensions or buffer sizes do not describe a valid matrix."""


def check_dims(dim_i: int, dim_j: int) -> None:
    for name, value in (("dim_i", dim_i), ("dim_j", dim_j)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise TypeError(f"{name} must be an integer, got {type(value).__name__}.")
        if value < 1:
            raise MatrixShapeError(f"{name} must be >= 1, got {value}.")


def as_matrix(matrix: ArrayLike, dim_i: int, dim_j: int) -> np.ndarray:
    """Return ``matrix`` as a float64 ``(dim_i, dim_j)`` array."""
    check_dims(dim_i, dim_j)
    values = np.asarray(matrix, dtype=np.float64)
    if values.size != dim_i * dim_j:
        raise MatrixShapeError(
            f"Matrix holds {values.size} values, expected {dim_i}x{dim_j}={dim_i * dim_j}."
        )
    return values.reshape(dim_i, dim_j)


def as_column_vector(vector: ArrayLike, dim_j: int, name: str = "vector") -> np.ndarray:
    values = np.asarray(vector, dtype=np.float64).reshape(-1)
    if values.size != dim_j:
        raise MatrixShapeError(f"{name} holds {values.size} values, expected {dim_j}.")
    return values


def check_out(out: np.ndarray, size: int, name: str = "out") -> np.ndarray:
    """Validate a caller-owned output buffer and return a flat view of it."""
    if not isinstance(out, np.ndarray):
        raise MatrixShapeError(f"{name} must be a numpy array, got {type(out).__name__}.")
    if out.size != size:
        raise MatrixShapeError(f"{name} holds {out.size} values, expected {size}.")
    if not out.flags.c_contiguous:
        raise MatrixShapeError(f"{name} must be C-contiguous.")
    if not out.flags.writeable:
        raise MatrixShapeError(f"{name} must be writable.")
    if not np.issubdtype(out.dtype, np.floating):
        raise MatrixShapeError(f"{name} must have a floating dtype, got {out.dtype}.")
    return out.reshape(-1)


def compute_mean(
    matrix: ArrayLike,
    dim_i: int,
    dim_j: int,
    out: Optional[np.ndarray] = None,
) -> np.ndarray:
    """Mean of each column: ``mean[j] = sum_i a[i, j] / dim_i``."""
    values = as_matrix(matrix, dim_i, dim_j)
    mean = values.sum(axis=0) / dim_i
    if out is None:
        return mean
    check_out(out, dim_j)[:] = mean
    return out


def compute_std(
    matrix: ArrayLike,
    mean: ArrayLike,
    dim_i: int,
    dim_j: int,
    out: Optional[np.ndarray] = None,
) -> np.ndarray:
    """Sample standard deviation of each column around a given mean.

    ``mean`` is trusted as-is; a mean that does not belong to ``matrix``
    gives a meaningless but unflagged result. The divisor is ``dim_i - 1``,
    so a single-row matrix yields NaN (or inf) rather than an error.
    """
    values = as_matrix(matrix, dim_i, dim_j)
    mu = as_column_vector(mean, dim_j, name="mean")
    sq_dev = ((values - mu) ** 2).sum(axis=0)
    if dim_i == 1:
        logger.debug("Sample std over a single row is undefined; returning NaN/inf.")
    with np.errstate(divide="ignore", invalid="ignore"):
        std = np.sqrt(sq_dev / np.float64(dim_i - 1))
    if out is None:
        return std
    check_out(out, dim_j)[:] = std
    return out


def remove_mean_per_column(
    matrix: ArrayLike,
    mean: ArrayLike,
    dim_i: int,
    dim_j: int,
    out: Optional[np.ndarray] = None,
) -> np.ndarray:
    """Subtract ``mean[j]`` from every element of column ``j``.

    Returns a flat array of ``dim_i * dim_j`` values. ``out`` may be the
    input matrix itself; each element only depends on its own old value.
    """
    values = as_matrix(matrix, dim_i, dim_j)
    mu = as_column_vector(mean, dim_j, name="mean")
    if out is None:
        return (values - mu).reshape(-1)
    target = check_out(out, dim_i * dim_j).reshape(dim_i, dim_j)
    np.subtract(values, mu, out=target)
    return out


def rescale_in_place(
    matrix: np.ndarray,
    new_mean: float,
    new_stddev: float,
    dim_i: int,
    dim_j: int,
    legacy_row_stride: bool = False,
) -> np.ndarray:
    """Apply ``x * new_stddev + new_mean`` to every element, in place.

    The transform is global, not per column: it stretches an already
    standardized matrix to a target mean and spread.

    With ``legacy_row_stride`` the destination of element ``(i, j)`` is
    ``i * dim_i + j`` while the source stays ``i * dim_j + j``, replaying the
    historical addressing. Only square matrices come out right in that mode.
    """
    if not isinstance(matrix, np.ndarray):
        raise TypeError(f"matrix must be a numpy array, got {type(matrix).__name__}.")
    if not matrix.flags.writeable:
        raise TypeError("matrix must be writable.")
    check_dims(dim_i, dim_j)
    flat = check_out(matrix, dim_i * dim_j, name="matrix")
    scale = float(new_stddev)
    shift = float(new_mean)

    if not legacy_row_stride:
        flat *= scale
        flat += shift
        return matrix

    last_dest = (dim_i - 1) * dim_i + (dim_j - 1)
    if last_dest >= flat.size:
        raise MatrixShapeError(
            f"Legacy row stride writes offset {last_dest} outside a {dim_i}x{dim_j} buffer."
        )
    if dim_i != dim_j:
        logger.debug("Legacy row stride on a %dx%d matrix; addressing is skewed.", dim_i, dim_j)
    for i in range(dim_i):
        for j in range(dim_j):
            flat[i * dim_i + j] = flat[i * dim_j + j] * scale + shift
    return matrix
