"""Descriptive statistics over flat row-major matrices."""

from matstats.stats.columns import (
    MatrixShapeError,
    compute_mean,
    compute_std,
    remove_mean_per_column,
    rescale_in_place,
)
from matstats.stats.display import format_matrix, print_matrix
from matstats.stats.random import (
    NormalSampler,
    default_sampler,
    sample_standard_normal,
    sample_standard_normal_matrix,
    set_default_sampler,
    single_draw_moments,
)
from matstats.stats.summary import column_summary, restandardize, standardize

__all__ = [
    "MatrixShapeError",
    "NormalSampler",
    "column_summary",
    "compute_mean",
    "compute_std",
    "default_sampler",
    "format_matrix",
    "print_matrix",
    "remove_mean_per_column",
    "rescale_in_place",
    "restandardize",
    "sample_standard_normal",
    "sample_standard_normal_matrix",
    "set_default_sampler",
    "single_draw_moments",
    "standardize",
]
