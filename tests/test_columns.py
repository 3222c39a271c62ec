from __future__ import annotations

import warnings

import numpy as np
import pytest

from matstats.stats.columns import (
    MatrixShapeError,
    compute_mean,
    compute_std,
    remove_mean_per_column,
    rescale_in_place,
)


M = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]


def test_three_by_two_scenario():
    mean = compute_mean(M, 3, 2)
    std = compute_std(M, mean, 3, 2)
    centered = remove_mean_per_column(M, mean, 3, 2)
    assert mean.tolist() == [3.0, 4.0]
    assert np.allclose(std, [2.0, 2.0])
    assert centered.tolist() == [-2.0, -2.0, 0.0, 0.0, 2.0, 2.0]


def test_mean_accepts_two_dimensional_input():
    mean = compute_mean(np.array([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]]), 3, 2)
    assert mean.tolist() == [3.0, 4.0]


def test_mean_invariant_to_row_order():
    rng = np.random.default_rng(7)
    values = rng.normal(size=(50, 4))
    shuffled = values[rng.permutation(50)]
    assert np.allclose(compute_mean(values, 50, 4), compute_mean(shuffled, 50, 4))


def test_std_of_constant_column_is_zero():
    values = np.array([[2.5, 1.0], [2.5, 3.0], [2.5, 8.0]])
    std = compute_std(values, compute_mean(values, 3, 2), 3, 2)
    assert std[0] == 0.0
    assert std[1] > 0.0


def test_std_single_row_is_nan_not_error():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        std = compute_std([1.0, 2.0], [1.0, 2.0], 1, 2)
        assert np.isnan(std).all()
        std = compute_std([1.0, 2.0], [0.0, 0.0], 1, 2)
        assert np.isinf(std).all()


def test_centered_columns_have_zero_mean_and_round_trip():
    rng = np.random.default_rng(3)
    values = rng.uniform(-10, 10, size=24)
    mean = compute_mean(values, 6, 4)
    centered = remove_mean_per_column(values, mean, 6, 4)
    assert np.allclose(compute_mean(centered, 6, 4), 0.0)
    restored = (centered.reshape(6, 4) + mean).reshape(-1)
    assert np.allclose(restored, values)


def test_out_buffers_are_written_and_returned():
    mean_out = np.empty(2)
    std_out = np.empty(2)
    centered_out = np.empty(6)
    assert compute_mean(M, 3, 2, out=mean_out) is mean_out
    assert compute_std(M, mean_out, 3, 2, out=std_out) is std_out
    assert remove_mean_per_column(M, mean_out, 3, 2, out=centered_out) is centered_out
    assert mean_out.tolist() == [3.0, 4.0]
    assert np.allclose(std_out, [2.0, 2.0])
    assert centered_out.tolist() == [-2.0, -2.0, 0.0, 0.0, 2.0, 2.0]


def test_remove_mean_in_place_aliasing():
    values = np.array(M)
    result = remove_mean_per_column(values, [3.0, 4.0], 3, 2, out=values)
    assert result is values
    assert values.tolist() == [-2.0, -2.0, 0.0, 0.0, 2.0, 2.0]


@pytest.mark.parametrize("dim_i, dim_j", [(0, 2), (3, 0), (-1, 1)])
def test_non_positive_dims_rejected(dim_i, dim_j):
    with pytest.raises(MatrixShapeError):
        compute_mean([1.0], dim_i, dim_j)


def test_non_integer_dims_rejected():
    with pytest.raises(TypeError):
        compute_mean(M, 3.0, 2)


def test_size_mismatches_rejected():
    with pytest.raises(MatrixShapeError):
        compute_mean(M, 2, 2)
    with pytest.raises(MatrixShapeError):
        compute_std(M, [3.0], 3, 2)
    with pytest.raises(MatrixShapeError):
        remove_mean_per_column(M, [3.0, 4.0], 3, 2, out=np.empty(5))
    with pytest.raises(MatrixShapeError):
        compute_mean(M, 3, 2, out=np.empty(2, dtype=np.int64))


def test_rescale_in_place_is_global_affine():
    values = np.array([-1.0, 0.0, 1.0, 2.0, -2.0, 0.5])
    result = rescale_in_place(values, 10.0, 2.0, 3, 2)
    assert result is values
    assert values.tolist() == [8.0, 10.0, 12.0, 14.0, 6.0, 11.0]


def test_rescale_rejects_non_arrays_and_read_only():
    with pytest.raises(TypeError):
        rescale_in_place([1.0, 2.0], 0.0, 1.0, 1, 2)
    frozen = np.array([1.0, 2.0])
    frozen.flags.writeable = False
    with pytest.raises(TypeError):
        rescale_in_place(frozen, 0.0, 1.0, 1, 2)


def test_rescale_errors_name_the_matrix():
    with pytest.raises(MatrixShapeError, match="matrix must have a floating dtype"):
        rescale_in_place(np.arange(4), 0.0, 1.0, 2, 2)
    strided = np.zeros((2, 4))[:, ::2]
    with pytest.raises(MatrixShapeError, match="matrix must be C-contiguous"):
        rescale_in_place(strided, 0.0, 1.0, 2, 2)
    with pytest.raises(MatrixShapeError, match="matrix holds 3 values"):
        rescale_in_place(np.zeros(3), 0.0, 1.0, 2, 2)


def test_legacy_row_stride_matches_default_on_square():
    values = np.arange(9, dtype=float)
    legacy = values.copy()
    rescale_in_place(values, 1.0, 3.0, 3, 3)
    rescale_in_place(legacy, 1.0, 3.0, 3, 3, legacy_row_stride=True)
    assert legacy.tolist() == values.tolist()


def test_legacy_row_stride_skews_wide_matrix():
    # 2x3: row 1 reads offsets 3..5 and writes offsets 2..4
    values = np.arange(6, dtype=float)
    rescale_in_place(values, 0.0, 10.0, 2, 3, legacy_row_stride=True)
    assert values.tolist() == [0.0, 10.0, 30.0, 40.0, 50.0, 5.0]


def test_legacy_row_stride_out_of_bounds_raises_before_writing():
    values = np.arange(6, dtype=float)
    with pytest.raises(MatrixShapeError):
        rescale_in_place(values, 0.0, 10.0, 3, 2, legacy_row_stride=True)
    assert values.tolist() == [0.0, 1.0, 2.0, 3.0, 4.0, 5.0]
