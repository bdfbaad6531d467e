"""
Unit tests for the DCT-II transform used by the perceptual hash.
"""

import math

import numpy as np
import pytest

from pixelprint.hashing.dct import DCTPlan, get_dct_plan, dct_2d


def direct_dct_2d(matrix):
    """Reference 2D DCT-II by double summation."""
    n = matrix.shape[0]
    result = np.zeros((n, n), dtype=np.float64)
    for k1 in range(n):
        for k2 in range(n):
            total = 0.0
            for n1 in range(n):
                for n2 in range(n):
                    total += (
                        matrix[n1, n2]
                        * math.cos(math.pi * k1 * (2 * n1 + 1) / (2 * n))
                        * math.cos(math.pi * k2 * (2 * n2 + 1) / (2 * n))
                    )
            result[k1, k2] = total
    return result


class TestDCTPlan:
    """Test DCTPlan construction and 1D execution."""

    def test_impulse_gives_cosines(self):
        plan = DCTPlan(4)
        result = plan.execute([1.0, 0.0, 0.0, 0.0])
        expected = [math.cos(math.pi * k / 8) for k in range(4)]
        assert np.allclose(result, expected, atol=1e-6)

    def test_constant_vector_only_dc(self):
        plan = DCTPlan(8)
        result = plan.execute([3.0] * 8)
        assert result[0] == pytest.approx(24.0)
        assert np.allclose(result[1:], 0.0, atol=1e-4)

    def test_result_is_float32(self):
        assert DCTPlan(4).execute([1, 2, 3, 4]).dtype == np.float32

    def test_wrong_length_rejected(self):
        with pytest.raises(ValueError):
            DCTPlan(4).execute([1.0, 2.0, 3.0])

    @pytest.mark.parametrize("size", [0, -1, 2.5, "32", True])
    def test_invalid_size(self, size):
        with pytest.raises(ValueError):
            DCTPlan(size)

    def test_basis_is_read_only(self):
        plan = DCTPlan(4)
        with pytest.raises(ValueError):
            plan.basis[0, 0] = 5.0

    def test_execute_rows(self):
        plan = DCTPlan(4)
        matrix = np.arange(8, dtype=np.float32).reshape(2, 4)
        rows = plan.execute_rows(matrix)
        assert rows.shape == (2, 4)
        assert np.allclose(rows[0], plan.execute(matrix[0]), atol=1e-5)
        assert np.allclose(rows[1], plan.execute(matrix[1]), atol=1e-5)


class TestGetDCTPlan:
    """Test plan caching."""

    def test_same_size_returns_cached_plan(self):
        assert get_dct_plan(32) is get_dct_plan(32)

    def test_different_sizes_differ(self):
        assert get_dct_plan(16).size == 16
        assert get_dct_plan(32).size == 32


class TestDCT2D:
    """Test the separable 2D transform."""

    def test_matches_direct_summation(self):
        rng = np.random.default_rng(7)
        matrix = rng.integers(0, 256, size=(8, 8)).astype(np.float32)
        result = dct_2d(matrix)
        expected = direct_dct_2d(matrix.astype(np.float64))
        assert np.allclose(result, expected, rtol=1e-4, atol=1e-2)

    def test_constant_matrix_only_dc(self):
        matrix = np.full((4, 4), 2.0, dtype=np.float32)
        result = dct_2d(matrix)
        assert result[0, 0] == pytest.approx(32.0)
        result[0, 0] = 0.0
        assert np.allclose(result, 0.0, atol=1e-4)

    def test_zero_matrix_is_exactly_zero(self):
        result = dct_2d(np.zeros((32, 32), dtype=np.float32))
        assert not result.any()

    def test_output_shape_and_dtype(self):
        result = dct_2d(np.ones((32, 32)))
        assert result.shape == (32, 32)
        assert result.dtype == np.float32

    def test_input_not_modified(self):
        matrix = np.arange(16, dtype=np.float32).reshape(4, 4)
        original = matrix.copy()
        dct_2d(matrix)
        assert np.array_equal(matrix, original)

    def test_rows_transformed_before_columns(self):
        """A pattern varying only along rows puts energy in the first row."""
        matrix = np.tile(np.arange(8, dtype=np.float32), (8, 1))
        result = dct_2d(matrix)
        assert abs(result[0, 1]) > 1.0
        assert np.allclose(result[1:, :], 0.0, atol=1e-3)

    @pytest.mark.parametrize("shape", [(4, 5), (4,), (0, 0), (2, 2, 2)])
    def test_rejects_non_square(self, shape):
        with pytest.raises(ValueError):
            dct_2d(np.zeros(shape))

    def test_rejects_mismatched_plan(self):
        with pytest.raises(ValueError):
            dct_2d(np.zeros((4, 4)), plan=DCTPlan(8))
