"""
Tests for the validated strided primitives.

Regions are addressed by (start, inc, n) with n the extent: the touched
indices are start, start + inc, ... strictly below start + n.
"""

import numpy as np
import pytest

from pylinalg import kernel
from pylinalg.core.exceptions import InvalidParameterError


# ═══════════════════════════════════════════════════════════════════════
# fill / negate
# ═══════════════════════════════════════════════════════════════════════


class TestFill:

    def test_contiguous(self):
        x = np.zeros(5)
        kernel.fill(x, 1, 1, 3, 7.0)
        np.testing.assert_array_equal(x, [0, 7, 7, 7, 0])

    def test_strided(self):
        x = np.zeros(6)
        kernel.fill(x, 0, 2, 6, 1.0)
        np.testing.assert_array_equal(x, [1, 0, 1, 0, 1, 0])

    def test_identity_diagonal(self):
        n = 4
        ident = np.zeros(n * n)
        kernel.fill(ident, 0, n + 1, n * n, 1.0)
        np.testing.assert_array_equal(ident.reshape(n, n), np.eye(n))

    def test_zero_extent_is_noop(self):
        x = np.arange(3.0)
        kernel.fill(x, 0, 1, 0, 9.0)
        np.testing.assert_array_equal(x, [0, 1, 2])


class TestNegate:

    def test_strided(self):
        x = np.arange(1.0, 7.0)
        kernel.negate(x, 1, 2, 4)
        np.testing.assert_array_equal(x, [1, -2, 3, -4, 5, 6])


# ═══════════════════════════════════════════════════════════════════════
# scale / divide
# ═══════════════════════════════════════════════════════════════════════


class TestScale:

    def test_general(self):
        x = np.array([1.0, 2.0, 3.0, 4.0])
        kernel.scale(x, 0, 1, 4, 2.5)
        np.testing.assert_array_equal(x, [2.5, 5.0, 7.5, 10.0])

    def test_one_is_noop(self):
        x = np.array([np.nan, 1.0])
        kernel.scale(x, 0, 1, 2, 1.0)
        assert np.isnan(x[0])

    def test_zero_fills_same_region(self):
        x = np.array([np.inf, 2.0, np.nan, 4.0])
        kernel.scale(x, 0, 2, 4, 0.0)
        np.testing.assert_array_equal(x, [0.0, 2.0, 0.0, 4.0])

    def test_minus_one_negates(self):
        x = np.array([1.0, -2.0])
        kernel.scale(x, 0, 1, 2, -1.0)
        np.testing.assert_array_equal(x, [-1.0, 2.0])


class TestDivide:

    def test_general(self):
        x = np.array([2.0, 4.0, 6.0])
        kernel.divide(x, 1, 1, 2, 2.0)
        np.testing.assert_array_equal(x, [2.0, 2.0, 3.0])

    def test_minus_one_negates(self):
        x = np.array([1.0, 2.0])
        kernel.divide(x, 0, 1, 2, -1.0)
        np.testing.assert_array_equal(x, [-1.0, -2.0])

    def test_by_zero_is_ieee(self):
        x = np.array([1.0, -1.0])
        with pytest.warns(RuntimeWarning):
            kernel.divide(x, 0, 1, 2, 0.0)
        np.testing.assert_array_equal(x, [np.inf, -np.inf])


# ═══════════════════════════════════════════════════════════════════════
# axpy
# ═══════════════════════════════════════════════════════════════════════


class TestAxpy:

    def test_row_update(self):
        # rows of a 2x3 matrix: row1 += -2 * row0
        x = np.array([1.0, 2.0, 3.0, 2.0, 5.0, 9.0])
        kernel.axpy(x, 3, 0, 1, 3, -2.0)
        np.testing.assert_array_equal(x, [1, 2, 3, 0, 1, 3])

    def test_strided_column_update(self):
        # columns of a 2x2 matrix: column1 += 3 * column0
        x = np.array([1.0, 0.0, 2.0, 1.0])
        kernel.axpy(x, 1, 0, 2, 3, 3.0)
        np.testing.assert_array_equal(x, [1, 3, 2, 7])

    def test_zero_alpha_is_noop(self):
        x = np.array([1.0, np.nan])
        kernel.axpy(x, 0, 1, 1, 1, 0.0)
        assert x[0] == 1.0

    def test_overlapping_reads_source_first(self):
        x = np.array([1.0, 1.0, 1.0, 1.0])
        kernel.axpy(x, 1, 0, 1, 3, 1.0)
        np.testing.assert_array_equal(x, [1, 2, 2, 2])


# ═══════════════════════════════════════════════════════════════════════
# Validation
# ═══════════════════════════════════════════════════════════════════════


class TestValidation:

    @pytest.mark.parametrize("call", [
        lambda x: kernel.fill(x, 0, 1, -1, 0.0),
        lambda x: kernel.fill(x, 0, 0, 2, 0.0),
        lambda x: kernel.negate(x, 0, 1, 5),
        lambda x: kernel.scale(x, -1, 1, 2, 2.0),
        lambda x: kernel.divide(x, 3, 1, 2, 2.0),
        lambda x: kernel.axpy(x, 0, 3, 1, 2, 1.0),
        lambda x: kernel.axpy(x, 3, 0, 1, 2, 1.0),
        lambda x: kernel.axpy(x, 0, 0, -1, 2, 1.0),
    ], ids=[
        'negative-extent',
        'zero-increment',
        'extent-past-buffer',
        'negative-start',
        'region-past-end',
        'source-past-end',
        'target-past-end',
        'negative-increment',
    ])
    def test_bad_region(self, call):
        x = np.arange(4.0)
        with pytest.raises(InvalidParameterError):
            call(x)
        np.testing.assert_array_equal(x, [0, 1, 2, 3])

    @pytest.mark.parametrize("buffer", [None, [1.0, 2.0], np.zeros((2, 2))])
    def test_bad_buffer(self, buffer):
        with pytest.raises(InvalidParameterError):
            kernel.fill(buffer, 0, 1, 1, 0.0)

    def test_integer_buffer_left_untouched(self):
        x = np.arange(4)
        with pytest.raises(InvalidParameterError, match="floating-point"):
            kernel.scale(x, 0, 1, 4, 0.5)
        np.testing.assert_array_equal(x, [0, 1, 2, 3])
