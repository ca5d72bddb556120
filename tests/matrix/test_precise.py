"""
PreciseMatrix-specific behaviour.

The 100-digit decimal container resolves systems that are numerically
singular in double precision and reports decimal arithmetic errors
unmodified.
"""

import decimal
from decimal import Decimal

import pytest

from pylinalg.core.exceptions import ConstructionError, SingularMatrixError
from pylinalg.matrix import DenseMatrix, PreciseMatrix


NEARLY_ONE = '1.' + '0' * 49 + '1'  # 1 + 1e-50


class TestPrecision:

    def test_entries_are_decimals(self):
        m = PreciseMatrix([[1, 0.1], ['0.3', 2]])
        assert all(isinstance(v, Decimal) for row in m.tolist() for v in row)
        assert m.get(0, 1) == Decimal('0.1')
        assert m.get(1, 0) == Decimal('0.3')

    def test_inverse_carries_100_digits(self):
        third = PreciseMatrix([[3]]).inverse().get(0, 0)
        assert third.as_tuple().digits == (3,) * 100

    def test_exact_inverse(self):
        inv = PreciseMatrix([[4, 7], [2, 6]]).inverse()
        assert inv == PreciseMatrix([['0.6', '-0.7'], ['-0.2', '0.4']])

    def test_resolves_tiny_determinant(self):
        m = PreciseMatrix([['1', '1'], ['1', NEARLY_ONE]])
        assert m.determinant() == Decimal('1e-50')
        assert m.is_invertible()

    def test_double_precision_loses_tiny_determinant(self):
        m = DenseMatrix([[1.0, 1.0], [1.0, float(NEARLY_ONE)]])
        assert m.determinant() == 0.0
        with pytest.raises(SingularMatrixError):
            m.inverse()

    def test_inverse_of_near_singular(self):
        m = PreciseMatrix([['1', '1'], ['1', NEARLY_ONE]])
        product = m.multiply(m.inverse())
        assert product.is_close(PreciseMatrix.identity(2), 1e-45)

    def test_result_independent_of_ambient_context(self):
        with decimal.localcontext() as ctx:
            ctx.prec = 5
            third = PreciseMatrix([[3]]).inverse().get(0, 0)
        assert len(third.as_tuple().digits) == 100


class TestDecimalErrors:

    def test_zero_pivot_raises_division_by_zero(self):
        m = PreciseMatrix([[0, 1], [1, 0]])
        with pytest.raises(decimal.DivisionByZero):
            m.determinant()

    def test_zero_pivot_in_inverse(self):
        with pytest.raises(decimal.DecimalException):
            PreciseMatrix([[0, 1], [1, 0]]).inverse()


class TestNonFiniteEntries:

    @pytest.mark.parametrize("entry", [float('nan'), float('inf'), 'NaN', 'Infinity', '-inf'])
    def test_rejected_at_construction(self, entry):
        with pytest.raises(ConstructionError, match="finite"):
            PreciseMatrix([[entry, 1.0], [1.0, 2.0]])

    def test_unparseable_string(self):
        with pytest.raises(ConstructionError):
            PreciseMatrix([['abc']])

    def test_dense_nan_is_not_close_to_precise(self):
        dense = DenseMatrix([[float('nan'), 1.0]])
        assert not PreciseMatrix([[0, 1]]).is_close(dense, 1.0)
