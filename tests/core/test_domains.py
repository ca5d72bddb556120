"""
Tests for the numeric domains.

Validates:
    - Both domains satisfy the NumericDomain protocol
    - Scalar conversion rules (float repr for decimals, string parsing)
    - 100-digit decimal arithmetic independent of the ambient context
    - IEEE division by zero in float64, decimal exceptions in decimal
    - Buffer construction
"""

import decimal
from decimal import Decimal

import numpy as np
import pytest

from pylinalg.core.compute.domains import DECIMAL, FLOAT64, DecimalDomain
from pylinalg.core.compute.precision import DECIMAL_PRECISION
from pylinalg.core.exceptions import ValidationError
from pylinalg.core.protocols import NumericDomain


class TestProtocol:

    @pytest.mark.parametrize("domain", [FLOAT64, DECIMAL], ids=['float64', 'decimal'])
    def test_satisfies_protocol(self, domain):
        assert isinstance(domain, NumericDomain)

    def test_names(self):
        assert FLOAT64.name == 'float64'
        assert DECIMAL.name == 'decimal'

    def test_dtypes(self):
        assert FLOAT64.dtype == np.float64
        assert DECIMAL.dtype == np.dtype(object)


# ═══════════════════════════════════════════════════════════════════════
# Float64
# ═══════════════════════════════════════════════════════════════════════


class TestFloatDomain:

    def test_convert_int_and_decimal(self):
        assert FLOAT64.convert(3) == 3.0
        assert FLOAT64.convert(Decimal('0.5')) == 0.5

    @pytest.mark.parametrize("value", ["1.0", None, [1.0], b"1"])
    def test_convert_rejects_non_numbers(self, value):
        with pytest.raises(ValidationError):
            FLOAT64.convert(value)

    def test_divide_by_zero_is_ieee(self):
        with pytest.warns(RuntimeWarning):
            assert np.isinf(FLOAT64.divide(1.0, 0.0))

    def test_buffer_from_ints(self):
        buf = FLOAT64.buffer([1, 2, 3])
        assert buf.dtype == np.float64
        np.testing.assert_array_equal(buf, [1.0, 2.0, 3.0])

    def test_buffer_ravels(self):
        assert FLOAT64.buffer(np.ones((2, 2))).shape == (4,)

    def test_buffer_from_decimals(self):
        buf = FLOAT64.buffer([Decimal('0.25'), Decimal('2')])
        np.testing.assert_array_equal(buf, [0.25, 2.0])


# ═══════════════════════════════════════════════════════════════════════
# Decimal
# ═══════════════════════════════════════════════════════════════════════


class TestDecimalDomain:

    def test_default_precision(self):
        assert DECIMAL.precision == DECIMAL_PRECISION == 100

    def test_float_converts_through_repr(self):
        assert DECIMAL.convert(0.1) == Decimal('0.1')

    def test_string_parses_exactly(self):
        assert DECIMAL.convert('0.1000000000000000000001') == Decimal('0.1000000000000000000001')

    def test_bad_string_rejected(self):
        with pytest.raises(ValidationError, match="parse"):
            DECIMAL.convert('not a number')

    def test_numpy_scalars(self):
        assert DECIMAL.convert(np.int64(7)) == Decimal(7)
        assert DECIMAL.convert(np.float64(0.5)) == Decimal('0.5')
        assert DECIMAL.convert(np.True_) == Decimal(1)

    def test_object_rejected(self):
        with pytest.raises(ValidationError):
            DECIMAL.convert(object())

    def test_division_keeps_100_digits(self):
        third = DECIMAL.divide(Decimal(1), Decimal(3))
        assert len(third.as_tuple().digits) == 100

    def test_arithmetic_ignores_ambient_context(self):
        with decimal.localcontext() as ctx:
            ctx.prec = 5
            third = DECIMAL.divide(Decimal(1), Decimal(3))
        assert len(third.as_tuple().digits) == 100

    def test_context_applies_to_operators(self):
        with DECIMAL.context():
            third = Decimal(1) / Decimal(3)
        assert len(third.as_tuple().digits) == 100

    def test_divide_by_zero_raises(self):
        with pytest.raises(decimal.DivisionByZero):
            DECIMAL.divide(Decimal(1), Decimal(0))

    def test_custom_precision(self):
        domain = DecimalDomain(precision=10)
        third = domain.divide(Decimal(1), Decimal(3))
        assert len(third.as_tuple().digits) == 10

    def test_buffer_is_object_array(self):
        buf = DECIMAL.buffer(np.array([[1.5, 2.0], [3.0, 4.0]]))
        assert buf.dtype == object
        assert buf.shape == (4,)
        assert all(isinstance(v, Decimal) for v in buf)
        assert buf[0] == Decimal('1.5')

    @pytest.mark.parametrize("value", [float('nan'), float('inf'), 'NaN', '-Infinity'])
    def test_buffer_rejects_non_finite(self, value):
        with pytest.raises(ValidationError, match="finite"):
            DECIMAL.buffer([1.0, value])

    def test_zeros(self):
        buf = DECIMAL.zeros(3)
        assert list(buf) == [Decimal(0)] * 3
