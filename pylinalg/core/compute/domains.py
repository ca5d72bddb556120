"""
Numeric domains.

Two concrete implementations of the NumericDomain protocol:

    FLOAT64: IEEE double precision on numpy float64 buffers
    DECIMAL: decimal.Decimal with a fixed 100-digit context on numpy
             object buffers

Every algorithm in the package is written once against these and never
branches on the concrete domain.
"""

from contextlib import AbstractContextManager, nullcontext
from dataclasses import dataclass, field
import decimal
from decimal import Decimal
from numbers import Real
from typing import Any, Iterable

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.compute.precision import DECIMAL_PRECISION
from pylinalg.core.exceptions import ValidationError


class FloatDomain:
    """
    Native double-precision floating point.

    Scalars are numpy.float64 so that division by zero follows IEEE rules
    (inf/nan with a numpy RuntimeWarning) instead of raising.
    """

    @property
    def name(self) -> str:
        return 'float64'

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(np.float64)

    @property
    def zero(self) -> np.float64:
        return np.float64(0.0)

    @property
    def one(self) -> np.float64:
        return np.float64(1.0)

    def convert(self, value: Any) -> np.float64:
        if isinstance(value, (str, bytes)) or not isinstance(value, (Real, Decimal, np.number, np.bool_)):
            raise ValidationError(
                f"cannot use {value!r} ({type(value).__name__}) as a float64 entry"
            )
        return np.float64(float(value))

    def to_python(self, value: Any) -> float:
        return float(value)

    def add(self, a, b):
        return np.float64(a) + np.float64(b)

    def subtract(self, a, b):
        return np.float64(a) - np.float64(b)

    def multiply(self, a, b):
        return np.float64(a) * np.float64(b)

    def divide(self, a, b):
        return np.float64(a) / np.float64(b)

    def negate(self, a):
        return -np.float64(a)

    def absolute(self, a):
        return np.abs(np.float64(a))

    def is_zero(self, a) -> bool:
        return bool(a == 0.0)

    def context(self) -> AbstractContextManager:
        return nullcontext()

    def zeros(self, shape: int | tuple[int, ...]) -> NDArray[np.float64]:
        return np.zeros(shape, dtype=np.float64)

    def buffer(self, values: Iterable[Any]) -> NDArray[np.float64]:
        arr = np.asarray(values)
        if np.issubdtype(arr.dtype, np.number):
            return arr.astype(np.float64).ravel()
        return np.array([self.convert(v) for v in arr.ravel()], dtype=np.float64)

    def __repr__(self) -> str:
        return 'FloatDomain()'


@dataclass(frozen=True)
class DecimalDomain:
    """
    Arbitrary-precision decimal arithmetic.

    All scalar operations round through ``decimal_context`` explicitly.
    Buffers are numpy object arrays of Decimal; vectorised arithmetic on
    them calls Decimal's operators, which read the thread's current
    context, so it must run inside ``context()``.

    Attributes:
        precision: Significant digits kept after every operation
    """
    precision: int = DECIMAL_PRECISION
    decimal_context: decimal.Context = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            'decimal_context',
            decimal.Context(prec=self.precision, rounding=decimal.ROUND_HALF_EVEN),
        )

    @property
    def name(self) -> str:
        return 'decimal'

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(object)

    @property
    def zero(self) -> Decimal:
        return Decimal(0)

    @property
    def one(self) -> Decimal:
        return Decimal(1)

    def convert(self, value: Any) -> Decimal:
        """
        Convert to Decimal.

        Floats go through their shortest repr, so 0.1 becomes Decimal('0.1')
        rather than the exact binary expansion.
        """
        if isinstance(value, Decimal):
            return value
        if isinstance(value, (bool, np.bool_)):
            return Decimal(int(value))
        if isinstance(value, (float, np.floating)):
            return Decimal(repr(float(value)))
        if isinstance(value, (int, np.integer)):
            return Decimal(int(value))
        if isinstance(value, str):
            try:
                return Decimal(value)
            except decimal.InvalidOperation as e:
                raise ValidationError(f"cannot parse {value!r} as a decimal entry") from e
        raise ValidationError(
            f"cannot use {value!r} ({type(value).__name__}) as a decimal entry"
        )

    def to_python(self, value: Any) -> Decimal:
        return value

    def add(self, a, b):
        return self.decimal_context.add(a, b)

    def subtract(self, a, b):
        return self.decimal_context.subtract(a, b)

    def multiply(self, a, b):
        return self.decimal_context.multiply(a, b)

    def divide(self, a, b):
        return self.decimal_context.divide(a, b)

    def negate(self, a):
        return self.decimal_context.minus(a)

    def absolute(self, a):
        return self.decimal_context.abs(a)

    def is_zero(self, a) -> bool:
        return a.is_zero()

    def context(self) -> AbstractContextManager:
        return decimal.localcontext(self.decimal_context)

    def zeros(self, shape: int | tuple[int, ...]) -> NDArray[np.object_]:
        return np.full(shape, Decimal(0), dtype=object)

    def buffer(self, values: Iterable[Any]) -> NDArray[np.object_]:
        if isinstance(values, np.ndarray):
            values = values.ravel()
        converted = [self.convert(v) for v in values]
        for value in converted:
            if not value.is_finite():
                raise ValidationError(f"decimal entries must be finite, got {value}")
        out = np.empty(len(converted), dtype=object)
        out[:] = converted
        return out


FLOAT64 = FloatDomain()
DECIMAL = DecimalDomain()
