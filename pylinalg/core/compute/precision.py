"""
Numerical precision constants and utilities.

Provides float64 machine epsilon, the decimal working precision and
the relative error measure used by tests and benchmarks.
"""

from typing import Any

import numpy as np


# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16

# Significant digits carried by the arbitrary-precision domain
DECIMAL_PRECISION: int = 100


def relative_error(expected: Any, actual: Any) -> Any:
    """
    |actual - expected| / |expected|.

    Works for floats and Decimals alike (both operands must share a type).
    An expected value of zero yields inf/nan for floats and raises for
    Decimals; callers compare against non-zero references.
    """
    if isinstance(expected, float) and expected == 0.0:
        return float('inf') if actual != 0.0 else 0.0
    return abs((actual - expected) / expected)
