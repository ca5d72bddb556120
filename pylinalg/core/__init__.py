"""
Core infrastructure for pylinalg.

This module provides shared abstractions, utilities, and compute
infrastructure used by the matrix containers, the raw-buffer kernel and
the iterative solvers.

Key components:
    protocols: NumericDomain, Backend protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Numeric domains, timing, tolerances, elimination engine
"""

from pylinalg.core.protocols import NumericDomain, Backend
from pylinalg.core.result import Result
from pylinalg.core.exceptions import (
    PyLinalgError,
    ValidationError,
    ConstructionError,
    DimensionError,
    IndexOutOfBoundsError,
    InvalidParameterError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Protocols
    "NumericDomain",
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyLinalgError",
    "ValidationError",
    "ConstructionError",
    "DimensionError",
    "IndexOutOfBoundsError",
    "InvalidParameterError",
    "NumericalError",
    "SingularMatrixError",
]
