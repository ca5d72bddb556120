"""
Exception hierarchy for pylinalg.

All exceptions inherit from PyLinalgError to allow catching any
library-specific error. Module-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from typing import Any


class PyLinalgError(Exception):
    """Base exception for all pylinalg errors."""
    pass


class ValidationError(PyLinalgError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class ConstructionError(ValidationError):
    """
    A matrix could not be built from the given values.

    Raised for None input, zero rows or columns, ragged rows and
    non-positive factory sizes.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix shapes are incorrect or inconsistent.

    Raised when operand shapes are incompatible (multiply, subtract) or
    when a rectangular matrix reaches an operation that needs a square one
    (determinant, inverse, triangularization, triangularity predicates).
    """
    pass


class IndexOutOfBoundsError(DimensionError):
    """
    Element access outside the matrix.

    Attributes:
        row: Requested row index
        column: Requested column index
        shape: (rows, columns) of the accessed matrix
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        column: int | None = None,
        shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.row = row
        self.column = column
        self.shape = shape


class InvalidParameterError(ValidationError):
    """
    A scalar parameter is outside its valid range.

    Raised for negative tolerances, negative counts, non-positive strides,
    undersized or missing buffers, out-of-range start offsets and
    inverted (low > high) sampling bounds.
    """
    pass


class NumericalError(PyLinalgError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when inversion is requested for a matrix whose determinant,
    as computed by one-pass triangularization, is exactly zero.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: The determinant that was computed, if available
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: Any = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant
