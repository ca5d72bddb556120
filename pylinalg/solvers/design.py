"""
Linear system design.

Design wraps the coefficient matrix A and right-hand side b of A x = b.
It is the validation boundary for the solvers: once built, backends trust
the shapes and the domain without checking again.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from pylinalg.core.exceptions import DimensionError, ValidationError
from pylinalg.core.protocols import NumericDomain
from pylinalg.matrix import DenseMatrix, Matrix


@dataclass(frozen=True)
class LinearSystemDesign:
    """
    Square linear system A x = b.

    Immutable after construction.

    Construction:
        LinearSystemDesign.build(A, b)          # Matrix operands
        LinearSystemDesign.build(A, [1, 2, 3])  # b as a flat array-like

    Array-like operands are converted to the class of the other operand
    when that one is a Matrix, and to DenseMatrix otherwise. A flat b is
    read as a column vector.
    """
    _A: Matrix
    _b: Matrix
    _n: int

    @classmethod
    def build(cls, A: Any, b: Any) -> LinearSystemDesign:
        """
        Validate and wrap a linear system.

        Raises:
            ConstructionError: If an array-like operand is not a valid grid
            ValidationError: If A and b come from different numeric domains
            DimensionError: If A is not square or b is not an A.rows x 1 column
        """
        matrix_class = _operand_class(A, b)
        A = _as_matrix(A, matrix_class, column=False)
        b = _as_matrix(b, matrix_class, column=True)

        if A.domain is not b.domain:
            raise ValidationError(
                f"A and b must share a numeric domain, got "
                f"{A.domain.name} and {b.domain.name}"
            )
        if not A.is_square():
            raise DimensionError(f"A: must be square, got {A.rows} x {A.columns}")
        if b.columns != 1 or b.rows != A.rows:
            raise DimensionError(
                f"b: expected a {A.rows} x 1 column vector, got {b.rows} x {b.columns}"
            )
        return cls(_A=A, _b=b, _n=A.rows)

    # === Properties ===

    @property
    def A(self) -> Matrix:
        """Coefficient matrix (n x n)."""
        return self._A

    @property
    def b(self) -> Matrix:
        """Right-hand side (n x 1)."""
        return self._b

    @property
    def n(self) -> int:
        """Number of unknowns."""
        return self._n

    @property
    def domain(self) -> NumericDomain:
        return self._A.domain

    @property
    def matrix_class(self) -> type[Matrix]:
        """Concrete Matrix class of the operands."""
        return type(self._A)


def _operand_class(A: Any, b: Any) -> type[Matrix]:
    if isinstance(A, Matrix):
        return type(A)
    if isinstance(b, Matrix):
        return type(b)
    return DenseMatrix


def _as_matrix(value: Any, matrix_class: type[Matrix], column: bool) -> Matrix:
    if isinstance(value, Matrix):
        return value
    if column and value is not None:
        arr = np.asarray(value, dtype=object)
        if arr.ndim == 1:
            value = arr.reshape(-1, 1)
    return matrix_class(value)
