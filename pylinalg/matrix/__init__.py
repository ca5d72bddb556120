"""
Dense matrix containers.

Public API:
    DenseMatrix(values)    -> float64 matrix
    PreciseMatrix(values)  -> 100-digit decimal matrix

Both share the Matrix interface: factories (random, identity,
upper_triangular, random_symmetric), shape predicates, arithmetic
(multiply, subtract, transpose, norm, condition_number) and elimination
(gauss_jordan, determinant, inverse, eigenvalues).

Example:
    >>> from pylinalg.matrix import DenseMatrix
    >>> m = DenseMatrix([[4, 7], [2, 6]])
    >>> m.determinant()
    10.0
    >>> print(m.inverse())
    2x2
    +6.000000e-01, -7.000000e-01
    -2.000000e-01, +4.000000e-01
"""

from pylinalg.matrix.dense import DenseMatrix, Matrix, PreciseMatrix

__all__ = [
    "Matrix",
    "DenseMatrix",
    "PreciseMatrix",
]
