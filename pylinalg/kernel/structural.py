"""
Raw-buffer triangularization, determinant and inversion.

The same elimination algorithms as the Matrix containers, called directly
on flat row-major float64 buffers with the shape passed out of band. Input
buffers are copied first and never modified; results are new buffers.

Every structural operation requires rows == columns.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.compute.domains import FLOAT64
from pylinalg.core.compute.linalg import elimination
from pylinalg.core.exceptions import InvalidParameterError
from pylinalg.core.validation import (
    check_bounds,
    check_dimensions,
    check_square,
)


def random_matrix(
    rows: int,
    columns: int,
    low: float,
    high: float,
    *,
    rng: np.random.Generator | int | None = None,
) -> NDArray[np.float64]:
    """
    Flat buffer of rows * columns values uniform in [low, high).

    low == high yields a constant buffer.

    Raises:
        InvalidParameterError: If rows or columns is negative or low > high
    """
    check_dimensions(rows, columns)
    check_bounds(low, high)
    size = rows * columns
    if low == high:
        return np.full(size, low, dtype=np.float64)
    return np.random.default_rng(rng).uniform(low, high, size=size)


def _prepare(m: ArrayLike | None, rows: int, columns: int) -> NDArray[np.float64]:
    """Validate a structural call and return a private float64 copy of the matrix."""
    check_dimensions(rows, columns)
    if m is None:
        raise InvalidParameterError("m: buffer is None")
    buffer = np.array(m, dtype=np.float64).ravel()
    size = rows * columns
    if len(buffer) < size:
        raise InvalidParameterError(
            f"m: buffer of length {len(buffer)} cannot hold a {rows} x {columns} matrix"
        )
    check_square((rows, columns), 'm')
    return buffer[:size]


def triangularize(m: ArrayLike, rows: int, columns: int) -> NDArray[np.float64]:
    """
    One-pass Gauss-Jordan triangularization of a square buffer.

    Raises:
        InvalidParameterError: If the buffer is None or too short, or a
            dimension is negative
        DimensionError: If rows != columns
    """
    buffer = _prepare(m, rows, columns)
    return elimination.triangularize(buffer, rows, FLOAT64)


def determinant(m: ArrayLike, rows: int, columns: int) -> float:
    """Product of the triangularized diagonal. Same errors as triangularize()."""
    buffer = _prepare(m, rows, columns)
    return float(elimination.determinant(buffer, rows, FLOAT64))


def invert(m: ArrayLike, rows: int, columns: int) -> NDArray[np.float64]:
    """
    Inverse of a square buffer by full Gauss-Jordan reduction.

    Raises:
        InvalidParameterError: If the buffer is None or too short, or a
            dimension is negative
        DimensionError: If rows != columns
        SingularMatrixError: If the determinant is exactly zero
    """
    buffer = _prepare(m, rows, columns)
    return elimination.invert(buffer, rows, FLOAT64, matrix_name='m')
