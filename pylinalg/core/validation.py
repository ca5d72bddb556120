"""
Input validation utilities for pylinalg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent. Every check runs before any
allocation or mutation, so a failed call never leaves partial results.

Design principles:
    - No silent truncation or padding of user input
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.exceptions import (
    ConstructionError,
    DimensionError,
    InvalidParameterError,
)


def check_grid(values: Any, name: str) -> tuple[int, int, list[Any]]:
    """
    Validate a rectangular grid of values and flatten it row-major.

    Accepts any sequence of sequences, including a 2-D numpy array.

    Args:
        values: Grid to validate
        name: Parameter name for error messages

    Returns:
        (rows, columns, flat) with len(flat) == rows * columns

    Raises:
        ConstructionError: If values is None, has no rows, no columns,
            or rows of differing length
    """
    if values is None:
        raise ConstructionError(f"{name}: expected a grid of values, got None")
    if isinstance(values, np.ndarray) and values.ndim != 2:
        raise ConstructionError(
            f"{name}: expected 2D array, got {values.ndim}D with shape {values.shape}"
        )
    try:
        rows = len(values)
    except TypeError as e:
        raise ConstructionError(f"{name}: expected a sequence of rows: {e}") from e
    if rows < 1:
        raise ConstructionError(f"{name}: invalid number of rows ({rows})")

    first = values[0]
    if first is None or isinstance(first, (str, bytes)) or not hasattr(first, '__len__'):
        raise ConstructionError(f"{name}: row 0 is not a sequence ({type(first).__name__})")
    columns = len(first)
    if columns < 1:
        raise ConstructionError(f"{name}: invalid number of columns ({columns})")

    flat: list[Any] = []
    for i, row in enumerate(values):
        if row is None or isinstance(row, (str, bytes)) or not hasattr(row, '__len__'):
            raise ConstructionError(f"{name}: row {i} is not a sequence ({type(row).__name__})")
        if len(row) != columns:
            raise ConstructionError(
                f"{name}: row {i} has {len(row)} columns, expected {columns}"
            )
        flat.extend(row)
    return rows, columns, flat


def check_size(size: int, name: str) -> None:
    """
    Verify a matrix dimension is a positive integer.

    Raises:
        ConstructionError: If size is not an int or is below 1
    """
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
        raise ConstructionError(f"{name}: expected an integer, got {type(size).__name__}")
    if size < 1:
        raise ConstructionError(f"{name}: must be >= 1, got {size}")


def check_bounds(low: float, high: float) -> None:
    """
    Verify a sampling interval is ordered.

    Raises:
        InvalidParameterError: If low > high
    """
    if low > high:
        raise InvalidParameterError(f"low ({low}) must not exceed high ({high})")


def check_non_negative(value: Any, name: str) -> None:
    """
    Verify value >= 0.

    Raises:
        InvalidParameterError: If value is negative
    """
    if value < 0:
        raise InvalidParameterError(f"{name}: must be non-negative, got {value}")


def check_positive(value: Any, name: str) -> None:
    """
    Verify value > 0.

    Raises:
        InvalidParameterError: If value is zero or negative
    """
    if value <= 0:
        raise InvalidParameterError(f"{name}: must be positive, got {value}")


def check_square(shape: tuple[int, int], name: str) -> None:
    """
    Verify a shape describes a square matrix.

    Raises:
        DimensionError: If rows != columns
    """
    rows, columns = shape
    if rows != columns:
        raise DimensionError(f"{name}: must be square, got {rows} x {columns}")


def check_same_shape(
    a: tuple[int, int],
    b: tuple[int, int],
    names: tuple[str, str],
) -> None:
    """
    Verify two shapes are identical.

    Raises:
        DimensionError: If the shapes differ
    """
    if a != b:
        raise DimensionError(
            f"Different shapes: {names[0]}={a[0]} x {a[1]}, {names[1]}={b[0]} x {b[1]}"
        )


def check_buffer(x: Any, name: str) -> NDArray[Any]:
    """
    Verify a raw buffer is a 1-D floating-point numpy array.

    Raw-buffer primitives mutate in place, so array-likes that would need a
    copy (lists, tuples) are rejected rather than converted.

    Raises:
        InvalidParameterError: If x is None, not an ndarray, not 1-D,
            or not of a floating dtype
    """
    if x is None:
        raise InvalidParameterError(f"{name}: buffer is None")
    if not isinstance(x, np.ndarray):
        raise InvalidParameterError(
            f"{name}: expected numpy.ndarray, got {type(x).__name__}"
        )
    if x.ndim != 1:
        raise InvalidParameterError(
            f"{name}: expected 1D buffer, got {x.ndim}D with shape {x.shape}"
        )
    if not np.issubdtype(x.dtype, np.floating):
        raise InvalidParameterError(
            f"{name}: expected a floating-point buffer, got dtype {x.dtype}"
        )
    return x


def check_region(length: int, start: int, inc: int, n: int, name: str) -> None:
    """
    Verify a strided region (start, inc, n) lies inside a buffer.

    n is the extent of the region: the touched indices are
    start, start + inc, ... strictly below start + n.

    Raises:
        InvalidParameterError: If n < 0, inc <= 0, length < n, start < 0
            or start + n > length
    """
    check_non_negative(n, f"{name} count")
    check_positive(inc, f"{name} increment")
    if length < n:
        raise InvalidParameterError(
            f"{name}: buffer of length {length} is shorter than count {n}"
        )
    if start < 0 or start + n > length:
        raise InvalidParameterError(
            f"{name}: cannot iterate on [{start}; {start + n}) with buffer of length {length}"
        )


def check_dimensions(rows: int, columns: int) -> None:
    """
    Verify raw-buffer dimensions are non-negative.

    Raises:
        InvalidParameterError: If rows or columns is negative
    """
    check_non_negative(rows, 'rows')
    check_non_negative(columns, 'columns')
