"""
Validated strided primitives over raw float64 buffers.

Each function addresses a region of a 1-D numpy buffer by (start, inc, n),
where n is the extent of the region: the touched indices are
start, start + inc, ... strictly below start + n. Buffers are mutated in
place.

Validation (all raise InvalidParameterError, before any write):
    - buffer is a 1-D numpy.ndarray (not None)
    - n >= 0 and inc > 0
    - len(buffer) >= n
    - 0 <= start and start + n <= len(buffer)
"""

from typing import Any

from numpy.typing import NDArray

from pylinalg.core.compute.linalg import blas
from pylinalg.core.validation import check_buffer, check_region


def fill(x: NDArray[Any], start: int, inc: int, n: int, value: float) -> None:
    """Set every addressed element to value."""
    check_buffer(x, 'x')
    check_region(len(x), start, inc, n, 'x')
    blas.fill(x, start, inc, n, value)


def negate(x: NDArray[Any], start: int, inc: int, n: int) -> None:
    """Flip the sign of every addressed element."""
    check_buffer(x, 'x')
    check_region(len(x), start, inc, n, 'x')
    blas.negate(x, start, inc, n)


def scale(x: NDArray[Any], start: int, inc: int, n: int, alpha: float) -> None:
    """
    Multiply every addressed element by alpha.

    Fast paths: alpha == 1 is a no-op, alpha == 0 fills the region with
    zeros, alpha == -1 negates the region.
    """
    check_buffer(x, 'x')
    check_region(len(x), start, inc, n, 'x')
    blas.scale(x, start, inc, n, alpha)


def divide(x: NDArray[Any], start: int, inc: int, n: int, alpha: float) -> None:
    """
    Divide every addressed element by alpha.

    Fast paths: alpha == 1 is a no-op, alpha == -1 negates the region.
    Division by zero follows IEEE rules (inf/nan).
    """
    check_buffer(x, 'x')
    check_region(len(x), start, inc, n, 'x')
    blas.divide(x, start, inc, n, alpha)


def axpy(
    x: NDArray[Any],
    start_x: int,
    start_y: int,
    inc: int,
    n: int,
    alpha: float,
) -> None:
    """
    Scaled accumulate within one buffer: x[start_x + k] += alpha * x[start_y + k].

    k runs over 0, inc, 2*inc, ... below n. Both index streams are
    validated against the buffer. The source stream is read in full before
    the target is written. alpha == 0 is a no-op.
    """
    check_buffer(x, 'x')
    check_region(len(x), start_x, inc, n, 'x (target)')
    check_region(len(x), start_y, inc, n, 'x (source)')
    blas.axpy(x, start_x, start_y, inc, n, alpha)
