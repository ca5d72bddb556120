"""
Strided vector primitives.

Unvalidated BLAS-style level-1 operations over flat numpy buffers, shared
by the elimination engine and the public raw-buffer kernel (which wraps
them with validation).

Every region is addressed by (start, inc, n) where n is the extent of the
region: the touched indices are start, start + inc, ... strictly below
start + n. All functions mutate ``x`` in place and work on float64 and
object (Decimal) buffers alike; Decimal buffers must be processed inside
the domain's ``context()``.
"""

from typing import Any

from numpy.typing import NDArray


def fill(x: NDArray[Any], start: int, inc: int, n: int, value: Any) -> None:
    """x[start:start+n:inc] = value."""
    if n == 0:
        return
    x[start:start + n:inc] = value


def negate(x: NDArray[Any], start: int, inc: int, n: int) -> None:
    """x[start:start+n:inc] = -x[start:start+n:inc]."""
    if n == 0:
        return
    region = slice(start, start + n, inc)
    x[region] = -x[region]


def scale(x: NDArray[Any], start: int, inc: int, n: int, alpha: Any) -> None:
    """
    x[start:start+n:inc] *= alpha.

    alpha == 1 is a no-op, alpha == 0 fills the region with zeros and
    alpha == -1 negates it.
    """
    if n == 0 or alpha == 1:
        return
    if alpha == 0:
        fill(x, start, inc, n, type(alpha)(0))
    elif alpha == -1:
        negate(x, start, inc, n)
    else:
        region = slice(start, start + n, inc)
        x[region] = x[region] * alpha


def divide(x: NDArray[Any], start: int, inc: int, n: int, alpha: Any) -> None:
    """
    x[start:start+n:inc] /= alpha.

    alpha == 1 is a no-op and alpha == -1 negates the region. alpha == 0
    is not special-cased: the domain decides (inf/nan or an exception).
    """
    if n == 0 or alpha == 1:
        return
    if alpha == -1:
        negate(x, start, inc, n)
    else:
        region = slice(start, start + n, inc)
        x[region] = x[region] / alpha


def axpy(x: NDArray[Any], start_x: int, start_y: int, inc: int, n: int, alpha: Any) -> None:
    """
    x[start_x + k] += alpha * x[start_y + k] for k in range(0, n, inc).

    Both streams live in the same buffer. The right-hand side is read in
    full before any element is written. alpha == 0 is a no-op.
    """
    if n == 0 or alpha == 0:
        return
    target = slice(start_x, start_x + n, inc)
    source = slice(start_y, start_y + n, inc)
    x[target] = x[target] + alpha * x[source]
