"""
Elementary matrix arithmetic on flat row-major buffers.

Generic over the numeric domain. Products accumulate over the inner
index left to right, one rank-1 update per k, which reproduces the
rounding of the textbook triple loop exactly in either domain.
"""

from typing import Any

from numpy.typing import NDArray

from pylinalg.core.protocols import NumericDomain


def multiply(
    a: NDArray[Any],
    b: NDArray[Any],
    rows: int,
    inner: int,
    columns: int,
    domain: NumericDomain,
) -> NDArray[Any]:
    """
    (rows x inner) @ (inner x columns).

    Entry (i, j) is 0 + a[i,0]*b[0,j] + a[i,1]*b[1,j] + ... in that order.
    """
    left = a.reshape(rows, inner)
    right = b.reshape(inner, columns)
    out = domain.zeros((rows, columns))
    with domain.context():
        for k in range(inner):
            out += left[:, k:k + 1] * right[k:k + 1, :]
    return out.ravel()


def subtract(a: NDArray[Any], b: NDArray[Any], domain: NumericDomain) -> NDArray[Any]:
    """Element-wise a - b of two equally sized buffers."""
    with domain.context():
        return a - b


def transpose(a: NDArray[Any], rows: int, columns: int) -> NDArray[Any]:
    """(rows x columns) -> (columns x rows)."""
    return a.reshape(rows, columns).T.copy().ravel()
