"""
Gauss-Jordan elimination on flat buffers.

The single implementation of triangularization, determinant and inversion.
It is generic over the numeric domain and works on row-major flat buffers
of an n x n matrix, so both the Matrix containers and the raw-buffer
kernel are thin wrappers around it.

There is deliberately no pivoting: each step divides by the current
diagonal entry as-is. A zero pivot yields inf/nan in the float64 domain
and raises decimal.DivisionByZero / decimal.InvalidOperation in the
decimal domain.

Inputs are never modified; every function works on a private copy.
"""

from typing import Any

from numpy.typing import NDArray

from pylinalg.core.exceptions import SingularMatrixError
from pylinalg.core.protocols import NumericDomain
from pylinalg.core.compute.linalg import blas


def triangularize(m: NDArray[Any], n: int, domain: NumericDomain) -> NDArray[Any]:
    """
    One-pass Gauss-Jordan triangularization.

    For each pivot row i and every row j below it, computes
    factor = M[j][i] / M[i][i], zeroes columns 0..i of row j and subtracts
    factor * M[i][k] from M[j][k] for k > i.

    Args:
        m: Row-major buffer holding at least n * n entries
        n: Matrix order
        domain: Numeric domain of the buffer

    Returns:
        New buffer holding an upper triangular matrix
    """
    out = m[:n * n].copy()
    with domain.context():
        for i in range(n):
            pivot_row = i * n
            pivot = out[pivot_row + i]
            for j in range(i + 1, n):
                row = j * n
                factor = domain.divide(out[row + i], pivot)
                blas.fill(out, row, 1, i + 1, domain.zero)
                blas.axpy(out, row + i + 1, pivot_row + i + 1, 1, n - i - 1, domain.negate(factor))
    return out


def diagonal(m: NDArray[Any], n: int) -> list[Any]:
    """Diagonal entries of an n x n row-major buffer, in pivot order."""
    return [m[i * n + i] for i in range(n)]


def diagonal_product(m: NDArray[Any], n: int, domain: NumericDomain) -> Any:
    """Product of the diagonal, accumulated in diagonal order from one."""
    result = domain.one
    for d in diagonal(m, n):
        result = domain.multiply(result, d)
    return result


def determinant(m: NDArray[Any], n: int, domain: NumericDomain) -> Any:
    """Determinant as the product of the triangularized diagonal."""
    return diagonal_product(triangularize(m, n, domain), n, domain)


def invert(
    m: NDArray[Any],
    n: int,
    domain: NumericDomain,
    matrix_name: str = 'A',
) -> NDArray[Any]:
    """
    Inverse by full Gauss-Jordan reduction of [A | I].

    For each pivot row i the row is divided by its pivot in both the
    working copy and the accumulator, then factor * row_i is subtracted
    from every other row j, with factor = row_j[i].

    Args:
        m: Row-major buffer holding at least n * n entries
        n: Matrix order
        domain: Numeric domain of the buffer
        matrix_name: Name used in the singularity error

    Returns:
        New buffer holding the inverse

    Raises:
        SingularMatrixError: If the determinant is exactly zero
    """
    det = determinant(m, n, domain)
    if domain.is_zero(det):
        raise SingularMatrixError(
            f"{matrix_name}: matrix is singular (determinant is zero), not invertible",
            matrix_name=matrix_name,
            determinant=domain.to_python(det),
        )

    if n == 1:
        return domain.buffer([domain.divide(domain.one, m[0])])

    work = m[:n * n].copy()
    inverse = domain.zeros(n * n)
    with domain.context():
        blas.fill(inverse, 0, n + 1, n * n, domain.one)
        for i in range(n):
            pivot_row = i * n
            pivot = work[pivot_row + i]
            blas.divide(work, pivot_row, 1, n, pivot)
            blas.divide(inverse, pivot_row, 1, n, pivot)

            for j in range(n):
                if j == i:
                    continue
                row = j * n
                factor = domain.negate(work[row + i])
                blas.axpy(work, row, pivot_row, 1, n, factor)
                blas.axpy(inverse, row, pivot_row, 1, n, factor)

    return inverse
