"""
Iterative solvers for square linear systems.

Public API:
    solve(A, b, ...) -> JacobiSolution
    jacobi(A, b) -> Matrix

Both accept DenseMatrix or PreciseMatrix operands (or array-likes) and
return results in the operands' numeric domain.

Example:
    >>> from pylinalg.matrix import PreciseMatrix
    >>> from pylinalg.solvers import solve
    >>> A = PreciseMatrix([[4, 1], [2, 5]])
    >>> b = PreciseMatrix([[1], [2]])
    >>> result = solve(A, b, tol=1e-30)
    >>> result.backend_name
    'decimal_jacobi'
"""

from pylinalg.solvers.design import LinearSystemDesign
from pylinalg.solvers.solution import JacobiParams, JacobiSolution
from pylinalg.solvers.solvers import jacobi, solve

__all__ = [
    "solve",
    "jacobi",
    "LinearSystemDesign",
    "JacobiSolution",
    "JacobiParams",
]
