"""
Solver dispatch for linear systems.

This module provides the solve() function (public API) and backend selection.
"""

from typing import Any, Literal

import numpy as np

from pylinalg.core.compute.tolerances import JACOBI_MAX_ITERATIONS, JACOBI_TOLERANCE
from pylinalg.core.exceptions import InvalidParameterError
from pylinalg.core.validation import check_non_negative
from pylinalg.matrix import Matrix
from pylinalg.solvers.backends.jacobi import JacobiBackend
from pylinalg.solvers.design import LinearSystemDesign
from pylinalg.solvers.solution import JacobiSolution


# Type alias for method selection
MethodChoice = Literal['jacobi']


def solve(
    A: Any,
    b: Any,
    *,
    method: MethodChoice = 'jacobi',
    tol: float = JACOBI_TOLERANCE,
    max_iter: int = JACOBI_MAX_ITERATIONS,
) -> JacobiSolution:
    """
    Solve the square linear system A x = b iteratively.

    This is the primary public API for the solvers. All input validation,
    backend selection, and result wrapping happens here.

    Args:
        A: Square coefficient matrix. A Matrix, or an array-like grid.
        b: Right-hand side. An n x 1 Matrix, a grid with one column, or
            a flat array-like of length n.
        method: Iterative method. Only 'jacobi' is available.
        tol: Stop once no component moves by more than this. Must be >= 0.
        max_iter: Maximum number of iterations. Must be >= 1.

    Returns:
        JacobiSolution with the iterate, convergence diagnostics and summary

    Raises:
        ValidationError: If A and b come from different numeric domains
        DimensionError: If A is not square or b does not match A
        InvalidParameterError: If tol < 0, max_iter < 1 or method is unknown

    Example:
        >>> from pylinalg.solvers import solve
        >>> result = solve([[4, 1], [2, 5]], [1, 2])
        >>> result.converged
        True
        >>> print(result.summary())
    """
    # === Input Validation ===
    # This is the boundary - validate here, trust everywhere else
    check_non_negative(tol, 'tol')
    if isinstance(max_iter, bool) or not isinstance(max_iter, (int, np.integer)) or max_iter < 1:
        raise InvalidParameterError(f"max_iter: must be an integer >= 1, got {max_iter!r}")

    # === Construct Design ===
    design = LinearSystemDesign.build(A, b)

    # === Select Backend ===
    backend_impl = _get_backend(method, design)

    # === Solve ===
    result = backend_impl.solve(design, tol=tol, max_iter=max_iter)

    # === Wrap and Return ===
    return JacobiSolution(_result=result, _design=design)


def jacobi(A: Any, b: Any) -> Matrix:
    """
    Jacobi iteration with the default tolerance and iteration budget.

    Returns only the final iterate; use solve() for diagnostics.
    """
    return solve(A, b, method='jacobi').x


def _get_backend(choice: MethodChoice, design: LinearSystemDesign):
    """
    Select and instantiate the backend for a method.

    Raises:
        InvalidParameterError: If the method is unknown
    """
    if choice == 'jacobi':
        return JacobiBackend(design.domain)
    raise InvalidParameterError(f"Unknown method: {choice!r}")
