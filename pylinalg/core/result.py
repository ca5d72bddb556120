"""
Generic result container for pylinalg computations.

The Result class provides a standardized envelope for iterative solvers.
It carries timing and diagnostics alongside the computed payload while
each solver defines its own parameter structure.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (converged, iterations, final change)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for solver computations.

    Type Parameters:
        P: The solver-specific parameter payload type

    Attributes:
        params: Solver-specific payload (iterate, iteration count, ...)
        info: Structured metadata (method, convergence, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=JacobiParams(x=x, iterations=12, converged=True,
        ...                         final_change=3e-9),
        ...     info={'method': 'jacobi', 'tol': 1e-8, 'max_iter': 100},
        ...     timing={'total_seconds': 0.002, 'iterations': 0.0019},
        ...     backend_name='float64_jacobi'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
