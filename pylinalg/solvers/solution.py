"""
Linear system solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from pylinalg.core.result import Result
from pylinalg.matrix import Matrix

if TYPE_CHECKING:
    from pylinalg.solvers.design import LinearSystemDesign


@dataclass(frozen=True)
class JacobiParams:
    """
    Parameter payload for the Jacobi iteration.

    This is the immutable data computed by backends.
    """
    x: Matrix
    iterations: int
    converged: bool
    final_change: Any


@dataclass
class JacobiSolution:
    """
    User-facing result of an iterative solve.

    Wraps the backend Result and provides accessors for the iterate,
    convergence diagnostics and the residual.
    """
    _result: Result[JacobiParams]
    _design: 'LinearSystemDesign'

    # Cached computations
    _residual: Matrix | None = None

    @property
    def x(self) -> Matrix:
        """Final iterate as an n x 1 column in the input domain."""
        return self._result.params.x

    @property
    def iterations(self) -> int:
        return self._result.params.iterations

    @property
    def converged(self) -> bool:
        return self._result.params.converged

    @property
    def final_change(self) -> Any:
        """Largest absolute component change in the last iteration."""
        return self._result.params.final_change

    def residual(self) -> Matrix:
        """A @ x - b."""
        if self._residual is None:
            self._residual = self._design.A.multiply(self.x).subtract(self._design.b)
        return self._residual

    @property
    def residual_norm(self) -> Any:
        """Squared Euclidean norm of the residual, via Matrix.norm()."""
        return self.residual().norm()

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Human-readable report of the solve."""
        lines = [
            "Jacobi Iteration Results",
            "=" * 60,
            f"Unknowns: {self._design.n}",
            f"Domain: {self._design.domain.name}",
            f"Converged: {self.converged}",
            f"Iterations: {self.iterations}",
            f"Final change: {float(self.final_change):.6e}",
            f"Residual norm: {float(self.residual_norm):.6e}",
            "",
            "Solution:",
            "-" * 60,
        ]
        for i, value in enumerate(self.x.tolist()):
            lines.append(f"  x[{i}]: {float(value[0]):+.6e}")

        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        for warning in self.warnings:
            lines.append(f"Warning: {warning}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"JacobiSolution(n={self._design.n}, iterations={self.iterations}, "
            f"converged={self.converged})"
        )
