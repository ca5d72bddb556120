"""
Jacobi iteration backend.

Implements the textbook Jacobi method for square linear systems:

    x_new[i] = (b[i] - sum_{j != i} A[i][j] * x[j]) / A[i][i]

starting from the zero vector. One implementation serves both numeric
domains; every scalar operation goes through the domain, so the decimal
variant carries full 100-digit precision through the iteration.
"""

from typing import Any

from pylinalg.core.compute.timing import Timer
from pylinalg.core.compute.tolerances import JACOBI_MAX_ITERATIONS, JACOBI_TOLERANCE
from pylinalg.core.protocols import NumericDomain
from pylinalg.core.result import Result
from pylinalg.solvers.design import LinearSystemDesign
from pylinalg.solvers.solution import JacobiParams


class JacobiBackend:
    """
    Jacobi backend for A x = b.

    Convergence is declared when the largest absolute component change
    between two iterates is at most tol. Running out of iterations is not
    an error: the last iterate is returned with converged=False and a
    warning on the Result.

    No diagonal-dominance check is made. A zero diagonal entry yields
    inf/nan in float64 and raises decimal.DivisionByZero in decimal.

    Parameters
    ----------
    domain : NumericDomain
        Domain of the system's entries.
    """

    def __init__(self, domain: NumericDomain):
        self._domain = domain

    @property
    def name(self) -> str:
        return f'{self._domain.name}_jacobi'

    def solve(
        self,
        design: LinearSystemDesign,
        *,
        tol: float = JACOBI_TOLERANCE,
        max_iter: int = JACOBI_MAX_ITERATIONS,
    ) -> Result[JacobiParams]:
        """
        Iterate until the component change drops to tol.

        Parameters
        ----------
        design : LinearSystemDesign
            Validated square system.
        tol : float
            Convergence threshold on max_i |x_new[i] - x[i]|.
        max_iter : int
            Maximum number of sweeps.

        Returns
        -------
        Result[JacobiParams]
        """
        domain = self._domain
        timer = Timer()
        timer.start()
        warnings_list = []

        # --- Initialization ---
        with timer.section('initialization'):
            n = design.n
            a = design.A.to_numpy()
            b = design.b.to_numpy().ravel()
            threshold = domain.convert(tol)
            x = domain.zeros(n)

        # --- Iteration ---
        converged = False
        iterations = 0
        change: Any = None

        with timer.section('iterations'), domain.context():
            for iteration in range(max_iter):
                x_new = self._sweep(a, b, x, n)
                change = self._max_change(x_new, x, n)
                x = x_new
                iterations = iteration + 1

                if change <= threshold:
                    converged = True
                    break

        if not converged:
            warnings_list.append(
                f"Jacobi did not converge after {max_iter} iterations "
                f"(final change: {float(change):.2e}, tol: {tol:.2e})"
            )

        timer.stop()

        params = JacobiParams(
            x=design.matrix_class._from_buffer(n, 1, x),
            iterations=iterations,
            converged=converged,
            final_change=domain.to_python(change),
        )

        return Result(
            params=params,
            info={
                'method': 'jacobi',
                'domain': domain.name,
                'convergence_criterion': 'max_abs_change',
                'tol': tol,
                'max_iter': max_iter,
                'final_change': float(change),
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    # ------------------------------------------------------------------
    # Core steps
    # ------------------------------------------------------------------

    def _sweep(self, a, b, x, n: int):
        """One Jacobi sweep. The off-diagonal sum accumulates left to right."""
        domain = self._domain
        x_new = domain.zeros(n)
        for i in range(n):
            total = domain.zero
            for j in range(n):
                if j != i:
                    total = domain.add(total, domain.multiply(a[i, j], x[j]))
            x_new[i] = domain.divide(domain.subtract(b[i], total), a[i, i])
        return x_new

    def _max_change(self, x_new, x, n: int) -> Any:
        domain = self._domain
        change = domain.zero
        for i in range(n):
            delta = domain.absolute(domain.subtract(x_new[i], x[i]))
            # nan must win so a blown-up iterate never reads as converged
            if not delta <= change:
                change = delta
        return change
