"""Solver backends."""

from pylinalg.solvers.backends.jacobi import JacobiBackend

__all__ = ["JacobiBackend"]
