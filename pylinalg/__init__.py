"""
PyLinalg: dense linear algebra in double and 100-digit decimal precision.

Gauss-Jordan triangularization, determinants and inverses over immutable
matrix containers, a raw strided-buffer kernel for the float64 hot path,
and an iterative Jacobi solver.

Submodules:
    matrix: DenseMatrix and PreciseMatrix containers
    kernel: Strided primitives and structural operations on flat buffers
    solvers: Jacobi iteration for square linear systems
"""

__version__ = "0.1.0"

from pylinalg import kernel
from pylinalg import matrix
from pylinalg import solvers
from pylinalg.matrix import DenseMatrix, Matrix, PreciseMatrix
from pylinalg.solvers import jacobi, solve

__all__ = [
    "__version__",
    "kernel",
    "matrix",
    "solvers",
    "Matrix",
    "DenseMatrix",
    "PreciseMatrix",
    "solve",
    "jacobi",
]
