"""
Flat-buffer linear algebra kernels for pylinalg.

All functions follow these conventions:
    - Buffers are 1-D numpy arrays in row-major order (float64 or object)
    - Shape is passed out of band; no function validates its arguments
      (validation lives in the public APIs that call them)
    - Arithmetic goes through a NumericDomain, never through a
      hard-coded scalar type

Submodules:
    blas: Strided primitives (fill, negate, scale, divide, axpy)
    arithmetic: multiply, subtract, transpose
    elimination: triangularize, determinant, invert
"""

from pylinalg.core.compute.linalg.elimination import (
    determinant,
    diagonal,
    invert,
    triangularize,
)

__all__ = [
    "determinant",
    "diagonal",
    "invert",
    "triangularize",
]
