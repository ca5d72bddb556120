"""
Raw strided-buffer kernel.

BLAS-style primitives and structural operations on flat row-major float64
numpy buffers, with the matrix shape passed alongside the buffer.

Public API:
    fill, negate, scale, divide, axpy            (mutate in place)
    random_matrix, triangularize, determinant, invert   (return new buffers)

Example:
    >>> import numpy as np
    >>> from pylinalg import kernel
    >>> ident = np.zeros(9)
    >>> kernel.fill(ident, 0, 4, 9, 1.0)
    >>> ident.reshape(3, 3)
    array([[1., 0., 0.],
           [0., 1., 0.],
           [0., 0., 1.]])
"""

from pylinalg.kernel.primitives import axpy, divide, fill, negate, scale
from pylinalg.kernel.structural import (
    determinant,
    invert,
    random_matrix,
    triangularize,
)

__all__ = [
    "fill",
    "negate",
    "scale",
    "divide",
    "axpy",
    "random_matrix",
    "triangularize",
    "determinant",
    "invert",
]
