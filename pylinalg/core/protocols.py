"""
Core protocols for pylinalg.

These define structural interfaces that implementations must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) to allow
flexibility while maintaining type safety.

Design Principles:
    - Minimal contracts: prescribe only the arithmetic the algorithms use
    - Closed variants: exactly two numeric domains exist (float64, decimal)
    - Type-safe: use generics to preserve type information through pipelines
"""

from contextlib import AbstractContextManager
from typing import Protocol, TypeVar, Any, runtime_checkable

import numpy as np
from numpy.typing import NDArray

# Type variables for generic payloads
P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class NumericDomain(Protocol):
    """
    Scalar arithmetic capability set shared by every algorithm.

    The elimination engine, the container arithmetic and the Jacobi solver
    are written once against this protocol and instantiated for native
    floating point and for arbitrary-precision decimals.

    Scalar operations (add, subtract, ...) must apply the domain's rounding
    rules themselves. Vectorised numpy arithmetic on the domain's buffers
    must run inside ``context()`` so that it sees the same rules.
    """

    @property
    def name(self) -> str:
        """Short identifier ('float64', 'decimal')."""
        ...

    @property
    def dtype(self) -> np.dtype:
        """numpy dtype of the domain's flat buffers."""
        ...

    @property
    def zero(self) -> Any:
        ...

    @property
    def one(self) -> Any:
        ...

    def convert(self, value: Any) -> Any:
        """Convert a Python/numpy number into a domain scalar."""
        ...

    def to_python(self, value: Any) -> Any:
        """Convert a domain scalar into the value handed back to callers."""
        ...

    def add(self, a: Any, b: Any) -> Any:
        ...

    def subtract(self, a: Any, b: Any) -> Any:
        ...

    def multiply(self, a: Any, b: Any) -> Any:
        ...

    def divide(self, a: Any, b: Any) -> Any:
        ...

    def negate(self, a: Any) -> Any:
        ...

    def absolute(self, a: Any) -> Any:
        ...

    def is_zero(self, a: Any) -> bool:
        ...

    def context(self) -> AbstractContextManager:
        """Context under which vectorised buffer arithmetic is rounded."""
        ...

    def zeros(self, shape: int | tuple[int, ...]) -> NDArray[Any]:
        """Allocate a buffer filled with the domain's zero."""
        ...

    def buffer(self, values: Any) -> NDArray[Any]:
        """Convert a flat iterable of numbers into a new domain buffer."""
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend knows how to take a validated design and produce a
    parameter payload wrapped in a Result.

    Backends are stateless: all configuration is passed via the design or at
    construction time. This makes them easy to test and swap.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{domain}_{algorithm}'
        Examples: 'float64_jacobi', 'decimal_jacobi'
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the computation.

        Args:
            design: Validated problem description

        Returns:
            Result envelope containing parameter payload and metadata

        Raises:
            NumericalError: If numerical issues prevent a solution
            ValidationError: If design is invalid for this backend
        """
        ...
