"""
Shared compute infrastructure for pylinalg.

IMPORTANT: This is NOT where the public APIs live. Those are
pylinalg.matrix, pylinalg.kernel and pylinalg.solvers. This module
contains shared NUMERIC infrastructure.

Submodules:
    domains: FLOAT64 and DECIMAL numeric domains
    timing: Execution timing utilities
    precision: Numerical precision constants and utilities
    tolerances: Tolerance tiers and solver defaults
    linalg: Flat-buffer kernels (BLAS primitives, arithmetic, elimination)
"""

from pylinalg.core.compute.domains import (
    DECIMAL,
    FLOAT64,
    DecimalDomain,
    FloatDomain,
)
from pylinalg.core.compute.timing import Timer, timed

__all__ = [
    # Domains
    "DECIMAL",
    "FLOAT64",
    "DecimalDomain",
    "FloatDomain",
    # Timing
    "Timer",
    "timed",
]
