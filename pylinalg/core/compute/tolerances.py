"""
Tolerance tiers for numerical validation.

Defines precision expectations for the two numeric domains:
- FLOAT64: double precision, naive (unpivoted) Gauss-Jordan
- DECIMAL: 100-digit decimal arithmetic

Used by the test suite, the benchmark harness and the Jacobi solver
defaults.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance definition for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Double precision: A @ inv(A) reproduces the identity to this level
FLOAT64 = ToleranceTier(
    rtol=1e-12,
    atol=1e-11,
    name='float64',
    description='Double precision: identity reconstruction after inversion',
)

# Double precision after two chained inversions
FLOAT64_ROUND_TRIP = ToleranceTier(
    rtol=1e-9,
    atol=1e-9,
    name='float64_round_trip',
    description='Double precision: inverse of the inverse',
)

# 100-digit decimal arithmetic
DECIMAL = ToleranceTier(
    rtol=1e-80,
    atol=1e-80,
    name='decimal',
    description='Arbitrary precision (100 digits): far below float64 epsilon',
)

# Jacobi iteration stops once the largest component change is <= this
JACOBI_TOLERANCE = 1e-8

# Jacobi iteration budget; exhausting it is not an error
JACOBI_MAX_ITERATIONS = 100


def select_tolerance(domain_name: str, round_trip: bool = False) -> ToleranceTier:
    """Select appropriate tolerance tier for a given numeric domain."""
    if domain_name == 'decimal':
        return DECIMAL
    if round_trip:
        return FLOAT64_ROUND_TRIP
    return FLOAT64
