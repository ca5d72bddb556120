"""
Command line entry point.

Two subcommands:

    pylinalg bench-inverse --domain {float,decimal,raw} --size N --repeats R
        Times repeated inversion of random matrices and reports throughput
        against the n(2n + 2n(n-1)) floating point operation count of
        Gauss-Jordan inversion.

    pylinalg jacobi --size N [--precise]
        Solves a random tridiagonal system with the Jacobi iteration and
        prints the condition number, the solution and the residual norm.
"""

import argparse
import sys
from typing import Any, Callable

import numpy as np
from scipy import linalg as sp_linalg

from pylinalg import kernel
from pylinalg.core.compute.precision import EPSILON_64
from pylinalg.core.compute.timing import timed
from pylinalg.core.compute.tolerances import JACOBI_MAX_ITERATIONS, JACOBI_TOLERANCE
from pylinalg.core.exceptions import PyLinalgError
from pylinalg.matrix import DenseMatrix, PreciseMatrix
from pylinalg.solvers import solve


DEFAULT_SIZES = {
    'float': 200,
    'decimal': 30,
    'raw': 200,
}


def inversion_flops(n: int) -> int:
    """Floating point operations of one Gauss-Jordan inversion of order n."""
    return n * (2 * n + (n - 1) * 2 * n)


def _inverse_task(
    domain: str,
    n: int,
    gen: np.random.Generator,
) -> tuple[Callable[[], Any], Callable[[Any], np.ndarray], np.ndarray]:
    """
    Draw one random input.

    Returns (invert, to_float64, source): a zero-argument inversion call,
    a converter of its result to a float64 grid, and the input as a
    float64 grid.
    """
    if domain == 'raw':
        m = kernel.random_matrix(n, n, -1.0, 1.0, rng=gen)
        return (lambda: kernel.invert(m, n, n)), (lambda inv: inv.reshape(n, n)), m.reshape(n, n)

    cls = PreciseMatrix if domain == 'decimal' else DenseMatrix
    m = cls.random(n, n, -1.0, 1.0, rng=gen)
    return m.inverse, (lambda inv: inv.to_numpy().astype(np.float64)), m.to_numpy().astype(np.float64)


def bench_inverse(args: argparse.Namespace) -> int:
    n = args.size if args.size is not None else DEFAULT_SIZES[args.domain]
    gen = np.random.default_rng(args.seed)
    flops = inversion_flops(n)
    print(f"Total FLOPs: {flops:,}")

    for _ in range(args.repeats):
        invert, to_float64, source = _inverse_task(args.domain, n, gen)

        with timed() as timer:
            inv = invert()

        s = timer.result()['total_seconds']
        ns = int(s * 1e9)
        gflops = (flops / s) / 1e9 if s > 0 else float('inf')
        line = f" {n:,} -> {ns:,} ns ({s:.6f} s) -> {gflops:.6f} GFLOPs/s"

        if args.check:
            deviation = np.max(np.abs(to_float64(inv) - sp_linalg.inv(source)))
            line += (
                f" (max deviation from scipy: {deviation:.3e},"
                f" {deviation / EPSILON_64:,.0f} eps)"
            )
        print(line)
    return 0


def tridiagonal_system(n: int, precise: bool, gen: np.random.Generator):
    """Random tridiagonal A (entries in [-1, 1)) and random b of matching domain."""
    cls = PreciseMatrix if precise else DenseMatrix
    rows, columns = np.indices((n, n))
    values = np.where(np.abs(rows - columns) <= 1, gen.uniform(-1.0, 1.0, size=(n, n)), 0.0)
    A = cls(values)
    b = cls.random(n, 1, -1.0, 1.0, rng=gen)
    return A, b


def jacobi_demo(args: argparse.Namespace) -> int:
    gen = np.random.default_rng(args.seed)
    A, b = tridiagonal_system(args.size, args.precise, gen)

    print(f"K(A) = {float(A.condition_number()):.6f}")
    result = solve(A, b, tol=args.tol, max_iter=args.max_iter)
    print(result.summary())
    print(result.residual_norm)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pylinalg',
        description='Dense linear algebra benchmarks and demos',
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    bench = subparsers.add_parser(
        'bench-inverse',
        help='Time inversion of random matrices',
    )
    bench.add_argument(
        '--domain',
        choices=sorted(DEFAULT_SIZES),
        default='raw',
        help='Container to benchmark (default: raw)',
    )
    bench.add_argument(
        '--size', '-n',
        type=int,
        default=None,
        help='Matrix order (default depends on domain)',
    )
    bench.add_argument(
        '--repeats', '-r',
        type=int,
        default=10,
        help='Number of timed runs (default: 10)',
    )
    bench.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Random seed',
    )
    bench.add_argument(
        '--check',
        action='store_true',
        help='Report the largest deviation from scipy.linalg.inv',
    )
    bench.set_defaults(func=bench_inverse)

    jac = subparsers.add_parser(
        'jacobi',
        help='Solve a random tridiagonal system with Jacobi iteration',
    )
    jac.add_argument(
        '--size', '-n',
        type=int,
        default=10,
        help='Number of unknowns (default: 10)',
    )
    jac.add_argument(
        '--precise',
        action='store_true',
        help='Use 100-digit decimal arithmetic',
    )
    jac.add_argument(
        '--tol',
        type=float,
        default=JACOBI_TOLERANCE,
        help=f'Convergence threshold (default: {JACOBI_TOLERANCE:g})',
    )
    jac.add_argument(
        '--max-iter',
        type=int,
        default=JACOBI_MAX_ITERATIONS,
        help=f'Iteration budget (default: {JACOBI_MAX_ITERATIONS})',
    )
    jac.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Random seed',
    )
    jac.set_defaults(func=jacobi_demo)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if getattr(args, 'size', None) is not None and args.size < 1:
        parser.error(f"--size must be >= 1, got {args.size}")
    if getattr(args, 'repeats', 1) < 1:
        parser.error(f"--repeats must be >= 1, got {args.repeats}")

    try:
        return args.func(args)
    except PyLinalgError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
