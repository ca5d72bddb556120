"""
Dense matrix containers.

Matrix is the shape-aware, immutable rectangular container. Exactly two
concrete variants exist and they differ only in their numeric domain:

    DenseMatrix: IEEE double precision (numpy float64 storage)
    PreciseMatrix: 100-digit decimal.Decimal (numpy object storage)

Storage is a flat, read-only, row-major buffer. Every transformation
allocates and returns a new matrix of the receiver's class; nothing
mutates the receiver. All numerical work is delegated to the flat-buffer
kernels in pylinalg.core.compute.linalg.
"""

from __future__ import annotations

from typing import Any, ClassVar

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.compute.domains import DECIMAL, FLOAT64
from pylinalg.core.compute.linalg import arithmetic, elimination
from pylinalg.core.exceptions import (
    ConstructionError,
    DimensionError,
    IndexOutOfBoundsError,
    ValidationError,
)
from pylinalg.core.protocols import NumericDomain
from pylinalg.core.validation import (
    check_bounds,
    check_grid,
    check_non_negative,
    check_same_shape,
    check_size,
)


RandomState = np.random.Generator | int | None


def _format_entry(value: Any) -> str:
    """Signed scientific notation with six decimals and a two-digit exponent."""
    text = f"{value:+.6e}"
    if 'e' not in text:
        return text  # nan / inf
    mantissa, exponent = text.split('e')
    if float(mantissa) == 0.0:
        exponent = '0'  # decimal zeros keep the exponent of their scale
    return f"{mantissa}e{int(exponent):+03d}"


class Matrix:
    """
    Immutable rectangular matrix over a numeric domain.

    Construction:
        DenseMatrix([[1, 2], [3, 4]])            # from a grid of values
        PreciseMatrix([['0.1', '0.2'], [1, 2]])  # strings parse exactly
        DenseMatrix.identity(3)
        DenseMatrix.random(3, 4, -1.0, 1.0, rng=42)

    Invariants:
        rows >= 1, columns >= 1, len(buffer) == rows * columns
    """
    _domain: ClassVar[NumericDomain]

    __slots__ = ('_rows', '_columns', '_data')

    def __init__(self, values: Any):
        if type(self) is Matrix:
            raise TypeError("Matrix is abstract; use DenseMatrix or PreciseMatrix")
        rows, columns, flat = check_grid(values, 'values')
        try:
            data = self._domain.buffer(flat)
        except ValidationError as e:
            raise ConstructionError(f"values: {e}") from e
        self._init(rows, columns, data)

    def _init(self, rows: int, columns: int, data: NDArray[Any]) -> None:
        data.flags.writeable = False
        self._rows = rows
        self._columns = columns
        self._data = data

    @classmethod
    def _from_buffer(cls, rows: int, columns: int, data: NDArray[Any]) -> Matrix:
        """Wrap a freshly computed buffer without re-validating it."""
        obj = cls.__new__(cls)
        obj._init(rows, columns, data)
        return obj

    # === Factories ===

    @classmethod
    def random(
        cls,
        rows: int,
        columns: int,
        low: float,
        high: float,
        *,
        rng: RandomState = None,
    ) -> Matrix:
        """Matrix with entries drawn uniformly from [low, high)."""
        check_size(rows, 'rows')
        check_size(columns, 'columns')
        check_bounds(low, high)
        values = np.random.default_rng(rng).uniform(low, high, size=rows * columns)
        return cls._from_buffer(rows, columns, cls._domain.buffer(values))

    @classmethod
    def identity(cls, size: int) -> Matrix:
        check_size(size, 'size')
        data = cls._domain.zeros(size * size)
        data[::size + 1] = cls._domain.one
        return cls._from_buffer(size, size, data)

    @classmethod
    def upper_triangular(
        cls,
        size: int,
        low: float,
        high: float,
        *,
        rng: RandomState = None,
    ) -> Matrix:
        """Square matrix, uniform in [low, high) on and above the diagonal, zero below."""
        check_size(size, 'size')
        check_bounds(low, high)
        values = np.triu(np.random.default_rng(rng).uniform(low, high, size=(size, size)))
        return cls._from_buffer(size, size, cls._domain.buffer(values))

    @classmethod
    def random_symmetric(
        cls,
        size: int,
        low: float,
        high: float,
        *,
        rng: RandomState = None,
    ) -> Matrix:
        """
        Symmetric matrix with off-diagonal pairs uniform in [low, high).

        The diagonal is drawn uniformly from [0, 1) regardless of the
        bounds.
        """
        check_size(size, 'size')
        check_bounds(low, high)
        gen = np.random.default_rng(rng)
        strict_upper = np.triu(gen.uniform(low, high, size=(size, size)), k=1)
        values = strict_upper + strict_upper.T
        values[np.diag_indices(size)] = gen.uniform(0.0, 1.0, size=size)
        return cls._from_buffer(size, size, cls._domain.buffer(values))

    # === Properties ===

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._columns)

    @property
    def domain(self) -> NumericDomain:
        """Numeric domain of the entries."""
        return self._domain

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def get(self, row: int, column: int) -> Any:
        """
        Entry at (row, column).

        Returns a float for DenseMatrix and a Decimal for PreciseMatrix.

        Raises:
            IndexOutOfBoundsError: If either index is negative or past the end
        """
        if row < 0 or row >= self._rows or column < 0 or column >= self._columns:
            raise IndexOutOfBoundsError(
                f"A {self._rows} x {self._columns} matrix has no element in ({row}; {column}).",
                row=row,
                column=column,
                shape=self.shape,
            )
        return self._domain.to_python(self._data[row * self._columns + column])

    def __getitem__(self, index: tuple[int, int]) -> Any:
        row, column = index
        return self.get(row, column)

    def tolist(self) -> list[list[Any]]:
        """Nested list of entries (floats or Decimals)."""
        to_python = self._domain.to_python
        c = self._columns
        return [
            [to_python(self._data[i * c + j]) for j in range(c)]
            for i in range(self._rows)
        ]

    def to_numpy(self) -> NDArray[Any]:
        """Writable 2-D copy (float64, or object dtype for decimals)."""
        return self._data.reshape(self._rows, self._columns).copy()

    # === Predicates ===

    def is_square(self) -> bool:
        return self._rows == self._columns

    def is_upper_triangular(self) -> bool:
        """
        True if every entry strictly below the diagonal is zero.

        Raises:
            DimensionError: If the matrix is not square
        """
        self._require_square("A rectangular matrix cannot be triangular")
        grid = self._data.reshape(self._rows, self._columns)
        return bool(np.all(grid[np.tril_indices(self._rows, k=-1)] == 0))

    def is_lower_triangular(self) -> bool:
        """
        True if every entry strictly above the diagonal is zero.

        Raises:
            DimensionError: If the matrix is not square
        """
        self._require_square("A rectangular matrix cannot be triangular")
        grid = self._data.reshape(self._rows, self._columns)
        return bool(np.all(grid[np.triu_indices(self._rows, k=1)] == 0))

    def is_triangular(self) -> bool:
        return self.is_lower_triangular() or self.is_upper_triangular()

    def is_diagonal(self) -> bool:
        return self.is_lower_triangular() and self.is_upper_triangular()

    def is_symmetric(self) -> bool:
        return self == self.transpose()

    def is_invertible(self) -> bool:
        """True if the determinant is non-zero."""
        return not self._domain.is_zero(self._determinant())

    def is_positive_definite(self) -> bool:
        """
        True if no eigenvalue estimate is negative.

        Inherits the approximation of eigenvalues(): only meaningful where
        the one-pass triangularization preserves the spectrum. Zero
        estimates are accepted.
        """
        return all(ev >= 0 for ev in self.eigenvalues())

    # === Arithmetic ===

    def multiply(self, other: Matrix) -> Matrix:
        """
        Matrix product self @ other.

        Raises:
            ValidationError: If other is not a matrix of the same domain
            DimensionError: If self.columns != other.rows
        """
        self._require_compatible(other)
        if self._columns != other._rows:
            raise DimensionError(
                f"Invalid rows and columns: cannot multiply {self._rows} x {self._columns} "
                f"by {other._rows} x {other._columns}"
            )
        data = arithmetic.multiply(
            self._data, other._data, self._rows, self._columns, other._columns, self._domain
        )
        return self._from_buffer(self._rows, other._columns, data)

    def __matmul__(self, other: Matrix) -> Matrix:
        return self.multiply(other)

    def subtract(self, other: Matrix) -> Matrix:
        """
        Element-wise difference.

        Raises:
            ValidationError: If other is not a matrix of the same domain
            DimensionError: If the shapes differ
        """
        self._require_compatible(other)
        check_same_shape(self.shape, other.shape, ('self', 'other'))
        return self._from_buffer(
            self._rows, self._columns, arithmetic.subtract(self._data, other._data, self._domain)
        )

    def __sub__(self, other: Matrix) -> Matrix:
        return self.subtract(other)

    def transpose(self) -> Matrix:
        return self._from_buffer(
            self._columns, self._rows, arithmetic.transpose(self._data, self._rows, self._columns)
        )

    def norm(self) -> Any:
        """
        (self^T @ self)[0, 0].

        This is not a general matrix norm: it is the squared Euclidean norm
        of the first column, which is only representative for column
        vectors.
        """
        return self._domain.to_python(self._norm())

    def _norm(self) -> Any:
        return self.transpose().multiply(self)._data[0]

    def condition_number(self) -> Any:
        """
        norm(self) * norm(inverse(self)), with the narrow norm above.

        Raises:
            DimensionError: If the matrix is not square
            SingularMatrixError: If the matrix is singular
        """
        inverse = self.inverse()
        return self._domain.to_python(self._domain.multiply(self._norm(), inverse._norm()))

    # === Elimination ===

    def gauss_jordan(self) -> Matrix:
        """
        Upper triangular matrix from one-pass Gauss-Jordan elimination.

        No pivoting is performed; a zero pivot propagates inf/nan
        (DenseMatrix) or raises a decimal arithmetic error (PreciseMatrix).

        Raises:
            DimensionError: If the matrix is not square
        """
        self._require_square("Matrix must be square")
        n = self._rows
        return self._from_buffer(n, n, elimination.triangularize(self._data, n, self._domain))

    def determinant(self) -> Any:
        """
        Product of the diagonal of gauss_jordan().

        Raises:
            DimensionError: If the matrix is not square
        """
        return self._domain.to_python(self._determinant())

    def _determinant(self) -> Any:
        self._require_square("Matrix must be square")
        return elimination.determinant(self._data, self._rows, self._domain)

    def inverse(self) -> Matrix:
        """
        Inverse by full Gauss-Jordan reduction of [A | I].

        Raises:
            DimensionError: If the matrix is not square
            SingularMatrixError: If the determinant is exactly zero
        """
        self._require_square("Matrix must be square")
        n = self._rows
        return self._from_buffer(
            n, n, elimination.invert(self._data, n, self._domain, matrix_name=type(self).__name__)
        )

    def eigenvalues(self) -> list[Any]:
        """
        Diagonal of gauss_jordan(), in pivot order.

        This is an approximation, not an eigensolver: the values are the
        true eigenvalues only when triangularization preserves them (for
        example when the input is already upper triangular).

        Raises:
            DimensionError: If the matrix is not square
        """
        upper = self.gauss_jordan()
        return [self._domain.to_python(d) for d in elimination.diagonal(upper._data, upper._rows)]

    # === Comparison ===

    def is_close(self, other: Matrix | None, eps: float = 0.0) -> bool:
        """
        True if other has the same shape and every entry pair differs by at most eps.

        Entries of a matrix from the other domain are converted into this
        matrix's domain before comparison.

        Raises:
            InvalidParameterError: If eps is negative
        """
        check_non_negative(eps, 'eps')
        if other is None or not isinstance(other, Matrix):
            return False
        if self.shape != other.shape:
            return False
        theirs = other._data
        if other._domain is not self._domain:
            try:
                theirs = self._domain.buffer(theirs)
            except ValidationError:
                return False  # non-finite entries have no decimal counterpart
        tolerance = self._domain.convert(eps)
        with self._domain.context():
            return bool(np.all(np.abs(self._data - theirs) <= tolerance))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return type(self) is type(other) and self.is_close(other, 0.0)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.shape, tuple(self._data.tolist())))

    # === Rendering ===

    def __str__(self) -> str:
        c = self._columns
        lines = [f"{self._rows}x{c}"]
        for i in range(self._rows):
            lines.append(", ".join(_format_entry(x) for x in self._data[i * c:(i + 1) * c]))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rows={self._rows}, columns={self._columns})"

    # === Internal checks ===

    def _require_square(self, message: str) -> None:
        if not self.is_square():
            raise DimensionError(f"{message}, got {self._rows} x {self._columns}")

    def _require_compatible(self, other: Any) -> None:
        if not isinstance(other, Matrix):
            raise ValidationError(f"expected a Matrix, got {type(other).__name__}")
        if other._domain is not self._domain:
            raise ValidationError(
                f"cannot combine {type(self).__name__} ({self._domain.name}) with "
                f"{type(other).__name__} ({other._domain.name})"
            )


class DenseMatrix(Matrix):
    """Matrix of IEEE double precision values."""
    __slots__ = ()
    _domain = FLOAT64


class PreciseMatrix(Matrix):
    """Matrix of decimal.Decimal values carried at 100 significant digits."""
    __slots__ = ()
    _domain = DECIMAL
