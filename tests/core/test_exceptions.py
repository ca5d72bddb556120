"""
Tests for the pylinalg exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyLinalgError)
    - Diagnostic attributes on IndexOutOfBoundsError and SingularMatrixError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pylinalg.core.exceptions import (
    ConstructionError,
    DimensionError,
    IndexOutOfBoundsError,
    InvalidParameterError,
    NumericalError,
    PyLinalgError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyLinalgError."""

    @pytest.mark.parametrize("exc", [
        ValidationError,
        ConstructionError,
        DimensionError,
        IndexOutOfBoundsError,
        InvalidParameterError,
        NumericalError,
        SingularMatrixError,
    ])
    def test_is_pylinalg_error(self, exc):
        with pytest.raises(PyLinalgError):
            raise exc("failure")

    @pytest.mark.parametrize("exc", [
        ConstructionError,
        DimensionError,
        IndexOutOfBoundsError,
        InvalidParameterError,
    ])
    def test_input_errors_are_validation_errors(self, exc):
        assert issubclass(exc, ValidationError)

    def test_index_error_is_dimension_error(self):
        with pytest.raises(DimensionError):
            raise IndexOutOfBoundsError("out of range")

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_numerical_errors_are_not_validation_errors(self):
        assert not issubclass(SingularMatrixError, ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# IndexOutOfBoundsError
# ═══════════════════════════════════════════════════════════════════════


class TestIndexOutOfBoundsError:
    """IndexOutOfBoundsError carries the offending position and shape."""

    def test_all_attributes(self):
        err = IndexOutOfBoundsError(
            "A 2 x 2 matrix has no element in (2; 0).",
            row=2,
            column=0,
            shape=(2, 2),
        )
        assert str(err) == "A 2 x 2 matrix has no element in (2; 0)."
        assert err.row == 2
        assert err.column == 0
        assert err.shape == (2, 2)

    def test_defaults_are_none(self):
        err = IndexOutOfBoundsError("bad index")
        assert err.row is None
        assert err.column is None
        assert err.shape is None


# ═══════════════════════════════════════════════════════════════════════
# SingularMatrixError
# ═══════════════════════════════════════════════════════════════════════


class TestSingularMatrixError:
    """SingularMatrixError carries matrix diagnostic attributes."""

    def test_all_attributes(self):
        err = SingularMatrixError(
            "A: matrix is singular",
            matrix_name="A",
            determinant=0.0,
        )
        assert str(err) == "A: matrix is singular"
        assert err.matrix_name == "A"
        assert err.determinant == 0.0

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.determinant is None

    def test_catchable_with_attributes(self):
        with pytest.raises(SingularMatrixError) as exc_info:
            raise SingularMatrixError("singular", matrix_name="m", determinant=0.0)
        assert exc_info.value.matrix_name == "m"
