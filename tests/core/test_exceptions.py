"""
Tests for PyMatrix exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via MatrixError)
    - Diagnostic attributes on the dimension and index errors
    - Default attribute values (None for optional attributes)
"""

import pytest

from pymatrix.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidDimensionError,
    MatrixError,
    NotSquareError,
    RaggedRowsError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via MatrixError."""

    def test_validation_error_is_matrix_error(self):
        with pytest.raises(MatrixError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    @pytest.mark.parametrize("exc_type", [
        InvalidDimensionError,
        RaggedRowsError,
        NotSquareError,
        DimensionMismatchError,
    ])
    def test_shape_errors_are_dimension_errors(self, exc_type):
        with pytest.raises(DimensionError):
            raise exc_type("shape problem")

    def test_index_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise IndexOutOfRangeError("index out of range")

    def test_index_error_is_builtin_index_error(self):
        with pytest.raises(IndexError):
            raise IndexOutOfRangeError("index out of range")

    def test_index_error_is_not_dimension_error(self):
        err = IndexOutOfRangeError("index out of range")
        assert not isinstance(err, DimensionError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestRaggedRowsError:

    def test_all_attributes(self):
        err = RaggedRowsError(
            "rows differ",
            row_index=2,
            expected_length=3,
            actual_length=1,
        )
        assert str(err) == "rows differ"
        assert err.row_index == 2
        assert err.expected_length == 3
        assert err.actual_length == 1

    def test_defaults_are_none(self):
        err = RaggedRowsError("rows differ")
        assert err.row_index is None
        assert err.expected_length is None
        assert err.actual_length is None


class TestShapeErrors:

    def test_invalid_dimension_size(self):
        err = InvalidDimensionError("positive number required", size=0)
        assert err.size == 0
        assert InvalidDimensionError("x").size is None

    def test_not_square_shape(self):
        err = NotSquareError("must be a n x n matrix", shape=(2, 3))
        assert err.shape == (2, 3)
        assert NotSquareError("x").shape is None

    def test_dimension_mismatch_shapes(self):
        with pytest.raises(DimensionMismatchError) as exc_info:
            raise DimensionMismatchError(
                "mismatch", shape=(2, 2), other_shape=(3, 2)
            )
        assert exc_info.value.shape == (2, 2)
        assert exc_info.value.other_shape == (3, 2)


class TestIndexOutOfRangeError:

    def test_all_attributes(self):
        err = IndexOutOfRangeError(
            "index: row index 5 out of range [0, 2)",
            axis="row",
            index=5,
            size=2,
        )
        assert "out of range" in str(err)
        assert err.axis == "row"
        assert err.index == 5
        assert err.size == 2

    def test_defaults_are_none(self):
        err = IndexOutOfRangeError("out of range")
        assert err.axis is None
        assert err.index is None
        assert err.size is None
