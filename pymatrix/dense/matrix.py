"""
Matrix: a small dense two-dimensional container of float64 values.

The shape is fixed at construction; only transpose() changes it (by
swapping rows and columns). Content is mutable through set_element(),
scale(), transpose() and add(). Every check runs before storage is
touched, so a call that raises leaves the matrix unchanged.

Construction:
    Matrix([[1, 2], [3, 4]])
    matrix([[1, 2], [3, 4]])
    identity(3)
    Matrix.from_array(np.eye(3))
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import (
    DimensionMismatchError,
    NotSquareError,
    ValidationError,
)
from pymatrix.core.validation import (
    check_2d,
    check_array,
    check_index,
    check_positive_size,
    check_real,
    check_rectangular,
)
from pymatrix.dense._determinant import diagonal_expansion

logger = logging.getLogger(__name__)


def _check_matrix(value: Any, name: str) -> None:
    if not isinstance(value, Matrix):
        raise ValidationError(
            f"{name}: expected a Matrix, got {type(value).__name__}"
        )


class Matrix:
    """
    Dense R x C matrix of float64 values.

    The matrix owns its storage: the constructor copies its input and
    the row/column accessors return copies.

    Not thread-safe. Concurrent mutation of one instance must be
    serialized by the caller.

    Parameters
    ----------
    rows : sequence of sequences of float, or 2D array-like
        Row-major values. Must have at least one row and one column,
        and every row must have the same length.

    Raises
    ------
    InvalidDimensionError
        If there are no rows or the first row is empty.
    RaggedRowsError
        If the rows differ in length.
    ValidationError
        If the values are not real numbers.
    """

    __hash__ = None

    def __init__(self, rows: ArrayLike):
        self._data = self._build(rows, "rows")

    @staticmethod
    def _build(rows: ArrayLike, name: str) -> NDArray[np.float64]:
        check_rectangular(rows, name)
        data = check_array(rows, name)
        check_2d(data, name)
        logger.debug("built %dx%d matrix", data.shape[0], data.shape[1])
        return np.ascontiguousarray(data)

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """
        Build the n x n identity matrix.

        Raises
        ------
        InvalidDimensionError
            If n < 1.
        """
        n = check_positive_size(n, "n")
        rows = [[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)]
        return cls(rows)

    @classmethod
    def from_array(cls, array) -> Matrix:
        """
        Build a Matrix from a 2D array-like.

        Objects exposing ``.values`` (pandas DataFrames) are unwrapped
        first. Validation is the same as for the constructor.
        """
        if hasattr(array, 'values') and not callable(array.values):
            array = np.asarray(array.values)
        return cls(array)

    def copy(self) -> Matrix:
        """Independent matrix with the same content."""
        return Matrix(self._data)

    # --- Shape ---

    @property
    def row_count(self) -> int:
        """Number of rows."""
        return self._data.shape[0]

    @property
    def column_count(self) -> int:
        """Number of columns."""
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        """(row_count, column_count)."""
        return (self.row_count, self.column_count)

    @property
    def is_square(self) -> bool:
        """Whether the matrix is n x n."""
        return self.row_count == self.column_count

    def is_same_size(self, other: Matrix) -> bool:
        """Whether other has the same number of rows and columns."""
        _check_matrix(other, "other")
        return self.row_count == other.row_count and self.column_count == other.column_count

    # --- Access ---

    def get_row(self, index: int) -> NDArray[np.float64]:
        """
        Copy of the row at index, shape (column_count,).

        Raises
        ------
        IndexOutOfRangeError
            If index is negative or >= row_count.
        """
        index = check_index(index, self.row_count, 'row', 'index')
        return self._data[index].copy()

    def get_column(self, index: int) -> NDArray[np.float64]:
        """
        Copy of the column at index, shape (row_count,).

        Raises
        ------
        IndexOutOfRangeError
            If index is negative or >= column_count.
        """
        index = check_index(index, self.column_count, 'column', 'index')
        return self._data[:, index].copy()

    def get_element(self, i: int, j: int) -> float:
        """Value at row i, column j."""
        i = check_index(i, self.row_count, 'row', 'i')
        j = check_index(j, self.column_count, 'column', 'j')
        return float(self._data[i, j])

    def set_element(self, i: int, j: int, value: float) -> None:
        """Overwrite the value at row i, column j in place."""
        i = check_index(i, self.row_count, 'row', 'i')
        j = check_index(j, self.column_count, 'column', 'j')
        self._data[i, j] = check_real(value, 'value')

    # --- In-place operations ---

    def scale(self, scalar: float) -> None:
        """Multiply every element by scalar, in place."""
        scalar = check_real(scalar, 'scalar')
        np.multiply(scalar, self._data, out=self._data)

    def transpose(self) -> None:
        """
        Replace the matrix with its transpose, in place.

        An R x C matrix becomes C x R; the object identity is kept.
        """
        shape = self.shape
        self._data = np.ascontiguousarray(self._data.T)
        logger.debug("transposed %dx%d -> %dx%d", *shape, *self.shape)

    def add(self, other: Matrix) -> None:
        """
        Add other into this matrix elementwise, in place.

        other is left unchanged.

        Raises
        ------
        DimensionMismatchError
            If the shapes differ. Nothing is modified in that case.
        ValidationError
            If other is not a Matrix.
        """
        if not self.is_same_size(other):
            raise DimensionMismatchError(
                f"matrices dimensions do not match: {self.shape} vs {other.shape}",
                shape=self.shape,
                other_shape=other.shape,
            )
        np.add(self._data, other._data, out=self._data)

    # --- Reductions ---

    def determinant(self) -> float:
        """
        Wrapped-diagonal expansion of a square matrix.

        This is the library's historical formula, not the mathematical
        determinant; see pymatrix.dense._determinant for the exact
        definition.

        Raises
        ------
        NotSquareError
            If the matrix is not n x n.
        """
        if not self.is_square:
            raise NotSquareError(
                f"must be a n x n matrix, got {self.row_count}x{self.column_count}",
                shape=self.shape,
            )
        return diagonal_expansion(self._data)

    # --- Comparison ---

    def is_equal(self, other: Matrix) -> bool:
        """
        Exact elementwise equality, no tolerance.

        Matrices of different shape are never equal. NaN never equals NaN,
        except that a matrix always equals itself.
        """
        _check_matrix(other, "other")
        if other is self:
            return True
        if not self.is_same_size(other):
            return False
        return bool(np.all(self._data == other._data))

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.is_equal(other)

    # --- Conversion ---

    def to_array(self) -> NDArray[np.float64]:
        """Copy of the values as a 2D float64 array."""
        return self._data.copy()

    def to_list(self) -> list[list[float]]:
        """Values as nested lists of Python floats."""
        return self._data.tolist()

    def __repr__(self) -> str:
        return (
            f"Matrix(rows={self.row_count}, columns={self.column_count}, "
            f"data={self.to_list()})"
        )


def matrix(rows: ArrayLike) -> Matrix:
    """
    Build a Matrix from explicit rows.

    Parameters
    ----------
    rows : sequence of sequences of float
        Row-major values; copied.

    Returns
    -------
    Matrix
    """
    return Matrix(rows)


def identity(n: int) -> Matrix:
    """Build the n x n identity matrix."""
    return Matrix.identity(n)


__all__ = ["Matrix", "matrix", "identity"]
