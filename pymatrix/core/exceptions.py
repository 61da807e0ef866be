"""
Exception hierarchy for PyMatrix.

All exceptions inherit from MatrixError to allow catching any
library-specific error. Every check runs before a matrix is touched,
so an operation that raises leaves its operands exactly as they were.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class MatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(MatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs (rows, indices, scalars) fail
    validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Base class for every shape-related failure.
    """
    pass


class InvalidDimensionError(DimensionError):
    """
    A dimension is zero or negative.

    Raised for constructor input with no rows or no columns, and for
    identity sizes below one.

    Attributes:
        size: The offending dimension, if known
    """

    def __init__(self, message: str, size: int | None = None):
        super().__init__(message)
        self.size = size


class RaggedRowsError(DimensionError):
    """
    Rows of the constructor input differ in length.

    Attributes:
        row_index: Index of the first row whose length differs
        expected_length: Length of the first row
        actual_length: Length of the offending row
    """

    def __init__(
        self,
        message: str,
        row_index: int | None = None,
        expected_length: int | None = None,
        actual_length: int | None = None
    ):
        super().__init__(message)
        self.row_index = row_index
        self.expected_length = expected_length
        self.actual_length = actual_length


class NotSquareError(DimensionError):
    """
    Operation requires an n x n matrix.

    Attributes:
        shape: (rows, columns) of the matrix that was rejected
    """

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message)
        self.shape = shape


class DimensionMismatchError(DimensionError):
    """
    Two matrices do not have the same shape.

    Attributes:
        shape: (rows, columns) of the receiving matrix
        other_shape: (rows, columns) of the argument
    """

    def __init__(
        self,
        message: str,
        shape: tuple[int, int] | None = None,
        other_shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.shape = shape
        self.other_shape = other_shape


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    A row, column or element index falls outside the matrix.

    Also an IndexError, so code written against sequence semantics can
    catch it the usual way.

    Attributes:
        axis: 'row' or 'column'
        index: The rejected index
        size: Number of valid positions along that axis
    """

    def __init__(
        self,
        message: str,
        axis: str | None = None,
        index: int | None = None,
        size: int | None = None
    ):
        super().__init__(message)
        self.axis = axis
        self.index = index
        self.size = size
