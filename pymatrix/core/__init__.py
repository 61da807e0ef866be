"""
Core infrastructure for PyMatrix.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
"""

from pymatrix.core.exceptions import (
    MatrixError,
    ValidationError,
    DimensionError,
    InvalidDimensionError,
    RaggedRowsError,
    NotSquareError,
    DimensionMismatchError,
    IndexOutOfRangeError,
)
from pymatrix.core.validation import DTYPE

__all__ = [
    "DTYPE",
    # Exceptions
    "MatrixError",
    "ValidationError",
    "DimensionError",
    "InvalidDimensionError",
    "RaggedRowsError",
    "NotSquareError",
    "DimensionMismatchError",
    "IndexOutOfRangeError",
]
