"""
PyMatrix: a small dense-matrix value type.

Basic linear-algebra primitives without a full numerics library:
construction, element access, scalar scaling, transposition,
determinant, equality and addition on float64 matrices.

Submodules:
    dense: the Matrix type and its constructors
    core: exceptions and input validators
"""

import logging

__version__ = "0.1.0"

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
from pymatrix.dense import Matrix, matrix, identity
from pymatrix.logging_config import configure_logging

# Silent unless the application configures logging
logging.getLogger("pymatrix").addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "Matrix",
    "matrix",
    "identity",
    "configure_logging",
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
