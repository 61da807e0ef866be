"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent. Every mutating operation calls
them before touching storage.

Design principles:
    - No silent type coercion (except integer -> float64 promotion)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    InvalidDimensionError,
    RaggedRowsError,
    ValidationError,
)

DTYPE = np.float64


def check_rectangular(rows: Any, name: str) -> None:
    """
    Verify a sequence of rows is non-empty and rectangular.

    Only lengths are inspected; element types are checked by check_array.

    Args:
        rows: Sequence of row sequences, or a 2D array
        name: Parameter name for error messages

    Raises:
        InvalidDimensionError: If there are no rows or the first row is empty
        RaggedRowsError: If a row's length differs from the first row's
        DimensionError: If rows are not sequences
    """
    try:
        n_rows = len(rows)
    except TypeError as e:
        raise DimensionError(
            f"{name}: expected a sequence of rows, got {type(rows).__name__}"
        ) from e

    if n_rows == 0:
        raise InvalidDimensionError(f"{name}: need at least 1 row, got 0", size=0)

    lengths = []
    for i, row in enumerate(rows):
        try:
            lengths.append(len(row))
        except TypeError as e:
            raise DimensionError(
                f"{name}: row {i} is not a sequence ({type(row).__name__})"
            ) from e

    if lengths[0] == 0:
        raise InvalidDimensionError(f"{name}: need at least 1 column, got 0", size=0)

    for i, length in enumerate(lengths):
        if length != lengths[0]:
            raise RaggedRowsError(
                f"{name}: rows must contain the same number of elements "
                f"(row 0 has {lengths[0]}, row {i} has {length})",
                row_index=i,
                expected_length=lengths[0],
                actual_length=length,
            )


def check_array(array: ArrayLike, name: str) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Always returns a new array, never a view of the input. Rejects
    inputs that result in object dtype, non-numeric dtypes (strings,
    booleans, datetimes) and complex values.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with dtype float64

    Raises:
        ValidationError: If input cannot be converted to a real numeric array
    """
    try:
        result = np.array(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real values"
        )

    return result.astype(DTYPE, copy=False)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 2D
    """
    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
        )


def check_positive_size(n: Any, name: str) -> int:
    """
    Verify a requested dimension is an integer >= 1.

    Args:
        n: Requested size
        name: Parameter name for error messages

    Returns:
        n as a Python int

    Raises:
        ValidationError: If n is not an integer
        InvalidDimensionError: If n < 1
    """
    n = check_integer(n, name)
    if n < 1:
        raise InvalidDimensionError(
            f"{name}: positive number required, got {n}", size=n
        )
    return n


def check_integer(value: Any, name: str) -> int:
    """
    Verify value is an integer (bool excluded) and return it as int.

    Args:
        value: Value to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If value is not an integer
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__}"
        )
    return int(value)


def check_real(value: Any, name: str) -> float:
    """
    Verify value is a real number (bool excluded) and return it as float.

    Args:
        value: Value to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If value is not a real number or overflows float64
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(
        value, (int, float, np.integer, np.floating)
    ):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    try:
        return float(value)
    except OverflowError as e:
        raise ValidationError(
            f"{name}: {type(value).__name__} value is out of float64 range"
        ) from e


def check_index(index: Any, size: int, axis: str, name: str) -> int:
    """
    Verify an index lies in [0, size).

    Negative indices are rejected rather than counted from the end.

    Args:
        index: Index to check
        size: Number of valid positions along the axis
        axis: 'row' or 'column', for diagnostics
        name: Parameter name for error messages

    Returns:
        index as a Python int

    Raises:
        ValidationError: If index is not an integer
        IndexOutOfRangeError: If index < 0 or index >= size
    """
    index = check_integer(index, name)
    if index < 0 or index >= size:
        raise IndexOutOfRangeError(
            f"{name}: {axis} index {index} out of range [0, {size})",
            axis=axis,
            index=index,
            size=size,
        )
    return index
