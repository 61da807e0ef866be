"""
Wrapped-diagonal determinant expansion.

For every starting column j the kernel walks the right-going and the
left-going diagonal, wrapping column indices modulo n, and accumulates
the difference of the two products:

    det = sum_j (prod_i a[i, (j+i) mod n] - prod_i a[i, (j-i) mod n]) * a[0, j]

The product loop starts at row 0, so a[0, j] enters each diagonal twice.
This is the historical behaviour of the library and is kept bit-for-bit:
the result is NOT the mathematical determinant (1x1 and 2x2 inputs always
give 0.0, larger inputs give the historical value). Callers needing a true
determinant should use numpy.linalg.det.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray


def diagonal_expansion(data: NDArray[np.floating[Any]]) -> float:
    """
    Evaluate the wrapped-diagonal expansion of a square array.

    Multiplications run row by row starting from a[0, j], so the
    float result never depends on numpy reduction order.

    Parameters
    ----------
    data : ndarray
        Square 2D float64 array. Squareness is the caller's check.

    Returns
    -------
    float
    """
    n = data.shape[1]
    values = data.tolist()
    determinant = 0.0

    for j in range(n):
        diag_left = values[0][j]
        diag_right = values[0][j]

        for i in range(n):
            diag_right *= values[i][(j + i) % n]
            diag_left *= values[i][(j - i) % n]

        determinant += diag_right - diag_left

    return determinant
