"""
Tests for Matrix.determinant() and the wrapped-diagonal kernel.

The expansion is the library's historical formula, so expected values
are the historical outputs rather than numpy.linalg.det.
"""

import numpy as np
import pytest

from pymatrix import NotSquareError, identity, matrix
from pymatrix.dense._determinant import diagonal_expansion


def reference_expansion(rows):
    """Plain nested-list evaluation of the expansion."""
    n = len(rows)
    total = 0.0
    for j in range(n):
        left = right = float(rows[0][j])
        for i in range(n):
            right *= rows[i][(j + i) % n]
            left *= rows[i][(j - i) % n]
        total += right - left
    return total


class TestDeterminant:

    def test_overwritten_corner(self, square):
        # square[0][0] is overwritten to 2 before the determinant is taken
        square.set_element(0, 0, 2)
        assert square.determinant() == -15.0

    def test_sequential_three_by_three(self, square):
        assert square.determinant() == -6.0

    def test_not_square(self, wide):
        with pytest.raises(NotSquareError) as exc_info:
            wide.determinant()
        assert exc_info.value.shape == (2, 3)

    def test_not_square_after_transpose(self, wide):
        wide.transpose()
        with pytest.raises(NotSquareError):
            wide.determinant()

    def test_returns_python_float(self, square):
        assert isinstance(square.determinant(), float)

    def test_does_not_mutate(self, square):
        before = square.copy()
        square.determinant()
        assert square == before

    @pytest.mark.parametrize("rows", [
        [[5.0]],
        [[1.0, 2.0], [3.0, 4.0]],
        [[-3.5, 2.0], [0.5, 9.0]],
    ])
    def test_small_orders_cancel(self, rows):
        """For n <= 2 both diagonals visit the same cells, so the sum is 0."""
        assert matrix(rows).determinant() == 0.0

    def test_identity(self):
        # only the j = 0 right diagonal survives
        assert identity(3).determinant() == 1.0

    def test_four_by_four_matches_reference(self, rng):
        rows = rng.standard_normal((4, 4)).tolist()
        assert matrix(rows).determinant() == reference_expansion(rows)

    def test_transposed_matches_reference(self, square):
        square.set_element(0, 0, 2)
        square.transpose()
        assert square.determinant() == reference_expansion(square.to_list())


class TestDiagonalExpansion:

    def test_kernel_on_array(self):
        data = np.array([[2.0, 2.0, 3.0], [4.0, 5.0, 6.0], [7.0, 8.0, 9.0]])
        assert diagonal_expansion(data) == -15.0

    @pytest.mark.parametrize("n", [3, 5, 6])
    def test_matches_reference(self, rng, n):
        data = rng.uniform(-2.0, 2.0, size=(n, n))
        assert diagonal_expansion(data) == reference_expansion(data.tolist())
