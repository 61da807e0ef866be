"""
Dense matrix module.

Public API:
    Matrix       - R x C float64 matrix with in-place operations
    matrix(rows) - Build a Matrix from explicit rows
    identity(n)  - n x n identity matrix
"""

from pymatrix.dense.matrix import Matrix, matrix, identity

__all__ = [
    "Matrix",
    "matrix",
    "identity",
]
