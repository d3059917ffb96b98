"""
Matrix module.

Public API:
    Matrix  - Dense row-major matrix with construction helpers
              (zeroes, ones, identity, from_rows, from_columns), elementwise
              and matrix arithmetic, transpose, reshape, trace and a
              cofactor-expansion determinant
"""

from pylinalg.matrix.dense import Matrix

__all__ = [
    "Matrix",
]
