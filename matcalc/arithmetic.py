# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Elementwise and linear-algebraic matrix arithmetic

Every function returns a new plain Matrix and leaves its operands
untouched.
"""

import numpy as np

from .errors import DimensionMismatch, NotSquare
from .matrix import Matrix


def _check_matrix(*operands) -> None:
    for M in operands:
        if not isinstance(M, Matrix):
            raise TypeError(f"Expected a Matrix, got {type(M).__name__}")


def add(A: Matrix, B: Matrix) -> Matrix:
    _check_matrix(A, B)
    if A.dimensions() != B.dimensions():
        raise DimensionMismatch("Matrix dimensions must match for addition")
    return Matrix._wrap(A._data + B._data)


def subtract(A: Matrix, B: Matrix) -> Matrix:
    _check_matrix(A, B)
    if A.dimensions() != B.dimensions():
        raise DimensionMismatch("Matrix dimensions must match for subtraction")
    return Matrix._wrap(A._data - B._data)


def multiply(A: Matrix, B: Matrix) -> Matrix:
    """
    Matrix product A B by plain triple-loop accumulation.

    Each entry starts at the field zero and adds A[i, k] * B[k, j] for
    k = 0 .. A.cols - 1 in order, so results do not depend on BLAS
    blocking.
    """
    _check_matrix(A, B)
    if A.cols != B.rows:
        raise DimensionMismatch("Inner dimensions must match for multiplication")

    m, inner = A.dimensions()
    n = B.cols
    C = np.zeros((m, n), dtype=np.result_type(A.dtype, B.dtype))
    for i in range(m):
        for j in range(n):
            acc = C[i, j]
            for k in range(inner):
                acc += A._data[i, k] * B._data[k, j]
            C[i, j] = acc
    return Matrix._wrap(C)


def scale(A: Matrix, scalar) -> Matrix:
    _check_matrix(A)
    return Matrix._wrap(A._data * scalar)


def transpose(A: Matrix) -> Matrix:
    _check_matrix(A)
    return Matrix._wrap(A._data.T.copy())


def trace(A: Matrix):
    """Sum of the diagonal of a square matrix."""
    _check_matrix(A)
    if not A.is_square():
        raise NotSquare("Trace is only defined for square matrices")
    result = A.dtype.type(0)
    for i in range(A.rows):
        result += A._data[i, i]
    return result


def is_square(A: Matrix) -> bool:
    _check_matrix(A)
    return A.is_square()
