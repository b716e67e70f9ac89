# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging

import numpy as np

from .arithmetic import _check_matrix
from .errors import NotSquare
from .matrix import Matrix
from .utils import COFACTOR_WARN_SIZE, check_field

logger = logging.getLogger(__name__)


class SquareMatrix(Matrix):
    """
    A Matrix with rows == cols.

    Only adds the shape guarantee: every constructor refuses non-square
    data with NotSquare, nothing from Matrix is overridden.
    """

    def __init__(self, n: int, dtype=float):
        self._data = np.zeros((n, n), dtype=check_field(dtype))

    @classmethod
    def _from_array(cls, data: np.ndarray) -> "SquareMatrix":
        rows, cols = data.shape
        if rows != cols:
            raise NotSquare(f"Matrix must be square, got {rows}x{cols}")
        return cls._wrap(data)

    @classmethod
    def from_matrix(cls, M: Matrix) -> "SquareMatrix":
        """Validated conversion, the copy shares no storage with M."""
        _check_matrix(M)
        return cls._from_array(M._data.copy())


def minor(A: Matrix, remove_row: int, remove_col: int) -> SquareMatrix:
    """
    Return the (n-1)-by-(n-1) matrix left after deleting one row and
    one column, remaining rows and columns keep their order.
    """
    _check_matrix(A)
    if not A.is_square():
        raise NotSquare("Minors are only taken of square matrices")
    A._check_index(remove_row, remove_col)

    n = A.rows
    keep_rows = np.arange(n) != remove_row
    keep_cols = np.arange(n) != remove_col
    return SquareMatrix._wrap(A._data[keep_rows][:, keep_cols])


def _cofactor_det(A: Matrix):
    n = A.rows
    if n == 1:
        return A._data[0, 0]
    if n == 2:
        return A._data[0, 0] * A._data[1, 1] - A._data[0, 1] * A._data[1, 0]

    # Laplace expansion along row 0, summed left to right
    det = A.dtype.type(0)
    for j in range(n):
        sign = 1 if j % 2 == 0 else -1
        det += sign * A._data[0, j] * _cofactor_det(minor(A, 0, j))
    return det


def determinant(A: Matrix):
    """
    Determinant of a square matrix by recursive cofactor expansion.

    Runs in O(n!) and is meant for small matrices only. An empty (0 x 0)
    matrix yields the field zero.
    """
    _check_matrix(A)
    if not A.is_square():
        raise NotSquare("Determinant is only defined for square matrices")
    if A.rows > COFACTOR_WARN_SIZE:
        logger.warning(
            "determinant(): cofactor expansion on a %dx%d matrix – O(n!)",
            A.rows,
            A.cols,
        )
    if A.rows == 0:
        return A.dtype.type(0)
    return _cofactor_det(A)


def is_identity(A: Matrix) -> bool:
    """Exact check: ones on the diagonal, zeros everywhere else."""
    _check_matrix(A)
    if not A.is_square():
        return False

    one = A.dtype.type(1)
    zero = A.dtype.type(0)
    for i in range(A.rows):
        for j in range(A.cols):
            expected = one if i == j else zero
            if A._data[i, j] != expected:
                return False
    return True
