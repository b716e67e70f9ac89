# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
from typing import Sequence, Union

import numpy as np

from .arithmetic import _check_matrix
from .errors import DimensionMismatch, NotSquare, Singular
from .matrix import Matrix
from .utils import PIVOT_TOL

logger = logging.getLogger(__name__)


def invert(A: Matrix) -> Matrix:
    """
    Inverse of an n-by-n matrix by Gauss-Jordan elimination on [A | I].

    The pivot at step i is always the diagonal entry augmented[i, i]; no
    row swaps are made, so a matrix whose leading entry is zero is
    reported singular even when it is invertible. gaussian_solve does
    pivot.

    Parameters
    ----------
    A : Matrix (n, n)

    Returns
    -------
    A_inv : Matrix (n, n), float64

    Raises
    ------
    NotSquare : if A is not square.
    Singular  : if a pivot magnitude falls below PIVOT_TOL.
    """
    _check_matrix(A)
    if not A.is_square():
        raise NotSquare("Can only invert square matrices")

    n = A.rows
    augmented = np.zeros((n, 2 * n), dtype=float)
    augmented[:, :n] = A._data
    augmented[:, n:] = np.eye(n)

    for i in range(n):
        pivot = augmented[i, i]
        if abs(pivot) < PIVOT_TOL:
            logger.debug(f"invert(): pivot {pivot!r} at step {i} below tolerance")
            raise Singular("Matrix is singular")

        # Normalize pivot row across all 2n columns
        augmented[i] /= pivot

        # Clear column i above and below the pivot
        for k in range(n):
            if k != i:
                factor = augmented[k, i]
                augmented[k] -= factor * augmented[i]

    return Matrix._wrap(augmented[:, n:].copy())


def gaussian_solve(A: Matrix, b: Union[Sequence[float], np.ndarray]) -> np.ndarray:
    """
    Solve A x = b by forward elimination with partial pivoting followed
    by back substitution.

    Parameters
    ----------
    A : Matrix (n, n)
        Coefficient matrix.
    b : (n,) sequence or ndarray
        Right-hand side.

    Returns
    -------
    x : (n,) ndarray, float64

    Raises
    ------
    DimensionMismatch : if A is not square or len(b) != n.
    Singular          : if the chosen pivot magnitude is below PIVOT_TOL.
    """
    _check_matrix(A)
    b = np.asarray(b)
    if b.ndim != 1:
        raise DimensionMismatch(f"b must be a 1-D vector, got {b.ndim}-D")
    if not A.is_square() or A.rows != b.shape[0]:
        raise DimensionMismatch("Invalid matrix dimensions for linear system")

    n = A.rows
    augmented = np.zeros((n, n + 1), dtype=float)
    augmented[:, :n] = A._data
    augmented[:, n] = b

    for i in range(n):
        # Pick the largest magnitude in column i, rows i and below.
        # argmax keeps the first of equal candidates.
        col_slice = np.abs(augmented[i:, i])
        max_row = i + int(col_slice.argmax())
        if max_row != i:
            logger.debug(f"gaussian_solve(): swapping rows {i} and {max_row}")
            augmented[[i, max_row]] = augmented[[max_row, i]]

        if abs(augmented[i, i]) < PIVOT_TOL:
            logger.debug(f"gaussian_solve(): column {i} has no usable pivot")
            raise Singular("Matrix is singular")

        # Eliminate entries below the pivot
        for k in range(i + 1, n):
            factor = augmented[k, i] / augmented[i, i]
            augmented[k, i:] -= factor * augmented[i, i:]

    x = np.zeros(n, dtype=float)
    for i in reversed(range(n)):
        s = augmented[i, n]
        for j in range(i + 1, n):
            s -= augmented[i, j] * x[j]
        x[i] = s / augmented[i, i]

    return x


def solve(A: Matrix, b: Union[Sequence[float], np.ndarray]) -> np.ndarray:
    """Alias of gaussian_solve."""
    return gaussian_solve(A, b)
