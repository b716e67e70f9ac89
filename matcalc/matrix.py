# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Dense rectangular matrix value type
"""

from typing import Any, Iterable, List, Sequence, Tuple

import numpy as np

from .errors import DimensionMismatch, IndexOutOfBounds
from .utils import check_field


class Matrix:
    """
    Bounds-checked dense matrix over an integer or floating field.

    Matrices are values: ``copy()`` deep-clones the storage and ``move()``
    hands the storage to a new handle, leaving this one empty (0 x 0).
    No two live matrices ever share the same backing array.

    Parameters
    ----------
    rows, cols : int
        Shape of the matrix.
    dtype : numpy dtype
        Element field, every element starts at its zero.
    """

    __hash__ = None  # mutable value type

    def __init__(self, rows: int, cols: int, dtype=float):
        self._data = np.zeros((rows, cols), dtype=check_field(dtype))

    # -----------------------------------------------------------------
    # Construction
    # -----------------------------------------------------------------
    @classmethod
    def _wrap(cls, data: np.ndarray) -> "Matrix":
        """Adopt an already validated 2-D array without copying it."""
        m = cls.__new__(cls)
        m._data = data
        return m

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[Any]]) -> "Matrix":
        """
        Build a matrix from nested row literals, e.g. [[1, 2], [3, 4]].

        The column count is taken from the first row; every other row must
        have the same length or DimensionMismatch is raised.
        """
        rows = [list(r) for r in rows]
        if not rows:
            return cls._from_array(np.zeros((0, 0)))

        cols = len(rows[0])
        for i, r in enumerate(rows):
            if len(r) != cols:
                raise DimensionMismatch(
                    f"Row {i} has {len(r)} elements, expected {cols}"
                )

        data = np.array(rows)
        check_field(data.dtype)
        return cls._from_array(data)

    @classmethod
    def from_numpy(cls, A: np.ndarray) -> "Matrix":
        """Copy a 2-D ndarray into a new matrix."""
        if not isinstance(A, np.ndarray):
            raise TypeError("A must be a NumPy ndarray")
        if A.ndim != 2:
            raise DimensionMismatch(f"Expected a 2-D array, got {A.ndim}-D")
        check_field(A.dtype)
        return cls._from_array(A.copy())

    @classmethod
    def _from_array(cls, data: np.ndarray) -> "Matrix":
        """Hook for refinements that validate the shape before adopting."""
        return cls._wrap(data)

    @classmethod
    def identity(cls, n: int, dtype=float) -> "Matrix":
        return cls._from_array(np.eye(n, dtype=check_field(dtype)))

    # -----------------------------------------------------------------
    # Shape & element access
    # -----------------------------------------------------------------
    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def dimensions(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def is_square(self) -> bool:
        return self.rows == self.cols

    def _check_index(self, row: int, col: int) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexOutOfBounds(
                f"Index ({row}, {col}) out of bounds for "
                f"{self.rows}x{self.cols} matrix"
            )

    def at(self, row: int, col: int):
        self._check_index(row, col)
        return self._data[row, col]

    def set(self, row: int, col: int, value) -> None:
        self._check_index(row, col)
        self._data[row, col] = value

    def __getitem__(self, idx: Tuple[int, int]):
        row, col = idx
        return self.at(row, col)

    def __setitem__(self, idx: Tuple[int, int], value) -> None:
        row, col = idx
        self.set(row, col, value)

    # -----------------------------------------------------------------
    # Value semantics
    # -----------------------------------------------------------------
    def copy(self) -> "Matrix":
        return self._wrap(self._data.copy())

    def __copy__(self) -> "Matrix":
        return self.copy()

    def __deepcopy__(self, memo) -> "Matrix":
        return self.copy()

    def move(self) -> "Matrix":
        """Transfer the storage to a new matrix, leaving this one 0 x 0."""
        moved = self._wrap(self._data)
        self._data = np.zeros((0, 0), dtype=self._data.dtype)
        return moved

    def to_numpy(self) -> np.ndarray:
        return self._data.copy()

    def tolist(self) -> List[List[Any]]:
        return self._data.tolist()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.dimensions() == other.dimensions() and bool(
            np.all(self._data == other._data)
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.tolist()})"

    # -----------------------------------------------------------------
    # Operators, implemented in matcalc.arithmetic
    # -----------------------------------------------------------------
    def __add__(self, other):
        from .arithmetic import add

        if not isinstance(other, Matrix):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other):
        from .arithmetic import subtract

        if not isinstance(other, Matrix):
            return NotImplemented
        return subtract(self, other)

    def __mul__(self, other):
        from .arithmetic import multiply, scale

        if isinstance(other, Matrix):
            return multiply(self, other)
        if isinstance(other, (int, float, np.integer, np.floating)):
            return scale(self, other)
        return NotImplemented

    def __rmul__(self, other):
        from .arithmetic import scale

        if isinstance(other, (int, float, np.integer, np.floating)):
            return scale(self, other)
        return NotImplemented

    def __matmul__(self, other):
        from .arithmetic import multiply

        if not isinstance(other, Matrix):
            return NotImplemented
        return multiply(self, other)
