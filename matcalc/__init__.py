# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
matcalc
=======

A small dense matrix calculator: a bounds-checked matrix value type and
the classical textbook algorithms that run on it.

Public API
~~~~~~~~~~
- Value types
    - `Matrix`, `SquareMatrix`
- Arithmetic
    - `add`, `subtract`, `multiply`, `scale`, `transpose`, `trace`,
      `is_square`
- Square matrices
    - `determinant`, `minor`, `is_identity`
- Calculator
    - `invert`, `solve` (`gaussian_solve`), `svd` (not implemented)
- Rendering
    - `format_matrix`, `print_matrix`
- Errors
    - `MatrixError`, `DimensionMismatch`, `IndexOutOfBounds`,
      `NotSquare`, `Singular`

Example
-------
>>> import matcalc as mc
>>> A = mc.Matrix.from_rows([[1, 2], [3, 4]])
>>> mc.determinant(A)
np.int64(-2)
>>> mc.solve(A, [5, 11])
array([1., 2.])
"""

from importlib.metadata import version as _pkg_version

from .arithmetic import (
    add,
    is_square,
    multiply,
    scale,
    subtract,
    trace,
    transpose,
)
from .elimination import gaussian_solve, invert, solve
from .errors import (
    DimensionMismatch,
    IndexOutOfBounds,
    MatrixError,
    NotSquare,
    Singular,
)
from .matrix import Matrix
from .render import format_matrix, print_matrix
from .square import SquareMatrix, determinant, is_identity, minor
from .svd import svd
from .utils import PIVOT_TOL

__all__ = [
    "Matrix",
    "SquareMatrix",
    "add",
    "subtract",
    "multiply",
    "scale",
    "transpose",
    "trace",
    "is_square",
    "determinant",
    "minor",
    "is_identity",
    "invert",
    "solve",
    "gaussian_solve",
    "svd",
    "format_matrix",
    "print_matrix",
    "MatrixError",
    "DimensionMismatch",
    "IndexOutOfBounds",
    "NotSquare",
    "Singular",
    "PIVOT_TOL",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show matcalc”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Silent unless the application configures logging.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
