# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Error kinds raised by matcalc operations
"""

import numpy as np


class MatrixError(Exception):
    """Base class for every failure raised by matcalc."""


class DimensionMismatch(MatrixError, ValueError):
    """Operand shapes are incompatible for the requested operation."""


class IndexOutOfBounds(MatrixError, IndexError):
    """Element access outside of the matrix dimensions."""


class NotSquare(MatrixError, ValueError):
    """Operation is only defined for square matrices."""


class Singular(MatrixError, np.linalg.LinAlgError):
    """A pivot fell below the singularity threshold during elimination."""
