# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Plain-text rendering of matrices
"""

import sys
from typing import Optional, TextIO

import numpy as np

from .arithmetic import _check_matrix
from .matrix import Matrix


def format_element(value) -> str:
    """Floats use %g (six significant digits), integers print as-is."""
    if isinstance(value, (float, np.floating)):
        return f"{float(value):g}"
    return str(value)


def format_matrix(M: Matrix) -> str:
    """One row per line, elements separated by a single tab."""
    _check_matrix(M)
    lines = [
        "\t".join(format_element(M.at(i, j)) for j in range(M.cols))
        for i in range(M.rows)
    ]
    return "".join(line + "\n" for line in lines)


def print_matrix(M: Matrix, stream: Optional[TextIO] = None) -> None:
    if stream is None:
        stream = sys.stdout
    stream.write(format_matrix(M))
