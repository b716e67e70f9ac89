# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

from typing import Tuple

from .arithmetic import _check_matrix
from .matrix import Matrix


def svd(A: Matrix) -> Tuple[Matrix, Matrix, Matrix]:
    """
    Singular Value Decomposition entry point, A = U S Vt.

    Not available in matcalc: every call raises NotImplementedError
    once the argument has been checked.
    """
    _check_matrix(A)
    raise NotImplementedError("SVD not implemented")
