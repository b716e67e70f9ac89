# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np

# Pivots with magnitude below this are treated as zero (inverse and solve).
PIVOT_TOL: float = 1e-10

# Cofactor expansion is O(n!), warn above this size.
COFACTOR_WARN_SIZE: int = 8


def check_field(dtype) -> np.dtype:
    """Return dtype if it is an integer or floating field, else raise TypeError."""
    dtype = np.dtype(dtype)
    if dtype == np.bool_ or not (
        np.issubdtype(dtype, np.integer) or np.issubdtype(dtype, np.floating)
    ):
        raise TypeError(f"Matrix elements must be integer or floating, got {dtype}")
    return dtype


def random_well_conditioned(n, low=-10, high=10, seed=None) -> np.ndarray:
    """
    Build an n-by-n strictly diagonally dominant matrix with random
    entries. Strict dominance keeps every leading diagonal entry away
    from zero, so elimination without row swaps still succeeds.

    Returns
    -------
    Matrix with float64 dtype
    """
    rng = np.random.default_rng(seed)
    A = rng.uniform(low, high, size=(n, n))
    # push the diagonal above the sum of the off-diagonal magnitudes
    off = np.abs(A).sum(axis=1) - np.abs(np.diag(A))
    signs = np.where(rng.uniform(size=n) < 0.5, -1.0, 1.0)
    A[np.diag_indices(n)] = signs * (off + rng.uniform(1.0, high, size=n))
    return np.asarray(A)
