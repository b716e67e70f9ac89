# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging

import numpy as np
import pytest

from matcalc.arithmetic import multiply
from matcalc.elimination import gaussian_solve, invert, solve
from matcalc.errors import DimensionMismatch, NotSquare, Singular
from matcalc.matrix import Matrix
from matcalc.utils import PIVOT_TOL, random_well_conditioned

TEST_ITERATIONS = 20
logger = logging.getLogger(__name__)


def test_pivot_tolerance_contract():
    assert PIVOT_TOL == 1e-10


def test_invert_two_by_two():
    A = Matrix.from_rows([[1, 2], [3, 4]])
    A_inv = invert(A)
    np.testing.assert_allclose(
        A_inv.to_numpy(), [[-2.0, 1.0], [1.5, -0.5]], rtol=1e-12, atol=1e-12
    )
    assert A.tolist() == [[1, 2], [3, 4]]


def test_invert_random_well_conditioned():
    for i in range(TEST_ITERATIONS):
        n = 2 + i % 7
        A = random_well_conditioned(n, seed=i)
        logger.debug(f"\nRunning Test\n{A}\n")

        M = Matrix.from_numpy(A)
        product = multiply(invert(M), M)
        np.testing.assert_allclose(product.to_numpy(), np.eye(n), atol=1e-10)
        np.testing.assert_allclose(
            invert(M).to_numpy(), np.linalg.inv(A), rtol=1e-8, atol=1e-12
        )


def test_invert_empty_and_identity():
    assert invert(Matrix(0, 0)).dimensions() == (0, 0)
    assert invert(Matrix.identity(4)) == Matrix.identity(4)


def test_invert_singular():
    with pytest.raises(Singular):
        invert(Matrix.from_rows([[1, 2], [2, 4]]))
    with pytest.raises(Singular):
        invert(Matrix(3, 3))


def test_invert_not_square():
    with pytest.raises(NotSquare):
        invert(Matrix(2, 3))


def test_invert_threshold_is_strict():
    # |pivot| == 1e-10 is accepted, anything smaller is singular
    np.testing.assert_allclose(
        invert(Matrix.from_rows([[1e-10]])).to_numpy(), [[1e10]], rtol=1e-12
    )
    with pytest.raises(Singular):
        invert(Matrix.from_rows([[9e-11]]))


def test_invert_does_not_pivot():
    # Invertible, but the leading entry is zero and the inverter never
    # looks below the diagonal for a better pivot.
    P = Matrix.from_rows([[0.0, 1.0], [1.0, 0.0]])
    with pytest.raises(Singular):
        invert(P)
    np.testing.assert_allclose(solve(P, [3.0, 4.0]), [4.0, 3.0])


def test_solve_reference_system():
    x = solve(Matrix.from_rows([[1, 2], [3, 4]]), [5, 11])
    assert x.shape == (2,)
    np.testing.assert_allclose(x, [1.0, 2.0], rtol=1e-12, atol=1e-12)


def test_solve_random_against_numpy():
    rng = np.random.default_rng(seed=5)
    for _ in range(TEST_ITERATIONS):
        n = int(rng.integers(1, 12))
        A = rng.normal(size=(n, n))
        x_true = rng.normal(size=n)
        b = A @ x_true

        x_calculated = np.linalg.solve(A, b)
        u_calculated = gaussian_solve(Matrix.from_numpy(A), b)
        logger.debug(
            f"\n==== Results ====\nOurs:\n{u_calculated}\nNumpy:\n{x_calculated}"
        )

        # Compare residuals, which does not depend on conditioning
        res_np = np.linalg.norm(A @ x_calculated - b, ord=np.inf)
        res_ge = np.linalg.norm(A @ u_calculated - b, ord=np.inf)
        assert res_ge <= max(10 * res_np, 1e-10)


def test_solve_needs_row_swap():
    A = Matrix.from_rows([[0, 2, 1], [1, -2, -3], [-1, 1, 2]])
    x_true = np.array([-1.0, 2.0, 3.0])
    b = A.to_numpy() @ x_true
    np.testing.assert_allclose(solve(A, b), x_true, rtol=1e-10, atol=1e-10)


def test_solve_leaves_inputs_untouched():
    A = Matrix.from_rows([[2.0, 1.0], [4.0, 3.0]])
    b = np.array([3.0, 7.0])
    solve(A, b)
    assert A.tolist() == [[2.0, 1.0], [4.0, 3.0]]
    assert b.tolist() == [3.0, 7.0]


def test_solve_dimension_mismatch():
    with pytest.raises(DimensionMismatch):
        solve(Matrix(2, 3), [1.0, 2.0])
    with pytest.raises(DimensionMismatch):
        solve(Matrix.identity(2), [1.0, 2.0, 3.0])
    with pytest.raises(DimensionMismatch):
        solve(Matrix.identity(2), [[1.0], [2.0]])


def test_solve_singular():
    with pytest.raises(Singular):
        solve(Matrix.from_rows([[1, 2], [2, 4]]), [1.0, 2.0])
    with pytest.raises(Singular):
        solve(Matrix.from_rows([[1e-11, 0], [0, 1]]), [1.0, 1.0])


def test_singular_is_linalg_error():
    with pytest.raises(np.linalg.LinAlgError):
        invert(Matrix.from_rows([[0.0]]))
