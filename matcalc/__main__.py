#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Demonstration driver: python -m matcalc
"""

import argparse
import json
import sys

from .elimination import gaussian_solve, invert
from .errors import MatrixError
from .matrix import Matrix
from .render import format_element, print_matrix
from .square import SquareMatrix, determinant


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="matcalc",
        description="Walk through the matcalc operations on two small matrices.",
    )
    parser.add_argument(
        "--a", type=json.loads, default=[[1, 2], [3, 4]], help="Matrix A as JSON rows"
    )
    parser.add_argument(
        "--b", type=json.loads, default=[[5, 6], [7, 8]], help="Matrix B as JSON rows"
    )
    parser.add_argument(
        "--rhs", type=json.loads, default=[5, 11], help="Right-hand side of A x = rhs"
    )
    return parser


def run(args, out=None) -> None:
    if out is None:
        out = sys.stdout
    A = Matrix.from_rows(args.a)
    B = Matrix.from_rows(args.b)

    print("Matrix A:", file=out)
    print_matrix(A, out)

    print("\nMatrix B:", file=out)
    print_matrix(B, out)

    print("\nA + B:", file=out)
    print_matrix(A + B, out)

    print("\nA * B:", file=out)
    print_matrix(A * B, out)

    S = SquareMatrix.from_matrix(A)
    print(f"\nDeterminant of A: {format_element(determinant(S))}", file=out)

    print("\nInverse of A:", file=out)
    print_matrix(invert(A), out)

    x = gaussian_solve(A, args.rhs)
    print("\nSolution to Ax = b:", file=out)
    print("".join(f"{format_element(v)} " for v in x), file=out)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        run(args)
    except MatrixError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
