r"""
Solve the assignment problem stored in a matrix file from the command line::

    python -m kuhnmunkres costs.txt --time
"""

from __future__ import annotations

import argparse
import time
import typing as T

from .assignment import hungarian_assignment, matching_price
from .errors import InvalidInputError
from .io import load_cost_matrix

__all__ = ["main"]


def main(argv: T.Optional[T.Sequence[str]] = None) -> None:
    ap = argparse.ArgumentParser(
        prog="kuhnmunkres",
        description="Minimum cost perfect matching of a square cost matrix.",
    )
    ap.add_argument("path", type=str, help="text file with one matrix row per line")
    ap.add_argument("--delimiter", type=str, default=None, help="entry separator")
    ap.add_argument("--time", action="store_true", help="report the solve time")
    args = ap.parse_args(argv)

    try:
        cost_matrix = load_cost_matrix(args.path, delimiter=args.delimiter)
    except InvalidInputError as err:
        ap.error(str(err))

    solve_time = time.perf_counter()
    matching = hungarian_assignment(cost_matrix)
    solve_time = time.perf_counter() - solve_time

    print(f"Matching vector in set X: {matching.mx}")
    print(f"Matching vector in set Y: {matching.my}")
    print(f"Optimal price: {matching_price(cost_matrix, matching.mx)}")
    if args.time:
        print(f"Solve time: {solve_time * 1e3:.3f} ms")


if __name__ == "__main__":
    main()
