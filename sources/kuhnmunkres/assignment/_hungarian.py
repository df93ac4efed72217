"""
Primal-dual (Hungarian, Kuhn-Munkres) algorithm for the linear assignment problem.

The cost matrix is reduced once, after which the rows are matched one at a time.
For every unmatched row an alternating path over the zero-cost edges is searched.
When none exists, the dual values of the visited vertices are shifted to create
a new zero edge and the search continues where it stopped.
"""

from __future__ import annotations

import typing as T

import torch
import torch.fx
import typing_extensions as TX
from torch import Tensor

from ..constants import UNMATCHED
from ..debug import check_debug_enabled
from ..errors import AlgorithmInvariantError
from ._base import Assignment
from ._dual import adjust_duals_
from ._graph import zero_adjacency
from ._reduce import reduce_cost_matrix_
from ._search import SearchState, find_augmenting_path, resume_augmenting_path
from ._utils import Matching, as_cost_matrix

__all__ = ["Hungarian", "hungarian_assignment"]


class Hungarian(Assignment):
    r"""
    Implements the Hungarian algorithm for solving a linear assignment problem.
    """

    @TX.override
    def _assign(self, cost_matrix: Tensor) -> Matching:
        return hungarian_assignment(cost_matrix)


@torch.no_grad()
def hungarian_assignment(cost_matrix: T.Any) -> Matching:
    """
    Solves the assignment problem using the Hungarian algorithm.

    Parameters
    ----------
    cost_matrix
        Square matrix of non-negative integer costs. It is not modified.

    Returns
    -------
        Minimum cost perfect matching with 1-based vertex ids.
    """

    matrix = reduce_cost_matrix_(as_cost_matrix(cost_matrix))
    n = matrix.shape[0]

    debug = check_debug_enabled()
    if debug:
        print(f"Hungarian assignment of {n} x {n} matrix, reduced:\n{matrix}")

    mx = [UNMATCHED] * n
    my = [UNMATCHED] * n

    for x_start in range(n):
        if mx[x_start] != UNMATCHED:
            continue

        state = SearchState.start(n, x_start)
        adjacency = zero_adjacency(matrix)
        found, y_end = find_augmenting_path(adjacency, my, x_start, state)

        adjustments = 0
        while not found:
            if adjustments >= n:
                msg = f"Row {x_start} needed more than {n} dual adjustments!"
                raise AlgorithmInvariantError(msg)
            adjustments += 1

            visited_count = len(state.tr_y)
            d = adjust_duals_(matrix, state.tr_x, state.tr_y)
            if d <= 0:
                msg = f"Dual adjustment for row {x_start} made no progress ({state})!"
                raise AlgorithmInvariantError(msg)
            if debug:
                print(f"- row {x_start}: adjusted duals by {d} ({state})")

            adjacency = zero_adjacency(matrix)
            found, y_end = resume_augmenting_path(adjacency, my, state)
            if not found and len(state.tr_y) == visited_count:
                msg = f"Search for row {x_start} reached no new column ({state})!"
                raise AlgorithmInvariantError(msg)

        _augment(mx, my, state, x_start, y_end)

        if debug:
            print(f"- row {x_start}: matched along path ending at column {y_end}")

    if UNMATCHED in mx:
        msg = f"Assignment finished with unmatched rows: {mx}"
        raise AlgorithmInvariantError(msg)

    matching = Matching(mx=[y + 1 for y in mx], my=[x + 1 for x in my])
    if debug:
        print(f"Hungarian assignment completed: mx = {matching.mx}, my = {matching.my}")

    return matching


def _augment(
    mx: T.List[int], my: T.List[int], state: SearchState, x_start: int, y_end: int
) -> None:
    # Walk back from the free column, every row on the path takes the column
    # that was reached from it
    y = y_end
    x = state.py[y]
    mx[x], my[y] = y, x
    while x != x_start:
        y = state.px[x]
        x = state.py[y]
        mx[x], my[y] = y, x


torch.fx.wrap("hungarian_assignment")
