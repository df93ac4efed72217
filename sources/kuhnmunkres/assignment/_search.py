r"""
Depth-first search for an alternating path over the zero-cost edges.

An alternating (augmenting) path starts at a free row vertex, alternates between
unmatched and matched zero edges and ends at a free column vertex. Flipping the
matching along such a path grows the matching by one pair.

The search keeps all of its bookkeeping in a :class:`SearchState`. When a search
is exhausted, the same state is kept while the dual values are adjusted, after
which :func:`resume_augmenting_path` continues from the vertices visited so far.
Each column vertex is visited at most once per state, which bounds the number
of adjustments per starting vertex by the matrix size.

All vertices are 0-based indices into the cost matrix.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from ..constants import UNMATCHED
from ..errors import AlgorithmInvariantError

__all__ = ["SearchState", "find_augmenting_path", "resume_augmenting_path"]


class SearchState:
    """
    Traversal state of the alternating path search for one starting row vertex.

    Attributes
    ----------
    px
        For each row vertex, the column vertex it was reached through.
    py
        For each column vertex, the row vertex it was reached through.
    tr_x
        Visited row vertices, in order of visit.
    tr_y
        Visited column vertices, in order of visit.
    stack
        Pending ``(x, next_neighbour_index)`` frames of the depth-first search.
    """

    __slots__ = ("px", "py", "tr_x", "tr_y", "stack")

    def __init__(self, size: int):
        self.px: List[int] = [UNMATCHED] * size
        self.py: List[int] = [UNMATCHED] * size
        self.tr_x: List[int] = []
        self.tr_y: List[int] = []
        self.stack: List[Tuple[int, int]] = []

    @classmethod
    def start(cls, size: int, x_start: int) -> SearchState:
        state = cls(size)
        state.tr_x.append(x_start)
        return state

    def is_visited_y(self, y: int) -> bool:
        return self.py[y] != UNMATCHED

    def visit_y(self, y: int, x: int) -> None:
        if self.is_visited_y(y):
            msg = f"Column vertex {y} was already visited from row vertex {self.py[y]}!"
            raise AlgorithmInvariantError(msg)
        self.py[y] = x
        self.tr_y.append(y)

    def visit_x(self, x: int, y: int) -> None:
        self.px[x] = y
        self.tr_x.append(x)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(tr_x={self.tr_x}, tr_y={self.tr_y})"


def find_augmenting_path(
    adjacency: Sequence[Sequence[int]],
    my: Sequence[int],
    x_start: int,
    state: SearchState,
) -> Tuple[bool, int]:
    """
    Search an alternating path from ``x_start`` to a free column vertex.

    Parameters
    ----------
    adjacency
        Zero-cost adjacency list, see :func:`.zero_adjacency`.
    my
        Current matching of the column vertices, ``UNMATCHED`` where free.
    x_start
        Row vertex to start from. It must already be part of ``state.tr_x``.
    state
        Search state, extended in-place.

    Returns
    -------
        Tuple of whether a path was found and the free column vertex it ends at
        (``UNMATCHED`` if not found).
    """

    stack = state.stack
    stack.append((x_start, 0))

    while stack:
        x, k = stack.pop()
        neighbours = adjacency[x]
        while k < len(neighbours):
            y = neighbours[k]
            k += 1
            if state.is_visited_y(y):
                continue
            state.visit_y(y, x)

            x_next = my[y]
            if x_next == UNMATCHED:
                stack.clear()
                return True, y

            # Descend into the row currently matched to y, continue here afterwards
            state.visit_x(x_next, y)
            stack.append((x, k))
            stack.append((x_next, 0))
            break

    return False, UNMATCHED


def resume_augmenting_path(
    adjacency: Sequence[Sequence[int]],
    my: Sequence[int],
    state: SearchState,
) -> Tuple[bool, int]:
    """
    Continue an exhausted search after the zero-cost edges have changed.

    The search is restarted from every visited row vertex that has a zero edge
    to a column vertex that was not visited yet. Previously visited vertices stay
    visited.

    Returns
    -------
        See :func:`find_augmenting_path`.
    """

    # Rows added while resuming are searched exhaustively by the call that adds them
    for x in list(state.tr_x):
        if all(state.is_visited_y(y) for y in adjacency[x]):
            continue
        found, y_end = find_augmenting_path(adjacency, my, x, state)
        if found:
            return found, y_end

    return False, UNMATCHED
