r"""
Various utilities for working with assignment problems.
"""

from __future__ import annotations

import typing as T

import torch
from torch import Tensor

from ..errors import InvalidInputError

__all__ = ["Matching", "as_cost_matrix", "matching_price", "gather_total_cost"]


class Matching(T.NamedTuple):
    """
    A perfect matching between the rows (X) and columns (Y) of a cost matrix.

    Both vectors hold 1-based vertex ids, such that ``mx[i - 1] == j`` if and only
    if ``my[j - 1] == i``.
    """

    mx: list[int]
    my: list[int]


def as_cost_matrix(cost_matrix: T.Any) -> Tensor:
    """
    Validate a cost matrix and return it as a new ``torch.long`` tensor on the CPU.

    Parameters
    ----------
    cost_matrix
        Square matrix of non-negative integer costs, as a tensor, array or nested
        sequence. It is never modified.

    Returns
    -------
    Tensor[N, N]
        A private copy of the costs.

    Raises
    ------
    InvalidInputError
        If the matrix is empty, not 2-D, not square, not integral or negative.
    """

    if isinstance(cost_matrix, Tensor):
        matrix = cost_matrix.detach().cpu()
    else:
        try:
            matrix = torch.as_tensor(cost_matrix)
        except (TypeError, ValueError, RuntimeError) as err:
            msg = f"Cost matrix could not be read as a tensor: {err}"
            raise InvalidInputError(msg) from err

    if matrix.numel() == 0:
        msg = f"Cost matrix is empty (shape {tuple(matrix.shape)}), nothing to match!"
        raise InvalidInputError(msg)
    if matrix.ndim != 2:
        msg = f"Cost matrix must be 2-D, got {matrix.ndim} dimensions!"
        raise InvalidInputError(msg)
    if matrix.shape[0] != matrix.shape[1]:
        msg = f"Cost matrix must be square, got shape {tuple(matrix.shape)}!"
        raise InvalidInputError(msg)
    if matrix.is_floating_point() or matrix.is_complex():
        msg = f"Cost matrix must hold integer costs, got {matrix.dtype}!"
        raise InvalidInputError(msg)

    matrix = matrix.to(dtype=torch.long, copy=True)
    if (matrix < 0).any():
        msg = f"Cost matrix holds negative costs (minimum {matrix.min().item()})!"
        raise InvalidInputError(msg)

    return matrix


def matching_price(cost_matrix: T.Any, mx: T.Sequence[int]) -> int:
    """
    Total cost of a matching, evaluated on the original (unreduced) matrix.

    Parameters
    ----------
    cost_matrix
        The original cost matrix.
    mx
        Matching vector of the rows with 1-based column ids, e.g. ``Matching.mx``.

    Returns
    -------
    int
        Sum of ``cost_matrix[i, mx[i] - 1]`` over all rows.
    """

    matrix = as_cost_matrix(cost_matrix)
    n = matrix.shape[0]

    ids = mx.tolist() if isinstance(mx, Tensor) else list(mx)
    try:
        cols = [int(y) for y in ids]
    except (TypeError, ValueError) as err:
        msg = f"Matching holds non-integer vertex ids: {ids}"
        raise InvalidInputError(msg) from err
    if cols != ids:
        msg = f"Matching holds non-integer vertex ids: {ids}"
        raise InvalidInputError(msg)
    if len(cols) != n:
        msg = f"Matching has {len(cols)} entries, expected {n}!"
        raise InvalidInputError(msg)
    if any(y < 1 or y > n for y in cols):
        msg = f"Matching holds vertex ids outside of 1..{n}: {cols}"
        raise InvalidInputError(msg)
    if len(set(cols)) != n:
        msg = f"Matching assigns a column to more than one row: {cols}"
        raise InvalidInputError(msg)

    # Summed as Python integers, large costs overflow ``torch.long``
    rows = torch.arange(n)
    return sum(matrix[rows, torch.tensor(cols) - 1].tolist())


def gather_total_cost(cost_matrix: Tensor, assignment: Tensor) -> Tensor:
    """
    Gather the total cost of an assignment. The amounts to summing all the assigned
    items from the cost matrix.

    Parameters
    ----------
    cost_matrix: Tensor[N, N]
        The cost matrix.
    assignment: Tensor[K, 2]
        The assignment tensor of 0-based row-column pairs.

    Returns
    -------
    Tensor[*]
        The total cost of the assignment.
    """

    return cost_matrix[assignment[:, 0], assignment[:, 1]].sum()
