r"""
Row and column reduction of a cost matrix.

Subtracting a constant from a full row or column changes the cost of every
perfect matching by that same constant, so the set of optimal assignments is
left intact while zeros appear that the solver can match on.
"""

from __future__ import annotations

import typing as T

import torch
from torch import Tensor

from ..errors import InvalidInputError
from ._utils import as_cost_matrix

__all__ = ["reduce_cost_matrix", "reduce_cost_matrix_"]


@torch.no_grad()
def reduce_cost_matrix_(matrix: Tensor) -> Tensor:
    """
    Reduce a cost matrix in-place.

    First the minimum of each row is subtracted from that row, then the minimum of
    each column of the result is subtracted from that column. Afterwards, every
    row and every column holds at least one zero and no entry is negative.

    Parameters
    ----------
    matrix: Tensor[N, N]
        The matrix to reduce, modified in-place.

    Returns
    -------
    Tensor[N, N]
        The same ``matrix``.
    """

    if matrix.ndim != 2 or matrix.numel() == 0:
        msg = f"Cannot reduce a matrix of shape {tuple(matrix.shape)}!"
        raise InvalidInputError(msg)

    matrix -= matrix.min(dim=1, keepdim=True).values
    matrix -= matrix.min(dim=0, keepdim=True).values

    return matrix


def reduce_cost_matrix(cost_matrix: T.Any) -> Tensor:
    """
    Validate ``cost_matrix`` and return a reduced copy.
    See :func:`reduce_cost_matrix_`.
    """
    return reduce_cost_matrix_(as_cost_matrix(cost_matrix))
