r"""
Dual adjustment that creates new zero-cost edges after a failed search.
"""

from __future__ import annotations

from typing import Sequence

import torch
from torch import Tensor

from ..errors import AlgorithmInvariantError

__all__ = ["adjust_duals_"]


@torch.no_grad()
def adjust_duals_(matrix: Tensor, tr_x: Sequence[int], tr_y: Sequence[int]) -> int:
    """
    Shift the dual values of the visited vertices in-place.

    With ``d`` the smallest cost between a row in ``tr_x`` and a column outside of
    ``tr_y``, ``d`` is subtracted from the rows in ``tr_x`` and added to the columns
    in ``tr_y``. Costs between visited rows and visited columns are unchanged, no
    cost becomes negative and the minimising entry becomes a zero edge.

    Parameters
    ----------
    matrix: Tensor[N, N]
        Reduced cost matrix, modified in-place.
    tr_x
        Visited row vertices (0-based).
    tr_y
        Visited column vertices (0-based).

    Returns
    -------
    int
        The applied shift ``d``.
    """

    n = matrix.shape[1]
    device = matrix.device
    rows = torch.as_tensor(list(tr_x), dtype=torch.long, device=device)
    visited = torch.zeros(n, dtype=torch.bool, device=device)
    visited[torch.as_tensor(list(tr_y), dtype=torch.long, device=device)] = True
    free = (~visited).nonzero().flatten()

    if rows.numel() == 0 or free.numel() == 0:
        msg = (
            f"Dual adjustment needs visited rows and unvisited columns, got "
            f"{rows.numel()} rows and {free.numel()} columns!"
        )
        raise AlgorithmInvariantError(msg)

    d = matrix[rows][:, free].min()

    matrix[rows, :] -= d
    matrix[:, visited] += d

    return int(d.item())
