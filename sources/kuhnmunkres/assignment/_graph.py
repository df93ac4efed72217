r"""
Bipartite graph of the zero-cost edges in a (reduced) cost matrix.
"""

from __future__ import annotations

from typing import List

import torch
from torch import Tensor

__all__ = ["zero_adjacency"]


def zero_adjacency(matrix: Tensor) -> List[List[int]]:
    """
    Adjacency list of the zero-cost edges.

    Parameters
    ----------
    matrix: Tensor[N, N]
        Current (reduced) cost matrix.

    Returns
    -------
        For each row ``x``, the ascending 0-based columns ``y`` where
        ``matrix[x, y] == 0``.
    """

    # Row-major order, so the columns of each row are ascending
    rows, cols = (matrix == 0).nonzero(as_tuple=True)
    counts = torch.bincount(rows, minlength=matrix.shape[0])

    return [part.tolist() for part in cols.split(counts.tolist())]
