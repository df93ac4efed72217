"""
Reference solver that delegates to the SciPy implementation.
"""

from __future__ import annotations

import typing as T

import scipy.optimize
import torch.fx
import typing_extensions as TX
from torch import Tensor

from ._base import Assignment
from ._utils import Matching, as_cost_matrix

__all__ = ["LinearSum", "linear_sum_assignment"]


class LinearSum(Assignment):
    """
    See :func:`.linear_sum_assignment` for details.
    """

    @TX.override
    def _assign(self, cost_matrix: Tensor) -> Matching:
        return linear_sum_assignment(cost_matrix)


def linear_sum_assignment(cost_matrix: T.Any) -> Matching:
    """
    Perform linear assignment using the SciPy implementation
    """

    cm = as_cost_matrix(cost_matrix).numpy()

    row_ind, col_ind = scipy.optimize.linear_sum_assignment(cm)

    mx = [0] * cm.shape[0]
    my = [0] * cm.shape[1]
    for x, y in zip(row_ind.tolist(), col_ind.tolist()):
        mx[x] = y + 1
        my[y] = x + 1

    return Matching(mx=mx, my=my)


torch.fx.wrap("linear_sum_assignment")
