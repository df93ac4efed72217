from __future__ import annotations

from abc import abstractmethod

import torch

from ._utils import Matching, as_cost_matrix

__all__ = ["Assignment"]


class Assignment(torch.nn.Module):
    """
    Solves a square linear assignment problem (LAP).
    """

    def forward(self, cost_matrix: torch.Tensor) -> torch.Tensor:
        """
        Solve the cost matrix

        Parameters
        ----------
        cost_matrix
            Cost matrix (NxN) to solve

        Returns
        -------
            Matches (N x 2) of 0-based row and column indices, sorted by row
        """

        device = cost_matrix.device
        matching = self._assign(as_cost_matrix(cost_matrix))

        rows = torch.arange(len(matching.mx), dtype=torch.long)
        cols = torch.as_tensor(matching.mx, dtype=torch.long) - 1

        return torch.stack((rows, cols), dim=1).to(device)

    @abstractmethod
    def _assign(self, cost_matrix: torch.Tensor) -> Matching:
        raise NotImplementedError
