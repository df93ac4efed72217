r"""
Common set-up for all tests.

Defines fixtures for known cost matrices and a brute-force oracle.
"""

from __future__ import annotations

import typing as T

import pytest
import torch
from fixture_data import brute_force_costs

import kuhnmunkres as km


@pytest.fixture(scope="session")
def oracle() -> T.Callable[[T.Any], int]:
    def _minimum(cost_matrix: T.Any) -> int:
        return int(brute_force_costs(km.as_cost_matrix(cost_matrix)).min().item())

    return _minimum


@pytest.fixture()
def product_matrix() -> torch.Tensor:
    """
    Costs ``(i + 1) * (j + 1)``, which need a dual adjustment to be solved.
    """
    idx = torch.arange(1, 4, dtype=torch.long)
    return idx[:, None] * idx[None, :]
