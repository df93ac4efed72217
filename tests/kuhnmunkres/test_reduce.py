r"""
Tests for ``kuhnmunkres.assignment.reduce_cost_matrix``.
"""

from __future__ import annotations

import pytest
import torch
from fixture_data import brute_force_costs, cost_matrices
from hypothesis import given, settings

import kuhnmunkres as km


def test_reduce_known():
    matrix = torch.tensor([[4, 1, 3], [2, 0, 5], [3, 2, 2]])
    result = km.reduce_cost_matrix_(matrix)

    assert result is matrix
    assert torch.equal(matrix, torch.tensor([[2, 0, 2], [1, 0, 5], [0, 0, 0]]))


def test_reduce_copy_leaves_input():
    cost_matrix = [[5, 6], [7, 9]]
    reduced = km.reduce_cost_matrix(cost_matrix)

    assert cost_matrix == [[5, 6], [7, 9]]
    assert torch.equal(reduced, torch.tensor([[0, 0], [0, 1]]))


@pytest.mark.parametrize(
    "matrix",
    [torch.zeros((0, 0), dtype=torch.long), torch.zeros(3, dtype=torch.long)],
    ids=("shape:empty", "shape:1d"),
)
def test_reduce_invalid(matrix):
    with pytest.raises(km.InvalidInputError):
        km.reduce_cost_matrix_(matrix)


@settings(deadline=None)
@given(cost_matrix=cost_matrices(max_size=10, max_cost=50))
def test_reduce_postcondition(cost_matrix):
    reduced = km.reduce_cost_matrix(cost_matrix)

    assert (reduced >= 0).all()
    assert (reduced == 0).any(dim=1).all(), "every row should hold a zero"
    assert (reduced == 0).any(dim=0).all(), "every column should hold a zero"


@settings(deadline=None)
@given(cost_matrix=cost_matrices(max_size=10, max_cost=50))
def test_reduce_idempotent(cost_matrix):
    once = km.reduce_cost_matrix(cost_matrix)
    twice = km.reduce_cost_matrix(once)

    assert torch.equal(once, twice)


@settings(deadline=None, max_examples=50)
@given(cost_matrix=cost_matrices(max_size=6, max_cost=30))
def test_reduce_preserves_optimal_assignments(cost_matrix):
    original = brute_force_costs(cost_matrix)
    reduced = brute_force_costs(km.reduce_cost_matrix(cost_matrix))

    offset = original - reduced
    assert (offset == offset[0]).all(), "every permutation shifts by one constant"
    assert torch.equal(original == original.min(), reduced == reduced.min())
