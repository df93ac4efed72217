r"""
Tests for ``kuhnmunkres.assignment.zero_adjacency``.
"""

from __future__ import annotations

import torch
from fixture_data import cost_matrices
from hypothesis import given, settings

import kuhnmunkres as km


def test_zero_adjacency_known():
    matrix = torch.tensor([[2, 0, 2], [1, 0, 5], [0, 0, 0]])

    assert km.zero_adjacency(matrix) == [[1], [1], [0, 1, 2]]


def test_zero_adjacency_without_zeros():
    matrix = torch.tensor([[0, 3], [1, 2]])

    assert km.zero_adjacency(matrix) == [[0], []]


@settings(deadline=None)
@given(cost_matrix=cost_matrices(max_size=10, max_cost=3))
def test_zero_adjacency_matches_matrix(cost_matrix):
    adjacency = km.zero_adjacency(cost_matrix)

    assert len(adjacency) == cost_matrix.shape[0]
    for x, ys in enumerate(adjacency):
        assert ys == sorted(ys)
        expected = [y for y in range(cost_matrix.shape[1]) if cost_matrix[x, y] == 0]
        assert ys == expected


def test_zero_adjacency_empty_rows():
    matrix = torch.tensor([[1, 2, 3], [0, 4, 0], [5, 6, 7]])

    assert km.zero_adjacency(matrix) == [[], [0, 2], []]
