r"""
Exceptions raised by the assignment solvers.
"""

from __future__ import annotations

__all__ = ["InvalidInputError", "AlgorithmInvariantError"]


class InvalidInputError(ValueError):
    """
    The cost matrix cannot be solved, e.g. because it is empty, not square or
    holds negative costs. Raised before any data is modified.
    """


class AlgorithmInvariantError(RuntimeError):
    """
    A guarantee of the primal-dual method was broken while solving. This never
    happens for valid input and points to a bug in the solver.
    """
