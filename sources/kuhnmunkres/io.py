r"""
Reading cost matrices from delimited text files.
"""

from __future__ import annotations

import os
import typing as T

import numpy as np
import torch
from torch import Tensor

from .assignment import as_cost_matrix
from .errors import InvalidInputError

__all__ = ["load_cost_matrix"]


def load_cost_matrix(
    path: T.Union[str, os.PathLike], delimiter: T.Optional[str] = None
) -> Tensor:
    """
    Load a square matrix of non-negative integer costs from a text file.

    Parameters
    ----------
    path
        File with one row of the matrix per line.
    delimiter, optional
        Separator between the entries of a row, any whitespace by default.

    Returns
    -------
    Tensor[N, N]
        The validated cost matrix.
    """

    try:
        data = np.loadtxt(path, dtype=np.int64, delimiter=delimiter, ndmin=2)
    except ValueError as err:
        msg = f"Failed to read an integer matrix from '{path}': {err}"
        raise InvalidInputError(msg) from err

    return as_cost_matrix(torch.from_numpy(data))
