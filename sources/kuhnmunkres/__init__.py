r"""
Kuhn-Munkres
============

This module implements the primal-dual (Hungarian) method for the linear
assignment problem.

.. math::

    \min_{\sigma} \sum_{i} C_{i, \sigma(i)}

Given an :math:`N \times N` matrix of non-negative integer costs between two
vertex sets, e.g. workers and tasks, a perfect matching of minimum total cost is
found.

Terminology
-----------

- **X, Y**: The row and column vertex sets of the bipartite graph.

- **Zero-cost edge**: An edge whose cost in the reduced matrix is exactly zero.

- **Alternating path**: A path from a free row vertex to a free column vertex that
    alternates between unmatched and matched zero-cost edges.

- **Dual values**: The row and column offsets that are subtracted or added to keep
    the reduced matrix consistent with the growing matching.
"""

from __future__ import annotations

__version__ = "1.0.0"

from . import assignment, constants, debug, errors
from .assignment import *
from .errors import *
from .io import *
