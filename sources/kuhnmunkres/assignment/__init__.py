"""
This package implements modules that solve a square Linear Assignment Problem
(LAP), where a minimum cost perfect matching must be computed over a cost-matrix.
"""

from __future__ import annotations

from ._base import *
from ._dual import *
from ._graph import *
from ._hungarian import *
from ._reduce import *
from ._reference import *
from ._search import *
from ._utils import *
