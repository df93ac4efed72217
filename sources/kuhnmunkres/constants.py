from __future__ import annotations

from typing import Final

UNMATCHED: Final = -1
ENV_DEBUG: Final = "KUHNMUNKRES_DEBUG"
