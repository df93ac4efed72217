"""
Simple system to debug the solvers via process output messages
"""

from __future__ import annotations

import functools

from .constants import ENV_DEBUG

__all__ = ["check_debug_enabled"]


@functools.cache
def check_debug_enabled() -> bool:
    """
    Check whether debugging is enabled by reading the environment
    variable ``KUHNMUNKRES_DEBUG``.
    """
    from unipercept.config.env import get_env

    return get_env(bool, ENV_DEBUG, default=False)
