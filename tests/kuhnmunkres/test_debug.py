r"""
Tests for ``kuhnmunkres.debug``.
"""

from __future__ import annotations

import pytest

import kuhnmunkres as km
from kuhnmunkres.constants import ENV_DEBUG
from kuhnmunkres.debug import check_debug_enabled


@pytest.fixture()
def debug_env(monkeypatch):
    def _set(value: str | None):
        if value is None:
            monkeypatch.delenv(ENV_DEBUG, raising=False)
        else:
            monkeypatch.setenv(ENV_DEBUG, value)
        check_debug_enabled.cache_clear()

    yield _set

    check_debug_enabled.cache_clear()


@pytest.mark.parametrize(
    ["value", "enabled"],
    [(None, False), ("0", False), ("false", False), ("1", True), ("true", True)],
)
def test_check_debug_enabled(debug_env, value, enabled):
    debug_env(value)

    assert bool(check_debug_enabled()) is enabled


def test_debug_trace(debug_env, product_matrix, capsys):
    debug_env("1")
    km.hungarian_assignment(product_matrix)

    out = capsys.readouterr().out
    assert "reduced" in out
    assert "adjusted duals by 1" in out
    assert "Hungarian assignment completed" in out


def test_debug_silent(debug_env, product_matrix, capsys):
    debug_env(None)
    km.hungarian_assignment(product_matrix)

    assert capsys.readouterr().out == ""
