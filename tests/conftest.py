"""Shared fixtures for the exprcalc test suite."""

import io

import pytest
from rich.console import Console


@pytest.fixture
def console():
    """A Rich Console that records into a string buffer."""
    return Console(file=io.StringIO(), width=120, color_system=None)


@pytest.fixture
def console_text(console):
    """Read back everything printed to the ``console`` fixture."""
    return lambda: console.file.getvalue()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep developer EXPRCALC_* settings out of the tests."""
    for key in ("EXPRCALC_LOG_LEVEL", "EXPRCALC_STRICT_BRACKETS", "EXPRCALC_PRECISION"):
        monkeypatch.delenv(key, raising=False)
