# tests/conftest.py
from __future__ import annotations

import pytest

from bigint import runtime


@pytest.fixture(autouse=True)
def fresh_runtime():
    """Every test starts from the built-in defaults (no profile applied)."""
    rt = runtime.reset()
    yield rt
    runtime.reset()


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """Point BIGINT_HOME at an empty temporary directory."""
    monkeypatch.setenv("BIGINT_HOME", str(tmp_path))
    return tmp_path
