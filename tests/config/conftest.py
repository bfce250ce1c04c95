"""Config test fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep caller environment from leaking into settings resolution."""
    monkeypatch.delenv("GRAPHCTL_CONFIG", raising=False)
    for name in ("GRAPHCTL_QUIET", "GRAPHCTL_VERBOSE", "GRAPHCTL_JSON_OUTPUT"):
        monkeypatch.delenv(name, raising=False)
