"""Pytest fixtures for evefrontier tooling tests."""

import json
from pathlib import Path

import pytest

NX_CLOUD_RUNNER = {"tasksRunnerOptions": {"default": {"runner": "nx-cloud"}}}


@pytest.fixture
def nx_project(tmp_path: Path) -> Path:
    """Project root whose nx.json configures a tasks runner (nx-cloud)."""
    (tmp_path / "nx.json").write_text(json.dumps(NX_CLOUD_RUNNER))
    return tmp_path


@pytest.fixture(autouse=True)
def _no_nx_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep NX_BASE / NX_HEAD from the CI environment out of tests."""
    monkeypatch.delenv("NX_BASE", raising=False)
    monkeypatch.delenv("NX_HEAD", raising=False)
