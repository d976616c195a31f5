"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def config_file(tmp_path: Path, monkeypatch) -> Path:
    """Path of a not-yet-written config.toml that numfield.config will read."""
    path = tmp_path / ".config" / "numfield" / "config.toml"
    path.parent.mkdir(parents=True)
    monkeypatch.delenv("NUMFIELD_CONFIG", raising=False)
    # _CONFIG_PATH is computed at import time, so we must patch it directly
    monkeypatch.setattr("numfield.config._CONFIG_PATH", path)
    return path
