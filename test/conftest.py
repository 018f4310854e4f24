"""Shared fixtures: a pinned clock so record ids are predictable."""

import pytest

from dispatcher import models

FROZEN_EPOCH = 1700001234


@pytest.fixture
def frozen_time(monkeypatch):
    """Pin time.time() so every new record gets id E1234."""
    monkeypatch.setattr(models.time, "time", lambda: FROZEN_EPOCH + 0.5)
    return FROZEN_EPOCH


@pytest.fixture
def data_file(tmp_path):
    return str(tmp_path / "emergencies.txt")
