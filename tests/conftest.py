# tests/conftest.py

from datetime import datetime, timezone

import pytest


@pytest.fixture(autouse=True)
def mock_settings_env_vars(monkeypatch):
    """
    Pytest fixture to pin the environment variables read by the config module.

    It runs automatically for every test (`autouse=True`) so results do not
    depend on the developer's shell or a local .env file.
    """
    monkeypatch.setenv("METRICS_HISTORY_LENGTH", "15")


@pytest.fixture
def base_time():
    """A fixed UTC instant used as the origin of sample timestamps."""
    return datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)
