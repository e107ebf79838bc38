# tests/core/test_config.py
"""
Tests for the Config class.
"""

import pytest

from kubedash.core.config import Config
from kubedash.core.exceptions import ConfigurationError, KubeDashError


def test_metrics_history_length_default(monkeypatch):
    monkeypatch.delenv("METRICS_HISTORY_LENGTH", raising=False)

    assert Config().METRICS_HISTORY_LENGTH == 15


def test_metrics_history_length_from_env(monkeypatch):
    monkeypatch.setenv("METRICS_HISTORY_LENGTH", "30")

    assert Config().METRICS_HISTORY_LENGTH == 30


def test_metrics_history_length_not_an_integer(monkeypatch):
    monkeypatch.setenv("METRICS_HISTORY_LENGTH", "lots")

    with pytest.raises(ConfigurationError) as exc_info:
        Config().METRICS_HISTORY_LENGTH

    assert "must be an integer" in str(exc_info.value)


def test_validate_instance_rejects_zero_history(monkeypatch):
    monkeypatch.setenv("METRICS_HISTORY_LENGTH", "0")

    with pytest.raises(ConfigurationError):
        Config().validate_instance()


def test_validate_instance_accepts_defaults():
    Config().validate_instance()


def test_configuration_error_hierarchy():
    assert issubclass(ConfigurationError, KubeDashError)
    assert issubclass(ConfigurationError, ValueError)
