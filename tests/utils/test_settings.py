import logging

import pytest

from dialectkit import DialectConfigurationError
from dialectkit.utils import resolve_log_level, resolve_slow_probe_ms


def test_slow_probe_default_and_override(monkeypatch):
    monkeypatch.delenv("DIALECTKIT_SLOW_PROBE_MS", raising=False)
    assert resolve_slow_probe_ms() == 100
    assert resolve_slow_probe_ms(default=50) == 50
    monkeypatch.setenv("DIALECTKIT_SLOW_PROBE_MS", "250")
    assert resolve_slow_probe_ms() == 250
    assert resolve_slow_probe_ms(override=5) == 5


@pytest.mark.parametrize("value", ["fast", "-1"])
def test_invalid_slow_probe_value_raises(monkeypatch, value):
    monkeypatch.setenv("DIALECTKIT_SLOW_PROBE_MS", value)
    with pytest.raises(DialectConfigurationError):
        resolve_slow_probe_ms()


def test_log_level_from_environment(monkeypatch):
    monkeypatch.delenv("DIALECTKIT_LOG_LEVEL", raising=False)
    assert resolve_log_level() == logging.INFO
    monkeypatch.setenv("DIALECTKIT_LOG_LEVEL", "debug")
    assert resolve_log_level() == logging.DEBUG
    monkeypatch.setenv("DIALECTKIT_LOG_LEVEL", "30")
    assert resolve_log_level() == logging.WARNING
    monkeypatch.setenv("DIALECTKIT_LOG_LEVEL", "chatty")
    with pytest.raises(DialectConfigurationError):
        resolve_log_level()
