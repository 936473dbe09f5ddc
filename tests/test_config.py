import logging

import pytest

from sprig import config


def test_defaults(monkeypatch):
    for var in ("SPRIG_TRACE", "SPRIG_HALT_ON_ERROR", "SPRIG_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    assert config.trace_enabled() is False
    assert config.halt_on_error() is True
    assert config.get_log_level() == logging.WARNING


@pytest.mark.parametrize("raw,expected", [("1", True), ("Yes", True), ("on", True), ("0", False), ("off", False), ("", False)])
def test_trace_flag(monkeypatch, raw, expected):
    monkeypatch.setenv("SPRIG_TRACE", raw)
    assert config.trace_enabled() is expected


def test_bad_flag(monkeypatch):
    monkeypatch.setenv("SPRIG_HALT_ON_ERROR", "maybe")
    with pytest.raises(ValueError):
        config.halt_on_error()


def test_log_level(monkeypatch):
    monkeypatch.setenv("SPRIG_LOG_LEVEL", "debug")
    assert config.get_log_level() == logging.DEBUG
    monkeypatch.setenv("SPRIG_LOG_LEVEL", "chatty")
    with pytest.raises(ValueError):
        config.get_log_level()
