"""Tests for environment-driven settings."""

from __future__ import annotations

import logging

import pytest

from ts_pilot.config import get_settings
from ts_pilot.log import configure_logging


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("TS_PILOT_SERVER_NAME", "TS_PILOT_PROTOCOL_VERSION", "TS_PILOT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = get_settings()
    assert settings.server_name == "ts-pilot"
    assert settings.protocol_version == "2025-06-18"
    assert settings.log_level == "WARNING"
    assert settings.server_version


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TS_PILOT_SERVER_NAME", "pilot-dev")
    monkeypatch.setenv("TS_PILOT_LOG_LEVEL", "debug")
    settings = get_settings()
    assert settings.server_name == "pilot-dev"
    assert settings.log_level == "DEBUG"


def test_configure_logging_sets_package_level() -> None:
    configure_logging("DEBUG")
    assert logging.getLogger("ts_pilot").level == logging.DEBUG
    configure_logging("WARNING")
    assert logging.getLogger("ts_pilot").level == logging.WARNING
    assert len(logging.getLogger("ts_pilot").handlers) == 1
