"""Runtime settings read from ``TS_PILOT_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version

_DEFAULT_PROTOCOL_VERSION = "2025-06-18"
_FALLBACK_VERSION = "1.0.0"


@dataclass(frozen=True)
class Settings:
    server_name: str
    server_version: str
    protocol_version: str
    log_level: str


def _package_version() -> str:
    try:
        return version("ts-pilot")
    except PackageNotFoundError:
        return _FALLBACK_VERSION


def get_settings() -> Settings:
    return Settings(
        server_name=os.getenv("TS_PILOT_SERVER_NAME", "ts-pilot"),
        server_version=_package_version(),
        protocol_version=os.getenv("TS_PILOT_PROTOCOL_VERSION", _DEFAULT_PROTOCOL_VERSION),
        log_level=os.getenv("TS_PILOT_LOG_LEVEL", "WARNING").upper(),
    )
