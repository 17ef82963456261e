"""Timeout configuration for upstream HTTP calls.

Every provider call uses the same per-phase deadline: the value bounds the
connect, write and read phases independently. The default is 30 seconds and
can be overridden with ``AI_UDF_HTTP_TIMEOUT_SECONDS`` (positive float).
"""
from __future__ import annotations

from dataclasses import dataclass
import os

HTTP_TIMEOUT_ENV = "AI_UDF_HTTP_TIMEOUT_SECONDS"
DEFAULT_HTTP_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class TimeoutConfig:
    """Normalized timeout values (seconds)."""

    http_timeout_seconds: float = DEFAULT_HTTP_TIMEOUT_SECONDS


def _parse_env_float(name: str, default: float) -> float:
    """Read ``name`` as a positive float, falling back to ``default``."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the timeout configuration.

    The environment is read on each call; calls are independent and carry no
    cached state.
    """
    return TimeoutConfig(http_timeout_seconds=_parse_env_float(HTTP_TIMEOUT_ENV, DEFAULT_HTTP_TIMEOUT_SECONDS))


__all__ = [
    "DEFAULT_HTTP_TIMEOUT_SECONDS",
    "HTTP_TIMEOUT_ENV",
    "TimeoutConfig",
    "get_timeout_config",
]
