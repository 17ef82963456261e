"""
Normalized failure codes (taxonomy).

Defines the `ErrorCode` enumeration used by providers, the registry and the
result adapter. Values are lowercase snake_case and are considered a stable
contract for logging.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated failure categories, from input checks to response parsing."""

    VALIDATION = "validation"
    UNKNOWN_PROVIDER = "unknown_provider"
    TRANSPORT = "transport"
    HTTP = "http"
    FORMAT = "format"
    PARSE = "parse"
    UNSUPPORTED = "unsupported"
    INTERNAL = "internal"


__all__ = ["ErrorCode"]
