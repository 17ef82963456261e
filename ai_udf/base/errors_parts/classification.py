"""
Classification helpers mapping outcomes to normalized ErrorCode values.

Used for structured logging only; the message surfaced to callers is never
derived from the classification.
"""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorCode
from .provider_error import ProviderError


def is_success_status(status: int) -> bool:
    """Return True for 2xx HTTP status codes."""
    return 200 <= status < 300


def classify_status(status: Optional[int]) -> Optional[ErrorCode]:
    """Map an HTTP status to an error code, or ``None`` for 2xx responses."""
    if status is None:
        return ErrorCode.TRANSPORT
    if is_success_status(status):
        return None
    return ErrorCode.HTTP


def classify_exception(exc: Exception) -> ErrorCode:
    """Classify an exception raised inside a provider call.

    ``ProviderError`` passes its code through; pydantic/``ValueError`` style
    configuration problems and anything else are ``INTERNAL``.
    """
    if isinstance(exc, ProviderError):
        return exc.code
    return ErrorCode.INTERNAL


__all__ = ["classify_exception", "classify_status", "is_success_status"]
