"""
Structured provider error exception type.

Carries a normalized `ErrorCode` next to the human-readable message so that
the boundary can report the message verbatim while logs keep the category.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class ProviderError(Exception):
    """Represents a structured provider error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Message reported to the caller unchanged.
        provider: Provider key where the error originated (e.g., ``"google"``).
        model: Optional model name associated with the failure.
    """

    code: ErrorCode
    message: str
    provider: str
    model: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


__all__ = ["ProviderError"]
