"""
ProviderResult DTO: the text-or-error outcome of a provider operation.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..errors_parts.error_code import ErrorCode


@dataclass(frozen=True)
class ProviderResult:
    """Text on success, error message otherwise; never both.

    Attributes:
        text: Extracted completion text or serialized embedding array.
        error: Message reported to the caller verbatim.
        error_code: Category of the failure, used for logging.
    """

    text: Optional[str] = None
    error: Optional[str] = None
    error_code: Optional[ErrorCode] = None

    def __post_init__(self) -> None:
        if (self.text is None) == (self.error is None):
            raise ValueError("ProviderResult requires exactly one of text or error")

    @classmethod
    def ok(cls, text: str) -> "ProviderResult":
        return cls(text=text)

    @classmethod
    def fail(cls, error: str, code: ErrorCode = ErrorCode.INTERNAL) -> "ProviderResult":
        return cls(error=error, error_code=code)

    @property
    def is_error(self) -> bool:
        return self.error is not None


__all__ = ["ProviderResult"]
