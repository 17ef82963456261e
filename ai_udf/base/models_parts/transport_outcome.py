"""
Normalized transport outcome.

Either an HTTP response was received (any status, with its body) or no
response was obtained and a transport failure string describes why. Exactly
one branch is populated.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..errors_parts.classification import is_success_status


@dataclass(frozen=True)
class TransportOutcome:
    """Result of a single blocking POST.

    Attributes:
        status_code: HTTP status when a response was received.
        body: Response body text when a response was received.
        transport_error: Failure description when no response was received.
    """

    status_code: Optional[int] = None
    body: Optional[str] = None
    transport_error: Optional[str] = None

    def __post_init__(self) -> None:
        has_response = self.status_code is not None
        has_error = self.transport_error is not None
        if has_response == has_error:
            raise ValueError("TransportOutcome requires exactly one of status_code or transport_error")
        if has_response and self.body is None:
            object.__setattr__(self, "body", "")

    @classmethod
    def response(cls, status_code: int, body: str) -> "TransportOutcome":
        return cls(status_code=status_code, body=body)

    @classmethod
    def failure(cls, transport_error: str) -> "TransportOutcome":
        return cls(transport_error=transport_error)

    @property
    def is_transport_error(self) -> bool:
        return self.transport_error is not None

    @property
    def is_success(self) -> bool:
        """True when a response was received with a 2xx status."""
        return self.status_code is not None and is_success_status(self.status_code)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable summary without the body."""
        if self.transport_error is not None:
            return {"transport_error": self.transport_error}
        return {"status_code": self.status_code, "body_len": len(self.body or "")}


__all__ = ["TransportOutcome"]
