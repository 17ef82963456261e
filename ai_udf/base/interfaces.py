"""AIProvider Protocol.

Defines the text-in/text-out contract shared by the message-style and
content-style adapters.
"""

from __future__ import annotations

from typing import Mapping, Optional, Protocol, runtime_checkable

from .logging import LogContext
from .models import ProviderResult, TransportOutcome


@runtime_checkable
class AIProvider(Protocol):
    """Minimal interface for LLM providers.

    Implementations never raise for upstream failures; every problem is
    encoded in the returned :class:`ProviderResult`.
    """

    @property
    def provider_name(self) -> str:
        """Canonical provider identifier, ``"anthropic"`` or ``"google"``."""
        ...

    def complete(self, model: str, credential: str, input_text: str) -> ProviderResult:
        """Send ``input_text`` as a single user turn and return the reply text."""
        ...

    def embed(self, model: str, credential: str, input_text: str) -> ProviderResult:
        """Return the embedding of ``input_text`` as a JSON array in text form."""
        ...


class TransportCall(Protocol):  # pragma: no cover - structural protocol
    """Signature of ``ai_udf.base.http.post``; tests substitute fakes."""

    def __call__(
        self,
        endpoint: str,
        path: str,
        body: str,
        headers: Mapping[str, str],
        timeout: float,
        *,
        ctx: Optional[LogContext] = None,
    ) -> TransportOutcome: ...


__all__ = ["AIProvider", "TransportCall"]
