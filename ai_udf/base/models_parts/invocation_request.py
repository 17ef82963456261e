"""
InvocationRequest: the four string inputs of a host function call.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class InvocationRequest:
    """Arguments as received from the host; any of them may be NULL.

    ``input_label`` names the fourth argument in validation messages
    (``"Prompt text"`` for completions, ``"Text"`` for embeddings).
    """

    provider_name: Optional[str]
    model: Optional[str]
    credential: Optional[str]
    input_text: Optional[str]
    input_label: str = "Prompt text"

    def has_null(self) -> bool:
        return any(v is None for v in (self.provider_name, self.model, self.credential, self.input_text))

    def labelled_fields(self) -> Tuple[Tuple[str, Optional[str]], ...]:
        """Return (label, value) pairs in validation order."""
        return (
            ("Provider name", self.provider_name),
            ("Model name", self.model),
            ("API key", self.credential),
            (self.input_label, self.input_text),
        )


__all__ = ["InvocationRequest"]
