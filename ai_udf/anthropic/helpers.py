"""Anthropic Messages API request/response helpers.

Side-effect-free builders for the request body and headers, plus the
success-path extractor used by ``AnthropicProvider``.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from ..base.parsing import dig_str


def build_headers(credential: str, api_version: str) -> Dict[str, str]:
    """Return the request headers; the credential goes in ``x-api-key``."""
    return {
        "x-api-key": credential,
        "anthropic-version": api_version,
        "content-type": "application/json",
    }


def build_request_body(model: str, prompt: str, max_tokens: int) -> str:
    """Serialize a single-turn Messages request."""
    payload: Dict[str, Any] = {
        "model": model,
        "max_tokens": max_tokens,
        "messages": [{"role": "user", "content": prompt}],
    }
    return json.dumps(payload, ensure_ascii=False)


def extract_text(document: Any) -> Optional[str]:
    """Return ``content[0].text`` or ``None`` when absent."""
    return dig_str(document, "content", 0, "text")


__all__ = ["build_headers", "build_request_body", "extract_text"]
