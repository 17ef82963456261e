"""Google Generative Language API request/response helpers.

Both operations share the header set; paths interpolate the model name and
the configured API version (``/v1beta/models/{model}:generateContent``).
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from ..base.parsing import dig, dig_str, dumps_compact


def build_headers(credential: str) -> Dict[str, str]:
    return {"x-goog-api-key": credential, "content-type": "application/json"}


def generate_path(api_version: str, model: str) -> str:
    return f"/{api_version}/models/{model}:generateContent"


def embed_path(api_version: str, model: str) -> str:
    return f"/{api_version}/models/{model}:embedContent"


def build_generate_body(prompt: str) -> str:
    return json.dumps({"contents": [{"parts": [{"text": prompt}]}]}, ensure_ascii=False)


def build_embed_body(text: str) -> str:
    return json.dumps({"content": {"parts": [{"text": text}]}}, ensure_ascii=False)


def extract_text(document: Any) -> Optional[str]:
    """Return ``candidates[0].content.parts[0].text`` or ``None``."""
    return dig_str(document, "candidates", 0, "content", "parts", 0, "text")


def extract_embedding(document: Any) -> Optional[str]:
    """Return ``embedding.values`` re-serialized as compact JSON text.

    The vector stays text because the host result type is a string; it is
    never decoded into floats here.
    """
    values = dig(document, "embedding", "values")
    if not isinstance(values, list):
        return None
    return dumps_compact(values)


__all__ = [
    "build_embed_body",
    "build_generate_body",
    "build_headers",
    "embed_path",
    "extract_embedding",
    "extract_text",
    "generate_path",
]
