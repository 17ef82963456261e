"""Typed settings for a provider adapter.

Purpose
-------
Capture the per-provider values that vary between deployments (base URL, API
version, token limit) in a validated DTO so that a bad config file or
environment value fails loudly at provider construction instead of producing
a malformed request.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProviderSettings(BaseModel):
    """Resolved configuration for one provider.

    Attributes
    ----------
    base_url:
        Absolute endpoint of the form ``scheme://host[:port]``.
    api_version:
        Version string sent as a header (message-style) or used as the path
        prefix (content-style).
    max_tokens:
        Upper bound on generated tokens; only sent by providers that require it.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    base_url: str = Field(..., min_length=1)
    api_version: str = Field(..., min_length=1)
    max_tokens: Optional[int] = Field(default=None, gt=0)

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.strip().rstrip("/")


__all__ = ["ProviderSettings"]
