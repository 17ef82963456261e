"""GoogleProvider adapter (content-style).

Uses the Generative Language REST API (``generateContent`` and
``embedContent``) through the shared transport; no SDK is involved.
"""

from __future__ import annotations

from typing import Optional

from ..base.dto import ProviderSettings
from ..base.http import post
from ..base.interfaces import TransportCall
from ..base.invocation import PreparedRequest, execute
from ..base.logging import LogContext, get_logger
from ..base.models import ProviderResult
from ..config import get_provider_config
from ..config.defaults import GOOGLE_PROVIDER_NAME
from .helpers import (
    build_embed_body,
    build_generate_body,
    build_headers,
    embed_path,
    extract_embedding,
    extract_text,
    generate_path,
)


class GoogleProvider:
    """Adapter for Gemini models via the Generative Language API.

    Parameters:
        settings: Resolved settings; read from configuration when omitted.
        transport: Callable with the signature of ``ai_udf.base.http.post``.
    """

    def __init__(
        self,
        settings: Optional[ProviderSettings] = None,
        transport: Optional[TransportCall] = None,
    ) -> None:
        self._settings = settings or get_provider_config(GOOGLE_PROVIDER_NAME)
        self._transport = transport or post
        self._logger = get_logger("ai_udf.providers.google")

    @property
    def provider_name(self) -> str:
        return GOOGLE_PROVIDER_NAME

    def complete(self, model: str, credential: str, input_text: str) -> ProviderResult:
        request = PreparedRequest(
            endpoint=self._settings.base_url,
            path=generate_path(self._settings.api_version, model),
            body=build_generate_body(input_text),
            headers=build_headers(credential),
        )
        return execute(
            self._transport,
            request,
            extract=extract_text,
            missing="candidates or content",
            logger=self._logger,
            ctx=LogContext(provider=self.provider_name, model=model, operation="complete"),
        )

    def embed(self, model: str, credential: str, input_text: str) -> ProviderResult:
        """Return ``embedding.values`` as JSON array text."""
        request = PreparedRequest(
            endpoint=self._settings.base_url,
            path=embed_path(self._settings.api_version, model),
            body=build_embed_body(input_text),
            headers=build_headers(credential),
        )
        return execute(
            self._transport,
            request,
            extract=extract_embedding,
            missing="embedding.values",
            logger=self._logger,
            ctx=LogContext(provider=self.provider_name, model=model, operation="embed"),
        )


__all__ = ["GoogleProvider"]
