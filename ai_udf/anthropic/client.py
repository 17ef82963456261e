"""AnthropicProvider adapter (message-style).

Talks to the Anthropic Messages API over plain HTTP via the shared
transport. Completion only: Anthropic has no embeddings endpoint, so
``embed`` fails without touching the network.
"""

from __future__ import annotations

from typing import Optional

from ..base.dto import ProviderSettings
from ..base.errors import ErrorCode
from ..base.http import post
from ..base.interfaces import TransportCall
from ..base.invocation import PreparedRequest, execute
from ..base.logging import LogContext, get_logger, log_event
from ..base.models import ProviderResult
from ..config import get_provider_config
from ..config.defaults import ANTHROPIC_DEFAULT_MAX_TOKENS, ANTHROPIC_MESSAGES_PATH, ANTHROPIC_PROVIDER_NAME
from .helpers import build_headers, build_request_body, extract_text

EMBEDDINGS_UNSUPPORTED = "Embeddings not supported for Anthropic provider"


class AnthropicProvider:
    """Adapter for the Anthropic Messages API.

    Parameters:
        settings: Resolved settings; read from configuration when omitted.
        transport: Callable with the signature of ``ai_udf.base.http.post``.
    """

    def __init__(
        self,
        settings: Optional[ProviderSettings] = None,
        transport: Optional[TransportCall] = None,
    ) -> None:
        self._settings = settings or get_provider_config(ANTHROPIC_PROVIDER_NAME)
        self._transport = transport or post
        self._logger = get_logger("ai_udf.providers.anthropic")

    @property
    def provider_name(self) -> str:
        return ANTHROPIC_PROVIDER_NAME

    def complete(self, model: str, credential: str, input_text: str) -> ProviderResult:
        """Send ``input_text`` as one user message and return ``content[0].text``."""
        max_tokens = self._settings.max_tokens or ANTHROPIC_DEFAULT_MAX_TOKENS
        request = PreparedRequest(
            endpoint=self._settings.base_url,
            path=ANTHROPIC_MESSAGES_PATH,
            body=build_request_body(model, input_text, max_tokens),
            headers=build_headers(credential, self._settings.api_version),
        )
        return execute(
            self._transport,
            request,
            extract=extract_text,
            missing="content",
            logger=self._logger,
            ctx=LogContext(provider=self.provider_name, model=model, operation="complete"),
        )

    def embed(self, model: str, credential: str, input_text: str) -> ProviderResult:
        """Always fails: the Messages API has no embeddings endpoint."""
        ctx = LogContext(provider=self.provider_name, model=model, operation="embed")
        log_event(self._logger, "embed.unsupported", ctx)
        return ProviderResult.fail(EMBEDDINGS_UNSUPPORTED, ErrorCode.UNSUPPORTED)


__all__ = ["AnthropicProvider", "EMBEDDINGS_UNSUPPORTED"]
