"""Message-style provider (Anthropic Messages API)."""

from .client import AnthropicProvider, EMBEDDINGS_UNSUPPORTED

__all__ = ["AnthropicProvider", "EMBEDDINGS_UNSUPPORTED"]
