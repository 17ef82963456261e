"""Provider Factory.

Purpose
-------
Resolve a provider name to a freshly constructed adapter implementing
``AIProvider``. The set of providers is closed: names map to adapter classes
in a fixed table and nothing is discovered or imported dynamically.

Matching
--------
Names are matched exactly and case-sensitively (``"anthropic"``,
``"google"``). An unknown name raises :class:`UnknownProviderError` whose
message is ``Unknown provider: <name>``, used verbatim by callers.

Failure modes
-------------
- Unknown name -> ``UnknownProviderError`` (code ``unknown_provider``).
- Adapter construction failure (for example invalid configuration) ->
  ``ProviderError`` with code ``internal``.
"""

from __future__ import annotations

from typing import Any, Dict, Tuple, Type

from ..anthropic.client import AnthropicProvider
from ..config.defaults import ANTHROPIC_PROVIDER_NAME, GOOGLE_PROVIDER_NAME
from ..google.client import GoogleProvider
from .errors import ErrorCode, ProviderError
from .interfaces import AIProvider


class UnknownProviderError(ProviderError):
    """Raised when a provider name is not in the registry."""

    def __init__(self, provider: str) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_PROVIDER,
            message=f"Unknown provider: {provider}",
            provider=provider,
        )


def create_provider(provider: str, **kwargs: Any) -> AIProvider:
    """Compatibility helper that delegates to :meth:`ProviderFactory.create`."""
    return ProviderFactory.create(provider, **kwargs)


class ProviderFactory:
    """Create provider adapters from a canonical name."""

    _PROVIDERS: Dict[str, Type[Any]] = {
        ANTHROPIC_PROVIDER_NAME: AnthropicProvider,
        GOOGLE_PROVIDER_NAME: GoogleProvider,
    }

    @classmethod
    def create(cls, provider: str, **kwargs: Any) -> AIProvider:
        """Create a provider adapter instance.

        Parameters
        ----------
        provider:
            Exact provider name.
        **kwargs:
            Forwarded to the adapter constructor (``settings``, ``transport``).

        Raises
        ------
        UnknownProviderError
            If ``provider`` is not registered.
        ProviderError
            If the adapter constructor raises.
        """
        klass = cls._PROVIDERS.get(provider)
        if klass is None:
            raise UnknownProviderError(provider)
        try:
            return klass(**kwargs)
        except Exception as exc:
            raise ProviderError(
                code=ErrorCode.INTERNAL,
                message=f"Failed to initialize provider '{provider}': {exc}",
                provider=provider,
            ) from exc

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Return the supported provider names in registration order."""
        return tuple(cls._PROVIDERS.keys())


__all__ = ["ProviderFactory", "UnknownProviderError", "create_provider"]
