"""Validated data transfer objects."""

from .provider_settings import ProviderSettings

__all__ = ["ProviderSettings"]
