"""Unified configuration layer for providers.

Sources are merged in a predictable order:
    1. Built-in defaults (``ai_udf.config.defaults``)
    2. Optional JSON config file pointed to by ``AI_UDF_CONFIG_FILE``
    3. Environment variables
    4. In-code overrides passed to ``get_provider_config``

Environment Variable Conventions
--------------------------------
``<PROVIDER>_BASE_URL`` for both providers, plus ``ANTHROPIC_VERSION``,
``ANTHROPIC_MAX_TOKENS`` and ``GOOGLE_API_VERSION``.

External Config File
--------------------
A JSON object keyed by provider name::

    {
      "anthropic": {"base_url": "http://localhost:8080", "max_tokens": 2048},
      "google": {"api_version": "v1"}
    }

Credentials are never read from configuration; callers pass them per call.
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from ..base.dto import ProviderSettings
from .defaults import (
    ANTHROPIC_DEFAULT_BASE_URL,
    ANTHROPIC_DEFAULT_MAX_TOKENS,
    ANTHROPIC_DEFAULT_VERSION,
    ANTHROPIC_PROVIDER_NAME,
    GOOGLE_DEFAULT_API_VERSION,
    GOOGLE_DEFAULT_BASE_URL,
    GOOGLE_PROVIDER_NAME,
)

CONFIG_FILE_ENV = "AI_UDF_CONFIG_FILE"

DEFAULTS: Dict[str, Dict[str, Any]] = {
    ANTHROPIC_PROVIDER_NAME: {
        "base_url": ANTHROPIC_DEFAULT_BASE_URL,
        "api_version": ANTHROPIC_DEFAULT_VERSION,
        "max_tokens": ANTHROPIC_DEFAULT_MAX_TOKENS,
    },
    GOOGLE_PROVIDER_NAME: {
        "base_url": GOOGLE_DEFAULT_BASE_URL,
        "api_version": GOOGLE_DEFAULT_API_VERSION,
    },
}

# setting key -> environment variable, per provider
ENV_VARS: Dict[str, Dict[str, str]] = {
    ANTHROPIC_PROVIDER_NAME: {
        "base_url": "ANTHROPIC_BASE_URL",
        "api_version": "ANTHROPIC_VERSION",
        "max_tokens": "ANTHROPIC_MAX_TOKENS",
    },
    GOOGLE_PROVIDER_NAME: {
        "base_url": "GOOGLE_BASE_URL",
        "api_version": "GOOGLE_API_VERSION",
    },
}


def _load_config_file() -> Dict[str, Any]:
    """Load the JSON config file named by ``AI_UDF_CONFIG_FILE``, if any.

    Raises ``ValueError`` when the file exists but is not a JSON object; a
    missing path is treated as no file.
    """
    raw_path = os.getenv(CONFIG_FILE_ENV)
    if not raw_path:
        return {}
    path = Path(raw_path).expanduser()
    if not path.is_file():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid config file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Invalid config file {path}: expected a JSON object")
    return data


def _env_layer(provider: str) -> Dict[str, Any]:
    layer: Dict[str, Any] = {}
    for key, env_name in ENV_VARS.get(provider, {}).items():
        if val := os.environ.get(env_name):
            layer[key] = val.strip()
    return layer


def get_provider_config(provider: str, overrides: Optional[Mapping[str, Any]] = None) -> ProviderSettings:
    """Return merged, validated settings for ``provider``.

    Raises:
        KeyError: ``provider`` has no defaults (not a supported provider).
        ValueError: the config file is malformed.
        pydantic.ValidationError: merged values fail validation.
    """
    merged: Dict[str, Any] = dict(DEFAULTS[provider])
    file_section = _load_config_file().get(provider) or {}
    if not isinstance(file_section, dict):
        raise ValueError(f"Config section for '{provider}' must be an object")
    merged.update(file_section)
    merged.update(_env_layer(provider))
    if overrides:
        merged.update({k: v for k, v in overrides.items() if v is not None})
    return ProviderSettings.model_validate(merged)


__all__ = [
    "CONFIG_FILE_ENV",
    "DEFAULTS",
    "ENV_VARS",
    "get_provider_config",
]
