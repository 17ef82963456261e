"""ai_udf.config.defaults
======================

Central place for small, stable default values. These can be overridden via
environment variables or a config file (see ``ai_udf.config``) but provide
the values the upstream APIs expect out of the box.

Only plain constants live here; no imports from other ai_udf packages.
"""

from __future__ import annotations

# ---- Message-style provider (Anthropic Messages API) ----
ANTHROPIC_PROVIDER_NAME = "anthropic"
ANTHROPIC_DEFAULT_BASE_URL = "https://api.anthropic.com"
ANTHROPIC_DEFAULT_VERSION = "2023-06-01"
ANTHROPIC_MESSAGES_PATH = "/v1/messages"
ANTHROPIC_DEFAULT_MAX_TOKENS = 1024

# ---- Content-style provider (Google Generative Language API) ----
GOOGLE_PROVIDER_NAME = "google"
GOOGLE_DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com"
GOOGLE_DEFAULT_API_VERSION = "v1beta"

# ---- Host boundary ----
# Declared output buffer size of both SQL functions.
FUNCTION_BUFFER_SIZE = 65535
# Size of the host's error message field; messages are capped one byte below.
ERROR_MSG_CAPACITY = 256

# ---- Error synthesis ----
# Bytes of a response body quoted in synthesized "HTTP <status> - ..." errors.
HTTP_ERROR_BODY_PREVIEW_BYTES = 100

# ---- Extension metadata ----
EXTENSION_NAME = "vsql_ai"
EXTENSION_VERSION = "0.0.1"


__all__ = [
    "ANTHROPIC_PROVIDER_NAME",
    "ANTHROPIC_DEFAULT_BASE_URL",
    "ANTHROPIC_DEFAULT_VERSION",
    "ANTHROPIC_MESSAGES_PATH",
    "ANTHROPIC_DEFAULT_MAX_TOKENS",
    "GOOGLE_PROVIDER_NAME",
    "GOOGLE_DEFAULT_BASE_URL",
    "GOOGLE_DEFAULT_API_VERSION",
    "FUNCTION_BUFFER_SIZE",
    "ERROR_MSG_CAPACITY",
    "HTTP_ERROR_BODY_PREVIEW_BYTES",
    "EXTENSION_NAME",
    "EXTENSION_VERSION",
]
