"""ai_udf package

Uniform access to third-party LLM services (text completion and embeddings)
for hosts that call string-typed functions and expect a bounded string, a
NULL, or a short error message back.

Public API (re-exported):
    - Version: ``__version__``
    - Functions: :func:`ai_prompt`, :func:`create_embed`, :func:`invoke`
    - Result record: :class:`FunctionResult`, :class:`ResultKind`, :func:`new_result`
    - Providers: :func:`create_provider`, :class:`ProviderFactory`
    - Errors: :class:`ProviderError`, :class:`ErrorCode`, :class:`UnknownProviderError`
"""

from .base.errors import ErrorCode, ProviderError
from .base.factory import ProviderFactory, UnknownProviderError, create_provider
from .functions import (
    FunctionResult,
    ResultKind,
    ai_prompt,
    create_embed,
    extension_manifest,
    invoke,
    new_result,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ErrorCode",
    "FunctionResult",
    "ProviderError",
    "ProviderFactory",
    "ResultKind",
    "UnknownProviderError",
    "ai_prompt",
    "create_embed",
    "create_provider",
    "extension_manifest",
    "invoke",
    "new_result",
]
