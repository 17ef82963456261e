"""Unified error taxonomy public surface.

Re-exports the one-class-per-file implementations under
``ai_udf.base.errors_parts`` to keep a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import ProviderError
from .errors_parts.classification import classify_exception, classify_status, is_success_status

__all__ = [
    "ErrorCode",
    "ProviderError",
    "classify_exception",
    "classify_status",
    "is_success_status",
]
