"""Shared interpretation of a TransportOutcome into a ProviderResult.

Both vendors report failures in an ``{"error": {...}}`` envelope and differ
only in where the useful payload lives on success, so adapters pass an
``extract`` callable and this module handles everything else:

1. transport error -> returned verbatim;
2. non-2xx status -> vendor ``error.message`` (or the ``error`` node as JSON),
   else ``HTTP <status> - <first 100 bytes of body>``;
3. 2xx status -> parse failure, embedded error envelope, or the extracted
   payload / ``Invalid response format: missing ...``.
"""
from __future__ import annotations

from typing import Any, Callable, Optional

from ..config.defaults import HTTP_ERROR_BODY_PREVIEW_BYTES
from .errors import ErrorCode, classify_status
from .models import ProviderResult, TransportOutcome
from .parsing import dig, dig_str, dumps_compact, parse_json_document
from .utils.text import truncate_utf8

INVALID_FORMAT_PREFIX = "Invalid response format: missing "

Extractor = Callable[[Any], Optional[str]]


def vendor_error_message(document: Any) -> Optional[str]:
    """Return the text of an ``error`` envelope, or ``None`` if absent.

    ``error.message`` is used when it is a string; otherwise the whole
    ``error`` node is serialized back to JSON text.
    """
    if not isinstance(document, dict) or "error" not in document:
        return None
    message = dig_str(document, "error", "message")
    if message is not None:
        return message
    return dumps_compact(dig(document, "error"))


def http_error_message(status_code: int, body: str) -> str:
    preview = truncate_utf8(body, HTTP_ERROR_BODY_PREVIEW_BYTES)
    return f"HTTP {status_code} - {preview}"


def invalid_format(missing: str) -> ProviderResult:
    return ProviderResult.fail(INVALID_FORMAT_PREFIX + missing, ErrorCode.FORMAT)


def interpret_outcome(outcome: TransportOutcome, extract: Extractor, missing: str) -> ProviderResult:
    """Normalize ``outcome`` using the vendor-specific ``extract`` callable.

    Parameters:
        outcome: Transport result for the request.
        extract: Returns the payload text from a decoded 2xx document, or
            ``None`` when the expected node is absent.
        missing: Description used in ``Invalid response format: missing ...``.
    """
    if outcome.transport_error is not None:
        return ProviderResult.fail(outcome.transport_error, ErrorCode.TRANSPORT)

    status = outcome.status_code
    body = outcome.body or ""
    parsed = parse_json_document(body)

    failure_code = classify_status(status)
    if failure_code is not None:
        api_error = vendor_error_message(parsed.document) if parsed.ok else None
        return ProviderResult.fail(api_error or http_error_message(status, body), failure_code)

    if not parsed.ok:
        return ProviderResult.fail(parsed.error_message, ErrorCode.PARSE)
    api_error = vendor_error_message(parsed.document)
    if api_error:
        return ProviderResult.fail(api_error, ErrorCode.HTTP)
    text = extract(parsed.document)
    if text is None:
        return invalid_format(missing)
    return ProviderResult.ok(text)


__all__ = [
    "INVALID_FORMAT_PREFIX",
    "http_error_message",
    "interpret_outcome",
    "invalid_format",
    "vendor_error_message",
]
