"""Single-shot blocking HTTP POST returning a normalized outcome.

Purpose:
    Issue exactly one POST to ``endpoint + path`` and report either the
    response (any status code) or why no response was received. Interpreting
    status codes is left to providers.

External dependencies:
    - ``httpx`` for the synchronous HTTP client.

Timeout strategy:
    - ``httpx.Timeout(timeout)`` applies the same deadline to the connect,
      write, read and pool phases independently.

Lifecycle:
    - A new ``httpx.Client`` is created and closed for every call. There is
      no pooling across calls and no retry; redirects are not followed.
"""

from __future__ import annotations

import os
import ssl
from typing import Mapping, Optional, Union

import httpx

from ..logging import LogContext, get_logger, log_event
from ..models import TransportOutcome
from .endpoint import parse_endpoint
from .failures import INVALID_URL_FORMAT, TransportFailure, classify_transport_exception

CA_BUNDLE_ENV = "AI_UDF_CA_BUNDLE"

_logger = get_logger("ai_udf.transport")


def _resolve_verify() -> Union[bool, ssl.SSLContext]:
    """Return the TLS verification setting.

    With ``AI_UDF_CA_BUNDLE`` set, a context trusting that bundle is built;
    a missing or unreadable bundle raises ``OSError``/``ssl.SSLError``.
    """
    bundle = os.getenv(CA_BUNDLE_ENV)
    if not bundle:
        return True
    return ssl.create_default_context(cafile=bundle)


def build_client(timeout: float) -> httpx.Client:
    """Create the per-call client (separate so tests can inject a transport)."""
    return httpx.Client(
        timeout=httpx.Timeout(timeout),
        verify=_resolve_verify(),
        follow_redirects=False,
    )


def post(
    endpoint: str,
    path: str,
    body: str,
    headers: Mapping[str, str],
    timeout: float,
    *,
    ctx: Optional[LogContext] = None,
) -> TransportOutcome:
    """POST ``body`` to ``endpoint + path`` and normalize the outcome.

    Parameters:
        endpoint: Absolute ``scheme://host[:port]``.
        path: Request path (may interpolate the model name).
        body: JSON request body as text.
        headers: Request headers, including credentials. Never logged.
        timeout: Per-phase deadline in seconds.
        ctx: Optional logging correlation context.

    Returns:
        ``TransportOutcome`` with status and body, or a transport error from
        :class:`TransportFailure` (``"Invalid URL format"`` for a malformed
        endpoint, ``"Exception: ..."`` for unexpected non-HTTP failures).
    """
    parsed = parse_endpoint(endpoint)
    if parsed is None:
        log_event(_logger, "transport.error", ctx, error=INVALID_URL_FORMAT)
        return TransportOutcome.failure(INVALID_URL_FORMAT)

    url = parsed.url_for(path)
    try:
        client = build_client(timeout)
    except (OSError, ssl.SSLError) as exc:
        log_event(_logger, "transport.error", ctx, url=url, error=TransportFailure.SSL_LOADING_CERTS.value, detail=str(exc))
        return TransportOutcome.failure(TransportFailure.SSL_LOADING_CERTS.value)

    log_event(_logger, "transport.request", ctx, url=url, timeout=timeout)
    try:
        with client:
            response = client.post(url, content=body.encode("utf-8"), headers=dict(headers))
            status, text = response.status_code, response.text
    except httpx.HTTPError as exc:
        failure = classify_transport_exception(exc)
        log_event(_logger, "transport.error", ctx, url=url, error=failure.value, detail=type(exc).__name__)
        return TransportOutcome.failure(failure.value)
    except Exception as exc:  # noqa: BLE001 - nothing may escape the call boundary
        log_event(_logger, "transport.error", ctx, url=url, error="exception", detail=str(exc))
        return TransportOutcome.failure(f"Exception: {exc}")

    outcome = TransportOutcome.response(status, text)
    log_event(_logger, "transport.response", ctx, url=url, **outcome.to_dict())
    return outcome


__all__ = ["CA_BUNDLE_ENV", "build_client", "post"]
