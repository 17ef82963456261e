"""Request execution shared by provider adapters.

Sends one request through the adapter's transport with the configured
timeout, interprets the outcome and logs start/end events. Vendor specifics
(body, headers, path, extraction) come from the adapter.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Mapping

from .envelope import Extractor, interpret_outcome
from .interfaces import TransportCall
from .logging import LogContext, log_event
from .models import ProviderResult
from .timeouts import get_timeout_config


@dataclass(frozen=True)
class PreparedRequest:
    """Everything needed for one upstream POST."""

    endpoint: str
    path: str
    body: str
    headers: Mapping[str, str]


def execute(
    transport: TransportCall,
    request: PreparedRequest,
    *,
    extract: Extractor,
    missing: str,
    logger: logging.Logger,
    ctx: LogContext,
) -> ProviderResult:
    """Run ``request`` and normalize the result.

    Returns:
        ``ProviderResult`` with the extracted text or a caller-facing error.
    """
    timeout = get_timeout_config().http_timeout_seconds
    op = ctx.operation or "request"
    log_event(logger, f"{op}.start", ctx, path=request.path)
    t0 = time.perf_counter()
    outcome = transport(request.endpoint, request.path, request.body, request.headers, timeout, ctx=ctx)
    result = interpret_outcome(outcome, extract, missing)
    latency_ms = (time.perf_counter() - t0) * 1000.0
    if result.is_error:
        log_event(
            logger,
            f"{op}.error",
            ctx,
            level=logging.WARNING,
            latency_ms=latency_ms,
            status_code=outcome.status_code,
            error_code=result.error_code.value if result.error_code else None,
            error=result.error,
        )
    else:
        log_event(
            logger,
            f"{op}.end",
            ctx,
            latency_ms=latency_ms,
            status_code=outcome.status_code,
            response_chars=len(result.text or ""),
        )
    return result


__all__ = ["PreparedRequest", "execute"]
