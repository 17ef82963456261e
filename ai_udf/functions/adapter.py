"""Result adapter: the boundary between host calls and providers.

Validation happens before any network activity, in this order:

1. any argument NULL -> NULL result;
2. empty string, checked provider -> model -> API key -> input, with a
   field-specific message;
3. unknown provider -> ``Unknown provider: <name>``;
4. dispatch to ``complete``/``embed``.

Provider errors are reported capped to 255 bytes; values are copied into the
caller's buffer up to ``capacity - 1`` bytes. No exception escapes.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from ..base.errors import ErrorCode, ProviderError, classify_exception
from ..base.factory import create_provider
from ..base.interfaces import AIProvider
from ..base.logging import LogContext, get_logger, log_event
from ..base.models import InvocationRequest, ProviderResult
from .result import FunctionResult, new_result

PROMPT_INPUT_LABEL = "Prompt text"
EMBED_INPUT_LABEL = "Text"

Operation = Callable[[AIProvider, InvocationRequest], ProviderResult]

_logger = get_logger("ai_udf.functions")


def empty_field_error(request: InvocationRequest) -> Optional[str]:
    """Return the message for the first empty argument, or ``None``."""
    for label, value in request.labelled_fields():
        if value == "":
            return f"{label} cannot be empty"
    return None


def _complete(provider: AIProvider, request: InvocationRequest) -> ProviderResult:
    return provider.complete(request.model, request.credential, request.input_text)


def _embed(provider: AIProvider, request: InvocationRequest) -> ProviderResult:
    return provider.embed(request.model, request.credential, request.input_text)


def run_function(
    name: str,
    request: InvocationRequest,
    operation: Operation,
    result: Optional[FunctionResult] = None,
) -> FunctionResult:
    """Validate ``request``, dispatch ``operation`` and fill ``result``."""
    result = result if result is not None else new_result()
    ctx = LogContext(provider=request.provider_name, model=request.model, operation=name)

    if request.has_null():
        result.set_null()
        return result

    message = empty_field_error(request)
    if message is not None:
        log_event(_logger, "function.rejected", ctx, error_code=ErrorCode.VALIDATION.value, error=message)
        result.set_error(message)
        return result

    try:
        provider = create_provider(request.provider_name)
        _store(result, operation(provider, request), ctx)
    except Exception as exc:  # noqa: BLE001 - failures are reported, never raised to the host
        code = classify_exception(exc)
        message = exc.message if isinstance(exc, ProviderError) else f"Internal error: {exc}"
        level = logging.ERROR if code is ErrorCode.INTERNAL else logging.WARNING
        log_event(_logger, "function.error", ctx, level=level, error_code=code.value, error=message)
        result.set_error(message)
    return result


def _store(result: FunctionResult, outcome: ProviderResult, ctx: LogContext) -> None:
    if outcome.is_error:
        result.set_error(outcome.error or "")
        return
    result.set_value(outcome.text or "")
    if result.truncated:
        log_event(
            _logger,
            "result.truncated",
            ctx,
            level=logging.WARNING,
            capacity=result.max_str_len,
            written=result.actual_len,
            source_bytes=len((outcome.text or "").encode("utf-8", errors="replace")),
        )


def ai_prompt(
    provider: Optional[str],
    model: Optional[str],
    api_key: Optional[str],
    prompt: Optional[str],
    result: Optional[FunctionResult] = None,
) -> FunctionResult:
    """Complete ``prompt`` with ``model`` at ``provider``."""
    request = InvocationRequest(provider, model, api_key, prompt, input_label=PROMPT_INPUT_LABEL)
    return run_function("ai_prompt", request, _complete, result)


def create_embed(
    provider: Optional[str],
    model: Optional[str],
    api_key: Optional[str],
    text: Optional[str],
    result: Optional[FunctionResult] = None,
) -> FunctionResult:
    """Embed ``text``; the value is a JSON array of numbers as text."""
    request = InvocationRequest(provider, model, api_key, text, input_label=EMBED_INPUT_LABEL)
    return run_function("create_embed", request, _embed, result)


__all__ = [
    "EMBED_INPUT_LABEL",
    "PROMPT_INPUT_LABEL",
    "ai_prompt",
    "create_embed",
    "empty_field_error",
    "run_function",
]
