"""Boundary behavior of ``ai_prompt`` / ``create_embed``.

Network access is replaced by patching the ``post`` name each provider module
resolves at construction time.
"""
from __future__ import annotations

import pytest

from ai_udf.functions import FunctionResult, ResultKind, ai_prompt, create_embed, new_result


@pytest.fixture()
def route(monkeypatch, fake_transport):
    """Point one provider module's ``post`` at a fake transport and return it."""

    def _route(provider, status=None, body="", *, error=None):
        transport = fake_transport(status, body, error=error)
        monkeypatch.setattr(f"ai_udf.{provider}.client.post", transport)
        return transport

    return _route


@pytest.fixture()
def no_network(route):
    return route("anthropic", error="unexpected"), route("google", error="unexpected")


@pytest.mark.parametrize(
    "args",
    [
        (None, "m", "k", "p"),
        ("anthropic", None, "k", "p"),
        ("anthropic", "m", None, "p"),
        ("anthropic", "m", "k", None),
        (None, "", "", ""),
    ],
)
@pytest.mark.parametrize("fn", [ai_prompt, create_embed])
def test_any_null_argument_yields_null(no_network, fn, args):
    result = fn(*args)
    assert result.kind is ResultKind.NULL
    assert all(not t.calls for t in no_network)


@pytest.mark.parametrize(
    "fn, input_message",
    [(ai_prompt, "Prompt text cannot be empty"), (create_embed, "Text cannot be empty")],
)
@pytest.mark.parametrize(
    "args, message",
    [
        (("", "", "", ""), "Provider name cannot be empty"),
        (("anthropic", "", "", ""), "Model name cannot be empty"),
        (("google", "m", "", ""), "API key cannot be empty"),
        (("anthropic", "m", "k", ""), None),
        (("nope", "", "k", "p"), "Model name cannot be empty"),
        (("nope", "m", "", "p"), "API key cannot be empty"),
    ],
)
def test_empty_arguments_checked_in_order(no_network, fn, input_message, args, message):
    result = fn(*args)
    message = message or input_message
    assert result.kind is ResultKind.ERROR
    assert result.error_msg == message
    assert all(not t.calls for t in no_network)


@pytest.mark.parametrize("fn", [ai_prompt, create_embed])
def test_unknown_provider(no_network, fn):
    result = fn("openai", "gpt", "k", "hello")
    assert result.kind is ResultKind.ERROR
    assert result.error_msg == "Unknown provider: openai"


def test_anthropic_prompt_end_to_end(route):
    transport = route("anthropic", 200, {"content": [{"type": "text", "text": "hello"}]})
    result = ai_prompt("anthropic", "claude-x", "sk-1", "Say hello")

    assert result.kind is ResultKind.VALUE
    assert result.value == b"hello"
    assert result.actual_len == 5
    assert result.str_buf[5] == 0
    assert result.truncated is False
    assert transport.calls[0].headers["x-api-key"] == "sk-1"


def test_google_prompt_end_to_end(route):
    route("google", 200, {"candidates": [{"content": {"parts": [{"text": "hi there"}]}}]})
    result = ai_prompt("google", "gemini-pro", "g", "Greet me")
    assert result.text == "hi there"
    assert result.actual_len == 8


def test_google_embed_end_to_end(route):
    route("google", 200, {"embedding": {"values": [0.5, 0.25]}})
    assert create_embed("google", "text-embedding-004", "g", "hello").text == "[0.5,0.25]"


def test_anthropic_embed_makes_no_request(no_network):
    result = create_embed("anthropic", "claude-x", "sk-1", "hello")
    assert result.kind is ResultKind.ERROR
    assert result.error_msg == "Embeddings not supported for Anthropic provider"
    assert all(not t.calls for t in no_network)


def test_transport_failure_is_reported(route):
    route("anthropic", error="Connection failed")
    result = ai_prompt("anthropic", "m", "k", "p")
    assert result.kind is ResultKind.ERROR
    assert result.error_msg == "Connection failed"


def test_vendor_error_is_reported(route):
    route("google", 401, {"error": {"code": 401, "message": "invalid api key"}})
    assert ai_prompt("google", "m", "bad", "p").error_msg == "invalid api key"


def test_value_truncated_to_capacity(route):
    route("anthropic", 200, {"content": [{"text": "abcdefghij"}]})
    result = ai_prompt("anthropic", "m", "k", "p", result=new_result(5))

    assert result.kind is ResultKind.VALUE
    assert result.value == b"abcd"
    assert result.actual_len == 4
    assert result.str_buf == bytearray(b"abcd\x00")
    assert result.truncated is True


def test_value_equal_to_capacity_minus_one_is_not_truncated(route):
    route("anthropic", 200, {"content": [{"text": "abcd"}]})
    result = ai_prompt("anthropic", "m", "k", "p", result=new_result(5))
    assert (result.value, result.truncated) == (b"abcd", False)


def test_error_message_capped_to_255_bytes(route):
    route("google", 400, {"error": {"message": "e" * 1000}})
    result = ai_prompt("google", "m", "k", "p")
    assert result.error_msg == "e" * 255


def test_error_cap_keeps_whole_characters(route):
    route("google", 400, {"error": {"message": "é" * 200}})
    msg = ai_prompt("google", "m", "k", "p").error_msg
    assert len(msg.encode("utf-8")) <= 255
    assert msg == "é" * 127


def test_provider_exception_does_not_escape(monkeypatch):
    def _explode(self, model, credential, input_text):
        raise RuntimeError("boom")

    monkeypatch.setattr("ai_udf.anthropic.client.AnthropicProvider.complete", _explode)
    result = ai_prompt("anthropic", "m", "k", "p")
    assert result.kind is ResultKind.ERROR
    assert result.error_msg == "Internal error: boom"


def test_invalid_configuration_becomes_error(monkeypatch, no_network):
    monkeypatch.setenv("ANTHROPIC_BASE_URL", " ")
    result = ai_prompt("anthropic", "m", "k", "p")
    assert result.kind is ResultKind.ERROR
    assert result.error_msg.startswith("Failed to initialize provider 'anthropic'")


def test_repeated_calls_are_independent(route):
    route("anthropic", 200, {"content": [{"text": "same"}]})
    first = ai_prompt("anthropic", "m", "k", "p")
    second = ai_prompt("anthropic", "m", "k", "p")
    assert first.value == second.value == b"same"
    assert first is not second


def test_default_record_capacity():
    result = FunctionResult()
    assert result.max_str_len == 65535
    assert len(result.str_buf) == 65535
    assert result.value is None


def test_unpaired_surrogate_in_completion_is_a_parse_error(route):
    route("anthropic", 200, '{"content":[{"text":"a\\ud800b"}]}')
    result = ai_prompt("anthropic", "m", "k", "p")
    assert result.kind is ResultKind.ERROR
    assert result.error_msg == "JSON parse error: unpaired surrogate in string"


def test_unpaired_surrogate_in_vendor_error_falls_back_to_body_preview(route):
    body = '{"error":{"message":"bad \\udc00 key"}}'
    route("google", 401, body)
    result = ai_prompt("google", "m", "k", "p")
    assert result.kind is ResultKind.ERROR
    assert result.error_msg == "HTTP 401 - " + body


def test_non_finite_embedding_is_a_parse_error(route):
    route("google", 200, '{"embedding":{"values":[NaN,0.5]}}')
    result = create_embed("google", "m", "k", "t")
    assert result.kind is ResultKind.ERROR
    assert result.error_msg.startswith("JSON parse error: ")


def test_unencodable_provider_text_is_written_with_replacement(monkeypatch):
    from ai_udf.base.models import ProviderResult

    monkeypatch.setattr(
        "ai_udf.google.client.GoogleProvider.complete",
        lambda self, model, credential, input_text: ProviderResult.ok("a\ud800b"),
    )
    result = ai_prompt("google", "m", "k", "p")
    assert result.kind is ResultKind.VALUE
    assert result.value == b"a?b"


def test_unencodable_exception_message_is_reported(monkeypatch):
    def _explode(self, model, credential, input_text):
        raise RuntimeError("bad \udc00")

    monkeypatch.setattr("ai_udf.anthropic.client.AnthropicProvider.complete", _explode)
    result = ai_prompt("anthropic", "m", "k", "p")
    assert result.kind is ResultKind.ERROR
    assert result.error_msg == "Internal error: bad ?"


def test_provider_error_message_is_reported_verbatim(monkeypatch):
    from ai_udf.base.errors import ErrorCode, ProviderError

    def _refuse(self, model, credential, input_text):
        raise ProviderError(ErrorCode.UNSUPPORTED, "not here", "google")

    monkeypatch.setattr("ai_udf.google.client.GoogleProvider.embed", _refuse)
    result = create_embed("google", "m", "k", "t")
    assert result.kind is ResultKind.ERROR
    assert result.error_msg == "not here"
