"""Unit tests for the single-shot HTTP transport.

Requests never leave the process: ``build_client`` is swapped for a client
backed by ``httpx.MockTransport`` (see ``conftest.mock_http``).
"""
from __future__ import annotations

import ssl

import httpx
import pytest

from ai_udf.base.http import TransportFailure, classify_transport_exception, post
from ai_udf.base.http import client as http_client


def test_invalid_endpoint_reports_error_without_io(monkeypatch):
    def _boom(timeout):
        raise AssertionError("no client should be built for a malformed endpoint")

    monkeypatch.setattr(http_client, "build_client", _boom)
    outcome = post("not a url", "/x", "{}", {}, 30)
    assert outcome.transport_error == "Invalid URL format"
    assert outcome.status_code is None


def test_success_returns_status_and_body(mock_http):
    mock = mock_http(lambda request: httpx.Response(200, text='{"ok":true}'))
    outcome = post("https://api.example.com", "/v1/messages", '{"a":1}', {"x-api-key": "k"}, 12.5)

    assert outcome.status_code == 200
    assert outcome.body == '{"ok":true}'
    assert outcome.transport_error is None
    (request,) = mock.requests
    assert request.method == "POST"
    assert str(request.url) == "https://api.example.com/v1/messages"
    assert request.headers["x-api-key"] == "k"
    assert request.content == b'{"a":1}'


def test_timeout_applies_to_every_phase(mock_http):
    mock = mock_http(lambda request: httpx.Response(200, text="{}"))
    post("https://api.example.com", "/", "{}", {}, 7.0)
    assert mock.timeouts == [{"connect": 7.0, "read": 7.0, "write": 7.0, "pool": 7.0}]


@pytest.mark.parametrize("status", [301, 401, 404, 500, 503])
def test_error_statuses_are_successful_outcomes(mock_http, status):
    mock_http(lambda request: httpx.Response(status, text="nope"))
    outcome = post("https://api.example.com", "/", "{}", {}, 30)
    assert outcome.status_code == status
    assert outcome.body == "nope"
    assert outcome.transport_error is None
    assert outcome.is_success is False


def test_exactly_one_request_per_call(mock_http):
    mock = mock_http(lambda request: httpx.Response(500, text="down"))
    post("https://api.example.com", "/", "{}", {}, 30)
    assert len(mock.requests) == 1


@pytest.mark.parametrize(
    "exc_type, expected",
    [
        (httpx.ConnectError, "Connection failed"),
        (httpx.ConnectTimeout, "Connection failed"),
        (httpx.ReadTimeout, "Read error"),
        (httpx.ReadError, "Read error"),
        (httpx.RemoteProtocolError, "Read error"),
        (httpx.WriteError, "Write error"),
        (httpx.WriteTimeout, "Write error"),
        (httpx.DecodingError, "Compression error"),
    ],
)
def test_network_failures_map_to_fixed_messages(mock_http, exc_type, expected):
    def _fail(request):
        raise exc_type("boom", request=request)

    mock_http(_fail)
    outcome = post("https://api.example.com", "/", "{}", {}, 30)
    assert outcome.transport_error == expected
    assert outcome.status_code is None


def test_unexpected_exception_is_reported_not_raised(mock_http):
    def _fail(request):
        raise RuntimeError("kaboom")

    mock_http(_fail)
    outcome = post("https://api.example.com", "/", "{}", {}, 30)
    assert outcome.transport_error == "Exception: kaboom"


def test_certificate_loading_failure(monkeypatch, tmp_path):
    monkeypatch.setenv("AI_UDF_CA_BUNDLE", str(tmp_path / "missing.pem"))
    outcome = post("https://api.example.com", "/", "{}", {}, 30)
    assert outcome.transport_error == "Failed to load SSL certificates"


def _wrapped(cause: BaseException) -> httpx.ConnectError:
    try:
        try:
            raise cause
        except BaseException as inner:
            raise httpx.ConnectError("connect failed") from inner
    except httpx.ConnectError as outer:
        return outer


def test_tls_failures_are_classified_from_the_cause_chain():
    verify = ssl.SSLCertVerificationError("certificate verify failed")
    assert classify_transport_exception(_wrapped(verify)) is TransportFailure.SSL_SERVER_VERIFICATION
    assert classify_transport_exception(_wrapped(ssl.SSLError("handshake"))) is TransportFailure.SSL_CONNECTION


def test_bind_failure_is_classified_from_errno():
    import errno

    exc = _wrapped(OSError(errno.EADDRNOTAVAIL, "Cannot assign requested address"))
    assert classify_transport_exception(exc) is TransportFailure.BIND_IP_ADDRESS


def test_redirect_and_unknown_failures():
    request = httpx.Request("POST", "https://api.example.com/")
    assert classify_transport_exception(httpx.TooManyRedirects("loop", request=request)) is TransportFailure.TOO_MANY_REDIRECTS
    assert classify_transport_exception(httpx.UnsupportedProtocol("x", request=request)) is TransportFailure.UNKNOWN
