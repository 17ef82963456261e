from __future__ import annotations

import pytest

from ai_udf.base.http import parse_endpoint


@pytest.mark.parametrize(
    "endpoint, scheme, host, port",
    [
        ("https://api.anthropic.com", "https", "api.anthropic.com", 443),
        ("http://localhost", "http", "localhost", 80),
        ("http://127.0.0.1:8080", "http", "127.0.0.1", 8080),
        ("https://example.com:8443/", "https", "example.com", 8443),
    ],
)
def test_parse_valid_endpoints(endpoint, scheme, host, port):
    parsed = parse_endpoint(endpoint)
    assert parsed is not None
    assert (parsed.scheme, parsed.host, parsed.port) == (scheme, host, port)


@pytest.mark.parametrize(
    "endpoint",
    [
        "",
        "api.anthropic.com",
        "ftp://example.com",
        "https://",
        "https://example.com:notaport",
        "https://example.com:70000",
        "https://example.com/v1/messages",
        "https://user@example.com",
    ],
)
def test_parse_rejects_malformed_endpoints(endpoint):
    assert parse_endpoint(endpoint) is None


def test_url_for_omits_default_port_and_joins_path():
    assert parse_endpoint("https://example.com").url_for("/v1/messages") == "https://example.com/v1/messages"
    assert parse_endpoint("http://localhost:8080").url_for("api") == "http://localhost:8080/api"
    assert parse_endpoint("https://example.com:443").base_url == "https://example.com"
