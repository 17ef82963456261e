"""Transport failure causes and their mapping from httpx exceptions.

The set of causes is closed; each value is the exact message reported to the
caller when no HTTP response could be obtained.
"""
from __future__ import annotations

import errno
import ssl
from enum import Enum
from typing import Iterator

import httpx

INVALID_URL_FORMAT = "Invalid URL format"


class TransportFailure(str, Enum):
    """Why no HTTP response was received."""

    CONNECTION = "Connection failed"
    BIND_IP_ADDRESS = "Failed to bind IP address"
    READ = "Read error"
    WRITE = "Write error"
    TOO_MANY_REDIRECTS = "Too many redirects"
    CANCELED = "Request canceled"
    SSL_CONNECTION = "SSL connection failed"
    SSL_LOADING_CERTS = "Failed to load SSL certificates"
    SSL_SERVER_VERIFICATION = "SSL server verification failed"
    UNSUPPORTED_MULTIPART_BOUNDARY = "Unsupported multipart boundary characters"
    COMPRESSION = "Compression error"
    UNKNOWN = "Unknown error"


_BIND_ERRNOS = frozenset({errno.EADDRNOTAVAIL, errno.EADDRINUSE})


def _cause_chain(exc: BaseException) -> Iterator[BaseException]:
    """Yield ``exc`` and its causes/contexts, guarding against cycles."""
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def _connect_failure(exc: httpx.HTTPError) -> TransportFailure:
    for cause in _cause_chain(exc):
        if isinstance(cause, ssl.SSLCertVerificationError):
            return TransportFailure.SSL_SERVER_VERIFICATION
        if isinstance(cause, ssl.SSLError):
            return TransportFailure.SSL_CONNECTION
        if isinstance(cause, OSError) and cause.errno in _BIND_ERRNOS:
            return TransportFailure.BIND_IP_ADDRESS
    return TransportFailure.CONNECTION


def classify_transport_exception(exc: httpx.HTTPError) -> TransportFailure:
    """Map an httpx exception raised before a response arrived to a cause.

    Timeouts are reported by phase: connect/pool timeouts as connection
    failures, read and write timeouts as read and write errors.
    """
    if isinstance(exc, (httpx.ConnectError, httpx.ConnectTimeout, httpx.PoolTimeout, httpx.ProxyError)):
        return _connect_failure(exc)
    if isinstance(exc, (httpx.ReadError, httpx.ReadTimeout, httpx.RemoteProtocolError)):
        return TransportFailure.READ
    if isinstance(exc, (httpx.WriteError, httpx.WriteTimeout, httpx.LocalProtocolError)):
        return TransportFailure.WRITE
    if isinstance(exc, httpx.TooManyRedirects):
        return TransportFailure.TOO_MANY_REDIRECTS
    if isinstance(exc, httpx.DecodingError):
        return TransportFailure.COMPRESSION
    return TransportFailure.UNKNOWN


__all__ = ["INVALID_URL_FORMAT", "TransportFailure", "classify_transport_exception"]
