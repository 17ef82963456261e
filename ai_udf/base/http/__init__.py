"""HTTP transport package: a single blocking POST per call."""

from .client import build_client, post
from .endpoint import Endpoint, parse_endpoint
from .failures import INVALID_URL_FORMAT, TransportFailure, classify_transport_exception

__all__ = [
    "Endpoint",
    "INVALID_URL_FORMAT",
    "TransportFailure",
    "build_client",
    "classify_transport_exception",
    "parse_endpoint",
    "post",
]
