"""Absolute endpoint parsing for the transport.

An endpoint is ``scheme://host[:port]`` with scheme ``http`` or ``https``.
Anything else (paths, queries, userinfo, other schemes) is rejected so that
the request path is always supplied separately by the provider.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

DEFAULT_PORTS = {"http": 80, "https": 443}

_ENDPOINT_RE = re.compile(r"(https?)://([^:/?#@\s]+)(?::(\d{1,5}))?/?")


@dataclass(frozen=True)
class Endpoint:
    """Parsed endpoint; ``port`` is always resolved (80/443 by default)."""

    scheme: str
    host: str
    port: int

    @property
    def base_url(self) -> str:
        if self.port == DEFAULT_PORTS[self.scheme]:
            return f"{self.scheme}://{self.host}"
        return f"{self.scheme}://{self.host}:{self.port}"

    def url_for(self, path: str) -> str:
        if not path.startswith("/"):
            path = "/" + path
        return self.base_url + path


def parse_endpoint(endpoint: str) -> Optional[Endpoint]:
    """Parse ``endpoint`` or return ``None`` when it is malformed."""
    match = _ENDPOINT_RE.fullmatch(endpoint.strip()) if endpoint else None
    if match is None:
        return None
    scheme, host, port_text = match.groups()
    if port_text is None:
        return Endpoint(scheme=scheme, host=host, port=DEFAULT_PORTS[scheme])
    port = int(port_text)
    if not 0 < port < 65536:
        return None
    return Endpoint(scheme=scheme, host=host, port=port)


__all__ = ["DEFAULT_PORTS", "Endpoint", "parse_endpoint"]
