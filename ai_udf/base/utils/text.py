"""Byte-bounded text helpers."""
from __future__ import annotations


def truncate_utf8(text: str, max_bytes: int) -> str:
    """Return the longest prefix of ``text`` whose UTF-8 encoding fits ``max_bytes``.

    A multi-byte character cut by the limit is dropped entirely; unpaired
    surrogates are replaced with ``?``.
    """
    data = text.encode("utf-8", errors="replace")[: max(max_bytes, 0)]
    return data.decode("utf-8", errors="ignore")


__all__ = ["truncate_utf8"]
