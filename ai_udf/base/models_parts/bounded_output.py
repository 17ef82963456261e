"""
Capacity-bounded output buffer.

The only place where text becomes bytes: the source string is encoded as
UTF-8 once, and at most ``capacity - 1`` bytes are copied so the NUL
terminator always fits inside the buffer.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class BoundedOutput:
    """Fixed-capacity byte buffer with the length actually written.

    Attributes:
        buffer: Byte storage of exactly ``capacity`` bytes.
        written_len: Number of payload bytes copied (terminator excluded).
        truncated: True when the source did not fit in ``capacity - 1`` bytes.
    """

    buffer: bytearray
    written_len: int = 0
    truncated: bool = False

    @classmethod
    def allocate(cls, capacity: int) -> "BoundedOutput":
        if capacity < 1:
            raise ValueError("capacity must be at least 1 byte")
        return cls(buffer=bytearray(capacity))

    @property
    def capacity(self) -> int:
        return len(self.buffer)

    def write(self, text: str) -> int:
        """Copy ``text`` into the buffer and return the written length.

        Unpaired surrogates are encoded as ``?``.
        """
        data = text.encode("utf-8", errors="replace")
        limit = self.capacity - 1
        copy_len = min(len(data), limit)
        self.buffer[:copy_len] = data[:copy_len]
        self.buffer[copy_len] = 0
        self.written_len = copy_len
        self.truncated = len(data) > limit
        return copy_len

    @property
    def value(self) -> bytes:
        """Payload bytes without the terminator."""
        return bytes(self.buffer[: self.written_len])


__all__ = ["BoundedOutput"]
