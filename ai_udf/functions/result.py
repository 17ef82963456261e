"""Host result record for SQL function calls.

Mirrors the record the host hands to a function: a fixed-capacity string
buffer, the actual length written, a result kind and a small error message
field. Writes go through :class:`BoundedOutput`, so nothing is ever written
past capacity.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ..base.models import BoundedOutput
from ..base.utils.text import truncate_utf8
from ..config.defaults import ERROR_MSG_CAPACITY, FUNCTION_BUFFER_SIZE


class ResultKind(str, Enum):
    VALUE = "value"
    NULL = "null"
    ERROR = "error"


@dataclass
class FunctionResult:
    """Output record of one function call.

    Attributes:
        max_str_len: Buffer capacity in bytes, terminator included.
        kind: Result kind; ``None`` until the call completes.
        actual_len: Bytes of payload written (after truncation).
        error_msg: Error text, at most ``ERROR_MSG_CAPACITY - 1`` UTF-8 bytes.
        truncated: True when a value did not fit in the buffer.
    """

    max_str_len: int = FUNCTION_BUFFER_SIZE
    kind: Optional[ResultKind] = None
    actual_len: int = 0
    error_msg: str = ""
    truncated: bool = False
    output: BoundedOutput = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.output = BoundedOutput.allocate(self.max_str_len)

    @property
    def str_buf(self) -> bytearray:
        return self.output.buffer

    @property
    def value(self) -> Optional[bytes]:
        """Payload bytes for VALUE results, ``None`` otherwise."""
        if self.kind is not ResultKind.VALUE:
            return None
        return self.output.value

    @property
    def text(self) -> Optional[str]:
        """Payload decoded as UTF-8; a character cut by truncation is dropped."""
        value = self.value
        return None if value is None else value.decode("utf-8", errors="ignore")

    def set_null(self) -> None:
        self.kind = ResultKind.NULL

    def set_error(self, message: str) -> None:
        self.kind = ResultKind.ERROR
        self.error_msg = truncate_utf8(message, ERROR_MSG_CAPACITY - 1)

    def set_value(self, text: str) -> None:
        self.kind = ResultKind.VALUE
        self.actual_len = self.output.write(text)
        self.truncated = self.output.truncated


def new_result(capacity: int = FUNCTION_BUFFER_SIZE) -> FunctionResult:
    """Allocate an empty result record with ``capacity`` bytes of buffer."""
    return FunctionResult(max_str_len=capacity)


__all__ = ["FunctionResult", "ResultKind", "new_result"]
