"""Function descriptors exposed to the host.

Declares the two SQL functions with their parameter list, return type and
output buffer size, and dispatches calls by name.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from ..config.defaults import EXTENSION_NAME, EXTENSION_VERSION, FUNCTION_BUFFER_SIZE
from .adapter import ai_prompt, create_embed
from .result import FunctionResult, new_result

STRING = "STRING"

FunctionImpl = Callable[..., FunctionResult]


@dataclass(frozen=True)
class FunctionDescriptor:
    name: str
    params: Tuple[str, ...]
    impl: FunctionImpl
    returns: str = STRING
    buffer_size: int = FUNCTION_BUFFER_SIZE

    def to_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "params": [{"name": p, "type": STRING} for p in self.params],
            "returns": self.returns,
            "buffer_size": self.buffer_size,
        }


FUNCTIONS: Tuple[FunctionDescriptor, ...] = (
    FunctionDescriptor("ai_prompt", ("provider", "model", "api_key", "prompt"), ai_prompt),
    FunctionDescriptor("create_embed", ("provider", "model", "api_key", "text"), create_embed),
)


def extension_manifest() -> Dict[str, object]:
    """Return the extension name, version and function list."""
    return {
        "name": EXTENSION_NAME,
        "version": EXTENSION_VERSION,
        "functions": [f.to_dict() for f in FUNCTIONS],
    }


def get_function(name: str) -> FunctionDescriptor:
    for descriptor in FUNCTIONS:
        if descriptor.name == name:
            return descriptor
    raise KeyError(f"Unknown function: {name}")


def invoke(name: str, *args: Optional[str], buffer_size: Optional[int] = None) -> FunctionResult:
    """Call function ``name`` with host arguments and a fresh result record.

    Raises:
        KeyError: unknown function name.
        TypeError: wrong number of arguments.
    """
    descriptor = get_function(name)
    if len(args) != len(descriptor.params):
        raise TypeError(f"{name} expects {len(descriptor.params)} arguments, got {len(args)}")
    result = new_result(buffer_size or descriptor.buffer_size)
    return descriptor.impl(*args, result=result)


__all__ = [
    "FUNCTIONS",
    "FunctionDescriptor",
    "STRING",
    "extension_manifest",
    "get_function",
    "invoke",
]
