"""Host-facing SQL functions and their result record."""

from .adapter import ai_prompt, create_embed
from .registry import FUNCTIONS, extension_manifest, invoke
from .result import FunctionResult, ResultKind, new_result

__all__ = [
    "FUNCTIONS",
    "FunctionResult",
    "ResultKind",
    "ai_prompt",
    "create_embed",
    "extension_manifest",
    "invoke",
    "new_result",
]
