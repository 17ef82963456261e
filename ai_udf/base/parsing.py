"""JSON parsing with explicit success/failure values.

Provider code never lets a decoding error propagate: ``parse_json_document``
returns a :class:`ParseOutcome` and the ``dig`` helpers return ``None`` for
any missing key, wrong node type or empty array.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Optional, Union

JSON_PARSE_ERROR_PREFIX = "JSON parse error: "

PathStep = Union[str, int]


@dataclass(frozen=True)
class ParseOutcome:
    """Decoded document, or the parser's message when decoding failed."""

    document: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_message(self) -> str:
        """Caller-facing message tagged as a parse failure."""
        return f"{JSON_PARSE_ERROR_PREFIX}{self.error}"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid number literal {name}")


def parse_json_document(text: str) -> ParseOutcome:
    """Decode ``text`` as strict JSON.

    ``NaN``/``Infinity`` literals, numbers overflowing a float and escaped
    unpaired surrogates (``"\\ud800"``) are rejected, so the document can be
    re-serialized as strict JSON and encoded as UTF-8.
    """
    try:
        document = json.loads(text, parse_constant=_reject_constant)
        json.dumps(document, ensure_ascii=False, allow_nan=False).encode("utf-8")
    except UnicodeEncodeError:
        return ParseOutcome(error="unpaired surrogate in string")
    except (ValueError, TypeError) as exc:
        return ParseOutcome(error=str(exc))
    except RecursionError:
        return ParseOutcome(error="document nested too deeply")
    return ParseOutcome(document=document)


def dig(node: Any, *path: PathStep) -> Any:
    """Follow ``path`` through dicts (str keys) and lists (int indexes).

    Returns ``None`` as soon as a step does not apply.
    """
    for step in path:
        if isinstance(step, int):
            if not isinstance(node, list) or not -len(node) <= step < len(node):
                return None
        elif not isinstance(node, dict) or step not in node:
            return None
        node = node[step]
    return node


def dig_str(node: Any, *path: PathStep) -> Optional[str]:
    """Like :func:`dig` but only returns string leaves."""
    value = dig(node, *path)
    return value if isinstance(value, str) else None


def dumps_compact(value: Any) -> str:
    """Serialize as strict JSON without whitespace, keeping non-ASCII text as-is."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)


__all__ = [
    "JSON_PARSE_ERROR_PREFIX",
    "ParseOutcome",
    "dig",
    "dig_str",
    "dumps_compact",
    "parse_json_document",
]
