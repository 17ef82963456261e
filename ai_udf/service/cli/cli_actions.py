"""Subcommand handlers for ai-udf."""

from __future__ import annotations

import argparse
import json
import os
import sys
from typing import Optional, TextIO

from ...functions import FunctionResult, ResultKind, extension_manifest, invoke


def resolve_api_key(args: argparse.Namespace) -> Optional[str]:
    """Return the credential; an unset ``--api-key-env`` variable yields ``None``."""
    if args.api_key is not None:
        return args.api_key
    return os.environ.get(args.api_key_env)


def read_input(value: str, stdin: TextIO) -> str:
    return stdin.read() if value == "-" else value


def result_to_dict(result: FunctionResult) -> dict:
    return {
        "kind": result.kind.value if result.kind else None,
        "value": result.text,
        "actual_len": result.actual_len,
        "max_str_len": result.max_str_len,
        "truncated": result.truncated,
        "error_msg": result.error_msg or None,
    }


def emit_result(result: FunctionResult, *, as_json: bool, out: TextIO, err: TextIO) -> int:
    """Print ``result`` and return the exit code (1 for errors)."""
    if as_json:
        print(json.dumps(result_to_dict(result), ensure_ascii=False), file=out)
        return 1 if result.kind is ResultKind.ERROR else 0
    if result.kind is ResultKind.ERROR:
        print(result.error_msg, file=err)
        return 1
    if result.kind is ResultKind.NULL:
        print("NULL", file=out)
        return 0
    print(result.text, file=out)
    return 0


def handle_call(
    args: argparse.Namespace,
    *,
    stdin: Optional[TextIO] = None,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    """Run ``ai_prompt`` or ``create_embed`` from parsed arguments."""
    stdin, out, err = stdin or sys.stdin, out or sys.stdout, err or sys.stderr
    if args.buffer_size < 1:
        print("--buffer-size must be positive", file=err)
        return 2
    if args.cmd == "prompt":
        name, raw_input = "ai_prompt", args.prompt
    else:
        name, raw_input = "create_embed", args.text
    result = invoke(
        name,
        args.provider,
        args.model,
        resolve_api_key(args),
        read_input(raw_input, stdin),
        buffer_size=args.buffer_size,
    )
    return emit_result(result, as_json=args.json, out=out, err=err)


def handle_functions(out: Optional[TextIO] = None) -> int:
    out = out or sys.stdout
    print(json.dumps(extension_manifest(), indent=2), file=out)
    return 0


__all__ = [
    "emit_result",
    "handle_call",
    "handle_functions",
    "read_input",
    "resolve_api_key",
    "result_to_dict",
]
