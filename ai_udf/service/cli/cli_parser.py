"""CLI parser construction for ai-udf.

Wires subcommands only; handlers live in ``cli_actions``.
"""

from __future__ import annotations

import argparse

from ...base.factory import ProviderFactory
from ...config.defaults import FUNCTION_BUFFER_SIZE


def _add_call_arguments(parser: argparse.ArgumentParser, input_name: str) -> None:
    parser.add_argument("--provider", required=True, help=f"One of: {', '.join(ProviderFactory.supported())}")
    parser.add_argument("--model", required=True)
    key = parser.add_mutually_exclusive_group(required=True)
    key.add_argument("--api-key", default=None, help="Credential passed to the provider as-is")
    key.add_argument("--api-key-env", default=None, metavar="VAR", help="Read the credential from this environment variable")
    parser.add_argument(input_name, help="Input text; '-' reads standard input")
    parser.add_argument("--buffer-size", type=int, default=FUNCTION_BUFFER_SIZE)
    parser.add_argument("--json", action="store_true", help="Print the full result record as JSON")


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level parser with ``prompt``, ``embed`` and ``functions``."""
    p = argparse.ArgumentParser(prog="ai-udf", description="Call the ai_prompt/create_embed functions from a shell")
    p.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR")
    sub = p.add_subparsers(dest="cmd", required=True)

    _add_call_arguments(sub.add_parser("prompt", help="Run ai_prompt"), "prompt")
    _add_call_arguments(sub.add_parser("embed", help="Run create_embed"), "text")
    sub.add_parser("functions", help="Print the extension manifest as JSON")
    return p


__all__ = ["build_parser"]
