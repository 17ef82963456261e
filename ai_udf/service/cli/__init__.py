"""ai-udf command-line entry point.

Wires argument parsing to the handlers in ``cli_actions``; no provider logic
lives here.
"""

from __future__ import annotations

import sys
from typing import Optional

from ...base.logging import configure_logger
from .cli_actions import handle_call, handle_functions
from .cli_parser import build_parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entrypoint.

    Returns
    -------
    int
        Process exit code (0 success, 1 function error, 2 usage error).
    """
    args = build_parser().parse_args(sys.argv[1:] if argv is None else argv)
    if args.log_level:
        configure_logger(level=args.log_level)
    if args.cmd == "functions":
        return handle_functions()
    return handle_call(args)


__all__ = ["main"]


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
