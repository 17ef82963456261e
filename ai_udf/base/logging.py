"""Shared logger setup and structured event helpers.

Every module logs through a child of the ``ai_udf`` logger. The package runs
inside a host process, so that logger is quiet by default (``WARNING``) and
never propagates to the root logger.

Level override: ``AI_UDF_LOG_LEVEL`` (DEBUG, INFO, WARNING, ERROR, CRITICAL),
read once when the shared logger is first configured.
"""
from __future__ import annotations

import logging
import json
import sys
import os
import contextlib
from logging.handlers import RotatingFileHandler
from typing import Any, Optional

from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "ai_udf"
LOG_LEVEL_ENV = "AI_UDF_LOG_LEVEL"

_BASE_LOGGER_ATTR = "_ai_udf_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_ai_udf_console_handler"
_FILE_HANDLER_ATTR = "_ai_udf_file_handler"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _parse_level(value: str | None, default: int = logging.WARNING) -> int:
    """Map a level name (any case, ``WARN`` accepted) to its number, else ``default``."""
    name = (value or "").strip().upper()
    if name == "WARN":
        name = "WARNING"
    resolved = logging.getLevelName(name) if name else None
    return resolved if isinstance(resolved, int) else default


def _ensure_base_logger(json_mode: bool, level: int) -> logging.Logger:
    """Initialize and return the shared ``ai_udf`` logger."""
    logger = logging.getLogger(BASE_LOGGER_NAME)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        return logger

    logger.setLevel(_parse_level(os.getenv(LOG_LEVEL_ENV), default=level))
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    logger.handlers[:] = [handler]
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(name: str = BASE_LOGGER_NAME, json_mode: bool = True, level: int = logging.WARNING) -> logging.Logger:
    """Return a logger under the shared ``ai_udf`` hierarchy.

    The base logger is configured on first use; children carry no handlers of
    their own and propagate to it.
    """
    base_logger = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == BASE_LOGGER_NAME:
        return base_logger
    if not name.startswith(BASE_LOGGER_NAME + "."):
        name = f"{BASE_LOGGER_NAME}.{name}"
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Reconfigure the shared logger at runtime.

    Parameters
    ----------
    level: int | str | None
        Numeric level or name; ``None`` keeps the current level.
    file_path: Optional[str]
        Attach a rotating file handler writing to this path. ``None`` removes
        any file handler previously attached by this function.
    json_mode: bool
        JSON formatter (default) or plain text.
    """
    logger = get_logger(json_mode=json_mode)
    if level is not None:
        resolved = _parse_level(level, default=logger.level) if isinstance(level, str) else level
        logger.setLevel(resolved)

    for h in logger.handlers:
        if getattr(h, _CONSOLE_HANDLER_ATTR, False):
            h.setFormatter(_formatter(json_mode))

    managed = [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]
    for h in managed:
        logger.removeHandler(h)
        with contextlib.suppress(OSError):
            h.close()
    if file_path is None:
        return logger

    abs_path = os.path.abspath(os.path.expanduser(file_path))
    os.makedirs(os.path.dirname(abs_path), exist_ok=True)
    fh = RotatingFileHandler(abs_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
    setattr(fh, _FILE_HANDLER_ATTR, True)
    fh.setFormatter(_formatter(json_mode))
    logger.addHandler(fh)
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    """Emit a structured log event as one JSON line.

    Keys whose value is ``None`` are dropped and unpaired surrogates are
    written as ``?``. Callers must not pass credentials or request bodies.
    """
    if not logger.isEnabledFor(level):
        return
    payload = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    payload.update({k: v for k, v in fields.items() if v is not None})
    line = json.dumps(payload, ensure_ascii=False, default=str)
    logger.log(level, line.encode("utf-8", errors="replace").decode("utf-8"))


__all__ = [
    "BASE_LOGGER_NAME",
    "LOG_LEVEL_ENV",
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
]
