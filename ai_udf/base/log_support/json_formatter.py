"""JSON formatter for the shared ``ai_udf`` logger.

Each record becomes one JSON object. Messages produced by ``log_event`` are
already JSON objects; their keys are merged into the output instead of being
nested as an escaped string. Attributes passed through ``extra=`` are kept.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

ISO = "%Y-%m-%dT%H:%M:%S.%fZ"

# Attributes every LogRecord carries; anything else came from ``extra=``.
_RECORD_INTERNALS = frozenset(vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))) | {
    "message",
    "asctime",
    "taskName",
}


def _structured(message: str) -> dict | None:
    if not message.startswith("{"):
        return None
    try:
        parsed = json.loads(message)
    except ValueError:
        return None
    return parsed if isinstance(parsed, dict) else None


class JsonFormatter(logging.Formatter):
    """Render records as single-line JSON with ``ts``, ``level`` and ``logger``."""

    def format(self, record: logging.LogRecord) -> str:
        out = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).strftime(ISO),
            "level": record.levelname,
            "logger": record.name,
        }
        message = record.getMessage()
        fields = _structured(message)
        if fields is None:
            out["msg"] = message
        else:
            out.update(fields)
        if record.exc_info:
            out["exc"] = self.formatException(record.exc_info)
        for key, value in vars(record).items():
            if key.startswith("_") or key in _RECORD_INTERNALS or key in out:
                continue
            out[key] = value
        return json.dumps(out, ensure_ascii=False, default=str)


__all__ = ["JsonFormatter", "ISO"]
