"""Structured Logging — JSON formatter and one-shot setup for the API process.

Invariants:
    - Every record carries timestamp, level, logger name and message
    - Entity ids and error codes passed via `extra=` become top-level JSON keys
    - setup_logging is idempotent: calling it twice does not duplicate output

Design Decisions:
    - Stdlib logging + small JSON formatter: log shippers parse one object per line
    - "text" format for local development
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_FIELDS = (
    "artwork_id", "exhibition_id", "event_id", "post_id",
    "slug", "error_code", "path",
)
_HANDLER_NAME = "museum-api"


class JSONFormatter(logging.Formatter):

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            value = getattr(record, key, None)
            if value is not None:
                entry[key] = str(value)
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
