"""Centralized JSON formatter and handler setup for the ``fars`` logger."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO, Union

# Attributes every LogRecord carries; anything else came in through extra=.
_RECORD_ATTRS = frozenset({
    "msg", "args", "levelname", "levelno", "pathname", "filename",
    "module", "exc_info", "exc_text", "stack_info", "lineno",
    "funcName", "created", "msecs", "relativeCreated", "thread",
    "threadName", "processName", "process", "name", "message",
    "taskName",
})

_TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.

    Merges any `extra=` kwargs directly into the payload, e.g. the
    ``year`` and ``data_file`` attached to ``invalid year`` warnings.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": _utc_iso(record.created),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRS:
                payload[key] = value

        # safe fallback for non-serializable objects
        return json.dumps(payload, default=str)


def configure_logging(
    level: Union[int, str] = logging.INFO,
    json_format: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Attach one stream handler to the package logger.

    Calling again replaces the handler installed by the previous call, so
    repeated setup never duplicates output.  The root logger is untouched.

    Args:
        level: Logging level name or number.
        json_format: Use ``JsonFormatter`` instead of plain text.
        stream: Destination stream.  Defaults to ``sys.stderr``.

    Returns:
        The configured ``fars`` logger.
    """
    pkg_logger = logging.getLogger("fars")

    for handler in list(pkg_logger.handlers):
        if getattr(handler, "_fars_handler", False):
            pkg_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(JsonFormatter() if json_format else logging.Formatter(_TEXT_FORMAT))
    handler._fars_handler = True
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(level)
    return pkg_logger


def _utc_iso(created: float) -> str:
    stamp = datetime.fromtimestamp(created, tz=timezone.utc)
    return stamp.isoformat().replace("+00:00", "Z")
