"""drips.core.logs

Logging setup.

Messages are event names (``metadata_version_matched``); context goes in ``extra``.
"""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import Any

from drips.core.config import LoggingConfig

# Attributes every LogRecord has; anything else came in via ``extra``.
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}

_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


class JsonFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        body: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "event": record.getMessage(),
        }
        for k, v in vars(record).items():
            if k not in _RECORD_ATTRS and not k.startswith("_"):
                body[k] = v
        if record.exc_info:
            body["exc"] = self.formatException(record.exc_info)
        return json.dumps(body, default=str, sort_keys=True)


def configure_logging(cfg: LoggingConfig, *, logger_name: str = "drips") -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Idempotent: repeated calls replace the handler instead of stacking them.
    """

    logger = logging.getLogger(logger_name)
    logger.setLevel(cfg.level)

    for h in list(logger.handlers):
        if getattr(h, "_drips_handler", False):
            logger.removeHandler(h)

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter() if cfg.json_output else logging.Formatter(_PLAIN_FORMAT))
    handler._drips_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
