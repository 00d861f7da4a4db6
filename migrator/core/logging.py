"""Logging configuration.

Provides JSON-formatted logging for the migrator CLI. Library modules only
create module loggers; handlers are installed here, by the entry point.
"""

import json
import logging
import sys
from datetime import datetime, timezone

from migrator.core import config


class JsonFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record):
        payload = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for k in ("region", "recipe_key"):
            if hasattr(record, k):
                payload[k] = getattr(record, k)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(
    log_file: str = None,
    log_level: str = None,
):
    """Configure root logging with the JSON formatter.

    Args:
        log_file: Optional path of a log file (appended to). Defaults to
            MIGRATOR_LOG_FILE; no file handler when neither is set.
        log_level: Log level name. Defaults to MIGRATOR_LOG_LEVEL or 'INFO'.
    """
    # Console handler; stdout carries the CLI's results
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(JsonFormatter())
    handlers = [console_handler]

    log_file = log_file or config.LOG_FILE
    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a')
        file_handler.setFormatter(JsonFormatter())
        handlers.append(file_handler)

    root = logging.getLogger()
    log_level = (log_level or config.LOG_LEVEL).upper()
    root.setLevel(getattr(logging, log_level, logging.INFO))
    root.handlers = handlers
