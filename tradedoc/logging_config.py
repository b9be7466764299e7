"""Shared logging configuration.

Provides JSON-formatted logging for the layout service and CLI.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Optional

from tradedoc.core.config import LOG_FILE_ENV, LOG_LEVEL_ENV


class JsonFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record):
        payload = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for k in ("request_id", "route", "remote_addr"):
            if hasattr(record, k):
                payload[k] = getattr(record, k)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def configure_logging(
    log_level: Optional[str] = None,
    log_file: Optional[str] = None,
    stream=None,
):
    """Configure logging with JSON formatter.

    Args:
        log_level: Log level. Defaults to TRADEDOC_LOG_LEVEL env var or 'INFO'.
        log_file: Optional path to an append-mode log file. Defaults to
            TRADEDOC_LOG_FILE env var; no file handler when unset.
        stream: Console stream. Defaults to stdout.
    """
    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setFormatter(JsonFormatter())
    handlers = [console_handler]

    log_file = log_file or os.getenv(LOG_FILE_ENV)
    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a')
        file_handler.setFormatter(JsonFormatter())
        handlers.append(file_handler)

    root = logging.getLogger()
    log_level = (log_level or os.getenv(LOG_LEVEL_ENV, "INFO")).upper()
    root.setLevel(getattr(logging, log_level, logging.INFO))
    root.handlers = handlers
