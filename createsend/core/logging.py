"""Createsend: Structured JSON Logging.

Every request logs one line at DEBUG with its method, path, status and
duration; API errors and empty-body responses log at WARNING / INFO.
"""

import logging
import json
import sys
from datetime import datetime, timezone
from createsend.config import settings

EXTRA_FIELDS = ("method", "path", "status_code", "duration_ms")


class JSONFormatter(logging.Formatter):
    """One JSON object per line, carrying request details when attached."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[0] is not None:
            log_entry["exception"] = self.formatException(record.exc_info)
        # Set by the client via `extra=` on request and error lines
        for key in EXTRA_FIELDS:
            if hasattr(record, key):
                log_entry[key] = getattr(record, key)
        return json.dumps(log_entry)


def get_logger(name: str) -> logging.Logger:
    """Return `createsend.<name>` with a JSON stdout handler, leveled from settings."""
    logger = logging.getLogger(f"createsend.{name}")
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JSONFormatter())
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    return logger
