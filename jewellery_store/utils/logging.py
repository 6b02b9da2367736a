# jewellery_store/utils/logging.py
"""
Structured logging for the store.

get_logger() is what every module uses; setup_logging() is called once by whatever
process hosts the services (an API server, a script, a worker).
"""

import json
import logging
import sys
import traceback
from datetime import datetime, timezone
from typing import Any, Dict

from jewellery_store.utils.settings import LOG_LEVEL, SERVICE_NAME


class StructuredFormatter(logging.Formatter):
    """Formats log records as single-line JSON documents."""

    def format(self, record: logging.LogRecord) -> str:
        log_obj: Dict[str, Any] = {
            "@timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": SERVICE_NAME,
        }

        log_obj["location"] = {
            "file": record.pathname,
            "line": record.lineno,
            "function": record.funcName,
            "module": record.module,
        }

        if record.exc_info:
            log_obj["error"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "stacktrace": traceback.format_exception(*record.exc_info),
            }

        if hasattr(record, "extra_fields"):
            log_obj["custom"] = record.extra_fields

        return json.dumps(log_obj, default=str)


def setup_logging(level: str = LOG_LEVEL, enable_console: bool = True) -> None:
    """
    Configure the root logger with the JSON formatter.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_console: Attach a stdout handler
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers = []

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(StructuredFormatter())
        root_logger.addHandler(console_handler)

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    root_logger.info(
        "Logging initialized",
        extra={"extra_fields": {"service": SERVICE_NAME, "level": level}},
    )


class LoggerAdapter(logging.LoggerAdapter):
    """Passes caller-supplied extra fields through untouched."""

    def process(self, msg, kwargs):
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


def get_logger(name: str) -> LoggerAdapter:
    """
    Get a logger for a module.

    Args:
        name: Logger name (usually __name__)
    """
    return LoggerAdapter(logging.getLogger(name), {})
