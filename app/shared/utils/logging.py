# 📄 File: app/shared/utils/logging.py

# 🧭 Purpose (Layman Explanation):
# Sets up the service's activity log so every line says which request or background run it
# came from, making it easy to follow a reminder from scheduling to completion.

# 🧪 Purpose (Technical Summary):
# Root logger configuration with a python-json-logger formatter (or a plain-text fallback),
# request / correlation ids carried in context variables, and a StructuredLogger wrapper for
# business and lifecycle events.

# 🔗 Dependencies:
# - python-json-logger: JSON log formatting
# - logging / contextvars: standard logging and per-task context

# 🔄 Connected Modules / Calls From:
# app.main (startup/shutdown), request logging middleware, reminder event handlers,
# background jobs

import logging
import socket
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional
from uuid import uuid4

from pythonjsonlogger import jsonlogger

from app.shared.config.settings import get_settings

SERVICE_NAME = "plant-care-reminders"
TEXT_FORMAT = "%(timestamp)s [%(request_id)s] %(name)s %(levelname)s %(message)s"

request_id_var: ContextVar[str] = ContextVar("request_id", default="")
correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")

_logging_configured = False
_loggers_cache: Dict[str, "StructuredLogger"] = {}


def _context_fields() -> Dict[str, Any]:
    fields = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": SERVICE_NAME,
        "hostname": socket.gethostname(),
    }
    if request_id_var.get():
        fields["request_id"] = request_id_var.get()
    if correlation_id_var.get():
        fields["correlation_id"] = correlation_id_var.get()
    return fields


class TextFormatter(logging.Formatter):
    """Human-readable lines for local development (LOG_FORMAT=text)."""

    def format(self, record: logging.LogRecord) -> str:
        record.request_id = "-"
        for key, value in _context_fields().items():
            setattr(record, key, value)
        message = super().format(record)
        extra_fields = getattr(record, "extra_fields", None)
        if extra_fields:
            message = f"{message} {extra_fields}"
        return message


class JSONFormatter(jsonlogger.JsonFormatter):
    """One JSON object per line for log aggregation."""

    def __init__(self):
        super().__init__("%(message)s", json_ensure_ascii=False)

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record.update(_context_fields())
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["location"] = f"{record.module}.{record.funcName}:{record.lineno}"

        extra_fields = log_record.pop("extra_fields", None)
        if extra_fields:
            log_record["extra"] = extra_fields


class StructuredLogger:
    """
    Thin wrapper over a stdlib logger.

    Keyword arguments and the `extra` dict are nested under a single
    `extra_fields` attribute so they never clash with LogRecord attributes.
    """

    _PASSTHROUGH = ("exc_info", "stack_info", "stacklevel")

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def debug(self, message: str, extra: Dict = None, **kwargs):
        self._log(logging.DEBUG, message, extra, **kwargs)

    def info(self, message: str, extra: Dict = None, **kwargs):
        self._log(logging.INFO, message, extra, **kwargs)

    def warning(self, message: str, extra: Dict = None, **kwargs):
        self._log(logging.WARNING, message, extra, **kwargs)

    def error(self, message: str, extra: Dict = None, **kwargs):
        self._log(logging.ERROR, message, extra, **kwargs)

    def log_business_event(
        self,
        event_type: str,
        description: str,
        entity_id: str = None,
        entity_type: str = None,
        extra: Dict = None,
    ):
        """Log a domain happening (reminder completed, alerts reconciled) for analytics."""
        self.info(
            description,
            extra={
                "event_type": "business_event",
                "business_event_type": event_type,
                "entity_id": entity_id,
                "entity_type": entity_type,
                **(extra or {}),
            },
        )

    def _log(self, level: int, message: str, extra: Dict = None, **kwargs):
        fields = dict(extra or {})
        fields.update({k: v for k, v in kwargs.items() if k not in self._PASSTHROUGH})
        log_kwargs = {k: v for k, v in kwargs.items() if k in self._PASSTHROUGH}
        if fields:
            log_kwargs["extra"] = {"extra_fields": fields}
        self.logger.log(level, message, **log_kwargs)


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the root logger once per process.

    Arguments default to the LOG_LEVEL / LOG_FORMAT / LOG_FILE settings.
    """
    global _logging_configured

    if _logging_configured:
        return logging.getLogger("startup")

    settings = get_settings()
    level = getattr(logging, (log_level or settings.LOG_LEVEL).upper(), logging.INFO)
    if (log_format or settings.LOG_FORMAT).lower() == "json":
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = TextFormatter(TEXT_FORMAT)

    handlers = [logging.StreamHandler(sys.stdout)]
    log_file = log_file or settings.LOG_FILE
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(RotatingFileHandler(log_file, maxBytes=10 * 1024 * 1024, backupCount=5))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    # Engine echo is controlled by DATABASE_ECHO, not the root level
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    _logging_configured = True
    return logging.getLogger("startup")


def get_logger(name: str) -> StructuredLogger:
    if name not in _loggers_cache:
        _loggers_cache[name] = StructuredLogger(name)
    return _loggers_cache[name]


@contextmanager
def log_context(request_id: str = None, correlation_id: str = None):
    """
    Tag every log line emitted inside the block.

    HTTP requests pass their request id; Celery tasks pass their task id as
    the correlation id. A request id is generated when none is given.
    """
    request_id = request_id or str(uuid4())
    request_token = request_id_var.set(request_id)
    correlation_token = correlation_id_var.set(correlation_id or "")
    try:
        yield {"request_id": request_id, "correlation_id": correlation_id}
    finally:
        request_id_var.reset(request_token)
        correlation_id_var.reset(correlation_token)


def log_startup_event(service_name: str, version: str, extra: Dict = None):
    get_logger("startup").info(
        f"Service {service_name} starting up",
        extra={"event_type": "service_startup", "version": version, **(extra or {})},
    )


def log_shutdown_event(service_name: str, extra: Dict = None):
    get_logger("shutdown").info(
        f"Service {service_name} shutting down",
        extra={"event_type": "service_shutdown", **(extra or {})},
    )
