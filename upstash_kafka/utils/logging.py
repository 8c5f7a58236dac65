"""
Structured logging utilities for the Upstash Kafka client.

The library itself only ever calls ``logging.getLogger(__name__)``; these
helpers are for applications and the command line front end that want JSON
log lines, request correlation and per-call timing.
"""

import json
import logging
import time
import uuid
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ..config import get_settings


# Attributes every LogRecord carries; anything else came in through ``extra``.
_RESERVED_ATTRS = frozenset([
    'name', 'msg', 'args', 'levelname', 'levelno', 'pathname', 'filename',
    'module', 'lineno', 'funcName', 'created', 'msecs', 'relativeCreated',
    'thread', 'threadName', 'processName', 'process', 'getMessage', 'exc_info',
    'exc_text', 'stack_info', 'taskName', 'message', 'asctime',
])


# Context variable for request tracking
request_context: ContextVar[Optional[Dict[str, Any]]] = ContextVar('request_context', default=None)


class StructuredFormatter(logging.Formatter):
    """Formatter emitting one JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }

        context = request_context.get()
        if context:
            log_entry['request_context'] = dict(context)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and key not in log_entry:
                log_entry[key] = value

        if record.exc_info:
            log_entry['exception'] = {
                'type': record.exc_info[0].__name__ if record.exc_info[0] else None,
                'message': str(record.exc_info[1]) if record.exc_info[1] else None,
                'traceback': self.formatException(record.exc_info)
            }

        return json.dumps(log_entry, default=str, ensure_ascii=False)


class RequestTrackingFilter(logging.Filter):
    """Filter to copy the current request context onto log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        context = request_context.get()
        if context:
            for key, value in context.items():
                if not hasattr(record, key):
                    setattr(record, key, value)
        return True


def setup_logging(
    log_level: Optional[str] = None,
    structured: Optional[bool] = None,
    enable_request_tracking: bool = True
) -> None:
    """
    Set up logging for an application using the client.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        structured: Whether to use structured JSON logging
        enable_request_tracking: Whether to attach the request context to records
    """
    settings = get_settings()
    if log_level is None:
        log_level = settings.log_level.value
    if structured is None:
        structured = settings.structured_logging

    level = getattr(logging, log_level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)

    if structured:
        formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(settings.log_format)
    console_handler.setFormatter(formatter)

    if enable_request_tracking:
        console_handler.addFilter(RequestTrackingFilter())

    root_logger.addHandler(console_handler)

    configure_logger_levels()


def configure_logger_levels():
    """Quiet the HTTP stack below the client."""
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('httpcore').setLevel(logging.WARNING)
    logging.getLogger('asyncio').setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the specified name."""
    return logging.getLogger(name)


def set_request_context(**kwargs):
    """Merge key-value pairs into the current request context."""
    current_context = dict(request_context.get() or {})
    current_context.update(kwargs)
    request_context.set(current_context)


def clear_request_context():
    """Clear the current request context."""
    request_context.set(None)


def get_request_context() -> Dict[str, Any]:
    """Get the current request context."""
    return dict(request_context.get() or {})


class LogContext:
    """Context manager timing an operation and logging its outcome."""

    def __init__(self, operation: str, logger: Optional[logging.Logger] = None, **kwargs):
        self.operation = operation
        self.logger = logger or get_logger(__name__)
        self.context = kwargs
        self.request_id = kwargs.pop('request_id', None) or str(uuid.uuid4())[:8]
        self.start_time = None
        self.duration_ms = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration_ms = round((time.perf_counter() - self.start_time) * 1000, 2)
        extra = {
            'operation': self.operation,
            'request_id': self.request_id,
            'duration_ms': self.duration_ms,
            **self.context
        }

        if exc_type is None:
            self.logger.debug(f"Operation completed: {self.operation}", extra={**extra, 'status': 'success'})
        else:
            self.logger.warning(
                f"Operation failed: {self.operation} - {exc_val}",
                extra={
                    **extra,
                    'status': 'error',
                    'error_type': exc_type.__name__,
                    'error_message': str(exc_val)
                }
            )
        return False


def log_http_call(
    logger: logging.Logger,
    method: str,
    path: str,
    status_code: int,
    duration_ms: float,
    **extra_context
):
    """
    Log one HTTP exchange with the remote API at DEBUG.

    Status codes are not interpreted here; failed exchanges and undecodable
    bodies are logged at WARNING by the transport. Only the URL path is
    logged, the base URL carries credentials.
    """
    log_data = {
        'method': method,
        'path': path,
        'status_code': status_code,
        'duration_ms': round(duration_ms, 2),
        **extra_context
    }

    logger.debug(f"HTTP {method} {path} -> {status_code}", extra=log_data)
