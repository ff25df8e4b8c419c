"""
Structured logging utilities with JSON formatting and context injection.

This module provides structured logging capabilities with:
- JSON formatted log output for machine-readable logs
- Context injection (component, operation) via LoggerAdapter
- Failure chain summaries for outcomes that reach a top-level caller
- Integration with Python's standard logging module
"""

import logging
import json
import sys
import traceback
from datetime import datetime, timezone
from typing import Any, Dict, Optional, MutableMapping
from logging import LogRecord

from feedback.models.outcome import Outcome


_STANDARD_ATTRIBUTES = frozenset([
    "name", "msg", "args", "created", "filename", "funcName",
    "levelname", "levelno", "lineno", "module", "msecs",
    "message", "pathname", "process", "processName", "relativeCreated",
    "thread", "threadName", "exc_info", "exc_text", "stack_info",
    "taskName", "component", "operation",
])


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    Outputs log records as JSON with standard fields:
    - timestamp: ISO 8601 formatted timestamp
    - level: Log level (INFO, WARNING, ERROR, etc.)
    - logger: Logger name
    - message: Log message
    - component / operation: Context fields, when set
    - context: Any other extra fields (description, depth, identity, etc.)
    - error: Exception details, when present
    """

    def format(self, record: LogRecord) -> str:
        """
        Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON formatted log string
        """
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if hasattr(record, "component"):
            log_data["component"] = record.component
        if hasattr(record, "operation"):
            log_data["operation"] = record.operation

        extra_fields = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _STANDARD_ATTRIBUTES
        }
        if extra_fields:
            log_data["context"] = extra_fields

        if record.exc_info:
            log_data["error"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "stack_trace": "".join(traceback.format_exception(*record.exc_info))
            }

        log_data["source"] = {
            "file": record.pathname,
            "line": record.lineno,
            "function": record.funcName
        }

        return json.dumps(log_data, default=str)


class LogContext:
    """
    Context manager for adding temporary context to logs.

    Usage:
        with LogContext(logger, operation="complex_operation"):
            logger.info("Running")  # Will include operation
    """

    def __init__(self, logger: logging.LoggerAdapter, **context: Any):
        self.logger = logger
        self.context = context
        self.old_extra = None

    def __enter__(self) -> logging.LoggerAdapter:
        self.old_extra = self.logger.extra.copy() if self.logger.extra else {}
        self.logger.extra = {**self.old_extra, **self.context}
        return self.logger

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.old_extra is not None:
            self.logger.extra = self.old_extra


class ContextLoggerAdapter(logging.LoggerAdapter):
    """
    Logger adapter that injects context fields into all log records.
    """

    def __init__(self, logger: logging.Logger, extra: Optional[Dict[str, Any]] = None):
        super().__init__(logger, extra or {})

    def process(self, msg: str, kwargs: MutableMapping[str, Any]) -> tuple[str, MutableMapping[str, Any]]:
        """
        Process log message and inject context.

        Args:
            msg: Log message
            kwargs: Log kwargs

        Returns:
            Tuple of (message, kwargs) with context injected
        """
        extra = kwargs.get("extra", {})
        extra.update(self.extra)
        kwargs["extra"] = extra
        return msg, kwargs

    def with_context(self, **context: Any) -> "ContextLoggerAdapter":
        """
        Create a new logger adapter with additional context.

        Args:
            **context: Additional context fields

        Returns:
            New logger adapter with merged context
        """
        new_extra = self.extra.copy()
        new_extra.update(context)
        return ContextLoggerAdapter(self.logger, new_extra)


def setup_logging(log_level: str = "INFO") -> None:
    """
    Configure structured logging for an application using the library.

    The library never calls this itself; it is meant for entry points such
    as the demo programs.

    Args:
        log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    formatter = JSONFormatter()

    # Tracebacks are printed to stdout, keep logs on stderr
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)


def get_logger(name: str, **context: Any) -> ContextLoggerAdapter:
    """
    Get a context-aware logger for a module.

    Args:
        name: Logger name (typically __name__)
        **context: Initial context fields (component, operation, etc.)

    Returns:
        Context logger adapter
    """
    base_logger = logging.getLogger(name)
    return ContextLoggerAdapter(base_logger, context)


def log_failure(
    logger: logging.LoggerAdapter,
    outcome: Outcome,
    message: str = "Operation failed",
    **context: Any
) -> None:
    """
    Log a failed outcome with a summary of its chain.

    Nothing is logged for a success.

    Args:
        logger: Logger to use
        outcome: Outcome to summarize
        message: Log message prefix
        **context: Additional context fields
    """
    from feedback.services.traversal import traverse

    if not outcome.failed:
        return

    records = traverse(outcome).records()
    head = records[0]
    root = records[-1]

    extra = {
        "description": head.description,
        "location": str(head.location) if head.location else None,
        "depth": len(records),
        "root_cause": root.description,
        "root_location": str(root.location) if root.location else None,
    }
    extra.update(context)

    logger.error(f"{message}: {head.description}", extra=extra)
