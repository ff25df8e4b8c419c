"""
Utility modules for the feedback library.
"""

from feedback.utils.location import capture_location
from feedback.utils.logging import (
    get_logger,
    setup_logging,
    LogContext,
    JSONFormatter,
    ContextLoggerAdapter,
    log_failure,
)

__all__ = [
    "capture_location",
    "get_logger",
    "setup_logging",
    "LogContext",
    "JSONFormatter",
    "ContextLoggerAdapter",
    "log_failure",
]
