"""
Error propagation through chained error records.

A function that fails returns an Outcome carrying an ErrorRecord: a
description of the failure kind, the source location where the record was
returned, and an optional cause linking to the record that triggered it.
Callers forward or wrap these records, and the top-level caller walks the
resulting chain from effect to root cause.

Basic usage:
    >>> from feedback import ErrorKind, fail, fail_from, is_failure, success, show_error
    >>> DIVISION_BY_ZERO = ErrorKind(description="I can't divide by zero!")
    >>> CANNOT_DIVIDE = ErrorKind(description="An error happened while dividing.")
    >>> def divide(a, b):
    ...     if b == 0:
    ...         return fail(DIVISION_BY_ZERO), None
    ...     return success(), a // b
    >>> def compute(a, b):
    ...     outcome, result = divide(a, b)
    ...     if is_failure(outcome):
    ...         return fail_from(CANNOT_DIVIDE, outcome), None
    ...     return success(), result
    >>> outcome, _ = compute(1, 0)
    >>> show_error(outcome)  # doctest: +SKIP
"""

__version__ = "0.1.2"

from feedback.models import ErrorKind, ErrorRecord, SourceLocation, Outcome, OutcomeStatus
from feedback.services import (
    Propagator,
    PropagationError,
    RecordMode,
    get_propagator,
    set_propagator,
    success,
    fail,
    fail_from,
    propagate,
    wrap,
    is_failure,
    IntegrityError,
    Traceback,
    TracebackFrame,
    traverse,
    root_cause,
    format_frame,
    format_traceback,
    show_error,
)
from feedback.utils import capture_location

__all__ = [
    # Version
    "__version__",
    
    # Data model
    "ErrorKind",
    "ErrorRecord",
    "SourceLocation",
    "Outcome",
    "OutcomeStatus",
    
    # Propagation
    "Propagator",
    "PropagationError",
    "RecordMode",
    "get_propagator",
    "set_propagator",
    "success",
    "fail",
    "fail_from",
    "propagate",
    "wrap",
    "is_failure",
    "capture_location",
    
    # Traversal and display
    "IntegrityError",
    "Traceback",
    "TracebackFrame",
    "traverse",
    "root_cause",
    "format_frame",
    "format_traceback",
    "show_error",
]
