"""Propagation, traversal and display services."""

from feedback.services.propagation import (
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
    is_failure
)
from feedback.services.traversal import (
    IntegrityError,
    Traceback,
    TracebackFrame,
    traverse,
    root_cause
)
from feedback.services.display import (
    format_frame,
    format_traceback,
    show_error
)

__all__ = [
    'Propagator',
    'PropagationError',
    'RecordMode',
    'get_propagator',
    'set_propagator',
    'success',
    'fail',
    'fail_from',
    'propagate',
    'wrap',
    'is_failure',
    'IntegrityError',
    'Traceback',
    'TracebackFrame',
    'traverse',
    'root_cause',
    'format_frame',
    'format_traceback',
    'show_error'
]
