"""
Plain-text rendering of tracebacks.

One line per record, outermost first and root cause last:

    Traceback:
        (0) ERROR (id:0x7f3b2c1d0e80) - division_by_zero.py:41 - An error happened while dividing.
        (1) ERROR (id:0x7f3b2c1d0f40) - division_by_zero.py:29 - I can't divide by zero!
"""

import sys
from typing import Optional, TextIO, Union

from feedback.models.error import ErrorRecord
from feedback.models.outcome import Outcome
from feedback.services.traversal import TracebackFrame, traverse

TRACEBACK_HEADER = "Traceback:"
FRAME_INDENT = "    "
FRAME_FORMAT = "({depth}) ERROR (id:{identity}) - {file}:{line} - {description}"


def format_frame(frame: TracebackFrame) -> str:
    """
    Render one traceback frame.

    Args:
        frame: Frame to render

    Returns:
        Single line without indentation or newline
    """
    record = frame.record
    location = record.location
    return FRAME_FORMAT.format(
        depth=frame.depth,
        identity=record.identity,
        file=location.file if location else "?",
        line=location.line if location else 0,
        description=record.description
    )


def format_traceback(outcome: Union[Outcome, ErrorRecord, None]) -> str:
    """
    Render the full traceback of an outcome.

    Args:
        outcome: Outcome (or outermost ErrorRecord) to render

    Returns:
        Header line followed by one indented line per frame, newline terminated
    """
    lines = [TRACEBACK_HEADER]
    for frame in traverse(outcome):
        lines.append(FRAME_INDENT + format_frame(frame))
    return "\n".join(lines) + "\n"


def show_error(outcome: Union[Outcome, ErrorRecord, None], stream: Optional[TextIO] = None) -> None:
    """
    Print the traceback of an outcome.

    Args:
        outcome: Outcome (or outermost ErrorRecord) to display
        stream: Output stream (default: standard output)
    """
    stream = stream if stream is not None else sys.stdout
    stream.write(format_traceback(outcome))
