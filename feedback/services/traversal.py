"""
Read-only traversal of a failure chain from effect to root cause.
"""

import logging
from typing import Iterator, List, NamedTuple, Optional, Union

from feedback.models.error import ErrorRecord
from feedback.models.outcome import Outcome

logger = logging.getLogger(__name__)


class IntegrityError(Exception):
    """Raised when a failure chain loops back on itself."""
    pass


class TracebackFrame(NamedTuple):
    """One record of a traceback and its distance from the outermost record."""

    depth: int
    record: ErrorRecord


class Traceback:
    """
    Lazy, restartable view over the chain of an outcome.

    Every iteration walks the chain again from the outermost record (depth 0)
    to the root cause. A success outcome has an empty traceback.
    """

    def __init__(self, outcome: Union[Outcome, ErrorRecord, None]):
        """
        Initialize traceback.

        Args:
            outcome: Outcome to inspect, or the outermost ErrorRecord itself
        """
        if isinstance(outcome, Outcome):
            self._head = outcome.error
        elif outcome is None or isinstance(outcome, ErrorRecord):
            self._head = outcome
        else:
            raise TypeError(f"expected an Outcome or ErrorRecord, got {type(outcome).__name__}")

    def __iter__(self) -> Iterator[TracebackFrame]:
        return _walk(self._head)

    def __bool__(self) -> bool:
        return self._head is not None

    def records(self) -> List[ErrorRecord]:
        """Return the records from outermost to root cause."""
        return [frame.record for frame in self]

    def root_cause(self) -> Optional[ErrorRecord]:
        """Return the root record, or None for a success."""
        last = None
        for frame in self:
            last = frame.record
        return last

    def depth(self) -> int:
        """Return the number of records in the chain."""
        return sum(1 for _ in self)


def _walk(head: Optional[ErrorRecord]) -> Iterator[TracebackFrame]:
    visited = set()
    record = head
    depth = 0

    while record is not None:
        if id(record) in visited:
            logger.error(
                f"Failure chain loops back to '{record.description}' at depth {depth}",
                extra={"identity": record.identity, "depth": depth}
            )
            raise IntegrityError(
                f"cause of record at depth {depth - 1} points back to "
                f"'{record.description}' (id:{record.identity})"
            )
        visited.add(id(record))

        yield TracebackFrame(depth, record)

        record = record.cause
        depth += 1


def traverse(outcome: Union[Outcome, ErrorRecord, None]) -> Traceback:
    """
    Walk a failure chain from the most recent record to its root cause.

    Args:
        outcome: Outcome (or outermost ErrorRecord) to walk

    Returns:
        Traceback yielding (depth, record) frames, empty for a success

    Raises:
        IntegrityError: While iterating, if a cause points back into the chain
    """
    return Traceback(outcome)


def root_cause(outcome: Union[Outcome, ErrorRecord, None]) -> Optional[ErrorRecord]:
    """Return the root record of a failure, or None for a success."""
    return traverse(outcome).root_cause()
