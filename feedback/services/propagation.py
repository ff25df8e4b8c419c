"""
Construction and chaining of error records across call boundaries.

A fallible function returns an Outcome. When it fails it stamps an
ErrorRecord with the location of the return and, when it is explaining a
lower-level failure, links that failure's record as the cause. Each frame
chooses independently between:

- identity propagation: forward the received outcome unchanged
- cumulative wrapping: return a layer-specific record whose cause is the
  received one

Example:
    DIVISION_BY_ZERO = ErrorKind(description="I can't divide by zero!")
    CANNOT_DIVIDE = ErrorKind(description="An error happened while dividing.")

    def divide(a, b):
        if b == 0:
            return fail(DIVISION_BY_ZERO), None
        return success(), a // b

    def compute(a, b):
        outcome, result = divide(a, b)
        if is_failure(outcome):
            return fail_from(CANNOT_DIVIDE, outcome), None
        return success(), result
"""

import logging
import threading
from enum import Enum
from typing import Dict, Optional, Union

from feedback.models.error import ErrorKind, ErrorRecord, SourceLocation
from feedback.models.outcome import Outcome
from feedback.utils.location import capture_location

logger = logging.getLogger(__name__)

RecordLike = Union[ErrorKind, ErrorRecord]
CauseLike = Union[ErrorRecord, Outcome, None]


class RecordMode(str, Enum):
    """How a propagator obtains the record it stamps."""
    FRESH = "fresh"  # New record per stamping, templates never mutated
    SHARED = "shared"  # One record per kind, mutated on every stamping


class PropagationError(Exception):
    """Raised when a propagation step is given an invalid cause."""
    pass


class Propagator:
    """
    Stamps and chains error records.

    In FRESH mode every failure returns a record owned by the returning
    frame: ErrorKind templates and ErrorRecord constants passed in are copied,
    never mutated, so concurrent failures cannot observe each other.

    In SHARED mode a single record per ErrorKind lives for the whole process
    and ErrorRecord arguments are stamped in place. The location and cause of
    such a record only describe its last occurrence. This mode is not safe
    when failures of the same kind can happen concurrently.

    Args:
        mode: Record ownership mode (default: FRESH)
        full_paths: Stamp full file paths instead of base names (default: False)
    """

    def __init__(self, mode: RecordMode = RecordMode.FRESH, full_paths: bool = False):
        """Initialize propagator."""
        self.mode = RecordMode(mode)
        self.full_paths = full_paths

        self._shared_records: Dict[ErrorKind, ErrorRecord] = {}
        self._lock = threading.Lock()

        if self.mode == RecordMode.SHARED:
            logger.warning(
                "Propagator running in shared record mode: records are reused "
                "per kind and must not be stamped concurrently"
            )
        else:
            logger.debug(f"Propagator initialized: mode={self.mode.value}, full_paths={full_paths}")

    def success(self) -> Outcome:
        """Return the success outcome."""
        return Outcome.success()

    def fail(
        self,
        record: RecordLike,
        cause: CauseLike = None,
        *,
        location: Optional[SourceLocation] = None,
        stacklevel: int = 1
    ) -> Outcome:
        """
        Stamp a record with the caller's location and return it as a failure.

        Args:
            record: ErrorKind template or ErrorRecord to return
            cause: Record (or failure outcome) that triggered this failure;
                None or a success outcome makes the record a root
            location: Explicit call site, overrides frame inspection
            stacklevel: Frames above the caller of fail() to attribute

        Returns:
            Failure outcome carrying the stamped record

        Raises:
            TypeError: If record or cause has an unsupported type
        """
        if location is None:
            location = capture_location(stacklevel + 1, full_path=self.full_paths)
        return self._stamp(record, self._resolve_cause(cause), location)

    def fail_from(
        self,
        record: RecordLike,
        cause: Union[ErrorRecord, Outcome],
        *,
        location: Optional[SourceLocation] = None,
        stacklevel: int = 1
    ) -> Outcome:
        """
        Wrap a lower-level failure in a layer-specific record.

        Args:
            record: ErrorKind template or ErrorRecord explaining the failure
            cause: Failure outcome or record being wrapped
            location: Explicit call site, overrides frame inspection
            stacklevel: Frames above the caller of fail_from() to attribute

        Returns:
            Failure outcome whose record's cause is the wrapped record

        Raises:
            PropagationError: If cause is a success outcome or None
        """
        cause_record = self._resolve_cause(cause)
        if cause_record is None:
            raise PropagationError(
                f"cannot wrap '{self._describe(record)}' around a non-failure cause"
            )
        if location is None:
            location = capture_location(stacklevel + 1, full_path=self.full_paths)
        return self._stamp(record, cause_record, location)

    def propagate(self, outcome: Outcome) -> Outcome:
        """
        Forward an outcome unchanged.

        No record is created and nothing is stamped, so the traceback of the
        returned outcome is identical to the received one.
        """
        if not isinstance(outcome, Outcome):
            raise TypeError(f"expected an Outcome, got {type(outcome).__name__}")
        return outcome

    def wrap(
        self,
        outcome: Outcome,
        record: RecordLike,
        *,
        location: Optional[SourceLocation] = None,
        stacklevel: int = 1
    ) -> Outcome:
        """
        Test an outcome and wrap it if it failed.

        Success is returned as is. A failure is wrapped in ``record`` stamped
        at the caller's location.

        Example:
            outcome = propagator.wrap(fragile_function(), FRAGILE_FUNCTION_FAILED)
            if outcome.failed:
                return outcome
        """
        if not self.is_failure(outcome):
            return outcome
        if location is None:
            location = capture_location(stacklevel + 1, full_path=self.full_paths)
        return self._stamp(record, outcome.error, location)

    @staticmethod
    def is_failure(outcome: Outcome) -> bool:
        """Return True if the outcome is a failure."""
        if not isinstance(outcome, Outcome):
            raise TypeError(f"expected an Outcome, got {type(outcome).__name__}")
        return outcome.failed

    def shared_record(self, kind: ErrorKind) -> ErrorRecord:
        """
        Get or create the process-wide record for a kind (SHARED mode).

        Args:
            kind: Failure kind

        Returns:
            The single ErrorRecord reused for every failure of this kind
        """
        with self._lock:
            record = self._shared_records.get(kind)
            if record is None:
                record = ErrorRecord.from_kind(kind)
                self._shared_records[kind] = record
            return record

    def _stamp(
        self,
        record: RecordLike,
        cause: Optional[ErrorRecord],
        location: SourceLocation
    ) -> Outcome:
        if isinstance(record, ErrorKind):
            if self.mode == RecordMode.SHARED:
                stamped = self.shared_record(record).stamp(location, cause)
            else:
                stamped = ErrorRecord.from_kind(record, location=location, cause=cause)
        elif isinstance(record, ErrorRecord):
            if self.mode == RecordMode.SHARED:
                stamped = record.stamp(location, cause)
            else:
                stamped = record.model_copy(update={"location": location, "cause": cause})
        else:
            raise TypeError(
                f"expected an ErrorKind or ErrorRecord, got {type(record).__name__}"
            )

        logger.debug(
            f"Stamped '{stamped.description}' at {location}",
            extra={
                "identity": stamped.identity,
                "cause": cause.identity if cause is not None else None,
            }
        )
        return Outcome.failure(stamped)

    @staticmethod
    def _resolve_cause(cause: CauseLike) -> Optional[ErrorRecord]:
        if cause is None or isinstance(cause, ErrorRecord):
            return cause
        if isinstance(cause, Outcome):
            return cause.error
        raise TypeError(
            f"expected an ErrorRecord, Outcome or None as cause, got {type(cause).__name__}"
        )

    @staticmethod
    def _describe(record: RecordLike) -> str:
        return getattr(record, "description", repr(record))


_default_propagator: Optional[Propagator] = None


def get_propagator() -> Propagator:
    """
    Get or create the global propagator instance.

    The instance is configured from settings on first use.

    Returns:
        Propagator instance
    """
    global _default_propagator
    if _default_propagator is None:
        from feedback.config import settings
        _default_propagator = Propagator(
            mode=settings.record_mode,
            full_paths=settings.full_paths
        )
    return _default_propagator


def set_propagator(propagator: Optional[Propagator]) -> None:
    """
    Replace the global propagator instance.

    Args:
        propagator: New instance, or None to rebuild from settings on next use
    """
    global _default_propagator
    _default_propagator = propagator


def success() -> Outcome:
    """Return the success outcome."""
    return get_propagator().success()


def fail(
    record: RecordLike,
    cause: CauseLike = None,
    *,
    location: Optional[SourceLocation] = None,
    stacklevel: int = 1
) -> Outcome:
    """Stamp ``record`` at the caller's location and return it as a failure."""
    return get_propagator().fail(record, cause, location=location, stacklevel=stacklevel + 1)


def fail_from(
    record: RecordLike,
    cause: Union[ErrorRecord, Outcome],
    *,
    location: Optional[SourceLocation] = None,
    stacklevel: int = 1
) -> Outcome:
    """Wrap the failure ``cause`` in ``record`` stamped at the caller's location."""
    return get_propagator().fail_from(record, cause, location=location, stacklevel=stacklevel + 1)


def propagate(outcome: Outcome) -> Outcome:
    """Forward ``outcome`` unchanged."""
    return get_propagator().propagate(outcome)


def wrap(
    outcome: Outcome,
    record: RecordLike,
    *,
    location: Optional[SourceLocation] = None,
    stacklevel: int = 1
) -> Outcome:
    """Return ``outcome`` if it succeeded, otherwise wrap it in ``record``."""
    return get_propagator().wrap(outcome, record, location=location, stacklevel=stacklevel + 1)


def is_failure(outcome: Outcome) -> bool:
    """Return True if ``outcome`` is a failure."""
    return Propagator.is_failure(outcome)
