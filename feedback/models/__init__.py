"""Data models for error records and outcomes."""

from .error import ErrorKind, ErrorRecord, SourceLocation
from .outcome import Outcome, OutcomeStatus

__all__ = [
    # Error models
    "ErrorKind",
    "ErrorRecord",
    "SourceLocation",
    # Outcome models
    "Outcome",
    "OutcomeStatus",
]
