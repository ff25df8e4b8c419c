"""Outcome of a fallible operation."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator

from .error import ErrorRecord


class OutcomeStatus(str, Enum):
    """Whether a fallible operation succeeded."""

    SUCCESS = "success"
    FAILURE = "failure"


class Outcome(BaseModel):
    """
    Return channel of a fallible operation.

    A success carries nothing. A failure carries a reference to the
    ErrorRecord describing the most recent layer of the failure.
    """

    status: OutcomeStatus
    error: Optional[ErrorRecord] = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_error_matches_status(self) -> "Outcome":
        if self.status == OutcomeStatus.FAILURE and self.error is None:
            raise ValueError("a failure outcome requires an error record")
        if self.status == OutcomeStatus.SUCCESS and self.error is not None:
            raise ValueError("a success outcome cannot carry an error record")
        return self

    @classmethod
    def success(cls) -> "Outcome":
        return cls(status=OutcomeStatus.SUCCESS)

    @classmethod
    def failure(cls, record: ErrorRecord) -> "Outcome":
        return cls(status=OutcomeStatus.FAILURE, error=record)

    @property
    def failed(self) -> bool:
        return self.status == OutcomeStatus.FAILURE

    @property
    def ok(self) -> bool:
        return self.status == OutcomeStatus.SUCCESS
