"""Error record data models."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorKind(BaseModel):
    """Immutable template describing one kind of failure."""

    description: str = Field(..., description="Static, human-readable description of the failure kind")
    name: Optional[str] = Field(None, description="Optional tag identifying the kind")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.description


class SourceLocation(BaseModel):
    """Call site where an error record was stamped."""

    file: str
    line: int
    function: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.file}:{self.line}"


class ErrorRecord(BaseModel):
    """
    One failure occurrence in a traceback chain.

    A record carries the description of its kind, the location where it was
    last returned, and an optional cause: the more specific record whose
    failure triggered this one. Following ``cause`` leads to the root record,
    the original detector of the failure.
    """

    description: str
    kind: Optional[ErrorKind] = None
    location: Optional[SourceLocation] = None
    cause: Optional["ErrorRecord"] = None

    @property
    def identity(self) -> str:
        """Opaque token identifying this record instance."""
        return hex(id(self))

    @property
    def is_root(self) -> bool:
        """True if this record has no cause."""
        return self.cause is None

    @classmethod
    def from_kind(
        cls,
        kind: ErrorKind,
        location: Optional[SourceLocation] = None,
        cause: Optional["ErrorRecord"] = None
    ) -> "ErrorRecord":
        """
        Create a fresh record for a failure kind.

        Args:
            kind: Template the record is created from
            location: Call site to stamp
            cause: Record that triggered this failure

        Returns:
            New ErrorRecord owned by the caller
        """
        return cls(description=kind.description, kind=kind, location=location, cause=cause)

    def stamp(self, location: SourceLocation, cause: Optional["ErrorRecord"] = None) -> "ErrorRecord":
        """
        Overwrite location and cause in place.

        Args:
            location: Call site returning this record
            cause: Record that triggered this failure, None for a root

        Returns:
            This record
        """
        self.location = location
        self.cause = cause
        return self


ErrorRecord.model_rebuild()
