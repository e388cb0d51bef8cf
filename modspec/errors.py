"""Failure taxonomy for module-manifest validation.

Every rule in :mod:`modspec.rules` reports a violation by raising
:class:`SpecValidationError`, which carries a single :class:`Failure`.
Primitives raise with an empty field path; the field validators in
:mod:`modspec.module` attach the field they were checking, and nested
entities prefix the path of their parent.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class FailureReason(str, Enum):
    """Which rule a value violated."""

    REQUIRED = "required"
    """A mandatory field is absent."""

    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"

    INVALID_CHARACTER = "invalid_character"
    """A character outside the permitted class."""

    INVALID_START = "invalid_start"
    INVALID_END = "invalid_end"

    INVALID_ENUM = "invalid_enum"
    """A value is present but is not one of the recognized enum members."""

    INVALID_BOUNDS = "invalid_bounds"
    """The length rule itself was configured with a negative bound."""


class Failure(BaseModel, frozen=True):
    """A single rule violation.

    Attributes:
        field: Path of the offending field relative to the validated entity,
            e.g. ``"version.replaces[1]"``. Empty for a bare primitive check.
        reason: The violated rule.
        value: The offending value rendered as text, if there was one.
        message: Human-readable description.
    """

    field: str = Field(default="", description="Dotted/indexed path of the offending field.")
    reason: FailureReason = Field(description="The violated rule.")
    value: Optional[str] = Field(default=None, description="Offending value, if any.")
    message: str = Field(description="Human-readable description of the violation.")

    def __str__(self) -> str:
        if self.field:
            return f"{self.field}: {self.message}"
        return self.message


class SpecValidationError(ValueError):
    """Raised when a module, version or dependency is not well-formed."""

    def __init__(self, failure: Failure):
        super().__init__(str(failure))
        self.failure = failure

    @classmethod
    def build(cls, reason: FailureReason, message: str, value: Optional[object] = None) -> "SpecValidationError":
        """Create an error for a primitive check, without a field path."""
        rendered = None if value is None else str(value)
        return cls(Failure(reason=reason, value=rendered, message=message))

    @property
    def field(self) -> str:
        return self.failure.field

    @property
    def reason(self) -> FailureReason:
        return self.failure.reason

    def with_field(self, field: str) -> "SpecValidationError":
        """Return a copy of this error that names ``field`` as the offender."""
        return SpecValidationError(self.failure.model_copy(update={"field": field}))

    def with_prefix(self, prefix: str) -> "SpecValidationError":
        """Return a copy whose field path is nested under ``prefix``."""
        if not self.failure.field:
            return self.with_field(prefix)
        if self.failure.field.startswith("["):
            return self.with_field(f"{prefix}{self.failure.field}")
        return self.with_field(f"{prefix}.{self.failure.field}")
