"""Shared field rules.

The primitives in this module are pure predicates over plain ASCII text.
Each returns ``None`` when the value satisfies it and raises
:class:`~modspec.errors.SpecValidationError` otherwise. The character-class
primitives treat the empty string as valid; absence is the length rule's
concern.

:class:`FieldRule` strings the primitives together in a fixed order
(length, character class, first character, last character) so that every
identifier kind is a configuration of the same pipeline rather than its own
function.
"""

import string
from enum import Enum

from pydantic import BaseModel, Field

from modspec.errors import FailureReason, SpecValidationError

LOWERCASE_ALPHABETIC = frozenset(string.ascii_lowercase)
LOWERCASE_ALPHANUMERIC = LOWERCASE_ALPHABETIC | frozenset(string.digits)
LOWERCASE_ALPHANUMERIC_DASH_DOT = LOWERCASE_ALPHANUMERIC | frozenset("-.")


def must_have_min_max_length(value: str, min_len: int, max_len: int) -> None:
    """Check that ``value`` is between ``min_len`` and ``max_len`` bytes long.

    Length is the size of the UTF-8 encoding, so a non-ASCII character
    counts for more than one. A negative bound is a configuration error and
    fails for every value, including the empty string.
    """
    if min_len < 0 or max_len < 0:
        raise SpecValidationError.build(
            FailureReason.INVALID_BOUNDS,
            f"length bounds must not be negative (min={min_len}, max={max_len})",
        )
    length = len(value.encode("utf-8"))
    if length < min_len:
        raise SpecValidationError.build(
            FailureReason.TOO_SHORT,
            f"must be at least {min_len} bytes long, got {length}",
            value,
        )
    if length > max_len:
        raise SpecValidationError.build(
            FailureReason.TOO_LONG,
            f"must be at most {max_len} bytes long, got {length}",
            value,
        )


def must_be_lowercase_alphanumeric_dash_dot(value: str) -> None:
    for position, char in enumerate(value):
        if char not in LOWERCASE_ALPHANUMERIC_DASH_DOT:
            raise SpecValidationError.build(
                FailureReason.INVALID_CHARACTER,
                f"invalid character {char!r} at position {position}; "
                "only lowercase letters, digits, '-' and '.' are allowed",
                value,
            )


def must_start_with_lowercase_alphabetic_character(value: str) -> None:
    if value and value[0] not in LOWERCASE_ALPHABETIC:
        raise SpecValidationError.build(
            FailureReason.INVALID_START,
            f"must start with a lowercase letter, got {value[0]!r}",
            value,
        )


def must_start_with_lowercase_alphanumeric_character(value: str) -> None:
    if value and value[0] not in LOWERCASE_ALPHANUMERIC:
        raise SpecValidationError.build(
            FailureReason.INVALID_START,
            f"must start with a lowercase letter or digit, got {value[0]!r}",
            value,
        )


def must_end_with_lowercase_alphanumeric_character(value: str) -> None:
    if value and value[-1] not in LOWERCASE_ALPHANUMERIC:
        raise SpecValidationError.build(
            FailureReason.INVALID_END,
            f"must end with a lowercase letter or digit, got {value[-1]!r}",
            value,
        )


class StartRule(str, Enum):
    """Constraint on the first character of a field."""

    ANY = "any"
    LOWERCASE_ALPHABETIC = "lowercase_alphabetic"
    LOWERCASE_ALPHANUMERIC = "lowercase_alphanumeric"


class FieldRule(BaseModel, frozen=True):
    """A fixed pipeline of primitives applied to one kind of field.

    Stages run in order and the first violated one is raised:

    1. length within ``[min_length, max_length]``
    2. every character in ``[a-z0-9-.]`` (if ``charset_restricted``)
    3. first character per ``start``
    4. last character in ``[a-z0-9]`` (if ``require_alphanumeric_end``)

    Bounds are not range-checked on construction; a negative bound is
    reported as ``INVALID_BOUNDS`` when the rule is applied.

    Example:
        ```python
        label = FieldRule(max_length=20, start=StartRule.LOWERCASE_ALPHANUMERIC)
        label.check("2021-08-30")
        ```
    """

    min_length: int = Field(default=1, description="Minimum length in UTF-8 bytes.")
    max_length: int = Field(default=63, description="Maximum length in UTF-8 bytes.")
    charset_restricted: bool = Field(
        default=True,
        description="Whether only lowercase letters, digits, dash and dot are allowed.",
    )
    start: StartRule = Field(
        default=StartRule.LOWERCASE_ALPHABETIC,
        description="Constraint on the first character.",
    )
    require_alphanumeric_end: bool = Field(
        default=True,
        description="Whether the last character must be a lowercase letter or digit.",
    )

    def check(self, value: str) -> None:
        """Apply the pipeline to ``value``, raising on the first violation."""
        must_have_min_max_length(value, self.min_length, self.max_length)
        if self.charset_restricted:
            must_be_lowercase_alphanumeric_dash_dot(value)
        if self.start is StartRule.LOWERCASE_ALPHABETIC:
            must_start_with_lowercase_alphabetic_character(value)
        elif self.start is StartRule.LOWERCASE_ALPHANUMERIC:
            must_start_with_lowercase_alphanumeric_character(value)
        if self.require_alphanumeric_end:
            must_end_with_lowercase_alphanumeric_character(value)


IDENTIFIER_RULE = FieldRule()
"""Namespace, name, type, schema and annotation keys."""

VERSION_NAME_RULE = FieldRule(start=StartRule.LOWERCASE_ALPHANUMERIC)
"""Version names: like identifiers, but a leading digit is allowed."""

ANNOTATION_VALUE_RULE = FieldRule(
    min_length=0,
    max_length=253,
    charset_restricted=False,
    start=StartRule.ANY,
    require_alphanumeric_end=False,
)
