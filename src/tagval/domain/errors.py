"""Error taxonomy for record validation.

Only :class:`NotAStructError` aborts a validation call. Every
:class:`FieldError` subclass is recorded against the field that produced
it and validation continues with the next field.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, ClassVar

from tagval.domain.types import ErrorKind

if TYPE_CHECKING:
    from tagval.services.result import ValidationReport

NOT_A_STRUCT_MESSAGE = "wrong argument given, should be a struct"
INVALID_SYNTAX_MESSAGE = "invalid validator syntax"
NOT_ACCESSIBLE_MESSAGE = "validation for unexported field is not allowed"
EMPTY_MEMBERSHIP_MESSAGE = "empty in"


class TagvalError(Exception):
    """Base class for every error raised or reported by tagval."""


class NotAStructError(TagvalError, TypeError):
    """The validated value is not a record instance."""

    kind: ClassVar[ErrorKind] = ErrorKind.NOT_A_STRUCT

    def __init__(self, message: str = NOT_A_STRUCT_MESSAGE) -> None:
        super().__init__(message)


class FieldError(TagvalError):
    """A failure attributed to a single field.

    Attributes:
        message: Human-readable description, used verbatim when rendering.
        field: Name of the offending field, or None before attribution.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.CONSTRAINT_VIOLATED

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, field={self.field!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldError):
            return NotImplemented
        return (self.kind, self.message, self.field) == (other.kind, other.message, other.field)

    def __hash__(self) -> int:
        # ``field`` is set after construction; keep it out of the hash.
        return hash((self.kind, self.message))


class FieldNotAccessibleError(FieldError):
    """A rule is attached to a private field."""

    kind = ErrorKind.NOT_ACCESSIBLE

    def __init__(self, message: str = NOT_ACCESSIBLE_MESSAGE, *, field: str | None = None) -> None:
        super().__init__(message, field=field)


class InvalidSyntaxError(FieldError):
    """The rule string (or a membership token) cannot be interpreted."""

    kind = ErrorKind.INVALID_SYNTAX

    def __init__(self, message: str = INVALID_SYNTAX_MESSAGE, *, field: str | None = None) -> None:
        super().__init__(message, field=field)


class EmptyMembershipError(InvalidSyntaxError):
    """An ``in:`` rule with nothing after the separator."""

    def __init__(self, message: str = EMPTY_MEMBERSHIP_MESSAGE, *, field: str | None = None) -> None:
        super().__init__(message, field=field)


class UnsupportedTypeError(FieldError):
    """A recognised constraint was applied to a type it cannot check."""

    kind = ErrorKind.UNSUPPORTED_TYPE


class ConstraintViolatedError(FieldError):
    """The value was checked and failed the constraint."""

    kind = ErrorKind.CONSTRAINT_VIOLATED


class ValidationErrors(TagvalError):
    """Composite error raised when a report contains at least one failure.

    Renders as the failure messages joined by newlines, in field order.
    """

    def __init__(self, report: ValidationReport) -> None:
        self.report = report
        super().__init__(str(report))

    @property
    def errors(self) -> tuple[FieldError, ...]:
        return self.report.errors

    def __str__(self) -> str:
        return str(self.report)

    def __iter__(self) -> Iterator[FieldError]:
        return iter(self.report.errors)

    def __len__(self) -> int:
        return len(self.report.errors)
