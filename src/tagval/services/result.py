"""FieldIssue and ValidationReport — the result of one validation call.

INVARIANT: The report holds exactly one entry per field that carried a
non-empty rule and failed, in field-declaration order. An empty report
means the record is valid.
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field, computed_field

from tagval.domain.errors import FieldError, ValidationErrors
from tagval.domain.types import ErrorKind


class FieldIssue(BaseModel):
    """Serializable view of one field failure."""

    model_config = {"frozen": True}

    field: str
    kind: ErrorKind
    message: str

    @classmethod
    def from_error(cls, error: FieldError) -> FieldIssue:
        return cls(field=error.field or "", kind=error.kind, message=error.message)


class ValidationReport(BaseModel):
    """Ordered per-field failures for one record.

    Attributes:
        issues: Serializable failure rows, in field order.
        errors: The underlying :class:`FieldError` objects (not serialized).
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    issues: tuple[FieldIssue, ...] = ()
    errors: tuple[FieldError, ...] = Field(default=(), exclude=True, repr=False)

    @classmethod
    def from_errors(cls, errors: Iterable[FieldError]) -> ValidationReport:
        collected = tuple(errors)
        return cls(
            issues=tuple(FieldIssue.from_error(e) for e in collected),
            errors=collected,
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ok(self) -> bool:
        return not self.issues

    @property
    def messages(self) -> list[str]:
        return [issue.message for issue in self.issues]

    def raise_for_errors(self) -> None:
        """Raise :class:`ValidationErrors` if any field failed."""
        if self.issues:
            raise ValidationErrors(self)

    def __len__(self) -> int:
        return len(self.issues)

    def __str__(self) -> str:
        return "\n".join(self.messages)
