"""Validator — walk a record's fields and collect rule failures.

For each field in declaration order:

1. no rule            -> skipped, nothing recorded
2. private field      -> FieldNotAccessibleError, rule never parsed
3. unparseable rule   -> the parser's InvalidSyntaxError
4. evaluation failure -> the evaluator's FieldError

Per-field failures never stop the walk. Only a non-record input aborts
the call, with :class:`NotAStructError`, before any field is read.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from tagval.config.settings import ValidatorSettings
from tagval.domain.errors import (
    FieldError,
    FieldNotAccessibleError,
    InvalidSyntaxError,
    NotAStructError,
)
from tagval.domain.evaluate import evaluate
from tagval.domain.fields import FieldSpec, is_record, record_fields
from tagval.domain.rules import parse_rule
from tagval.services.result import ValidationReport

logger = logging.getLogger(__name__)


class Validator:
    """Validates records against the rule annotations on their fields.

    Holds only frozen settings, so one instance can be shared freely.

    Usage::

        @dataclass
        class User:
            name: str = field(metadata={"validate": "min:3"})

        report = Validator().validate(User(name="al"))
        report.ok  # False
    """

    def __init__(self, settings: ValidatorSettings | None = None) -> None:
        self._settings = settings or ValidatorSettings()

    @property
    def settings(self) -> ValidatorSettings:
        return self._settings

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def validate(self, record: Any) -> ValidationReport:
        """Validate every annotated field of *record*.

        Raises:
            NotAStructError: If *record* is not a dataclass or pydantic
                model instance.
        """
        if not is_record(record):
            logger.debug("Rejected non-record input of type %s", type(record).__name__)
            raise NotAStructError
        fields = record_fields(
            record,
            tag_key=self._settings.tag_key,
            private_prefix=self._settings.private_prefix,
        )
        report = self.validate_fields(fields)
        logger.debug(
            "Validated %s: %d field(s), %d failure(s)",
            type(record).__name__,
            len(fields),
            len(report),
        )
        return report

    def validate_fields(self, fields: Iterable[FieldSpec]) -> ValidationReport:
        """Validate pre-bound field descriptions, in the order given."""
        errors: list[FieldError] = []
        for spec in fields:
            error = self._check_field(spec)
            if error is not None:
                error.field = spec.name
                errors.append(error)
        return ValidationReport.from_errors(errors)

    def ensure_valid(self, record: Any) -> None:
        """Validate *record* and raise if any field failed.

        Raises:
            NotAStructError: If *record* is not a record instance.
            ValidationErrors: If at least one field failed.
        """
        self.validate(record).raise_for_errors()

    # ------------------------------------------------------------------
    # Per-field pipeline
    # ------------------------------------------------------------------

    def _check_field(self, spec: FieldSpec) -> FieldError | None:
        if not spec.rule:
            return None

        if not spec.exported:
            logger.debug("Field %s: rule on private field", spec.name)
            return FieldNotAccessibleError()

        try:
            constraint = parse_rule(spec.rule)
        except InvalidSyntaxError as exc:
            logger.debug("Field %s: cannot parse rule %r", spec.name, spec.rule)
            return exc

        error = evaluate(constraint, spec.value)
        if error is not None:
            logger.debug("Field %s: %s failed: %s", spec.name, constraint, error.message)
        return error


def validate(record: Any, *, settings: ValidatorSettings | None = None) -> ValidationReport:
    """Validate *record* with *settings* (default: read from the environment)."""
    return Validator(settings).validate(record)


def ensure_valid(record: Any, *, settings: ValidatorSettings | None = None) -> None:
    """Validate *record*, raising :class:`ValidationErrors` on any failure."""
    Validator(settings).ensure_valid(record)
