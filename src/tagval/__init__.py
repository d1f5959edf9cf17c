"""tagval — validate record fields against compact rule annotations."""

from __future__ import annotations

from tagval.domain.constraints import Constraint, FixedLength, Maximum, MembershipSet, Minimum
from tagval.domain.errors import (
    ConstraintViolatedError,
    EmptyMembershipError,
    FieldError,
    FieldNotAccessibleError,
    InvalidSyntaxError,
    NotAStructError,
    TagvalError,
    UnsupportedTypeError,
    ValidationErrors,
)
from tagval.domain.evaluate import evaluate
from tagval.domain.fields import FieldSpec
from tagval.domain.rules import parse_rule
from tagval.domain.types import ConstraintKind, ErrorKind
from tagval.services.result import FieldIssue, ValidationReport
from tagval.services.validator import Validator, ensure_valid, validate

__version__ = "0.1.0"

__all__ = [
    "Constraint",
    "ConstraintKind",
    "ConstraintViolatedError",
    "EmptyMembershipError",
    "ErrorKind",
    "FieldError",
    "FieldIssue",
    "FieldNotAccessibleError",
    "FieldSpec",
    "FixedLength",
    "InvalidSyntaxError",
    "Maximum",
    "MembershipSet",
    "Minimum",
    "NotAStructError",
    "TagvalError",
    "UnsupportedTypeError",
    "ValidationErrors",
    "ValidationReport",
    "Validator",
    "__version__",
    "ensure_valid",
    "evaluate",
    "parse_rule",
    "validate",
]
