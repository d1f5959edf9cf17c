"""Constraint evaluation — check one descriptor against one field value.

Evaluators never raise for a failed check. They return ``None`` when the
value passes and a :class:`FieldError` instance describing the failure
otherwise, so callers can keep collecting outcomes for later fields.

Only text (``str``) and integer (``int``, excluding ``bool``) values are
supported. Any other runtime type is an unsupported-type failure.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from tagval.domain.constraints import Constraint, FixedLength, Maximum, MembershipSet, Minimum
from tagval.domain.errors import (
    ConstraintViolatedError,
    FieldError,
    InvalidSyntaxError,
    UnsupportedTypeError,
)
from tagval.domain.rules import parse_int
from tagval.domain.types import ConstraintKind

EvaluatorFn = Callable[[Any, Any], FieldError | None]


def is_text(value: Any) -> bool:
    return isinstance(value, str)


def is_integer(value: Any) -> bool:
    # bool subclasses int but is never treated as a number here.
    return isinstance(value, int) and not isinstance(value, bool)


def type_name(value: Any) -> str:
    """Runtime type name used in unsupported-type messages."""
    return type(value).__name__


def _unsupported(label: str, value: Any) -> UnsupportedTypeError:
    return UnsupportedTypeError(f"{label} validation not supported for {type_name(value)}")


def evaluate_length(constraint: FixedLength, value: Any) -> FieldError | None:
    if not is_text(value):
        return _unsupported("length", value)
    if len(value) != constraint.n:
        return ConstraintViolatedError(f"string length must be {constraint.n}")
    return None


def evaluate_membership(constraint: MembershipSet, value: Any) -> FieldError | None:
    """Check *value* against the option tokens.

    Text values match tokens exactly. For integer values every token is
    parsed first; a non-numeric token is a syntax error even if another
    token would have matched.
    """
    options = constraint.options
    if is_text(value):
        allowed: tuple[Any, ...] = options
    elif is_integer(value):
        try:
            allowed = tuple(parse_int(opt) for opt in options)
        except InvalidSyntaxError as exc:
            return exc
    else:
        return _unsupported("in", value)

    if value in allowed:
        return None
    return ConstraintViolatedError(f"value must be one of {', '.join(options)}")


def evaluate_minimum(constraint: Minimum, value: Any) -> FieldError | None:
    if is_text(value):
        if len(value) < constraint.n:
            return ConstraintViolatedError(f"string length must be at least {constraint.n}")
        return None
    if is_integer(value):
        if value < constraint.n:
            return ConstraintViolatedError(
                f"value must be greater than or equal to {constraint.n}"
            )
        return None
    return _unsupported("minimum", value)


def evaluate_maximum(constraint: Maximum, value: Any) -> FieldError | None:
    if is_text(value):
        if len(value) > constraint.n:
            return ConstraintViolatedError(f"string length must be at most {constraint.n}")
        return None
    if is_integer(value):
        if value > constraint.n:
            return ConstraintViolatedError(f"value must be less than or equal to {constraint.n}")
        return None
    return _unsupported("maximum", value)


EVALUATORS: dict[str, EvaluatorFn] = {
    ConstraintKind.LENGTH: evaluate_length,
    ConstraintKind.MEMBERSHIP: evaluate_membership,
    ConstraintKind.MINIMUM: evaluate_minimum,
    ConstraintKind.MAXIMUM: evaluate_maximum,
}


def evaluate(constraint: Constraint, value: Any) -> FieldError | None:
    """Evaluate *constraint* against *value*.

    Returns:
        None if the value satisfies the constraint, otherwise the
        (unattributed) failure.
    """
    return EVALUATORS[constraint.kind](constraint, value)
