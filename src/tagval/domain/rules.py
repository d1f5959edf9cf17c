"""Rule grammar — turn a rule annotation into a constraint descriptor.

Grammar (one constraint per field, no combinators)::

    len:<int>    -> FixedLength
    in:<a,b,...> -> MembershipSet
    min:<int>    -> Minimum
    max:<int>    -> Maximum

``<int>`` is a base-10 signed integer. The rule string is used verbatim;
no whitespace is trimmed.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from tagval.domain.constraints import Constraint, FixedLength, Maximum, MembershipSet, Minimum
from tagval.domain.errors import EmptyMembershipError, InvalidSyntaxError
from tagval.domain.types import OPTION_SEPARATOR, RULE_SEPARATOR, ConstraintKind

# ASCII digits only: int() would also accept " 5", "1_000" and non-ASCII digits.
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_int(text: str) -> int:
    """Parse *text* as a base-10 signed integer.

    Raises:
        InvalidSyntaxError: If *text* is not an optional sign followed by
            one or more ASCII digits.

    Examples:
        >>> parse_int("-12")
        -12
        >>> parse_int("+7")
        7
    """
    if _INT_PATTERN.fullmatch(text) is None:
        raise InvalidSyntaxError
    return int(text)


def _parse_length(payload: str) -> Constraint:
    return FixedLength(parse_int(payload))


def _parse_membership(payload: str) -> Constraint:
    if not payload:
        raise EmptyMembershipError
    return MembershipSet(tuple(payload.split(OPTION_SEPARATOR)))


def _parse_minimum(payload: str) -> Constraint:
    return Minimum(parse_int(payload))


def _parse_maximum(payload: str) -> Constraint:
    return Maximum(parse_int(payload))


RULE_PARSERS: dict[str, Callable[[str], Constraint]] = {
    ConstraintKind.LENGTH: _parse_length,
    ConstraintKind.MEMBERSHIP: _parse_membership,
    ConstraintKind.MINIMUM: _parse_minimum,
    ConstraintKind.MAXIMUM: _parse_maximum,
}


def split_rule(rule: str) -> tuple[str, str] | None:
    """Split *rule* into ``(prefix, payload)`` at the first separator.

    Returns None when the rule has no separator at all.

    Examples:
        >>> split_rule("in:a,b")
        ('in', 'a,b')
        >>> split_rule("min:")
        ('min', '')
        >>> split_rule("required") is None
        True
    """
    prefix, sep, payload = rule.partition(RULE_SEPARATOR)
    if not sep:
        return None
    return prefix, payload


def parse_rule(rule: str) -> Constraint:
    """Parse a rule annotation into exactly one constraint descriptor.

    Raises:
        InvalidSyntaxError: Unknown prefix, missing separator, or a
            numeric argument that is not an integer.
        EmptyMembershipError: An ``in:`` rule with an empty option list.
    """
    parts = split_rule(rule)
    if parts is None:
        raise InvalidSyntaxError
    prefix, payload = parts
    parser = RULE_PARSERS.get(prefix)
    if parser is None:
        raise InvalidSyntaxError
    return parser(payload)
