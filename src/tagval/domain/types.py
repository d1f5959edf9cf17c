"""Constraint and error classification enums."""

from __future__ import annotations

from enum import StrEnum


class ConstraintKind(StrEnum):
    """Rule prefixes recognised by the parser (the text before ``:``)."""

    LENGTH = "len"
    MEMBERSHIP = "in"
    MINIMUM = "min"
    MAXIMUM = "max"


class ErrorKind(StrEnum):
    """Classification of a validation failure."""

    NOT_A_STRUCT = "not_a_struct"
    NOT_ACCESSIBLE = "not_accessible"
    INVALID_SYNTAX = "invalid_syntax"
    UNSUPPORTED_TYPE = "unsupported_type"
    CONSTRAINT_VIOLATED = "constraint_violated"


# Separator between a rule prefix and its payload.
RULE_SEPARATOR = ":"

# Separator between membership options.
OPTION_SEPARATOR = ","
