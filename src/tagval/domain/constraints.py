"""Parsed constraint descriptors.

One frozen dataclass per rule form. A descriptor is produced fresh for
every field inspection and compared by value only.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, TypeAlias

from tagval.domain.types import OPTION_SEPARATOR, ConstraintKind


@dataclass(frozen=True)
class FixedLength:
    """``len:<n>`` — text must be exactly *n* characters long."""

    n: int

    kind: ClassVar[ConstraintKind] = ConstraintKind.LENGTH

    def __str__(self) -> str:
        return f"{self.kind}:{self.n}"


@dataclass(frozen=True)
class MembershipSet:
    """``in:<a,b,c>`` — value must equal one of the raw option tokens.

    Tokens stay strings; integer fields reinterpret them at evaluation time.
    """

    options: tuple[str, ...]

    kind: ClassVar[ConstraintKind] = ConstraintKind.MEMBERSHIP

    def __str__(self) -> str:
        return f"{self.kind}:{OPTION_SEPARATOR.join(self.options)}"


@dataclass(frozen=True)
class Minimum:
    """``min:<n>`` — text length or integer value must be at least *n*."""

    n: int

    kind: ClassVar[ConstraintKind] = ConstraintKind.MINIMUM

    def __str__(self) -> str:
        return f"{self.kind}:{self.n}"


@dataclass(frozen=True)
class Maximum:
    """``max:<n>`` — text length or integer value must be at most *n*."""

    n: int

    kind: ClassVar[ConstraintKind] = ConstraintKind.MAXIMUM

    def __str__(self) -> str:
        return f"{self.kind}:{self.n}"


Constraint: TypeAlias = FixedLength | MembershipSet | Minimum | Maximum
