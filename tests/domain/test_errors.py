"""Tests for the error taxonomy."""

from __future__ import annotations

import pytest

from tagval.domain.errors import (
    NOT_A_STRUCT_MESSAGE,
    NOT_ACCESSIBLE_MESSAGE,
    ConstraintViolatedError,
    EmptyMembershipError,
    FieldError,
    FieldNotAccessibleError,
    InvalidSyntaxError,
    NotAStructError,
    TagvalError,
    UnsupportedTypeError,
)
from tagval.domain.types import ErrorKind

KIND_CASES = [
    (FieldNotAccessibleError, ErrorKind.NOT_ACCESSIBLE),
    (InvalidSyntaxError, ErrorKind.INVALID_SYNTAX),
    (EmptyMembershipError, ErrorKind.INVALID_SYNTAX),
    (UnsupportedTypeError, ErrorKind.UNSUPPORTED_TYPE),
    (ConstraintViolatedError, ErrorKind.CONSTRAINT_VIOLATED),
]


@pytest.mark.parametrize(
    "error_cls,kind",
    KIND_CASES,
    ids=[cls.__name__ for cls, _ in KIND_CASES],
)
def test_field_error_kinds(error_cls: type[FieldError], kind: ErrorKind) -> None:
    assert issubclass(error_cls, FieldError)
    assert issubclass(error_cls, TagvalError)
    assert error_cls.kind == kind


class TestNotAStructError:
    def test_default_message(self) -> None:
        assert str(NotAStructError()) == NOT_A_STRUCT_MESSAGE

    def test_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            raise NotAStructError

    def test_is_not_a_field_error(self) -> None:
        assert not issubclass(NotAStructError, FieldError)


class TestFieldError:
    def test_str_is_message_only(self) -> None:
        error = ConstraintViolatedError("value must be one of a, b", field="color")
        assert str(error) == "value must be one of a, b"
        assert error.field == "color"

    def test_default_messages(self) -> None:
        assert FieldNotAccessibleError().message == NOT_ACCESSIBLE_MESSAGE

    def test_equality_by_kind_message_and_field(self) -> None:
        a = UnsupportedTypeError("x", field="f")
        assert a == UnsupportedTypeError("x", field="f")
        assert a != UnsupportedTypeError("x", field="g")
        assert a != ConstraintViolatedError("x", field="f")
        assert hash(a) == hash(UnsupportedTypeError("x", field="f"))

    def test_hash_stable_when_field_assigned(self) -> None:
        error = ConstraintViolatedError("too short")
        before = hash(error)
        seen = {error}

        error.field = "name"

        assert hash(error) == before
        assert error in seen

    def test_repr_names_class_and_field(self) -> None:
        assert repr(InvalidSyntaxError(field="age")) == (
            "InvalidSyntaxError('invalid validator syntax', field='age')"
        )
