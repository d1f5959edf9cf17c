"""Record binding — expose a record's fields as :class:`FieldSpec` rows.

Two record shapes are recognised, both as *instances*:

- dataclasses, with rules in ``field(metadata={"validate": "..."})``;
  pydantic dataclasses may also use ``Field(json_schema_extra=...)``
- pydantic models, with rules in ``Field(json_schema_extra={"validate": "..."})``

Everything else (classes, mappings, sequences, scalars) is not a record.
Field order is declaration order, inherited fields first.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel
from pydantic.fields import FieldInfo

DEFAULT_TAG_KEY = "validate"
DEFAULT_PRIVATE_PREFIX = "_"


@dataclass(frozen=True)
class FieldSpec:
    """Everything the validator needs to know about one field."""

    name: str
    rule: str  # empty when the field carries no rule
    exported: bool
    value: Any = None


def is_record(value: Any) -> bool:
    """Return True if *value* is a dataclass or pydantic model instance."""
    if isinstance(value, type):
        return False
    return isinstance(value, BaseModel) or dataclasses.is_dataclass(value)


def is_exported(name: str, private_prefix: str = DEFAULT_PRIVATE_PREFIX) -> bool:
    """Public-field check: names starting with *private_prefix* are private."""
    if not private_prefix:
        return True
    return not name.startswith(private_prefix)


def _coerce_rule(raw: Any) -> str:
    if raw is None:
        return ""
    return raw if isinstance(raw, str) else str(raw)


def _pydantic_rule(info: FieldInfo, tag_key: str) -> str:
    extra = info.json_schema_extra
    if not isinstance(extra, Mapping):
        return ""
    return _coerce_rule(extra.get(tag_key))


def _iter_dataclass(record: Any, tag_key: str, private_prefix: str) -> Iterator[FieldSpec]:
    # pydantic dataclasses keep Field(...) options here, not in field metadata.
    pydantic_fields: Mapping[str, FieldInfo] = getattr(type(record), "__pydantic_fields__", {})
    for f in dataclasses.fields(record):
        rule = _coerce_rule(f.metadata.get(tag_key))
        if not rule and f.name in pydantic_fields:
            rule = _pydantic_rule(pydantic_fields[f.name], tag_key)
        yield FieldSpec(
            name=f.name,
            rule=rule,
            exported=is_exported(f.name, private_prefix),
            # init=False fields without a default may never have been set.
            value=getattr(record, f.name, None),
        )


def _iter_pydantic(record: BaseModel, tag_key: str, private_prefix: str) -> Iterator[FieldSpec]:
    for name, info in type(record).model_fields.items():
        yield FieldSpec(
            name=name,
            rule=_pydantic_rule(info, tag_key),
            exported=is_exported(name, private_prefix),
            value=getattr(record, name, None),
        )


def record_fields(
    record: Any,
    *,
    tag_key: str = DEFAULT_TAG_KEY,
    private_prefix: str = DEFAULT_PRIVATE_PREFIX,
) -> list[FieldSpec]:
    """Return one :class:`FieldSpec` per declared field of *record*.

    Raises:
        TypeError: If *record* is not a record instance (see :func:`is_record`).
    """
    if isinstance(record, BaseModel):
        return list(_iter_pydantic(record, tag_key, private_prefix))
    if is_record(record):
        return list(_iter_dataclass(record, tag_key, private_prefix))
    msg = f"Expected a dataclass or pydantic model instance, got {type(record).__name__}"
    raise TypeError(msg)
