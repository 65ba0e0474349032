"""Composite types: structs, tuple structs and unit structs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .fields import Field


@dataclass(frozen=True)
class TypeDefComposite:
    """A composite type made of named (struct) or unnamed (tuple struct) fields.

    A unit struct has no fields at all.
    """

    fields: tuple[Field, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))

    def to_json(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.fields:
            result["fields"] = [field.to_json() for field in self.fields]
        return result

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> TypeDefComposite:
        if not isinstance(data, Mapping):
            raise ValueError("a composite definition must be a JSON object")
        raw_fields = data.get("fields", [])
        if not isinstance(raw_fields, list):
            raise ValueError("composite 'fields' must be a list")
        return cls(tuple(Field.from_json(item) for item in raw_fields))