"""Variant types: enums made of named variants."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .fields import Field

_MAX_INDEX = 255


@dataclass(frozen=True)
class Variant:
    """One variant of an enum, with its fields and encoding index.

    The index is the explicit codec index if one was given, otherwise the
    position of the variant in its enum; it must fit in one byte.
    """

    name: str
    fields: tuple[Field, ...] = ()
    index: int = 0
    docs: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))
        object.__setattr__(self, "docs", tuple(self.docs))
        if isinstance(self.index, bool) or not isinstance(self.index, int):
            raise TypeError("a variant index must be an integer")
        if not 0 <= self.index <= _MAX_INDEX:
            raise ValueError(
                f"variant index {self.index} is outside 0..{_MAX_INDEX}"
            )

    def to_json(self) -> dict[str, Any]:
        result: dict[str, Any] = {"name": self.name}
        if self.fields:
            result["fields"] = [field.to_json() for field in self.fields]
        result["index"] = self.index
        if self.docs:
            result["docs"] = list(self.docs)
        return result

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Variant:
        if not isinstance(data, Mapping):
            raise ValueError("a variant must be a JSON object")
        for key in ("name", "index"):
            if key not in data:
                raise ValueError(f"a variant needs a '{key}' entry")
        raw_fields = data.get("fields", [])
        if not isinstance(raw_fields, list):
            raise ValueError("variant 'fields' must be a list")
        return cls(
            name=data["name"],
            fields=tuple(Field.from_json(item) for item in raw_fields),
            index=data["index"],
            docs=tuple(data.get("docs", ())),
        )


@dataclass(frozen=True)
class TypeDefVariant:
    """An enum type, described by its variants in declaration order."""

    variants: tuple[Variant, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "variants", tuple(self.variants))

    def to_json(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.variants:
            result["variants"] = [variant.to_json() for variant in self.variants]
        return result

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> TypeDefVariant:
        if not isinstance(data, Mapping):
            raise ValueError("a variant definition must be a JSON object")
        raw_variants = data.get("variants", [])
        if not isinstance(raw_variants, list):
            raise ValueError("'variants' must be a list")
        return cls(tuple(Variant.from_json(item) for item in raw_variants))