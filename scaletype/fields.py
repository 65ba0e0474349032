"""Fields of struct-like types, named or unnamed."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class Field:
    """A field of a struct, tuple struct or enum variant.

    ``ty`` refers to the field's type; ``name`` is None for unnamed fields and
    ``type_name`` is the type as written in source, for information only.
    """

    ty: Any
    name: str | None = None
    type_name: str | None = None
    docs: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "docs", tuple(self.docs))

    def to_json(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.name is not None:
            result["name"] = self.name
        result["type"] = self.ty
        if self.type_name is not None:
            result["typeName"] = self.type_name
        if self.docs:
            result["docs"] = list(self.docs)
        return result

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Field:
        if not isinstance(data, Mapping):
            raise ValueError("a field must be a JSON object")
        if "type" not in data:
            raise ValueError("a field needs a 'type' entry")
        return cls(
            ty=data["type"],
            name=data.get("name"),
            type_name=data.get("typeName"),
            docs=tuple(data.get("docs", ())),
        )