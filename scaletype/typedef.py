"""Type descriptions: the type definition kinds and the full Type record."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Union

from .composite import TypeDefComposite
from .path import Path
from .variant import TypeDefVariant

_MAX_ARRAY_LEN = 2**32 - 1


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be a JSON object")
    return data


def _require_key(data: Mapping[str, Any], key: str, what: str) -> Any:
    if key not in data:
        raise ValueError(f"{what} needs a '{key}' entry")
    return data[key]


class TypeDefPrimitive(Enum):
    """A primitive type, serialized by its lower-case name."""

    BOOL = "bool"
    CHAR = "char"
    STR = "str"
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    U128 = "u128"
    U256 = "u256"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    I128 = "i128"
    I256 = "i256"

    @property
    def index(self) -> int:
        """The fixed encoding index of this primitive."""
        return list(type(self)).index(self)

    def to_json(self) -> str:
        return self.value

    @classmethod
    def from_json(cls, data: Any) -> TypeDefPrimitive:
        try:
            return cls(data)
        except ValueError:
            raise ValueError(f"unknown primitive type {data!r}") from None


@dataclass(frozen=True)
class TypeDefArray:
    """An array with a length known up front."""

    len: int
    type_param: Any

    def __post_init__(self) -> None:
        if isinstance(self.len, bool) or not isinstance(self.len, int):
            raise TypeError("an array length must be an integer")
        if not 0 <= self.len <= _MAX_ARRAY_LEN:
            raise ValueError(f"array length {self.len} does not fit in 32 bits")

    def to_json(self) -> dict[str, Any]:
        return {"len": self.len, "type": self.type_param}

    @classmethod
    def from_json(cls, data: Any) -> TypeDefArray:
        data = _require_mapping(data, "an array definition")
        return cls(
            len=_require_key(data, "len", "an array definition"),
            type_param=_require_key(data, "type", "an array definition"),
        )


@dataclass(frozen=True)
class TypeDefTuple:
    """A tuple type, described by the types of its elements."""

    fields: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))

    @classmethod
    def unit(cls) -> TypeDefTuple:
        """The unit tuple, with no elements."""
        return cls(())

    def to_json(self) -> list[Any]:
        return list(self.fields)

    @classmethod
    def from_json(cls, data: Any) -> TypeDefTuple:
        if not isinstance(data, list):
            raise ValueError("a tuple definition must be a list")
        return cls(tuple(data))


@dataclass(frozen=True)
class TypeDefSequence:
    """A sequence of elements of one type, length known only at run time."""

    type_param: Any

    def to_json(self) -> dict[str, Any]:
        return {"type": self.type_param}

    @classmethod
    def from_json(cls, data: Any) -> TypeDefSequence:
        data = _require_mapping(data, "a sequence definition")
        return cls(_require_key(data, "type", "a sequence definition"))


@dataclass(frozen=True)
class TypeDefCompact:
    """A type using the compact encoding."""

    type_param: Any

    def to_json(self) -> dict[str, Any]:
        return {"type": self.type_param}

    @classmethod
    def from_json(cls, data: Any) -> TypeDefCompact:
        data = _require_mapping(data, "a compact definition")
        return cls(_require_key(data, "type", "a compact definition"))


@dataclass(frozen=True)
class TypeDefBitSequence:
    """A sequence of bits, with its storage and bit-order types."""

    bit_store_type: Any
    bit_order_type: Any

    def to_json(self) -> dict[str, Any]:
        return {
            "bit_store_type": self.bit_store_type,
            "bit_order_type": self.bit_order_type,
        }

    @classmethod
    def from_json(cls, data: Any) -> TypeDefBitSequence:
        data = _require_mapping(data, "a bit sequence definition")
        return cls(
            bit_store_type=_require_key(
                data, "bit_store_type", "a bit sequence definition"
            ),
            bit_order_type=_require_key(
                data, "bit_order_type", "a bit sequence definition"
            ),
        )


TypeDef = Union[
    TypeDefComposite,
    TypeDefVariant,
    TypeDefSequence,
    TypeDefArray,
    TypeDefTuple,
    TypeDefPrimitive,
    TypeDefCompact,
    TypeDefBitSequence,
]

# Kind names in their fixed encoding order.
_KINDS: dict[str, type] = {
    "composite": TypeDefComposite,
    "variant": TypeDefVariant,
    "sequence": TypeDefSequence,
    "array": TypeDefArray,
    "tuple": TypeDefTuple,
    "primitive": TypeDefPrimitive,
    "compact": TypeDefCompact,
    "bitsequence": TypeDefBitSequence,
}
_KIND_OF = {kind_cls: name for name, kind_cls in _KINDS.items()}


def typedef_to_json(type_def: TypeDef) -> dict[str, Any]:
    """Serialize a type definition as a one-entry object keyed by its kind."""
    try:
        kind = _KIND_OF[type(type_def)]
    except KeyError:
        raise TypeError(
            f"{type(type_def).__name__} is not a type definition"
        ) from None
    return {kind: type_def.to_json()}


def typedef_from_json(data: Any) -> TypeDef:
    """Read a type definition from a one-entry object keyed by its kind."""
    data = _require_mapping(data, "a type definition")
    if len(data) != 1:
        raise ValueError("a type definition must have exactly one kind entry")
    (kind, body), = data.items()
    try:
        kind_cls = _KINDS[kind]
    except KeyError:
        raise ValueError(f"unknown type definition kind {kind!r}") from None
    return kind_cls.from_json(body)


@dataclass(frozen=True)
class TypeParameter:
    """A generic type parameter; ``ty`` is None when the parameter is skipped."""

    name: str
    ty: Any = None

    def to_json(self) -> dict[str, Any]:
        return {"name": self.name, "type": self.ty}

    @classmethod
    def from_json(cls, data: Any) -> TypeParameter:
        data = _require_mapping(data, "a type parameter")
        return cls(
            name=_require_key(data, "name", "a type parameter"),
            ty=data.get("type"),
        )


@dataclass(frozen=True)
class Type:
    """A type definition together with its path, parameters and docs."""

    type_def: TypeDef
    path: Path = Path()
    type_params: tuple[TypeParameter, ...] = ()
    docs: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "type_params", tuple(self.type_params))
        object.__setattr__(self, "docs", tuple(self.docs))

    def to_json(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if not self.path.is_empty():
            result["path"] = self.path.to_json()
        if self.type_params:
            result["params"] = [param.to_json() for param in self.type_params]
        result["def"] = typedef_to_json(self.type_def)
        if self.docs:
            result["docs"] = list(self.docs)
        return result

    @classmethod
    def from_json(cls, data: Any) -> Type:
        data = _require_mapping(data, "a type")
        raw_params = data.get("params", [])
        if not isinstance(raw_params, list):
            raise ValueError("type 'params' must be a list")
        raw_docs = data.get("docs", [])
        if not isinstance(raw_docs, list):
            raise ValueError("type 'docs' must be a list")
        return cls(
            type_def=typedef_from_json(_require_key(data, "def", "a type")),
            path=Path.from_json(data.get("path", [])),
            type_params=tuple(TypeParameter.from_json(p) for p in raw_params),
            docs=tuple(raw_docs),
        )