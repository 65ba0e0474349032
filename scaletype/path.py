"""Paths naming type definitions, made of identifier segments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from .utils import is_rust_identifier


class PathError(ValueError):
    """Raised when a path cannot be built from the given segments."""


class MissingSegmentsError(PathError):
    """No segments were supplied."""

    def __init__(self) -> None:
        super().__init__("a path needs at least one segment")


class InvalidIdentifierError(PathError):
    """A segment is not a valid identifier."""

    def __init__(self, segment: int) -> None:
        super().__init__(f"segment {segment} is not a valid identifier")
        self.segment = segment


@dataclass(frozen=True)
class Path:
    """The path of a type definition; empty for built-in types."""

    segments: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "segments", tuple(self.segments))

    @classmethod
    def new(cls, ident: str, module_path: str) -> Path:
        """Build a path from a ``::``-separated module path and an identifier."""
        return cls.from_segments([*module_path.split("::"), ident])

    @classmethod
    def from_segments(cls, segments: Iterable[str]) -> Path:
        """Build a path, checking that every segment is an identifier."""
        collected = list(segments)
        if not collected:
            raise MissingSegmentsError()
        for index, segment in enumerate(collected):
            if not is_rust_identifier(segment):
                raise InvalidIdentifierError(index)
        return cls(tuple(collected))

    @classmethod
    def prelude(cls, ident: str) -> Path:
        """Build a single-segment path for a prelude type."""
        return cls.from_segments([ident])

    @classmethod
    def voldemort(cls) -> Path:
        """Return the empty path used for types that shall not be named."""
        return cls()

    def is_empty(self) -> bool:
        return not self.segments

    def ident(self) -> str | None:
        """The last segment, or None for an empty path."""
        return self.segments[-1] if self.segments else None

    def namespace(self) -> tuple[str, ...]:
        """All segments except the last."""
        return self.segments[:-1]

    def to_json(self) -> list[str]:
        return list(self.segments)

    @classmethod
    def from_json(cls, data: Any) -> Path:
        if not isinstance(data, list) or not all(isinstance(s, str) for s in data):
            raise ValueError("a path must be a list of strings")
        return cls(tuple(data))

    def __str__(self) -> str:
        return "::".join(self.segments)