"""Cartesian coordinates measured in staff spaces."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from smufl.staff_spaces import StaffSpaces


@dataclass(frozen=True, slots=True)
class Coord:
    """X, Y coordinates in staff spaces, relative to a glyph origin.

    Metadata files encode coordinates as two-element arrays ``[x, y]``.
    """

    x: StaffSpaces
    y: StaffSpaces

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", StaffSpaces._validate(self.x))
        object.__setattr__(self, "y", StaffSpaces._validate(self.y))

    def __iter__(self) -> Iterator[StaffSpaces]:
        yield self.x
        yield self.y

    def to_list(self) -> list[float]:
        return [self.x.value, self.y.value]

    @classmethod
    def _validate(cls, value: Any) -> Coord:
        if isinstance(value, Coord):
            return value
        if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
            raise ValueError(f"expected an [x, y] array, got {type(value).__name__}")
        if len(value) != 2:
            raise ValueError(f"expected an [x, y] array, got {len(value)} elements")
        return cls(value[0], value[1])

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(Coord.to_list),
        )


__all__ = ["Coord"]
