"""The primary unit of measurement for SMuFL fonts."""

from __future__ import annotations

from dataclasses import dataclass
import math
from numbers import Real
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    return float(value)


@dataclass(frozen=True, slots=True, order=True)
class StaffSpaces:
    """A distance expressed in staff spaces.

    One staff space is the distance between two adjacent staff lines; every
    metric in a SMuFL metadata file uses this unit. Values are immutable and
    arithmetic always returns a new instance.
    """

    value: float

    def __post_init__(self) -> None:
        number = _as_number(self.value)
        if number is None:
            raise ValueError(f"staff spaces must be a real number, got {self.value!r}")
        if not math.isfinite(number):
            raise ValueError(f"staff spaces must be finite, got {number!r}")
        object.__setattr__(self, "value", number)

    @classmethod
    def zero(cls) -> StaffSpaces:
        return cls(0.0)

    def __float__(self) -> float:
        return self.value

    def __repr__(self) -> str:
        return f"StaffSpaces({self.value!r})"

    def __add__(self, other: object) -> StaffSpaces:
        if isinstance(other, StaffSpaces):
            return StaffSpaces(self.value + other.value)
        return NotImplemented

    def __radd__(self, other: object) -> StaffSpaces:
        # sum() starts from the integer 0.
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> StaffSpaces:
        if isinstance(other, StaffSpaces):
            return StaffSpaces(self.value - other.value)
        return NotImplemented

    def __mul__(self, other: object) -> StaffSpaces:
        if isinstance(other, StaffSpaces):
            return StaffSpaces(self.value * other.value)
        number = _as_number(other)
        if number is None:
            return NotImplemented
        return StaffSpaces(self.value * number)

    def __rmul__(self, other: object) -> StaffSpaces:
        number = _as_number(other)
        if number is None:
            return NotImplemented
        return StaffSpaces(number * self.value)

    def __truediv__(self, other: object) -> StaffSpaces:
        if isinstance(other, StaffSpaces):
            return StaffSpaces(self.value / other.value)
        number = _as_number(other)
        if number is None:
            return NotImplemented
        return StaffSpaces(self.value / number)

    def __neg__(self) -> StaffSpaces:
        return StaffSpaces(-self.value)

    def __abs__(self) -> StaffSpaces:
        return StaffSpaces(abs(self.value))

    def max(self, other: StaffSpaces) -> StaffSpaces:
        """Return the larger of ``self`` and ``other``."""
        return self if self.value >= other.value else other

    def min(self, other: StaffSpaces) -> StaffSpaces:
        """Return the smaller of ``self`` and ``other``."""
        return self if self.value <= other.value else other

    @classmethod
    def _validate(cls, value: Any) -> StaffSpaces:
        if isinstance(value, StaffSpaces):
            return value
        if _as_number(value) is None:
            raise ValueError(f"expected a number of staff spaces, got {type(value).__name__}")
        return cls(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda spaces: spaces.value
            ),
        )


__all__ = ["StaffSpaces"]
