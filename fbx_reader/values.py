"""Typed property values attached to FBX nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Tuple, Union


@dataclass(frozen=True)
class Int16Value:
    type_code: ClassVar[str] = "Y"
    value: int


@dataclass(frozen=True)
class CharValue:
    type_code: ClassVar[str] = "C"
    value: str

    def as_bool(self) -> bool:
        """Exporters commonly store booleans in ``C`` properties."""
        return self.value not in ("\x00", "0", "F", "f")


@dataclass(frozen=True)
class Int32Value:
    type_code: ClassVar[str] = "I"
    value: int


@dataclass(frozen=True)
class Float32Value:
    type_code: ClassVar[str] = "F"
    value: float


@dataclass(frozen=True)
class Float64Value:
    type_code: ClassVar[str] = "D"
    value: float


@dataclass(frozen=True)
class Int64Value:
    type_code: ClassVar[str] = "L"
    value: int


@dataclass(frozen=True)
class Float32ArrayValue:
    type_code: ClassVar[str] = "f"
    value: Tuple[float, ...]


@dataclass(frozen=True)
class Float64ArrayValue:
    type_code: ClassVar[str] = "d"
    value: Tuple[float, ...]


@dataclass(frozen=True)
class Int64ArrayValue:
    type_code: ClassVar[str] = "l"
    value: Tuple[int, ...]


@dataclass(frozen=True)
class Int32ArrayValue:
    type_code: ClassVar[str] = "i"
    value: Tuple[int, ...]


@dataclass(frozen=True)
class BoolArrayValue:
    type_code: ClassVar[str] = "b"
    value: Tuple[bool, ...]


@dataclass(frozen=True)
class StringValue:
    type_code: ClassVar[str] = "S"
    value: str


@dataclass(frozen=True)
class RawValue:
    type_code: ClassVar[str] = "R"
    value: bytes


ScalarValue = Union[Int16Value, CharValue, Int32Value, Float32Value, Float64Value, Int64Value]
ArrayValue = Union[Float32ArrayValue, Float64ArrayValue, Int64ArrayValue, Int32ArrayValue, BoolArrayValue]
PropertyValue = Union[ScalarValue, ArrayValue, StringValue, RawValue]

ARRAY_TYPES = (Float32ArrayValue, Float64ArrayValue, Int64ArrayValue, Int32ArrayValue, BoolArrayValue)


def is_array(value: PropertyValue) -> bool:
    return isinstance(value, ARRAY_TYPES)
