"""Property record decoding."""

from __future__ import annotations

from typing import Callable, Dict

from . import compressed
from .cursor import ByteCursor
from .exceptions import MalformedPropertyError
from .strictness import ErrorLevel
from ..values import (
    BoolArrayValue,
    CharValue,
    Float32ArrayValue,
    Float32Value,
    Float64ArrayValue,
    Float64Value,
    Int16Value,
    Int32ArrayValue,
    Int32Value,
    Int64ArrayValue,
    Int64Value,
    PropertyValue,
    RawValue,
    StringValue,
)

#: Namespace separator in the binary format; its tokens are stored reversed.
BINARY_SEPARATOR = "\x00\x01"
#: Namespace separator used by the ASCII format and by object names.
ASCII_SEPARATOR = "::"


def decode_string(data: bytes) -> str:
    """Decode an ``S`` payload, rewriting binary name separators.

    Bytes outside the ASCII range are replaced with U+FFFD.
    """

    text = data.decode("ascii", errors="replace")
    if BINARY_SEPARATOR in text:
        text = ASCII_SEPARATOR.join(reversed(text.split(BINARY_SEPARATOR)))
    return text


def _read_string(cursor: ByteCursor, level: ErrorLevel) -> StringValue:
    length = cursor.read_uint32()
    return StringValue(decode_string(cursor.read(length)))


def _read_raw(cursor: ByteCursor, level: ErrorLevel) -> RawValue:
    return RawValue(cursor.read(cursor.read_uint32()))


PropertyReader = Callable[[ByteCursor, ErrorLevel], PropertyValue]

_READERS: Dict[str, PropertyReader] = {
    "Y": lambda cursor, level: Int16Value(cursor.read_int16()),
    "C": lambda cursor, level: CharValue(chr(cursor.read_uint8())),
    "I": lambda cursor, level: Int32Value(cursor.read_int32()),
    "F": lambda cursor, level: Float32Value(cursor.read_float32()),
    "D": lambda cursor, level: Float64Value(cursor.read_float64()),
    "L": lambda cursor, level: Int64Value(cursor.read_int64()),
    "f": lambda cursor, level: Float32ArrayValue(compressed.read_array(cursor, compressed.FLOAT32, level)),
    "d": lambda cursor, level: Float64ArrayValue(compressed.read_array(cursor, compressed.FLOAT64, level)),
    "l": lambda cursor, level: Int64ArrayValue(compressed.read_array(cursor, compressed.INT64, level)),
    "i": lambda cursor, level: Int32ArrayValue(compressed.read_array(cursor, compressed.INT32, level)),
    "b": lambda cursor, level: BoolArrayValue(compressed.read_array(cursor, compressed.BOOL, level)),
    "S": _read_string,
    "R": _read_raw,
}


def read_property(cursor: ByteCursor, level: ErrorLevel = ErrorLevel.CHECKED) -> PropertyValue:
    """Read a single type-tagged property value.

    Unknown type tags are fatal at every error level, since the length of the
    payload cannot be known.
    """

    tag = chr(cursor.read_uint8())
    reader = _READERS.get(tag)
    if reader is None:
        raise MalformedPropertyError(cursor.position - 1, f"Invalid property data type `{tag}'")
    return reader(cursor, level)
