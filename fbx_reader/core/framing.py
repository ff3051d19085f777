"""File header and footer handling for binary FBX documents."""

from __future__ import annotations

import logging
import struct
from typing import List, Optional

from .cursor import ByteCursor
from .exceptions import InvalidFooterCodeError, InvalidFooterExtensionError, InvalidHeaderError
from .nodes import read_node
from .strictness import ErrorLevel
from ..models import WIDE_HEADER_VERSION, Document, Node
from ..values import Int16Value, Int32Value, Int64Value

logger = logging.getLogger(__name__)

#: Found at the start of every binary FBX file.
HEADER_MAGIC = b"Kaydara FBX Binary  \x00\x1a\x00"

FOOTER_CODE_SIZE = 16

# Tables for the footer code transform; the values are fixed by the format.
_SOURCE_ID = bytes(
    (0x58, 0xAB, 0xA9, 0xF0, 0x6C, 0xA2, 0xD8, 0x3F, 0x4D, 0x47, 0x49, 0xA3, 0xB4, 0xB2, 0xE7, 0x3D)
)
_KEY = bytes((0xE2, 0x4F, 0x7B, 0x5F, 0xCD, 0xE4, 0xC8, 0x6D, 0xDB, 0xD8, 0xFB, 0xD7, 0x40, 0x58, 0xC6, 0x78))

#: Closes every compliant file.
FOOTER_EXTENSION_MAGIC = bytes(
    (0xF8, 0x5A, 0x8C, 0x6A, 0xDE, 0xF5, 0xD9, 0x7E, 0xEC, 0xE9, 0x0C, 0xE3, 0x75, 0x8F, 0x29, 0x0B)
)
FOOTER_LEADING_ZEROES = 4
FOOTER_TRAILING_ZEROES = 120

TIMESTAMP_PATH = "FBXHeaderExtension/CreationTimeStamp"
_TIMESTAMP_FIELDS = ("Year", "Month", "Day", "Hour", "Minute", "Second", "Millisecond")
_TIMESTAMP_RANGES = {
    "Year": (0, 9999),
    "Month": (0, 12),
    "Day": (0, 31),
    "Hour": (0, 23),
    "Minute": (0, 59),
    "Second": (0, 59),
    "Millisecond": (0, 999),
}

_UINT32 = struct.Struct("<I")


def _encrypt(target: bytearray, key: bytes) -> None:
    c = 64
    for i in range(FOOTER_CODE_SIZE):
        target[i] ^= c ^ key[i]
        c = target[i]


def generate_footer_code(
    year: int, month: int, day: int, hour: int, minute: int, second: int, millisecond: int
) -> bytes:
    """Generate the footer code for a creation timestamp.

    :raises ValueError: when a component is out of range.
    """

    values = dict(zip(_TIMESTAMP_FIELDS, (year, month, day, hour, minute, second, millisecond)))
    for name, value in values.items():
        low, high = _TIMESTAMP_RANGES[name]
        if not low <= value <= high:
            raise ValueError(f"{name} out of range: {value}")

    mangled = f"{second:02d}{month:02d}{hour:02d}{day:02d}{millisecond // 10:02d}{year:04d}{minute:02d}".encode(
        "ascii"
    )
    code = bytearray(_SOURCE_ID)
    _encrypt(code, mangled)
    _encrypt(code, _KEY)
    _encrypt(code, mangled)
    return bytes(code)


def _timestamp_component(timestamp: Node, name: str) -> Optional[int]:
    element = timestamp.find(name)
    if element is None or not element.properties:
        return None
    prop = element.properties[0]
    if isinstance(prop, (Int16Value, Int32Value, Int64Value)):
        return prop.value
    return None


def document_footer_code(document: Document) -> bytes:
    """Regenerate the footer code from the document's creation timestamp.

    :raises ValueError: when the timestamp is missing or invalid.
    """

    timestamp = document.get_relative(TIMESTAMP_PATH)
    if timestamp is None:
        raise ValueError("No creation timestamp")
    components: List[int] = []
    for name in _TIMESTAMP_FIELDS:
        value = _timestamp_component(timestamp, name)
        if value is None:
            raise ValueError(f"Timestamp has no {name}")
        components.append(value)
    return generate_footer_code(*components)


def footer_padding(position: int) -> int:
    """Zero bytes that align the footer version field to 16 bytes."""

    padding = -position % 16
    return padding or 16


def check_header(cursor: ByteCursor) -> bool:
    return cursor.read_up_to(len(HEADER_MAGIC)) == HEADER_MAGIC


def check_footer_extension(cursor: ByteCursor, version: int) -> bool:
    """Read the footer extension and report whether it is compliant."""

    correct = cursor.read_up_to(FOOTER_LEADING_ZEROES) == bytes(FOOTER_LEADING_ZEROES)
    padding = footer_padding(cursor.position)
    correct &= cursor.read_up_to(padding) == bytes(padding)
    raw_version = cursor.read_up_to(_UINT32.size)
    correct &= len(raw_version) == _UINT32.size and _UINT32.unpack(raw_version)[0] == version
    correct &= cursor.read_up_to(FOOTER_TRAILING_ZEROES) == bytes(FOOTER_TRAILING_ZEROES)
    correct &= cursor.read_up_to(len(FOOTER_EXTENSION_MAGIC)) == FOOTER_EXTENSION_MAGIC
    return correct


def read_document(cursor: ByteCursor, level: ErrorLevel = ErrorLevel.CHECKED) -> Document:
    """Read a complete binary FBX file from the start of ``cursor``."""

    if not check_header(cursor) and level >= ErrorLevel.STRICT:
        raise InvalidHeaderError(cursor.position, "Invalid header string")

    version = cursor.read_uint32()
    wide = version >= WIDE_HEADER_VERSION
    logger.debug("Reading FBX document version %d", version)

    nodes: List[Node] = []
    while True:
        node = read_node(cursor, level, wide=wide)
        if node is None:
            break
        nodes.append(node)
    document = Document(version, tuple(nodes))

    footer_offset = cursor.position
    footer_code = cursor.read_up_to(FOOTER_CODE_SIZE)
    if level >= ErrorLevel.STRICT:
        try:
            expected = document_footer_code(document)
        except ValueError as exc:
            raise InvalidFooterCodeError(footer_offset, f"Cannot validate footer code: {exc}") from exc
        if footer_code != expected:
            raise InvalidFooterCodeError(footer_offset, "Incorrect footer code")

    extension_offset = cursor.position
    if not check_footer_extension(cursor, version) and level >= ErrorLevel.STRICT:
        raise InvalidFooterExtensionError(extension_offset, "Invalid footer")

    logger.debug("Read %d top-level nodes", len(nodes))
    return document
