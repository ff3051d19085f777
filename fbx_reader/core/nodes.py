"""Node record decoding.

A node record is::

    end_offset  property_count  property_list_length  name_length  name
    properties...
    nested node records..., terminated by a null record

``end_offset`` is the absolute stream position where the node and all of its
descendants end. A record whose ``end_offset`` is zero is a null record and
closes the enclosing child list. Nested records are decoded with an explicit
stack of open nodes so input depth never translates into Python recursion.
"""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass, field
from typing import List, Optional

from .cursor import ByteCursor
from .exceptions import (
    InvalidEndOffsetError,
    MalformedNullNodeError,
    NodeLengthMismatchError,
    PropertyListLengthMismatchError,
)
from .properties import read_property
from .strictness import ErrorLevel
from ..models import Node
from ..values import PropertyValue

logger = logging.getLogger(__name__)

_HEADER = struct.Struct("<IIIB")
_WIDE_HEADER = struct.Struct("<QQQB")


def null_record_size(wide: bool = False) -> int:
    return (_WIDE_HEADER if wide else _HEADER).size


@dataclass
class _NodeHeader:
    end_offset: int
    property_count: int
    property_list_length: int
    name: str


@dataclass
class _OpenNode:
    """A node whose child list is still being read."""

    name: str
    properties: List[PropertyValue]
    end_offset: int
    children: List[Node] = field(default_factory=list)

    def close(self) -> Node:
        return Node(self.name, tuple(self.properties), tuple(self.children))


def _read_header(cursor: ByteCursor, level: ErrorLevel, wide: bool) -> Optional[_NodeHeader]:
    fmt = _WIDE_HEADER if wide else _HEADER
    end_offset, property_count, property_list_length, name_length = fmt.unpack(cursor.read(fmt.size))
    name = cursor.read(name_length).decode("ascii", errors="replace") if name_length else ""

    if end_offset == 0:
        if level >= ErrorLevel.CHECKED and (property_count != 0 or property_list_length != 0 or name):
            raise MalformedNullNodeError(cursor.position, "Invalid node; expected NULL record")
        return None
    return _NodeHeader(end_offset, property_count, property_list_length, name)


def _read_body(cursor: ByteCursor, level: ErrorLevel, header: _NodeHeader) -> _OpenNode:
    """Read the property list and decide whether nested records follow."""

    property_end = cursor.position + header.property_list_length
    properties = [read_property(cursor, level) for _ in range(header.property_count)]

    if cursor.position != property_end:
        if level >= ErrorLevel.CHECKED:
            raise PropertyListLengthMismatchError(
                cursor.position,
                f"Property list of node '{header.name}' does not match its declared length; "
                f"end point is {property_end}",
            )
        if cursor.position < property_end:
            logger.warning(
                "Node '%s': properties ended at %d, skipping to declared end %d",
                header.name,
                cursor.position,
                property_end,
            )
            cursor.seek(property_end)

    return _OpenNode(header.name, properties, header.end_offset)


def _has_children(cursor: ByteCursor, level: ErrorLevel, node: _OpenNode) -> bool:
    remaining = node.end_offset - cursor.position
    if remaining < 0 and level >= ErrorLevel.CHECKED:
        raise InvalidEndOffsetError(cursor.position, f"Node '{node.name}' has invalid end point {node.end_offset}")
    return remaining > 0


def _check_end(cursor: ByteCursor, level: ErrorLevel, node: _OpenNode) -> None:
    if level >= ErrorLevel.CHECKED and cursor.position != node.end_offset:
        raise NodeLengthMismatchError(
            cursor.position,
            f"Node '{node.name}' does not end at its declared end point {node.end_offset}",
        )


def read_node(cursor: ByteCursor, level: ErrorLevel = ErrorLevel.CHECKED, *, wide: bool = False) -> Optional[Node]:
    """Read a single node and all of its descendants.

    Returns ``None`` for a null record. This does not read the file header or
    footer, so it fails when pointed at the start of a complete FBX file.

    :param wide: use the 64-bit header layout of FBX 7.5 and later.
    """

    header = _read_header(cursor, level, wide)
    if header is None:
        return None
    root = _read_body(cursor, level, header)
    if not _has_children(cursor, level, root):
        return root.close()

    stack = [root]
    while True:
        parent = stack[-1]
        header = _read_header(cursor, level, wide)
        if header is None:
            stack.pop()
            _check_end(cursor, level, parent)
            node = parent.close()
            if not stack:
                return node
            stack[-1].children.append(node)
            continue

        child = _read_body(cursor, level, header)
        if _has_children(cursor, level, child):
            stack.append(child)
        else:
            parent.children.append(child.close())
