"""Tests for node record decoding."""

import struct

import pytest

from fbx_reader.core.cursor import ByteCursor
from fbx_reader.core.exceptions import (
    InvalidEndOffsetError,
    MalformedNullNodeError,
    NodeLengthMismatchError,
    PropertyListLengthMismatchError,
)
from fbx_reader.core.nodes import null_record_size, read_node
from fbx_reader.core.strictness import ErrorLevel
from fbx_reader.models import Node
from fbx_reader.values import Int16Value, Int32Value, StringValue

from fbx_builder import NodeSpec, chain, int16, int32, null_record, string


def decode(record: NodeSpec, level: ErrorLevel = ErrorLevel.CHECKED, *, wide: bool = False, tail: bytes = b""):
    cursor = ByteCursor(record.encode(0, wide) + tail)
    return read_node(cursor, level, wide=wide), cursor


# ---------------------------------------------------------------------------
# Null records
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("level", list(ErrorLevel))
def test_null_record_is_no_node(level):
    cursor = ByteCursor(null_record())
    assert read_node(cursor, level) is None
    assert cursor.position == 13


def test_wide_null_record():
    cursor = ByteCursor(null_record(wide=True))
    assert read_node(cursor, wide=True) is None
    assert cursor.position == null_record_size(wide=True) == 25


@pytest.mark.parametrize(
    "fields, name",
    [((0, 1, 0), b""), ((0, 0, 5), b""), ((0, 0, 0), b"x")],
)
def test_malformed_null_record(fields, name):
    data = struct.pack("<IIIB", *fields, len(name)) + name
    with pytest.raises(MalformedNullNodeError):
        read_node(ByteCursor(data), ErrorLevel.CHECKED)
    assert read_node(ByteCursor(data), ErrorLevel.PERMISSIVE) is None


# ---------------------------------------------------------------------------
# Well-formed nodes
# ---------------------------------------------------------------------------

def test_leaf_node_properties_in_order():
    node, cursor = decode(NodeSpec("Leaf", [int32(7), string(b"x"), int16(3)]), tail=b"\xee")
    assert node == Node("Leaf", (Int32Value(7), StringValue("x"), Int16Value(3)), ())
    assert cursor.position == cursor.stream.getbuffer().nbytes - 1


def test_empty_name_and_no_properties():
    node, _ = decode(NodeSpec(""))
    assert node == Node("", (), ())


def test_nested_children():
    record = NodeSpec(
        "Root",
        [int32(1)],
        children=[
            NodeSpec("A", [int32(2)], children=[NodeSpec("A1"), NodeSpec("A2", [int32(3)])]),
            NodeSpec("B"),
        ],
    )
    node, _ = decode(record)
    assert [child.name for child in node.children] == ["A", "B"]
    assert [child.name for child in node.children[0].children] == ["A1", "A2"]
    assert node.children[0].children[1].value == 3
    assert node.children[1].children == ()


def test_wide_headers():
    record = NodeSpec("Root", children=[NodeSpec("Child", [int32(9)])])
    node, cursor = decode(record, wide=True)
    assert node.children[0].value == 9
    assert cursor.position == len(record.encode(0, wide=True))


def test_deep_nesting_does_not_recurse():
    cursor = ByteCursor(chain(3000))
    node = read_node(cursor, ErrorLevel.STRICT)
    assert cursor.position == len(chain(3000))
    depth = 0
    while node.children:
        node = node.children[0]
        depth += 1
    assert depth == 3000
    assert node.name == "l"


# ---------------------------------------------------------------------------
# Property list length
# ---------------------------------------------------------------------------

def padded_record() -> NodeSpec:
    # Two properties use 8 bytes; two padding bytes make the declared 10.
    return NodeSpec("Padded", [int32(1), int16(2), b"\x00\x00"], property_count=2, children=[NodeSpec("Child")])


@pytest.mark.parametrize("level", [ErrorLevel.CHECKED, ErrorLevel.STRICT])
def test_property_list_length_mismatch(level):
    with pytest.raises(PropertyListLengthMismatchError) as excinfo:
        decode(padded_record(), level)
    assert excinfo.value.offset == 13 + len("Padded") + 8


def test_property_list_short_read_reseeks_when_permissive():
    record = padded_record()
    node, cursor = decode(record, ErrorLevel.PERMISSIVE)
    assert node.properties == (Int32Value(1), Int16Value(2))
    assert [child.name for child in node.children] == ["Child"]
    assert cursor.position == len(record.encode(0))


def test_property_list_overshoot():
    record = NodeSpec("Over", [int32(1)], property_list_length=2)
    with pytest.raises(PropertyListLengthMismatchError):
        decode(record)
    node, cursor = decode(record, ErrorLevel.PERMISSIVE)
    assert node.value == 1


# ---------------------------------------------------------------------------
# End offsets
# ---------------------------------------------------------------------------

def test_node_length_mismatch():
    record = NodeSpec("Root", children=[NodeSpec("Child")], end_offset_adjust=1)
    with pytest.raises(NodeLengthMismatchError) as excinfo:
        decode(record, tail=b"\x00")
    assert excinfo.value.kind == "NodeLengthMismatch"


def test_node_length_mismatch_ignored_when_permissive():
    record = NodeSpec("Root", children=[NodeSpec("Child")], end_offset_adjust=1)
    node, _ = decode(record, ErrorLevel.PERMISSIVE, tail=b"\x00")
    assert [child.name for child in node.children] == ["Child"]


def test_nested_length_mismatch_propagates():
    inner = NodeSpec("Inner", children=[NodeSpec("Leaf")], end_offset_adjust=1)
    record = NodeSpec("Outer", children=[inner])
    with pytest.raises(NodeLengthMismatchError):
        decode(record)


def test_end_offset_before_properties_end():
    record = NodeSpec("Back", [int32(1)], end_offset_adjust=-2)
    with pytest.raises(InvalidEndOffsetError):
        decode(record)
    node, _ = decode(record, ErrorLevel.PERMISSIVE)
    assert node.children == ()
