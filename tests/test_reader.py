"""Tests for the reader facade and file loading."""

import io

import pytest

from fbx_reader import (
    ChecksumMismatchError,
    ErrorLevel,
    FBXBinaryReader,
    FBXLoadError,
    load_document,
    loads_document,
)
from fbx_reader.core.cursor import ByteCursor

from fbx_builder import NodeSpec, array, build_document, int32, null_record, timestamp_node


class _NonSeekable(io.RawIOBase):
    def readable(self):
        return True

    def seekable(self):
        return False


def test_reader_requires_seekable_stream():
    with pytest.raises(ValueError, match="must support seeking"):
        FBXBinaryReader(_NonSeekable())


def test_reader_rejects_none():
    with pytest.raises(ValueError):
        FBXBinaryReader(None)


def test_default_level_is_checked():
    assert FBXBinaryReader(b"").level is ErrorLevel.CHECKED


def test_read_nodes_one_at_a_time():
    data = NodeSpec("First", [int32(1)]).encode(0)
    data += NodeSpec("Second", [int32(2)]).encode(len(data))
    data += null_record()
    reader = FBXBinaryReader(io.BytesIO(data))
    assert reader.read_node().name == "First"
    assert reader.read_node().value == 2
    assert reader.read_node() is None


def test_read_wide_node():
    reader = FBXBinaryReader(NodeSpec("Wide", [int32(5)]).encode(0, wide=True), wide=True)
    assert reader.read_node().value == 5


def test_read_property():
    reader = FBXBinaryReader(int32(42))
    assert reader.read_property().value == 42


def test_read_document_from_file_object():
    reader = FBXBinaryReader(io.BytesIO(build_document()), ErrorLevel.STRICT)
    document = reader.read_document()
    assert document.version_label == "7.4"


def test_loads_document_level_is_respected():
    broken = NodeSpec("Data", [array(b"i", "i", [1, 2, 3], compress=True, trailer=1)])
    data = build_document(nodes=[timestamp_node(), broken])
    with pytest.raises(ChecksumMismatchError):
        loads_document(data)
    document = loads_document(data, ErrorLevel.PERMISSIVE)
    assert document.find("Data").value == (1, 2, 3)


def test_load_document_from_path(tmp_path):
    path = tmp_path / "scene.fbx"
    path.write_bytes(build_document())
    document = load_document(path, ErrorLevel.STRICT)
    assert len(document.nodes) == 4


def test_load_document_missing_file(tmp_path):
    with pytest.raises(FBXLoadError, match="Failed to open"):
        load_document(tmp_path / "missing.fbx")


def test_cursor_wraps_bytes():
    cursor = ByteCursor(bytearray(b"\x01\x00"))
    assert cursor.read_int16() == 1
    assert cursor.read_up_to(4) == b""
