"""Seekable little-endian byte cursor shared by every decoder stage."""

from __future__ import annotations

import io
import struct
from typing import BinaryIO, Union

from .exceptions import TruncatedDataError

_UINT8 = struct.Struct("<B")
_INT16 = struct.Struct("<h")
_INT32 = struct.Struct("<i")
_UINT32 = struct.Struct("<I")
_INT64 = struct.Struct("<q")
_UINT64 = struct.Struct("<Q")
_FLOAT32 = struct.Struct("<f")
_FLOAT64 = struct.Struct("<d")


class ByteCursor:
    """Reads primitives from a seekable binary stream.

    ``source`` may be an open binary file object or a bytes-like value, which
    is wrapped in :class:`io.BytesIO`.
    """

    def __init__(self, source: Union[BinaryIO, bytes, bytearray, memoryview]) -> None:
        if isinstance(source, (bytes, bytearray, memoryview)):
            source = io.BytesIO(bytes(source))
        seekable = getattr(source, "seekable", None)
        if not callable(seekable) or not seekable():
            raise ValueError("The stream must support seeking. Try reading the data into a buffer first")
        self._stream = source

    @property
    def stream(self) -> BinaryIO:
        return self._stream

    @property
    def position(self) -> int:
        return self._stream.tell()

    def seek(self, offset: int) -> None:
        self._stream.seek(offset)

    def skip(self, count: int) -> None:
        self._stream.seek(count, io.SEEK_CUR)

    def read(self, size: int) -> bytes:
        """Read exactly ``size`` bytes or raise :class:`TruncatedDataError`."""

        start = self._stream.tell()
        data = self._stream.read(size)
        if len(data) != size:
            raise TruncatedDataError(start, f"Unexpected end of data; needed {size} bytes, got {len(data)}")
        return data

    def read_up_to(self, size: int) -> bytes:
        """Read at most ``size`` bytes; a short result means end of stream."""

        return self._stream.read(size)

    def _unpack(self, fmt: struct.Struct):
        return fmt.unpack(self.read(fmt.size))[0]

    def read_uint8(self) -> int:
        return self._unpack(_UINT8)

    def read_int16(self) -> int:
        return self._unpack(_INT16)

    def read_int32(self) -> int:
        return self._unpack(_INT32)

    def read_uint32(self) -> int:
        return self._unpack(_UINT32)

    def read_int64(self) -> int:
        return self._unpack(_INT64)

    def read_uint64(self) -> int:
        return self._unpack(_UINT64)

    def read_float32(self) -> float:
        return self._unpack(_FLOAT32)

    def read_float64(self) -> float:
        return self._unpack(_FLOAT64)
