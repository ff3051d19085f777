"""Array payload decoding, including zlib-compressed arrays."""

from __future__ import annotations

import logging
import struct
import zlib
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple

from .cursor import ByteCursor
from .exceptions import (
    ChecksumMismatchError,
    DictionaryUnsupportedError,
    InvalidCompressionFormatError,
    InvalidEncodingError,
    InvalidFCheckError,
    MalformedCompressedDataError,
)
from .strictness import ErrorLevel

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 64 * 1024
_TRAILER = struct.Struct(">I")

ENCODING_RAW = 0
ENCODING_DEFLATE = 1


@dataclass(frozen=True)
class ArrayElement:
    """Describes how one array element is stored."""

    fmt: str
    size: int
    convert: Optional[Callable[[Any], Any]] = None

    def unpack(self, data: bytes, count: int) -> Tuple[Any, ...]:
        values = struct.unpack(f"<{count}{self.fmt}", data)
        if self.convert is not None:
            return tuple(self.convert(value) for value in values)
        return values


FLOAT32 = ArrayElement("f", 4)
FLOAT64 = ArrayElement("d", 8)
INT64 = ArrayElement("q", 8)
INT32 = ArrayElement("i", 4)
BOOL = ArrayElement("B", 1, bool)


class ChecksumInflater:
    """Inflates a raw deflate body while tracking an Adler-32 checksum.

    Compressed input is pulled from ``cursor`` in chunks and never past
    ``limit``. :attr:`checksum` reflects every decompressed byte produced so
    far, so it can be compared against the trailer at any point.
    """

    def __init__(self, cursor: ByteCursor, limit: int) -> None:
        self._cursor = cursor
        self._limit = limit
        self._inflater = zlib.decompressobj(-zlib.MAX_WBITS)
        self._pending = bytearray()
        self._checksum = zlib.adler32(b"")

    @property
    def checksum(self) -> int:
        return self._checksum

    @property
    def eof(self) -> bool:
        return self._inflater.eof

    def _fill(self) -> bool:
        """Inflate one more chunk; returns ``False`` when no input is left."""

        if self._inflater.eof:
            return False
        remaining = self._limit - self._cursor.position
        if remaining <= 0:
            return False
        chunk = self._cursor.read_up_to(min(_CHUNK_SIZE, remaining))
        if not chunk:
            return False
        try:
            produced = self._inflater.decompress(chunk)
        except zlib.error as exc:
            raise MalformedCompressedDataError(self._cursor.position, f"Compressed data was malformed: {exc}") from exc
        if produced:
            self._checksum = zlib.adler32(produced, self._checksum)
            self._pending.extend(produced)
        return True

    def read(self, size: int) -> bytes:
        """Return exactly ``size`` decompressed bytes."""

        while len(self._pending) < size:
            if not self._fill():
                raise MalformedCompressedDataError(
                    self._cursor.position,
                    f"Compressed data was malformed; expected {size} bytes, stream produced {len(self._pending)}",
                )
        data = bytes(self._pending[:size])
        del self._pending[:size]
        return data

    def drain(self) -> int:
        """Inflate whatever input remains and return the final checksum."""

        while self._fill():
            pass
        return self._checksum


def _check_zlib_header(cursor: ByteCursor, level: ErrorLevel) -> None:
    cmf = cursor.read_uint8()
    if (cmf & 0x0F) != 8 or (cmf >> 4) > 7:
        raise InvalidCompressionFormatError(cursor.position - 1, f"Invalid compression format {cmf}")
    flg = cursor.read_uint8()
    if level >= ErrorLevel.STRICT and ((cmf << 8) + flg) % 31 != 0:
        raise InvalidFCheckError(cursor.position - 1, "Invalid compression FCHECK")
    if flg & (1 << 5):
        raise DictionaryUnsupportedError(cursor.position - 1, "Invalid compression flags; dictionary not supported")


def read_array(cursor: ByteCursor, element: ArrayElement, level: ErrorLevel) -> Tuple[Any, ...]:
    """Read an array payload, decompressing it if required."""

    count = cursor.read_uint32()
    encoding_offset = cursor.position
    encoding = cursor.read_uint32()
    compressed_length = cursor.read_uint32()
    region_end = cursor.position + compressed_length
    size = count * element.size

    if encoding == ENCODING_RAW:
        return element.unpack(cursor.read(size), count)

    if level >= ErrorLevel.CHECKED:
        if encoding != ENCODING_DEFLATE:
            raise InvalidEncodingError(encoding_offset, f"Invalid compression encoding {encoding} (must be 0 or 1)")
        _check_zlib_header(cursor, level)
    else:
        cursor.skip(2)

    inflater = ChecksumInflater(cursor, region_end - _TRAILER.size)
    values = element.unpack(inflater.read(size), count)

    if level >= ErrorLevel.CHECKED:
        actual = inflater.drain()
        cursor.seek(region_end - _TRAILER.size)
        expected = _TRAILER.unpack(cursor.read(_TRAILER.size))[0]
        if expected != actual:
            raise ChecksumMismatchError(
                cursor.position,
                f"Compressed data has invalid checksum; trailer {expected:#010x}, computed {actual:#010x}",
            )
    cursor.seek(region_end)
    logger.debug("Decoded compressed array of %d elements (%d bytes compressed)", count, compressed_length)
    return values
