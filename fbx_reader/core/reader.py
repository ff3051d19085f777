"""Binary FBX reader facade."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Optional, Union

from .cursor import ByteCursor
from .exceptions import FBXLoadError
from .framing import read_document
from .nodes import read_node
from .properties import read_property
from .strictness import ErrorLevel
from ..models import WIDE_HEADER_VERSION, Document, Node
from ..values import PropertyValue


class FBXBinaryReader:
    """Reads FBX nodes from a seekable binary stream.

    A reader owns its cursor; use one reader per stream and do not share it
    between threads.
    """

    def __init__(
        self,
        stream: Union[BinaryIO, bytes, bytearray],
        level: ErrorLevel = ErrorLevel.CHECKED,
        *,
        wide: bool = False,
    ) -> None:
        if stream is None:
            raise ValueError("stream must not be None")
        self._cursor = ByteCursor(stream)
        self._level = ErrorLevel(level)
        self._wide = wide

    @property
    def level(self) -> ErrorLevel:
        return self._level

    @property
    def cursor(self) -> ByteCursor:
        return self._cursor

    def read_property(self) -> PropertyValue:
        return read_property(self._cursor, self._level)

    def read_node(self) -> Optional[Node]:
        """Read a single node at the current position.

        This won't read the file header or footer; returns ``None`` for a
        null record.
        """

        return read_node(self._cursor, self._level, wide=self._wide)

    def read_document(self) -> Document:
        """Read a complete FBX file, header to footer."""

        document = read_document(self._cursor, self._level)
        self._wide = document.version >= WIDE_HEADER_VERSION
        return document


def loads_document(data: bytes, level: ErrorLevel = ErrorLevel.CHECKED) -> Document:
    """Decode an FBX document held in memory."""

    return FBXBinaryReader(data, level).read_document()


def load_document(path: Union[str, Path], level: ErrorLevel = ErrorLevel.CHECKED) -> Document:
    """Open and decode the FBX file at ``path``."""

    try:
        handle = open(path, "rb")
    except OSError as exc:
        raise FBXLoadError(f"Failed to open FBX file '{path}': {exc}") from exc
    with handle:
        return FBXBinaryReader(handle, level).read_document()
