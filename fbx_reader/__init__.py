"""Decoder for the binary FBX file format."""

from .models import Document, FBXVersion, Node
from .core import (
    ErrorLevel,
    FBXAnalyzer,
    FBXBinaryReader,
    FBXFormatError,
    FBXLoadError,
    load_document,
    loads_document,
)
from .core.exceptions import (
    ChecksumMismatchError,
    DictionaryUnsupportedError,
    InvalidCompressionFormatError,
    InvalidEncodingError,
    InvalidEndOffsetError,
    InvalidFCheckError,
    InvalidFooterCodeError,
    InvalidFooterExtensionError,
    InvalidHeaderError,
    MalformedCompressedDataError,
    MalformedNullNodeError,
    MalformedPropertyError,
    NodeLengthMismatchError,
    PropertyListLengthMismatchError,
    TruncatedDataError,
)
from .values import PropertyValue

__all__ = [
    "ChecksumMismatchError",
    "DictionaryUnsupportedError",
    "Document",
    "ErrorLevel",
    "FBXAnalyzer",
    "FBXBinaryReader",
    "FBXFormatError",
    "FBXLoadError",
    "FBXVersion",
    "InvalidCompressionFormatError",
    "InvalidEncodingError",
    "InvalidEndOffsetError",
    "InvalidFCheckError",
    "InvalidFooterCodeError",
    "InvalidFooterExtensionError",
    "InvalidHeaderError",
    "MalformedCompressedDataError",
    "MalformedNullNodeError",
    "MalformedPropertyError",
    "Node",
    "NodeLengthMismatchError",
    "PropertyListLengthMismatchError",
    "PropertyValue",
    "TruncatedDataError",
    "load_document",
    "loads_document",
]
