"""Project-specific exception types."""


class FBXLoadError(RuntimeError):
    """Raised when an FBX file fails to load."""


class FBXFormatError(FBXLoadError):
    """Raised when the binary data is malformed for the active error level.

    Every format error records the absolute byte offset at which the problem
    was detected.
    """

    kind = "FormatError"

    def __init__(self, offset: int, message: str) -> None:
        super().__init__(f"{message} (at byte offset {offset})")
        self.offset = offset
        self.message = message


class TruncatedDataError(FBXFormatError):
    """Raised when the input ends in the middle of a record."""

    kind = "TruncatedData"


class MalformedPropertyError(FBXFormatError):
    """Raised for an unrecognized property type tag."""

    kind = "MalformedProperty"


class InvalidEncodingError(FBXFormatError):
    kind = "InvalidEncoding"


class InvalidCompressionFormatError(FBXFormatError):
    kind = "InvalidCompressionFormat"


class InvalidFCheckError(FBXFormatError):
    kind = "InvalidFCheck"


class DictionaryUnsupportedError(FBXFormatError):
    kind = "DictionaryUnsupported"


class MalformedCompressedDataError(FBXFormatError):
    """Raised when the deflate stream of an array cannot be decoded."""

    kind = "MalformedCompressedData"


class ChecksumMismatchError(FBXFormatError):
    kind = "ChecksumMismatch"


class MalformedNullNodeError(FBXFormatError):
    kind = "MalformedNullNode"


class PropertyListLengthMismatchError(FBXFormatError):
    kind = "PropertyListLengthMismatch"


class NodeLengthMismatchError(FBXFormatError):
    kind = "NodeLengthMismatch"


class InvalidEndOffsetError(FBXFormatError):
    kind = "InvalidEndOffset"


class InvalidHeaderError(FBXFormatError):
    kind = "InvalidHeader"


class InvalidFooterCodeError(FBXFormatError):
    kind = "InvalidFooterCode"


class InvalidFooterExtensionError(FBXFormatError):
    kind = "InvalidFooterExtension"
