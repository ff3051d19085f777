"""Core infrastructure for binary FBX decoding and traversal."""

from .analyzer import FBXAnalyzer, SceneContext, SceneInspector
from .exceptions import FBXFormatError, FBXLoadError
from .reader import FBXBinaryReader, load_document, loads_document
from .strictness import ErrorLevel

__all__ = [
    "ErrorLevel",
    "FBXAnalyzer",
    "FBXBinaryReader",
    "FBXFormatError",
    "FBXLoadError",
    "SceneContext",
    "SceneInspector",
    "load_document",
    "loads_document",
]
