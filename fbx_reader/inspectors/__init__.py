"""Inspector implementations for extracting targeted data."""

from .metadata import SceneMetadataInspector
from .top_level import TopLevelInspector

__all__ = [
    "TopLevelInspector",
    "SceneMetadataInspector",
]
