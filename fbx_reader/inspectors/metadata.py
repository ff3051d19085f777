"""Document metadata inspector."""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Optional

from ..core.analyzer import SceneContext, SceneInspector
from ..models import DefinitionSummary, Document, Node, SceneMetadata
from ..values import StringValue

_TIMESTAMP_FIELDS = ("Year", "Month", "Day", "Hour", "Minute", "Second", "Millisecond")


class SceneMetadataInspector(SceneInspector):
    """Collect header details, definitions, and object counts from a document."""

    id = "scene_metadata"

    def collect(self, context: SceneContext) -> SceneMetadata:
        document = context.document
        metadata = SceneMetadata(version=document.version)
        metadata.creator = _find_creator(document)
        metadata.creation_time = _format_timestamp(document.get_relative("FBXHeaderExtension/CreationTimeStamp"))

        definitions = document.find("Definitions")
        if definitions is not None:
            for object_type in definitions.find_all("ObjectType"):
                count_node = object_type.find("Count")
                count = count_node.value if count_node is not None else None
                metadata.definitions.append(
                    DefinitionSummary(
                        class_name=str(object_type.value),
                        object_count=count if isinstance(count, int) else 0,
                    )
                )
            metadata.definitions.sort(key=lambda item: item.class_name.lower())

        objects = document.find("Objects")
        if objects is not None:
            counts: Dict[str, int] = defaultdict(int)
            for child in objects.children:
                counts[child.name] += 1
            metadata.object_counts = dict(sorted(counts.items()))

        connections = document.find("Connections")
        if connections is not None:
            metadata.connection_count = len(connections.children)

        return metadata


def _find_creator(document: Document) -> Optional[str]:
    for path in ("Creator", "FBXHeaderExtension/Creator"):
        node = document.get_relative(path)
        if node is not None and node.properties and isinstance(node.properties[0], StringValue):
            return node.properties[0].value
    return None


def _format_timestamp(timestamp: Optional[Node]) -> Optional[str]:
    if timestamp is None:
        return None
    parts = {}
    for name in _TIMESTAMP_FIELDS:
        element = timestamp.find(name)
        if element is None or not isinstance(element.value, int):
            return None
        parts[name] = element.value
    return (
        f"{parts['Year']:04d}-{parts['Month']:02d}-{parts['Day']:02d} "
        f"{parts['Hour']:02d}:{parts['Minute']:02d}:{parts['Second']:02d}.{parts['Millisecond']:03d}"
    )
