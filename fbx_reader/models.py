"""Domain models for decoded FBX trees."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .values import PropertyValue


class FBXVersion(enum.IntEnum):
    """Known FBX file versions."""

    V6_0 = 6000
    V6_1 = 6100
    V7_0 = 7000
    V7_1 = 7100
    V7_2 = 7200
    V7_3 = 7300
    V7_4 = 7400
    V7_5 = 7500


#: First version whose node headers use 64-bit offsets and lengths.
WIDE_HEADER_VERSION = FBXVersion.V7_5


def version_label(version: int) -> str:
    """Render a version integer such as 7400 as ``"7.4"``."""

    major, minor = divmod(version, 1000)
    return f"{major}.{minor // 100}"


class NodeContainer:
    """Child lookup shared by :class:`Node` and :class:`Document`."""

    def _child_nodes(self) -> Tuple["Node", ...]:
        raise NotImplementedError

    def find(self, name: str) -> Optional["Node"]:
        """Return the first direct child called ``name``, if any."""

        for child in self._child_nodes():
            if child.name == name:
                return child
        return None

    def find_all(self, name: str) -> List["Node"]:
        return [child for child in self._child_nodes() if child.name == name]

    def __getitem__(self, name: str) -> Optional["Node"]:
        return self.find(name)

    def get_relative(self, path: str) -> Optional["Node"]:
        """Follow a ``/``-separated path of child names."""

        current: Optional[NodeContainer] = self
        for part in path.split("/"):
            if not part:
                continue
            if current is None:
                return None
            current = current.find(part)
        return current  # type: ignore[return-value]

    def walk(self) -> Iterator["Node"]:
        """Yield every descendant node depth-first, in file order."""

        stack = list(reversed(self._child_nodes()))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


@dataclass(frozen=True)
class Node(NodeContainer):
    name: str
    properties: Tuple[PropertyValue, ...] = ()
    children: Tuple["Node", ...] = ()

    def _child_nodes(self) -> Tuple["Node", ...]:
        return self.children

    # Comparison, hashing and repr must not recurse through children:
    # decoded trees may be nested deeper than the interpreter stack allows.
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        pending = [(self, other)]
        while pending:
            left, right = pending.pop()
            if left is right:
                continue
            if (
                left.name != right.name
                or left.properties != right.properties
                or len(left.children) != len(right.children)
            ):
                return False
            pending.extend(zip(left.children, right.children))
        return True

    def __hash__(self) -> int:
        return hash((self.name, self.properties, len(self.children)))

    def __repr__(self) -> str:
        return f"Node(name={self.name!r}, properties={self.properties!r}, children=<{len(self.children)} nodes>)"

    @property
    def value(self) -> Any:
        """Payload of the first property, or ``None`` when there is none."""

        if not self.properties:
            return None
        return self.properties[0].value

    @property
    def descendant_count(self) -> int:
        return sum(1 for _ in self.walk())


@dataclass(frozen=True)
class Document(NodeContainer):
    """A decoded FBX file: its version and top-level nodes."""

    version: int
    nodes: Tuple[Node, ...] = field(default_factory=tuple)

    def _child_nodes(self) -> Tuple[Node, ...]:
        return self.nodes

    @property
    def version_label(self) -> str:
        return version_label(self.version)

    @property
    def uses_wide_headers(self) -> bool:
        return self.version >= WIDE_HEADER_VERSION


@dataclass
class DefinitionSummary:
    class_name: str
    object_count: int


@dataclass
class SceneMetadata:
    version: int
    creator: Optional[str] = None
    creation_time: Optional[str] = None
    definitions: List[DefinitionSummary] = field(default_factory=list)
    object_counts: Dict[str, int] = field(default_factory=dict)
    connection_count: int = 0
