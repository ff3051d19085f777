"""Utilities for traversing decoded FBX node trees."""

from __future__ import annotations

from typing import Iterator, Optional, Tuple

from ..models import Node


def iter_nodes(root: Node) -> Iterator[Node]:
    """Yield nodes depth-first starting at `root` (inclusive)."""

    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        for idx in range(len(node.children) - 1, -1, -1):
            stack.append(node.children[idx])


def iter_with_depth(root: Node, max_depth: Optional[int] = None) -> Iterator[Tuple[int, Node]]:
    """Yield ``(depth, node)`` pairs depth-first, skipping nodes below `max_depth`."""

    stack = [(0, root)]
    while stack:
        depth, node = stack.pop()
        yield depth, node
        if max_depth is not None and depth >= max_depth:
            continue
        for idx in range(len(node.children) - 1, -1, -1):
            stack.append((depth + 1, node.children[idx]))


def iter_by_name(root: Node, name: str) -> Iterator[Node]:
    """Yield nodes whose name matches `name`."""

    for node in iter_nodes(root):
        if node.name == name:
            yield node
