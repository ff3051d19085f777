"""Shared helpers for presenting decoded FBX data."""

from __future__ import annotations

import json
from typing import Any, Dict, Iterator, List, Optional, Union

from .models import Document, Node
from .values import CharValue, PropertyValue, RawValue, StringValue, is_array

_PREVIEW_ITEMS = 4


def format_value(prop: PropertyValue, *, preview: int = _PREVIEW_ITEMS) -> str:
    """Render a property value for one-line display.

    Arrays are shortened to their first ``preview`` items plus a count, raw
    blobs to their length.
    """

    if is_array(prop):
        items = prop.value
        shown = ", ".join(_format_scalar(item) for item in items[:preview])
        if len(items) > preview:
            shown += ", ..."
        return f"{prop.type_code}[{len(items)}]({shown})"
    if isinstance(prop, RawValue):
        return f"R<{len(prop.value)} bytes>"
    if isinstance(prop, (StringValue, CharValue)):
        return repr(prop.value)
    return _format_scalar(prop.value)


def _format_scalar(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def property_to_json(prop: PropertyValue) -> Dict[str, Any]:
    value: Any = prop.value
    if isinstance(prop, RawValue):
        value = prop.value.hex()
    elif is_array(prop):
        value = list(prop.value)
    return {"type": prop.type_code, "value": value}


def node_to_json(root: Node) -> Dict[str, Any]:
    """Convert a node and its subtree into JSON-serialisable dictionaries."""

    def convert(node: Node) -> Dict[str, Any]:
        return {
            "name": node.name,
            "properties": [property_to_json(prop) for prop in node.properties],
            "children": [],
        }

    result = convert(root)
    stack = [(child, result["children"]) for child in reversed(root.children)]
    while stack:
        node, siblings = stack.pop()
        entry = convert(node)
        siblings.append(entry)
        stack.extend((child, entry["children"]) for child in reversed(node.children))
    return result


def to_json(item: Union[Document, Node]) -> Dict[str, Any]:
    """Convert a document or node into JSON-serialisable dictionaries."""

    if isinstance(item, Document):
        return {
            "version": item.version,
            "nodes": [node_to_json(node) for node in item.nodes],
        }
    return node_to_json(item)


def iter_json(item: Union[Document, Node], indent: Optional[int] = 2) -> Iterator[str]:
    """Yield the JSON text of :func:`to_json` in chunks.

    Nesting is tracked on an explicit stack, so arbitrarily deep trees encode
    without hitting the interpreter's recursion limit. Property lists are
    written on one line. ``indent=None`` produces compact output.
    """

    separator = "," if indent is not None else ", "

    def pad(level: int) -> str:
        if indent is None:
            return ""
        return "\n" + " " * (indent * level)

    def node_list(nodes, level: int) -> List[Any]:
        if not nodes:
            return ["[]"]
        work: List[Any] = ["["]
        for index, node in enumerate(nodes):
            work.append(pad(level + 1))
            work.append((node, level + 1))
            if index < len(nodes) - 1:
                work.append(separator)
        work.append(pad(level) + "]")
        return work

    if isinstance(item, Document):
        work = [
            "{" + pad(1) + f'"version": {item.version}' + separator + pad(1) + '"nodes": ',
            *node_list(item.nodes, 1),
            pad(0) + "}",
        ]
    else:
        work = [(item, 0)]

    stack = list(reversed(work))
    while stack:
        entry = stack.pop()
        if isinstance(entry, str):
            yield entry
            continue
        node, level = entry
        inner = pad(level + 1)
        properties = json.dumps([property_to_json(prop) for prop in node.properties])
        head = (
            "{" + inner + '"name": ' + json.dumps(node.name) + separator
            + inner + '"properties": ' + properties + separator
            + inner + '"children": '
        )
        stack.extend(reversed([head, *node_list(node.children, level + 1), pad(level) + "}"]))
