"""Command-line interface for fbx_reader."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from .core import FBXAnalyzer
from .core.exceptions import FBXLoadError
from .core.strictness import ErrorLevel
from .core.traversal import iter_with_depth
from .inspectors import SceneMetadataInspector, TopLevelInspector
from .models import Document, SceneMetadata, version_label
from .utils import format_value, iter_json


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Decode binary FBX files and summarize their node tree.")
    parser.add_argument("path", type=Path, help="Path to the binary FBX file to read.")
    parser.add_argument(
        "--level",
        type=ErrorLevel.parse,
        default=ErrorLevel.CHECKED,
        metavar="{permissive,checked,strict}",
        help="Which consistency checks to enforce while decoding (default: checked).",
    )
    parser.add_argument("--tree", action="store_true", help="Print the full node tree.")
    parser.add_argument(
        "--depth",
        type=int,
        default=None,
        help="Limit --tree output to this many levels below the top-level nodes.",
    )
    parser.add_argument("--json", action="store_true", help="Print the decoded tree as JSON instead of a summary.")
    parser.add_argument("--compact", action="store_true", help="Write --json output on a single line.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log decoder progress.")
    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    path: Path = args.path
    if not path.exists():
        parser.error(f"File not found: {path}")

    top_level_inspector = TopLevelInspector()
    metadata_inspector = SceneMetadataInspector()

    try:
        with FBXAnalyzer(str(path), args.level) as analyzer:
            document = analyzer.context.document
            results = analyzer.run([top_level_inspector, metadata_inspector])
    except FBXLoadError as exc:
        parser.error(str(exc))

    if args.json:
        for chunk in iter_json(document, indent=None if args.compact else 2):
            sys.stdout.write(chunk)
        sys.stdout.write("\n")
        return 0

    _print_metadata(results[metadata_inspector.id], title=path.name)
    _print_top_level_summary(results.get(top_level_inspector.id, []), title=path.name)
    if args.tree:
        _print_tree(document, args.depth)
    return 0


def _print_metadata(metadata: SceneMetadata, *, title: str) -> None:
    print(f"{title}: FBX {version_label(metadata.version)} ({metadata.version})")
    if metadata.creator:
        print(f"  creator: {metadata.creator}")
    if metadata.creation_time:
        print(f"  created: {metadata.creation_time}")
    if metadata.object_counts:
        counts = ", ".join(f"{name}={count}" for name, count in metadata.object_counts.items())
        print(f"  objects: {counts}")
    if metadata.connection_count:
        print(f"  connections: {metadata.connection_count}")


def _print_top_level_summary(entries: Iterable[Dict[str, Any]], *, title: str) -> None:
    entries = list(entries or [])
    if not entries:
        print(f"Top-level nodes ({title}): <none>")
        return

    print(f"Top-level nodes ({title}):")
    for entry in entries:
        print(
            f"  - {entry['name']} [properties: {entry['property_count']}, "
            f"children: {entry['child_count']}, descendants: {entry['descendant_count']}]"
        )


def _print_tree(document: Document, max_depth: Optional[int]) -> None:
    for top in document.nodes:
        for depth, node in iter_with_depth(top, max_depth):
            values = ", ".join(format_value(prop) for prop in node.properties)
            suffix = f": {values}" if values else ""
            print(f"{'  ' * depth}{node.name or '<unnamed>'}{suffix}")


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
