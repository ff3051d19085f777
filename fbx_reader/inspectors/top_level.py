"""Expose tree summaries for top-level document nodes."""

from __future__ import annotations

from typing import Any, Dict, List

from ..core.analyzer import SceneContext, SceneInspector


class TopLevelInspector(SceneInspector):
    id = "top_level_nodes"

    def collect(self, context: SceneContext) -> List[Dict[str, Any]]:
        summary: List[Dict[str, Any]] = []

        for node in context.document.nodes:
            summary.append(
                {
                    "name": node.name or "<unnamed>",
                    "property_count": len(node.properties),
                    "child_count": len(node.children),
                    "descendant_count": node.descendant_count,
                }
            )

        return summary
