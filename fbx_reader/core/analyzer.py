"""High level analyzer orchestration."""

from __future__ import annotations

import contextlib
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Protocol

from .exceptions import FBXLoadError
from .reader import load_document
from .strictness import ErrorLevel
from ..models import Document

logger = logging.getLogger(__name__)


class SceneInspector(Protocol):
    """Protocol defining how inspectors gather data from a decoded FBX tree."""

    id: str

    def collect(self, context: "SceneContext") -> Any:
        """Return extracted information from the document."""


@dataclass
class SceneContext:
    """Holds the decoded document and how it was read."""

    path: str
    document: Document
    level: ErrorLevel


class FBXAnalyzer(contextlib.AbstractContextManager["FBXAnalyzer"]):
    """Loads an FBX file and coordinates data extraction."""

    def __init__(self, path: str, level: ErrorLevel = ErrorLevel.CHECKED) -> None:
        self._path = path
        self._level = level
        self._document: Optional[Document] = None

    @property
    def path(self) -> str:
        return self._path

    @property
    def context(self) -> SceneContext:
        if self._document is None:
            raise RuntimeError("Analyzer not loaded. Call load() before accessing context.")
        return SceneContext(path=self._path, document=self._document, level=self._level)

    def load(self) -> "FBXAnalyzer":
        if self._document is not None:
            return self

        try:
            self._document = load_document(self._path, self._level)
        except FBXLoadError:
            logger.debug("Failed to decode '%s' at level %s", self._path, self._level.name)
            raise
        return self

    def close(self) -> None:
        self._document = None

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        self.close()
        return None

    # Allow usage as context manager via `with FBXAnalyzer(path) as analyzer:`
    def __enter__(self) -> "FBXAnalyzer":
        return self.load()

    def run(self, inspectors: Iterable[SceneInspector]) -> Dict[str, Any]:
        """Execute inspectors and return their aggregated results."""

        results: Dict[str, Any] = {}
        ctx = self.context
        for inspector in inspectors:
            results[inspector.id] = inspector.collect(ctx)
        return results
