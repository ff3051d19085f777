"""Tests for the analyzer and inspectors."""

import pytest

from fbx_reader.core import FBXAnalyzer, FBXLoadError
from fbx_reader.core.exceptions import InvalidFooterCodeError
from fbx_reader.core.strictness import ErrorLevel
from fbx_reader.inspectors import SceneMetadataInspector, TopLevelInspector
from fbx_reader.models import DefinitionSummary

from fbx_builder import build_document


def test_context_requires_load(fbx_path):
    analyzer = FBXAnalyzer(str(fbx_path))
    with pytest.raises(RuntimeError, match="not loaded"):
        analyzer.context


def test_analyzer_runs_inspectors(fbx_path):
    top_level = TopLevelInspector()
    metadata = SceneMetadataInspector()
    with FBXAnalyzer(str(fbx_path), ErrorLevel.STRICT) as analyzer:
        assert analyzer.context.level is ErrorLevel.STRICT
        results = analyzer.run([top_level, metadata])
    assert set(results) == {"top_level_nodes", "scene_metadata"}


def test_analyzer_close_drops_document(fbx_path):
    analyzer = FBXAnalyzer(str(fbx_path)).load()
    analyzer.close()
    with pytest.raises(RuntimeError):
        analyzer.context


def test_analyzer_propagates_format_errors(tmp_path):
    path = tmp_path / "bad.fbx"
    path.write_bytes(build_document(footer_code=bytes(16)))
    with pytest.raises(InvalidFooterCodeError):
        FBXAnalyzer(str(path), ErrorLevel.STRICT).load()


def test_analyzer_missing_file(tmp_path):
    with pytest.raises(FBXLoadError):
        with FBXAnalyzer(str(tmp_path / "nope.fbx")):
            pass


def test_top_level_summary(fbx_path):
    with FBXAnalyzer(str(fbx_path)) as analyzer:
        summary = TopLevelInspector().collect(analyzer.context)
    assert summary[0] == {
        "name": "FBXHeaderExtension",
        "property_count": 0,
        "child_count": 3,
        "descendant_count": 11,
    }
    assert [entry["name"] for entry in summary] == ["FBXHeaderExtension", "Definitions", "Objects", "Connections"]


def test_scene_metadata(fbx_path):
    with FBXAnalyzer(str(fbx_path)) as analyzer:
        metadata = SceneMetadataInspector().collect(analyzer.context)
    assert metadata.version == 7400
    assert metadata.creator == "fbx-builder 1.0"
    assert metadata.creation_time == "2021-06-15 13:45:30.250"
    assert metadata.definitions == [
        DefinitionSummary(class_name="Geometry", object_count=1),
        DefinitionSummary(class_name="Model", object_count=2),
    ]
    assert metadata.object_counts == {"Geometry": 1, "Model": 2}
    assert metadata.connection_count == 2
