"""Shared fixtures: FBX files written to a temporary directory."""

import pytest

from fbx_builder import ChainSpec, build_document

DEEP_CHAIN_DEPTH = 3000


@pytest.fixture
def fbx_path(tmp_path):
    path = tmp_path / "sample.fbx"
    path.write_bytes(build_document())
    return path


@pytest.fixture
def deep_fbx_path(tmp_path):
    """A file whose only top-level node nests ``DEEP_CHAIN_DEPTH`` levels deep."""

    path = tmp_path / "deep.fbx"
    path.write_bytes(build_document([ChainSpec(DEEP_CHAIN_DEPTH)]))
    return path
