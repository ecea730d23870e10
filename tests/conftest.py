"""Shared fixtures for repoviz tests."""

import pytest

from repoviz.core.builder import build_graph


SAMPLE_DESCRIPTORS = [
    {"path": "src/App.js", "type": "blob", "size": 120},
    {"path": "src/utils/math.js", "type": "blob", "size": 80},
    {"path": "src/utils/math.css", "type": "blob", "size": 40},
]


@pytest.fixture
def sample_descriptors():
    return [dict(d) for d in SAMPLE_DESCRIPTORS]


@pytest.fixture
def sample_graph(sample_descriptors):
    """root -> src -> {App.js, utils -> {math.js, math.css}}."""
    return build_graph(sample_descriptors)
