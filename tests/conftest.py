"""Shared test fixtures for textmagnet tests."""

import pytest

from textmagnet.models import Document, Word


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture
def sort_pivot_words():
    """Two words over two sort methods."""
    return [
        Word.of("sort", "A#sort", "B#sort", count=2),
        Word.of("pivot", "A#sort"),
    ]


@pytest.fixture
def algorithm_words():
    """Nine words spread over six methods."""
    return [
        Word.of("sort", "A#sort", "B#sort"),
        Word.of("pivot", "A#sort"),
        Word.of("merge", "B#sort", "C#merge"),
        Word.of("array", "A#sort", "C#merge", "D#find"),
        Word.of("index", "D#find"),
        Word.of("search", "D#find", "E#search"),
        Word.of("binary", "E#search"),
        Word.of("tree", "F#insert"),
        Word.of("node", "F#insert", "E#search"),
    ]


@pytest.fixture
def make_docs():
    """Build documents from type paths, ids in order."""

    def _make(*paths):
        return [Document.from_container(i, path) for i, path in enumerate(paths)]

    return _make


@pytest.fixture
def light_docs(make_docs):
    """Lights plus an unrelated camera."""
    return make_docs(
        "scene.light.SpotLight",
        "scene.light.PointLight",
        "scene.light.DirectionalLight",
        "scene.Camera",
    )
