"""Pytest configuration and shared fixtures for edgeschematic tests."""

import pytest

from edgeschematic import Edge, EdgeType, GraphSettings, GraphTheme, Node


@pytest.fixture
def theme():
    """Default theme: radius 35 (+3 margin), border 8, edge width 10."""
    return GraphTheme()


@pytest.fixture
def settings():
    """Default settings with edge labels displayed."""
    return GraphSettings()


@pytest.fixture
def hidden_labels():
    """Settings with edge labels hidden."""
    return GraphSettings(display_edge_labels=False)


@pytest.fixture
def two_nodes():
    """Two nodes 200 units apart on the x axis."""
    return [Node("n1", "A", 0, 0), Node("n2", "B", 200, 0)]


@pytest.fixture
def directed_edge():
    return Edge("e1", "A", "B", EdgeType.DIRECTED, 5)


@pytest.fixture
def undirected_edge():
    return Edge("e1", "A", "B", EdgeType.UNDIRECTED, 5)


@pytest.fixture
def reciprocal_edges():
    """A -> B and B -> A."""
    return [Edge("ab", "A", "B"), Edge("ba", "B", "A")]


@pytest.fixture
def star_nodes():
    """Hub N at the origin with neighbours to the east and south."""
    return [
        Node("n", "N", 0, 0),
        Node("e", "E", 200, 0),
        Node("s", "S", 0, 200),
    ]
