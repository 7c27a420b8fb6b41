import pytest

from branching_lib.core.graph import UndirectedGraph
from branching_lib.core.types import WeightEntry
from branching_lib.ops.build import create_network


@pytest.fixture
def line_network():
    """Five sites on the x axis joined as 0-1-2-3-4."""
    sites = [(float(i), 0.0) for i in range(5)]
    graph = UndirectedGraph.from_edges(5, [(0, 1), (1, 2), (2, 3), (3, 4)])
    return create_network(sites, graph)


@pytest.fixture
def grid_network():
    """3x3 unit grid with 4-neighborhood; site index = row * 3 + col."""
    sites = [(float(col), float(row)) for row in range(3) for col in range(3)]
    edges = []
    for row in range(3):
        for col in range(3):
            index = row * 3 + col
            if col < 2:
                edges.append((index, index + 1))
            if row < 2:
                edges.append((index, index + 3))
    graph = UndirectedGraph.from_edges(9, edges)
    return create_network(sites, graph)


class CountingWeights:
    """Weight query that returns fixed entries and records every call."""

    def __init__(self, entries):
        self.entries = entries
        self.calls = []

    def __call__(self, point):
        self.calls.append(point)
        return self.entries.get(point, WeightEntry.from_pairs([]))


@pytest.fixture
def counting_weights():
    return CountingWeights
