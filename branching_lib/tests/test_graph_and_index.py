"""
Tests for the adjacency graph and the spatial index.
"""

import pytest
from branching_lib.core.graph import UndirectedGraph
from branching_lib.core.types import Site
from branching_lib.spatial import SpatialIndex


def test_graph_is_symmetric_and_ordered():
    graph = UndirectedGraph.from_edges(4, [(0, 2), (0, 1), (3, 0)])

    assert graph.neighbors(0) == (2, 1, 3)
    assert graph.neighbors(1) == (0,)
    assert graph.has_edge(2, 0)
    assert graph.num_edges == 3
    assert sorted(graph.edges()) == [(0, 1), (0, 2), (0, 3)]


def test_graph_rejects_bad_edges():
    graph = UndirectedGraph(3)
    graph.add_edge(0, 1)

    with pytest.raises(ValueError):
        graph.add_edge(1, 0)
    with pytest.raises(ValueError):
        graph.add_edge(2, 2)
    with pytest.raises(IndexError):
        graph.add_edge(0, 3)
    with pytest.raises(IndexError):
        graph.neighbors(-1)


def test_nearest_site():
    sites = [Site(0.0, 0.0), Site(10.0, 0.0), Site(0.0, 10.0)]
    index = SpatialIndex(sites)

    assert index.nearest((1.0, 1.0)) == 0
    assert index.nearest((9.0, -3.0)) == 1
    assert index.nearest(Site(-5.0, 20.0)) == 2


def test_nearest_site_far_outside():
    """Any finite point resolves to a site, however far away."""
    index = SpatialIndex([Site(0.0, 0.0), Site(1.0, 1.0)])
    assert index.nearest((1e6, 1e6)) == 1


def test_nearest_site_tie_is_an_exact_minimizer():
    """Tie-breaking between equidistant sites is implementation-defined."""
    index = SpatialIndex([Site(-1.0, 0.0), Site(1.0, 0.0)])
    assert index.nearest((0.0, 0.0)) in (0, 1)


def test_query_radius():
    index = SpatialIndex([Site(float(i), 0.0) for i in range(5)])
    assert index.query_radius((2.0, 0.0), 1.0) == [1, 2, 3]


def test_spatial_index_contract_errors():
    with pytest.raises(ValueError):
        SpatialIndex([])

    index = SpatialIndex([Site(0.0, 0.0)])
    with pytest.raises(ValueError):
        index.nearest((float("nan"), 0.0))


def test_degree():
    graph = UndirectedGraph.from_edges(4, [(0, 1), (0, 2), (0, 3)])
    assert graph.degree(0) == 3
    assert graph.degree(3) == 1
    assert UndirectedGraph(1).degree(0) == 0
    with pytest.raises(IndexError):
        graph.degree(4)
