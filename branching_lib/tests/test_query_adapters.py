"""
Tests for state queries and the NetworkX adapter.
"""

import pytest
import networkx as nx
from branching_lib.adapters import from_networkx_graph, to_growth_tree, to_networkx_graph
from branching_lib.analysis import (
    count_states,
    get_parent_links,
    get_path_roots,
    get_sites_in_state,
    trace_path,
)
from branching_lib.core.types import StateKind
from branching_lib.ops.build import build_network_from_params, create_network
from branching_lib.params import get_preset


@pytest.fixture
def grown_line(line_network):
    """Line network three steps after seeding site 0 with lifetime 2."""
    line_network.set_lifetime(2)
    line_network.seed(0.0, 0.0)
    for _ in range(3):
        line_network.step()
    return line_network


def test_count_states(grown_line):
    counts = count_states(grown_line)
    assert counts == {"none": 1, "live": 2, "path": 2, "dead": 0, "wall": 0}


def test_get_sites_in_state(grown_line):
    assert get_sites_in_state(grown_line, StateKind.PATH) == [0, 1]
    assert get_sites_in_state(grown_line, StateKind.LIVE) == [2, 3]
    assert get_sites_in_state(grown_line, StateKind.WALL) == []


def test_parent_links_and_roots(grown_line):
    assert get_parent_links(grown_line) == [(0, 1), (1, 2), (2, 3)]
    assert get_path_roots(grown_line) == [0]


def test_trace_path(grown_line):
    assert trace_path(grown_line, 0) == [0, 1, 2]
    assert trace_path(grown_line, 4) == [4]
    with pytest.raises(IndexError):
        trace_path(grown_line, 5)


def test_to_networkx_graph(grown_line):
    G = to_networkx_graph(grown_line)

    assert G.number_of_nodes() == 5
    assert G.number_of_edges() == 4
    assert G.nodes[0]["state"] == "path"
    assert G.nodes[3]["parent"] == 2
    assert G.nodes[4]["coord"] == [4.0, 0.0]
    assert G.edges[1, 2]["length"] == pytest.approx(1.0)
    assert nx.is_connected(G)


def test_to_growth_tree(grown_line):
    tree = to_growth_tree(grown_line)
    assert sorted(tree.edges()) == [(0, 1), (1, 2), (2, 3)]
    assert nx.is_forest(tree)

    path_tree = to_growth_tree(grown_line, path_only=True)
    assert sorted(path_tree.edges()) == [(0, 1), (1, 2)]
    assert path_tree.nodes[2]["state"] == "live"


def test_from_networkx_graph():
    G = nx.Graph()
    G.add_node("a", coord=[0.0, 0.0])
    G.add_node("b", coord=[1.0, 0.0])
    G.add_node("c", coord=[2.0, 0.0])
    G.add_edge("a", "b")
    G.add_edge("b", "c")

    sites, graph, node_id_map = from_networkx_graph(G)

    assert node_id_map == {"a": 0, "b": 1, "c": 2}
    assert [s.to_tuple() for s in sites] == [(0.0, 0.0), (1.0, 0.0), (2.0, 0.0)]
    assert graph.neighbors(1) == (0, 2)

    network = create_network(sites, graph)
    network.set_lifetime(1)
    network.seed(0.0, 0.0)
    network.step()
    assert network.parent_of(1) == 0


def test_networkx_roundtrip_keeps_adjacency(grid_network):
    sites, graph, _ = from_networkx_graph(to_networkx_graph(grid_network))
    assert list(sites) == list(grid_network.sites)
    assert sorted(graph.edges()) == sorted(grid_network.graph.edges())


def test_from_networkx_graph_errors():
    with pytest.raises(ValueError):
        from_networkx_graph(nx.DiGraph())

    G = nx.Graph()
    G.add_node(0)
    with pytest.raises(ValueError):
        from_networkx_graph(G)


def test_parent_links_follow_graph_edges():
    """Every recorded growth parent is a graph neighbor of its site."""
    network = build_network_from_params(get_preset("sparse_debug"))
    network.seed(5.0, 5.0)
    network.seed(1.0, 9.0)
    for _ in range(6):
        network.step()

    links = get_parent_links(network)
    assert links
    for parent, index in links:
        assert network.graph.has_edge(parent, index)
