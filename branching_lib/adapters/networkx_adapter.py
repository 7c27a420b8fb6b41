"""
Adapter for converting between BranchingNetwork and NetworkX graphs.

This enables analysis of site graphs and growth trees with the NetworkX
algorithm library (components, shortest paths, tree metrics).
"""

import networkx as nx
from typing import Dict, List, Tuple, Hashable
from ..core.graph import UndirectedGraph
from ..core.network import BranchingNetwork
from ..core.types import Site, StateKind


def to_networkx_graph(network: BranchingNetwork) -> nx.Graph:
    """
    Convert the site graph of a network to a NetworkX graph.

    The resulting graph has node attributes:
    - 'coord': [x, y] position as list
    - 'state': str state name ("none", "live", "path", "dead", "wall")
    - 'parent': int or None growth parent

    And edge attributes:
    - 'length': float Euclidean distance between the sites

    Nodes and edges are inserted in site-index and graph order.

    Parameters
    ----------
    network : BranchingNetwork
        The network to convert

    Returns
    -------
    G : nx.Graph
        NetworkX graph keyed by site index
    """
    G = nx.Graph()
    props = network.automaton.properties

    for index, site in enumerate(network.sites):
        G.add_node(
            index,
            coord=[site.x, site.y],
            state=props[index].state.kind.value,
            parent=props[index].parent,
        )

    for a, b in network.graph.edges():
        G.add_edge(a, b, length=network.sites[a].distance_to(network.sites[b]))

    return G


def to_growth_tree(network: BranchingNetwork, path_only: bool = False) -> nx.DiGraph:
    """
    Directed graph of growth links, parent -> site.

    Parameters
    ----------
    network : BranchingNetwork
        The network to convert
    path_only : bool
        If True, keep only the finalized network: edges from each Path site
        to its recorded child

    Returns
    -------
    T : nx.DiGraph
        Forest whose nodes carry 'coord' and 'state' attributes
    """
    T = nx.DiGraph()
    props = network.automaton.properties

    def add(index: int) -> None:
        if index not in T:
            site = network.sites[index]
            T.add_node(index, coord=[site.x, site.y], state=props[index].state.kind.value)

    for index, prop in enumerate(props):
        if path_only:
            if prop.state.kind is StateKind.PATH:
                add(index)
                add(prop.state.child)
                T.add_edge(index, prop.state.child)
        elif prop.parent is not None:
            add(prop.parent)
            add(index)
            T.add_edge(prop.parent, index)

    return T


def from_networkx_graph(G: nx.Graph) -> Tuple[List[Site], UndirectedGraph, Dict[Hashable, int]]:
    """
    Convert a NetworkX graph with 'coord' node attributes to sites and a graph.

    Site indices follow ``G.nodes()`` order and neighbor order follows
    ``G.edges()`` order, so the same NetworkX graph always gives the same
    tie-breaking behavior.

    Parameters
    ----------
    G : nx.Graph
        Undirected graph; every node needs a 'coord' attribute [x, y]

    Returns
    -------
    sites : List[Site]
        Site list
    graph : UndirectedGraph
        Adjacency over site indices
    node_id_map : dict
        Mapping from NetworkX node IDs to site indices
    """
    if G.is_directed():
        raise ValueError("Expected an undirected graph")

    node_id_map = {}
    sites = []
    for node, data in G.nodes(data=True):
        if "coord" not in data:
            raise ValueError(f"Node {node!r} has no 'coord' attribute")
        node_id_map[node] = len(sites)
        sites.append(Site.from_tuple(data["coord"]))

    graph = UndirectedGraph(len(sites))
    for u, v in G.edges():
        if u == v:
            continue
        graph.add_edge(node_id_map[u], node_id_map[v])

    return sites, graph, node_id_map
