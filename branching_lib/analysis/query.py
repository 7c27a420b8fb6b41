"""
Query and topology analysis functions.
"""

from typing import Dict, List, Tuple
from ..core.network import BranchingNetwork
from ..core.types import StateKind


def count_states(network: BranchingNetwork) -> Dict[str, int]:
    """
    Number of sites in each growth state.

    Returns
    -------
    counts : Dict[str, int]
        Mapping of state name ("none", "live", ...) to site count; every
        state is present, possibly with 0
    """
    counts = network.automaton.count_states()
    return {kind.value: counts.get(kind, 0) for kind in StateKind}


def get_sites_in_state(network: BranchingNetwork, kind: StateKind) -> List[int]:
    """Indices of all sites currently in state ``kind``, ascending."""
    return [
        index
        for index, prop in enumerate(network.automaton.properties)
        if prop.state.kind is kind
    ]


def get_parent_links(network: BranchingNetwork) -> List[Tuple[int, int]]:
    """
    All (parent, site) growth links currently recorded.

    Every link joins two graph neighbors.
    """
    return [
        (prop.parent, index)
        for index, prop in enumerate(network.automaton.properties)
        if prop.parent is not None
    ]


def trace_path(network: BranchingNetwork, start: int) -> List[int]:
    """
    Follow Path child links downstream from ``start``.

    Parameters
    ----------
    network : BranchingNetwork
        Network to query
    start : int
        Site to start from

    Returns
    -------
    sites : List[int]
        ``start`` followed by each child in turn. The walk ends at the first
        site that is not a Path (that site is included) or when a site would
        be visited twice.
    """
    props = network.automaton.properties
    if not 0 <= start < len(props):
        raise IndexError(f"Site {start} out of range for {len(props)} sites")

    sites = [start]
    visited = {start}
    current = start
    while props[current].state.kind is StateKind.PATH:
        child = props[current].state.child
        if child in visited:
            break
        sites.append(child)
        visited.add(child)
        current = child
    return sites


def get_path_roots(network: BranchingNetwork) -> List[int]:
    """
    Path sites that no other Path site points to.

    These are the upstream ends of finalized branches, usually the seeds.
    """
    props = network.automaton.properties
    children = {
        prop.state.child for prop in props if prop.state.kind is StateKind.PATH
    }
    return [
        index
        for index, prop in enumerate(props)
        if prop.state.kind is StateKind.PATH and index not in children
    ]
