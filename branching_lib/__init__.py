"""
Branching Network Library - grow river, road and crack patterns on a site graph

A fixed set of 2D sites, connected by their Delaunay adjacency, is grown
from seed points by a synchronous automaton. Each site is dormant, Live,
part of the finalized Path, Dead, or a Wall obstacle. The discrete states
can be sampled anywhere in the plane as a smoothly blended property.

Key Features:
- Seeded, reproducible site generation with edge sites and Lloyd relaxation
- Double-buffered growth steps (every site sees the pre-step state)
- Greedy wall carving between two points
- Cached interpolation weights blended with the latest site states

Example Usage:
    from branching_lib import NetworkBuilder

    network = NetworkBuilder(500, 100.0, 100.0, seed=1).add_edge_sites().relax_sites(1).build()
    network.seed(50.0, 50.0)
    network.mark_wall(20.0, 70.0, 80.0, 70.0)
    network.set_lifetime(6)

    key = network.register_query(40.0, 40.0)
    for _ in range(30):
        network.step()
    print(network.sample(key))
"""

__version__ = "0.1.0"

from .core.types import Site, StateKind, SiteState, SiteProperty, NumericProperty, WeightEntry, NO_COVERAGE
from .core.graph import UndirectedGraph
from .core.result import OperationResult, OperationStatus, ErrorCode
from .core.automaton import GrowthAutomaton, AutomatonSnapshot
from .core.interpolation import InterpolationCache
from .core.network import BranchingNetwork

from .spatial import SpatialIndex, DelaunayWeights

from .ops.build import NetworkParams, NetworkBuilder, create_network, build_network_from_params
from .ops.growth import grow, grow_until_settled
from .ops.pathfinding import find_path, mark_wall

from .analysis.query import count_states, get_sites_in_state, trace_path

__all__ = [
    "Site",
    "StateKind",
    "SiteState",
    "SiteProperty",
    "NumericProperty",
    "WeightEntry",
    "NO_COVERAGE",
    "UndirectedGraph",
    "OperationResult",
    "OperationStatus",
    "ErrorCode",
    "GrowthAutomaton",
    "AutomatonSnapshot",
    "InterpolationCache",
    "BranchingNetwork",
    "SpatialIndex",
    "DelaunayWeights",
    "NetworkParams",
    "NetworkBuilder",
    "create_network",
    "build_network_from_params",
    "grow",
    "grow_until_settled",
    "find_path",
    "mark_wall",
    "count_states",
    "get_sites_in_state",
    "trace_path",
]
