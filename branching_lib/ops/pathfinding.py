"""
Greedy graph walks used to carve walls into a network.
"""

import logging
from typing import List, Optional, Sequence

from ..core.graph import UndirectedGraph
from ..core.network import BranchingNetwork
from ..core.result import ErrorCode, OperationResult
from ..core.types import PointLike, Site, as_site

logger = logging.getLogger(__name__)


def find_path(
    graph: UndirectedGraph,
    sites: Sequence[Site],
    from_index: int,
    to_index: int,
    max_steps: Optional[int] = None,
) -> Optional[List[int]]:
    """
    Greedy geodesic walk from one site to another.

    At every step the walk moves to the neighbor closest to the target
    (the first one in neighbor order on ties). This is not a shortest-path
    search: it can stall in a local minimum even when a path exists.

    Parameters
    ----------
    graph : UndirectedGraph
        Site adjacency
    sites : sequence of Site
        Site coordinates
    from_index : int
        Start site
    to_index : int
        Target site
    max_steps : int, optional
        Maximum number of moves (default: number of sites). A walk that
        cycles between equally good neighbors gives up after this many.

    Returns
    -------
    path : List[int] or None
        Visited sites including both endpoints, or None if the walk hit a
        site with no neighbors or ran out of steps
    """
    for index in (from_index, to_index):
        if not 0 <= index < len(sites):
            raise IndexError(f"Site {index} out of range for {len(sites)} sites")

    if max_steps is None:
        max_steps = len(sites)

    target = sites[to_index]
    current = from_index
    path = [current]

    while current != to_index:
        if len(path) > max_steps:
            logger.warning(
                "greedy walk %d -> %d gave up after %d steps", from_index, to_index, max_steps
            )
            return None

        if graph.degree(current) == 0:
            logger.debug("greedy walk %d -> %d stuck at isolated site %d", from_index, to_index, current)
            return None

        best = None
        best_dist = 0.0
        for neighbor in graph.neighbors(current):
            dist = sites[neighbor].squared_distance_to(target)
            if best is None or dist < best_dist:
                best = neighbor
                best_dist = dist

        current = best
        path.append(current)

    return path


def mark_wall(
    network: BranchingNetwork,
    from_point: PointLike,
    to_point: PointLike,
    max_steps: Optional[int] = None,
) -> OperationResult:
    """
    Turn the greedy path between two points into Wall sites.

    Both points are resolved to their nearest sites first. Sites on the
    path lose whatever state and parent they had. If no path is found the
    network is left untouched.

    Parameters
    ----------
    network : BranchingNetwork
        Network to modify
    from_point : tuple or Site
        Start of the wall
    to_point : tuple or Site
        End of the wall
    max_steps : int, optional
        Step bound passed to ``find_path``

    Returns
    -------
    result : OperationResult
        Result with new_ids['sites'] listing the wall sites in path order
    """
    from_point = as_site(from_point)
    to_point = as_site(to_point)

    if network.spatial_index is None:
        return OperationResult.failure("Cannot place a wall in an empty network", code=ErrorCode.NO_SITES)

    from_index = network.spatial_index.nearest(from_point)
    to_index = network.spatial_index.nearest(to_point)

    path = find_path(network.graph, network.sites, from_index, to_index, max_steps=max_steps)
    if path is None:
        return OperationResult.failure(
            message=f"No greedy path from site {from_index} to site {to_index}",
            code=ErrorCode.NO_PATH,
        )

    network.automaton.set_wall(path)
    return OperationResult.success(
        message=f"Marked {len(path)} sites as wall",
        new_ids={"sites": path},
        metadata={"from_site": from_index, "to_site": to_index},
    )
