"""
Branching network simulation object.
"""

import logging
from typing import Any, Callable, Dict, Optional, Sequence

from .automaton import AutomatonSnapshot, GrowthAutomaton
from .graph import UndirectedGraph
from .interpolation import InterpolationCache
from .result import ErrorCode, OperationResult
from .types import (
    NumericProperty,
    PointLike,
    SiteState,
    WeightEntry,
    as_site,
)
from ..spatial.site_index import SpatialIndex
from ..spatial.weights import DelaunayWeights

logger = logging.getLogger(__name__)


class BranchingNetwork:
    """
    A growing network over a fixed site graph.

    Owns all mutable simulation state (per-site growth states and the
    interpolation cache), so independent networks never share anything
    but the read-only sites and graph they were built from.
    """

    def __init__(
        self,
        sites: Sequence[PointLike],
        graph: UndirectedGraph,
        query_weights: Optional[Callable[[tuple], WeightEntry]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize branching network.

        Parameters
        ----------
        sites : sequence of Site or (x, y)
            Site coordinates, indexed by site id
        graph : UndirectedGraph
            Adjacency over the site indices
        query_weights : callable, optional
            Interpolation weight provider mapping (x, y) to a WeightEntry.
            Defaults to Delaunay barycentric weights over ``sites``.
        metadata : dict, optional
            Free-form network metadata (name, bounds, seed, ...)
        """
        self.sites = tuple(as_site(s) for s in sites)
        self.graph = graph
        self.metadata = metadata or {}

        self.automaton = GrowthAutomaton(self.sites, graph)
        self.spatial_index = SpatialIndex(self.sites) if self.sites else None

        if query_weights is None:
            query_weights = DelaunayWeights(self.sites)
        self.cache = InterpolationCache(query_weights)

    def __len__(self) -> int:
        return len(self.sites)

    def __repr__(self) -> str:
        return (
            f"BranchingNetwork(num_sites={self.num_sites}, num_edges={self.graph.num_edges}, "
            f"lifetime={self.lifetime}, generation={self.generation})"
        )

    @property
    def num_sites(self) -> int:
        return len(self.sites)

    @property
    def lifetime(self) -> Optional[int]:
        return self.automaton.lifetime

    @property
    def generation(self) -> int:
        return self.automaton.generation

    def nearest_site(self, x: float, y: float) -> Optional[int]:
        """Index of the site nearest to (x, y), or None for an empty network."""
        if self.spatial_index is None:
            return None
        return self.spatial_index.nearest((x, y))

    def seed(self, x: float, y: float) -> OperationResult:
        """
        Start growth at the site nearest to (x, y).

        The site becomes Live(0) with no parent, overwriting any previous
        state including Wall.

        Returns
        -------
        result : OperationResult
            Result with new_ids['site'] containing the seeded site index
        """
        index = self.nearest_site(x, y)
        if index is None:
            return OperationResult.failure("Cannot seed an empty network", code=ErrorCode.NO_SITES)

        self.automaton.seed(index)
        logger.debug("seeded site %d at (%s, %s)", index, x, y)
        return OperationResult.success(
            message=f"Seeded site {index}",
            new_ids={"site": index},
        )

    def mark_wall(self, x: float, y: float, prev_x: float, prev_y: float) -> OperationResult:
        """
        Carve a wall along the greedy graph path from (prev_x, prev_y) to (x, y).

        No site changes if the path search gives up.
        """
        from ..ops.pathfinding import mark_wall

        return mark_wall(self, (prev_x, prev_y), (x, y))

    def set_lifetime(self, lifetime: int) -> None:
        """Set how many steps a site stays Live before resolving."""
        self.automaton.set_lifetime(lifetime)

    def step(self) -> bool:
        """Advance one generation; False if the lifetime is not set yet."""
        return self.automaton.step()

    def register_query(self, x: float, y: float) -> int:
        """Cache the interpolation weights for (x, y) and return their key."""
        return self.cache.register_query((x, y))

    def sample(self, key: int) -> Optional[NumericProperty]:
        """Blended state at a registered query point, using the current states."""
        return self.cache.sample(key, self.automaton.properties)

    def sample_at(self, x: float, y: float) -> Optional[NumericProperty]:
        """Blended state at (x, y) without caching the weights."""
        return self.cache.sample_at((x, y), self.automaton.properties)

    def property_of(self, index: int) -> NumericProperty:
        """One-hot property of a single site."""
        return self.automaton.property_at(index).numeric()

    def state_of(self, index: int) -> SiteState:
        return self.automaton.state_at(index)

    def parent_of(self, index: int) -> Optional[int]:
        return self.automaton.property_at(index).parent

    def snapshot(self) -> AutomatonSnapshot:
        """In-memory copy of the growth state for deterministic replay."""
        return self.automaton.snapshot()

    def restore(self, snapshot: AutomatonSnapshot) -> None:
        """Restore growth state from ``snapshot``; cached weights are kept."""
        self.automaton.restore(snapshot)
