"""
Synchronous growth automaton over a site graph.

Each call to ``step`` computes every site's next state from the current
buffer, writes it into a second buffer and swaps the two, so neighbor reads
during a step always see the pre-step state.
"""

from dataclasses import dataclass
import logging
import numbers
from collections import Counter
from typing import List, Optional, Sequence, Tuple

from .graph import UndirectedGraph
from .types import (
    DEAD_PROPERTY,
    EMPTY_PROPERTY,
    WALL_PROPERTY,
    Site,
    SiteProperty,
    SiteState,
    StateKind,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AutomatonSnapshot:
    """Immutable copy of the automaton's per-site properties."""

    properties: Tuple[SiteProperty, ...]
    generation: int


def find_child(graph: UndirectedGraph, props: Sequence[SiteProperty], index: int) -> Optional[int]:
    """
    First neighbor of ``index`` (in graph order) whose parent is ``index``.

    When several branches claim the same parent, this first match decides
    which one is kept as the path.
    """
    for neighbor in graph.neighbors(index):
        if props[neighbor].parent == index:
            return neighbor
    return None


def nearest_live_neighbor(
    graph: UndirectedGraph,
    sites: Sequence[Site],
    props: Sequence[SiteProperty],
    index: int,
) -> Optional[int]:
    """
    Closest currently-Live neighbor of ``index``.

    Exact distance ties go to the neighbor enumerated later.
    """
    site = sites[index]
    best = None
    best_dist = 0.0
    for neighbor in graph.neighbors(index):
        if props[neighbor].state.kind is not StateKind.LIVE:
            continue
        dist = site.squared_distance_to(sites[neighbor])
        if best is None or dist <= best_dist:
            best = neighbor
            best_dist = dist
    return best


class GrowthAutomaton:
    """
    Per-site growth states evolving one synchronous generation at a time.

    Parameters
    ----------
    sites : sequence of Site
        Site coordinates, indexed by site id
    graph : UndirectedGraph
        Adjacency over the same indices
    """

    def __init__(self, sites: Sequence[Site], graph: UndirectedGraph):
        if graph.num_nodes != len(sites):
            raise ValueError(
                f"Graph has {graph.num_nodes} nodes but {len(sites)} sites were given"
            )
        self.sites = tuple(sites)
        self.graph = graph
        self.lifetime: Optional[int] = None
        self.generation = 0

        self._front: List[SiteProperty] = [EMPTY_PROPERTY] * len(self.sites)
        self._back: List[SiteProperty] = [EMPTY_PROPERTY] * len(self.sites)

    def __len__(self) -> int:
        return len(self._front)

    @property
    def properties(self) -> Sequence[SiteProperty]:
        """Current per-site properties; read-only for callers."""
        return self._front

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._front):
            raise IndexError(f"Site {index} out of range for {len(self._front)} sites")

    def property_at(self, index: int) -> SiteProperty:
        self._check_index(index)
        return self._front[index]

    def state_at(self, index: int) -> SiteState:
        return self.property_at(index).state

    def seed(self, index: int) -> None:
        """Force site ``index`` to Live(0) with no parent, whatever it was before."""
        self._check_index(index)
        self._front[index] = SiteProperty(SiteState.live(0))

    def set_wall(self, indices: Sequence[int]) -> None:
        """Turn every site in ``indices`` into a Wall."""
        for index in indices:
            self._check_index(index)
        for index in indices:
            self._front[index] = WALL_PROPERTY

    def set_lifetime(self, lifetime: int) -> None:
        """
        Set the number of Live steps a site may take before it resolves.

        Parameters
        ----------
        lifetime : int
            Non-negative step count
        """
        if isinstance(lifetime, bool) or not isinstance(lifetime, numbers.Integral):
            raise ValueError(f"lifetime must be an integer, got {lifetime!r}")
        if lifetime < 0:
            raise ValueError(f"lifetime must be non-negative, got {lifetime}")
        self.lifetime = int(lifetime)

    def is_ready(self) -> bool:
        return self.lifetime is not None

    def _next_property(self, index: int, current: Sequence[SiteProperty]) -> SiteProperty:
        prop = current[index]
        state = prop.state
        kind = state.kind

        if kind is StateKind.NONE:
            parent = nearest_live_neighbor(self.graph, self.sites, current, index)
            if parent is None:
                return prop
            return SiteProperty(SiteState.live(0), parent)

        if kind is StateKind.LIVE:
            if state.age + 1 < self.lifetime:
                return SiteProperty(SiteState.live(state.age + 1), prop.parent)
            child = find_child(self.graph, current, index)
            if child is None:
                return DEAD_PROPERTY
            return SiteProperty(SiteState.path(child), prop.parent)

        if kind is StateKind.PATH:
            child = state.child
            if current[child].parent == index:
                return prop
            child = find_child(self.graph, current, index)
            if child is None:
                return DEAD_PROPERTY
            return SiteProperty(SiteState.path(child), prop.parent)

        if kind is StateKind.DEAD:
            return DEAD_PROPERTY

        return prop

    def step(self) -> bool:
        """
        Advance every site by one generation.

        Returns
        -------
        performed : bool
            False if the lifetime has not been set (nothing happens),
            True once a step was performed
        """
        if self.lifetime is None:
            return False

        current = self._front
        back = self._back
        for index in range(len(current)):
            back[index] = self._next_property(index, current)

        self._front, self._back = back, current
        self.generation += 1

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("generation %d: %s", self.generation, dict(self.count_states()))
        return True

    def count_states(self) -> Counter:
        """Number of sites per StateKind."""
        return Counter(prop.state.kind for prop in self._front)

    def snapshot(self) -> AutomatonSnapshot:
        """Capture the current properties for later ``restore``."""
        return AutomatonSnapshot(properties=tuple(self._front), generation=self.generation)

    def restore(self, snapshot: AutomatonSnapshot) -> None:
        """Replace the current properties with a snapshot taken earlier."""
        if len(snapshot.properties) != len(self._front):
            raise ValueError(
                f"Snapshot has {len(snapshot.properties)} sites, automaton has {len(self._front)}"
            )
        self._front = list(snapshot.properties)
        self._back = [EMPTY_PROPERTY] * len(self._front)
        self.generation = snapshot.generation
