"""
Construction operations for building branching networks.

Sites are sampled uniformly in a bounding rectangle from a seeded RNG,
optionally augmented with evenly spaced boundary sites and relaxed with
Lloyd iterations; the graph is the edge set of their Delaunay triangulation.
"""

from dataclasses import dataclass
import logging
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple
import numpy as np
from scipy.spatial import Delaunay, QhullError, Voronoi

from ..core.graph import UndirectedGraph
from ..core.network import BranchingNetwork
from ..core.types import PointLike, Site, WeightEntry

logger = logging.getLogger(__name__)


@dataclass
class NetworkParams:
    """
    Parameters for generating a network.

    Units: coordinates are in arbitrary map units; ``bound_x`` and
    ``bound_y`` are the width and height of the sampling rectangle.
    """

    num_sites: int = 1000
    bound_x: float = 100.0
    bound_y: float = 100.0
    edge_sites: bool = True
    edge_num_x: Optional[int] = None  # sites per horizontal side (None: derived)
    edge_num_y: Optional[int] = None  # sites per vertical side (None: derived)
    relaxation_iterations: int = 1
    lifetime: Optional[int] = 8
    seed: int = 0

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "num_sites": self.num_sites,
            "bound_x": self.bound_x,
            "bound_y": self.bound_y,
            "edge_sites": self.edge_sites,
            "edge_num_x": self.edge_num_x,
            "edge_num_y": self.edge_num_y,
            "relaxation_iterations": self.relaxation_iterations,
            "lifetime": self.lifetime,
            "seed": self.seed,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "NetworkParams":
        """Create from dictionary."""
        return cls(
            num_sites=d.get("num_sites", 1000),
            bound_x=d.get("bound_x", 100.0),
            bound_y=d.get("bound_y", 100.0),
            edge_sites=d.get("edge_sites", True),
            edge_num_x=d.get("edge_num_x"),
            edge_num_y=d.get("edge_num_y"),
            relaxation_iterations=d.get("relaxation_iterations", 1),
            lifetime=d.get("lifetime", 8),
            seed=d.get("seed", 0),
        )


def _polygon_centroid(vertices: np.ndarray) -> Optional[np.ndarray]:
    """Area centroid of a simple polygon given its ordered vertices."""
    x = vertices[:, 0]
    y = vertices[:, 1]
    x_next = np.roll(x, -1)
    y_next = np.roll(y, -1)
    cross = x * y_next - x_next * y
    area = cross.sum() / 2.0
    if abs(area) < 1e-15:
        return None
    cx = ((x + x_next) * cross).sum() / (6.0 * area)
    cy = ((y + y_next) * cross).sum() / (6.0 * area)
    return np.array([cx, cy])


def _lloyd_step(points: np.ndarray, bound_x: float, bound_y: float) -> np.ndarray:
    """
    Move every point to the centroid of its Voronoi cell clipped to the box.

    Clipping is done by mirroring the points across the four sides, which
    makes the cell of every real site bounded by the box edges.
    """
    mirrored = [points]
    for axis, bound in ((0, 0.0), (0, bound_x), (1, 0.0), (1, bound_y)):
        off_edge = np.abs(points[:, axis] - bound) > 1e-12
        reflected = points[off_edge].copy()
        reflected[:, axis] = 2.0 * bound - reflected[:, axis]
        mirrored.append(reflected)

    try:
        voronoi = Voronoi(np.vstack(mirrored))
    except QhullError as exc:
        raise ValueError(f"Voronoi diagram failed during relaxation: {exc}") from exc

    relaxed = points.copy()
    upper = np.array([bound_x, bound_y])
    for i in range(len(points)):
        region = voronoi.regions[voronoi.point_region[i]]
        if not region or -1 in region:
            continue
        centroid = _polygon_centroid(voronoi.vertices[region])
        if centroid is not None:
            relaxed[i] = np.clip(centroid, 0.0, upper)
    return relaxed


class NetworkBuilder:
    """
    Fluent builder for site sets and their Delaunay adjacency graph.

    Example
    -------
    >>> network = (
    ...     NetworkBuilder(500, 100.0, 80.0, seed=7)
    ...     .add_edge_sites()
    ...     .relax_sites(2)
    ...     .build()
    ... )
    """

    def __init__(self, num: int, bound_x: float, bound_y: float, seed: int = 0):
        """
        Sample ``num`` sites uniformly in [0, bound_x) x [0, bound_y).

        Parameters
        ----------
        num : int
            Number of random sites
        bound_x, bound_y : float
            Size of the bounding rectangle
        seed : int
            RNG seed; the same seed always gives the same sites
        """
        if num < 0:
            raise ValueError(f"num must be non-negative, got {num}")
        if bound_x <= 0 or bound_y <= 0:
            raise ValueError(f"Bounds must be positive, got ({bound_x}, {bound_y})")

        self.bound_x = float(bound_x)
        self.bound_y = float(bound_y)
        self.seed = seed

        rng = np.random.default_rng(seed)
        self._points = rng.uniform(0.0, 1.0, size=(num, 2)) * np.array([self.bound_x, self.bound_y])

    @classmethod
    def from_sites(cls, sites: Sequence[PointLike], bound_x: float, bound_y: float) -> "NetworkBuilder":
        """Start from an explicit site list instead of random sampling."""
        builder = cls(0, bound_x, bound_y)
        builder._points = np.array(
            [s.to_tuple() if isinstance(s, Site) else tuple(s) for s in sites],
            dtype=float,
        ).reshape(-1, 2)
        return builder

    @property
    def sites(self) -> List[Site]:
        return [Site.from_array(p) for p in self._points]

    def __len__(self) -> int:
        return len(self._points)

    def add_edge_sites(
        self,
        edge_num_x: Optional[int] = None,
        edge_num_y: Optional[int] = None,
    ) -> "NetworkBuilder":
        """
        Append evenly spaced sites along the four sides of the rectangle.

        Parameters
        ----------
        edge_num_x : int, optional
            Sites per horizontal side; defaults to
            ``sqrt(n / bound_y * bound_x)`` for the current site count n
        edge_num_y : int, optional
            Sites per vertical side; defaults to ``sqrt(n / bound_x * bound_y)``

        Returns
        -------
        builder : NetworkBuilder
            Self, for chaining
        """
        n = len(self._points)
        if edge_num_x is None:
            edge_num_x = int(np.sqrt(n / self.bound_y * self.bound_x))
        if edge_num_y is None:
            edge_num_y = int(np.sqrt(n / self.bound_x * self.bound_y))

        corners = [
            (0.0, 0.0),
            (0.0, self.bound_y),
            (self.bound_x, self.bound_y),
            (self.bound_x, 0.0),
        ]
        edge_points = []
        for i, corner in enumerate(corners):
            nxt = corners[(i + 1) % len(corners)]
            count = edge_num_x if i % 2 == 1 else edge_num_y
            for j in range(count):
                t = j / count
                edge_points.append((
                    corner[0] * (1.0 - t) + nxt[0] * t,
                    corner[1] * (1.0 - t) + nxt[1] * t,
                ))

        if edge_points:
            self._points = np.vstack([self._points, np.array(edge_points)])
        logger.debug("added %d edge sites", len(edge_points))
        return self

    def relax_sites(self, times: int) -> "NetworkBuilder":
        """
        Apply ``times`` Lloyd relaxation iterations.

        Returns
        -------
        builder : NetworkBuilder
            Self, for chaining
        """
        if times < 0:
            raise ValueError(f"times must be non-negative, got {times}")
        if times == 0:
            return self
        if len(self._points) < 3:
            raise ValueError(f"Relaxation needs at least 3 sites, have {len(self._points)}")

        for _ in range(times):
            self._points = _lloyd_step(self._points, self.bound_x, self.bound_y)
        logger.info("relaxed %d sites with %d Lloyd iterations", len(self._points), times)
        return self

    def build_graph(self) -> Tuple[List[Site], UndirectedGraph]:
        """
        Triangulate the sites and reduce the triangles to an undirected graph.

        Each triangle contributes its three edges; an edge shared by two
        triangles is added once, in the order it is first encountered.

        Returns
        -------
        sites : List[Site]
            The site list
        graph : UndirectedGraph
            Deduplicated Delaunay adjacency
        """
        if len(self._points) < 3:
            raise ValueError(f"Triangulation needs at least 3 sites, have {len(self._points)}")
        try:
            triangulation = Delaunay(self._points)
        except QhullError as exc:
            raise ValueError(f"Delaunay triangulation failed: {exc}") from exc

        graph = UndirectedGraph(len(self._points))
        seen = set()
        for a, b, c in triangulation.simplices:
            for u, v in ((a, b), (b, c), (c, a)):
                key = (min(u, v), max(u, v))
                if key in seen:
                    continue
                seen.add(key)
                graph.add_edge(int(u), int(v))

        logger.info("built graph with %d sites and %d edges", graph.num_nodes, graph.num_edges)
        return self.sites, graph

    def build(
        self,
        query_weights: Optional[Callable[[tuple], WeightEntry]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> BranchingNetwork:
        """Triangulate and wrap the result in a BranchingNetwork."""
        sites, graph = self.build_graph()
        if metadata is None:
            metadata = {
                "bounds": (self.bound_x, self.bound_y),
                "seed": self.seed,
            }
        return BranchingNetwork(sites, graph, query_weights=query_weights, metadata=metadata)


def create_network(
    sites: Sequence[PointLike],
    graph: UndirectedGraph,
    query_weights: Optional[Callable[[tuple], WeightEntry]] = None,
    metadata: Optional[dict] = None,
) -> BranchingNetwork:
    """
    Create a network from an existing site list and graph.

    Parameters
    ----------
    sites : sequence of Site or (x, y)
        Site coordinates
    graph : UndirectedGraph
        Adjacency over the site indices
    query_weights : callable, optional
        Interpolation weight provider (default: Delaunay barycentric)
    metadata : dict, optional
        Network metadata

    Returns
    -------
    network : BranchingNetwork
        New network with every site dormant

    Example
    -------
    >>> graph = UndirectedGraph.from_edges(3, [(0, 1), (1, 2)])
    >>> network = create_network([(0, 0), (1, 0), (2, 0)], graph)
    """
    if metadata is None:
        metadata = {"name": "Branching Network"}
    return BranchingNetwork(sites, graph, query_weights=query_weights, metadata=metadata)


def build_network_from_params(
    params: NetworkParams,
    query_weights: Optional[Callable[[tuple], WeightEntry]] = None,
) -> BranchingNetwork:
    """
    Run the full builder pipeline described by ``params``.

    The lifetime from ``params`` is applied to the returned network when set.
    """
    builder = NetworkBuilder(params.num_sites, params.bound_x, params.bound_y, seed=params.seed)
    if params.edge_sites:
        builder.add_edge_sites(params.edge_num_x, params.edge_num_y)
    builder.relax_sites(params.relaxation_iterations)

    network = builder.build(query_weights=query_weights, metadata={"params": params.to_dict()})
    if params.lifetime is not None:
        network.set_lifetime(params.lifetime)
    return network
