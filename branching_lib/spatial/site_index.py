"""
KD-tree spatial index for point-to-site lookups.
"""

from typing import List, Sequence
import numpy as np
from scipy.spatial import cKDTree

from ..core.types import PointLike, Site, as_site


class SpatialIndex:
    """
    Immutable nearest-site lookup over a fixed site set.

    When several sites are exactly equidistant from a query point, which
    of them ``nearest`` returns is left to the KD-tree.
    """

    def __init__(self, sites: Sequence[Site]):
        """
        Build the index.

        Parameters
        ----------
        sites : sequence of Site
            Site coordinates; the position in the sequence is the site index
        """
        if len(sites) == 0:
            raise ValueError("Cannot build a spatial index over zero sites")
        self._coords = np.array([site.to_tuple() for site in sites], dtype=float)
        self._tree = cKDTree(self._coords)

    def __len__(self) -> int:
        return len(self._coords)

    def nearest(self, point: PointLike) -> int:
        """Index of the site closest to ``point``."""
        point = as_site(point)
        _, index = self._tree.query(point.to_array(), k=1)
        return int(index)

    def query_radius(self, point: PointLike, radius: float) -> List[int]:
        """
        Sites within ``radius`` of ``point``.

        Returns
        -------
        indices : List[int]
            Sorted site indices
        """
        point = as_site(point)
        if radius < 0:
            raise ValueError(f"radius must be non-negative, got {radius}")
        return sorted(int(i) for i in self._tree.query_ball_point(point.to_array(), radius))
