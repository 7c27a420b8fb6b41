"""
Default interpolation weights from the Delaunay triangulation of the sites.
"""

import logging
from typing import Sequence, Tuple
import numpy as np
from scipy.spatial import Delaunay, QhullError

from ..core.types import NO_COVERAGE, Site, WeightEntry

logger = logging.getLogger(__name__)


class DelaunayWeights:
    """
    Barycentric weights of the Delaunay triangle containing a query point.

    Points outside the convex hull of the sites get NO_COVERAGE. Fewer than
    three sites, or sites that are all collinear, cover nothing.
    """

    def __init__(self, sites: Sequence[Site]):
        self._triangulation = None

        if len(sites) < 3:
            logger.debug("%d sites cannot be triangulated; no interpolation coverage", len(sites))
            return

        points = np.array([site.to_tuple() for site in sites], dtype=float)
        try:
            self._triangulation = Delaunay(points)
        except QhullError as exc:
            logger.warning("Sites cannot be triangulated, no interpolation coverage: %s", exc)

    @property
    def has_coverage(self) -> bool:
        return self._triangulation is not None

    def __call__(self, point: Tuple[float, float]) -> WeightEntry:
        if not self.has_coverage:
            return NO_COVERAGE

        p = np.asarray(point, dtype=float)
        simplex = int(self._triangulation.find_simplex(p))
        if simplex < 0:
            return NO_COVERAGE

        transform = self._triangulation.transform[simplex]
        b = transform[:2].dot(p - transform[2])
        bary = np.clip(np.append(b, 1.0 - b.sum()), 0.0, None)
        bary /= bary.sum()

        vertices = self._triangulation.simplices[simplex]
        return WeightEntry.from_pairs(zip(vertices, bary))
