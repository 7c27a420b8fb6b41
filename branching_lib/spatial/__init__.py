"""Spatial lookups and interpolation weights over the site set."""

from .site_index import SpatialIndex
from .weights import DelaunayWeights

__all__ = ["SpatialIndex", "DelaunayWeights"]
