"""
Keyed cache of interpolation weights and the blend of site states.
"""

import logging
from typing import Callable, Dict, Optional, Sequence

from .ids import IDGenerator
from .types import NumericProperty, PointLike, SiteProperty, WeightEntry, as_site

logger = logging.getLogger(__name__)

WeightQuery = Callable[[tuple], WeightEntry]


def blend(entry: WeightEntry, props: Sequence[SiteProperty]) -> Optional[NumericProperty]:
    """
    Weighted sum of the one-hot properties of the sites in ``entry``.

    Parameters
    ----------
    entry : WeightEntry
        Site weights for the query point
    props : sequence of SiteProperty
        Current per-site properties

    Returns
    -------
    property : NumericProperty or None
        None when the entry has no coverage or no weights
    """
    if not entry.covered or not entry.weights:
        return None

    total = NumericProperty()
    for index, weight in entry.weights:
        if not 0 <= index < len(props):
            raise IndexError(f"Weight entry refers to site {index}, only {len(props)} sites exist")
        total = total.add(props[index].numeric().scale(weight))
    return total


class InterpolationCache:
    """
    Caches weight entries under integer keys.

    Weights depend only on site geometry, so they are computed once per key
    and reused; the blended value is recomputed from the current site states
    on every ``sample``.
    """

    def __init__(self, query_weights: WeightQuery):
        """
        Parameters
        ----------
        query_weights : callable
            Maps an (x, y) tuple to a WeightEntry
        """
        self._query_weights = query_weights
        self._entries: Dict[int, WeightEntry] = {}
        self._id_gen = IDGenerator()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: int) -> bool:
        return key in self._entries

    def query(self, point: PointLike) -> WeightEntry:
        """Run the weight query without caching."""
        return self._query_weights(as_site(point).to_tuple())

    def register_query(self, point: PointLike) -> int:
        """Compute and store the weight entry for ``point``; return its key."""
        entry = self.query(point)
        key = self._id_gen.next_id()
        self._entries[key] = entry
        logger.debug("registered key %d (covered=%s, %d weights)", key, entry.covered, len(entry.weights))
        return key

    def get_entry(self, key: int) -> WeightEntry:
        """Cached entry for ``key``; unknown keys raise KeyError."""
        try:
            return self._entries[key]
        except KeyError:
            raise KeyError(f"Unknown interpolation key {key}") from None

    def sample(self, key: int, props: Sequence[SiteProperty]) -> Optional[NumericProperty]:
        """Blend the current ``props`` using the weights cached under ``key``."""
        return blend(self.get_entry(key), props)

    def sample_at(self, point: PointLike, props: Sequence[SiteProperty]) -> Optional[NumericProperty]:
        """One-off query and blend at ``point`` without registering a key."""
        return blend(self.query(point), props)
