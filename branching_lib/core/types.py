"""
Site, state and property types for branching networks.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union
import numpy as np


@dataclass(frozen=True)
class Site:
    """Fixed 2D point acting as a node of the growth graph."""

    x: float
    y: float

    def to_array(self) -> np.ndarray:
        """Convert to numpy array."""
        return np.array([self.x, self.y])

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "Site":
        """Create from numpy array."""
        return cls(float(arr[0]), float(arr[1]))

    def to_tuple(self) -> Tuple[float, float]:
        """Convert to tuple."""
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, t: Tuple[float, float]) -> "Site":
        """Create from tuple."""
        return cls(float(t[0]), float(t[1]))

    def squared_distance_to(self, other: "Site") -> float:
        """Squared Euclidean distance to another site."""
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def distance_to(self, other: "Site") -> float:
        """Euclidean distance to another site."""
        return float(np.sqrt(self.squared_distance_to(other)))


PointLike = Union[Site, Tuple[float, float]]


def as_site(point: PointLike) -> Site:
    """Coerce a tuple or Site into a Site, rejecting non-finite coordinates."""
    if not isinstance(point, Site):
        point = Site.from_tuple(point)
    if not (np.isfinite(point.x) and np.isfinite(point.y)):
        raise ValueError(f"Point {point.to_tuple()} has non-finite coordinates")
    return point


class StateKind(Enum):
    """Discrete growth state of a site."""
    NONE = "none"
    LIVE = "live"
    PATH = "path"
    DEAD = "dead"
    WALL = "wall"


@dataclass(frozen=True)
class SiteState:
    """
    Tagged growth state.

    ``value`` carries the age for LIVE and the child site index for PATH;
    it is None for every other kind.
    """

    kind: StateKind
    value: Optional[int] = None

    @classmethod
    def none(cls) -> "SiteState":
        return _NONE

    @classmethod
    def live(cls, age: int) -> "SiteState":
        return cls(StateKind.LIVE, age)

    @classmethod
    def path(cls, child: int) -> "SiteState":
        return cls(StateKind.PATH, child)

    @classmethod
    def dead(cls) -> "SiteState":
        return _DEAD

    @classmethod
    def wall(cls) -> "SiteState":
        return _WALL

    @property
    def age(self) -> int:
        """Completed steps since becoming Live."""
        if self.kind is not StateKind.LIVE:
            raise ValueError(f"{self} has no age")
        return self.value

    @property
    def child(self) -> int:
        """Downstream neighbor of a Path site."""
        if self.kind is not StateKind.PATH:
            raise ValueError(f"{self} has no child")
        return self.value

    def __str__(self) -> str:
        if self.value is None:
            return self.kind.name.capitalize()
        return f"{self.kind.name.capitalize()}({self.value})"


_NONE = SiteState(StateKind.NONE)
_DEAD = SiteState(StateKind.DEAD)
_WALL = SiteState(StateKind.WALL)


@dataclass(frozen=True)
class NumericProperty:
    """
    Continuous per-state weights, one component per StateKind.

    A single site's property is one-hot; blended properties are convex
    combinations and still sum to 1.
    """

    state_none: float = 0.0
    state_live: float = 0.0
    state_path: float = 0.0
    state_dead: float = 0.0
    state_wall: float = 0.0

    @classmethod
    def from_state(cls, state: SiteState) -> "NumericProperty":
        """One-hot encoding of a discrete state."""
        return cls(**{f"state_{state.kind.value}": 1.0})

    def add(self, other: "NumericProperty") -> "NumericProperty":
        return NumericProperty(
            state_none=self.state_none + other.state_none,
            state_live=self.state_live + other.state_live,
            state_path=self.state_path + other.state_path,
            state_dead=self.state_dead + other.state_dead,
            state_wall=self.state_wall + other.state_wall,
        )

    def scale(self, factor: float) -> "NumericProperty":
        return NumericProperty(
            state_none=self.state_none * factor,
            state_live=self.state_live * factor,
            state_path=self.state_path * factor,
            state_dead=self.state_dead * factor,
            state_wall=self.state_wall * factor,
        )

    def lerp(self, other: "NumericProperty", t: float) -> "NumericProperty":
        """Linear interpolation toward ``other`` (t=0 gives self, t=1 gives other)."""
        return self.scale(1.0 - t).add(other.scale(t))

    def total(self) -> float:
        return float(self.to_array().sum())

    def dominant(self) -> StateKind:
        """State kind with the largest component (first wins on ties)."""
        return list(StateKind)[int(np.argmax(self.to_array()))]

    def to_array(self) -> np.ndarray:
        """Convert to numpy array ordered as StateKind."""
        return np.array([
            self.state_none,
            self.state_live,
            self.state_path,
            self.state_dead,
            self.state_wall,
        ])

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "state_none": self.state_none,
            "state_live": self.state_live,
            "state_path": self.state_path,
            "state_dead": self.state_dead,
            "state_wall": self.state_wall,
        }


@dataclass(frozen=True)
class SiteProperty:
    """Growth state of a site together with the neighbor that made it Live."""

    state: SiteState
    parent: Optional[int] = None

    def numeric(self) -> NumericProperty:
        return NumericProperty.from_state(self.state)


EMPTY_PROPERTY = SiteProperty(SiteState.none())
DEAD_PROPERTY = SiteProperty(SiteState.dead())
WALL_PROPERTY = SiteProperty(SiteState.wall())


@dataclass(frozen=True)
class WeightEntry:
    """
    Result of a spatial interpolation query.

    Either "no coverage" (``covered`` is False) or a tuple of
    (site index, weight) pairs whose weights sum to 1.
    """

    weights: Tuple[Tuple[int, float], ...] = field(default_factory=tuple)
    covered: bool = True

    @classmethod
    def from_pairs(cls, pairs) -> "WeightEntry":
        return cls(weights=tuple((int(i), float(w)) for i, w in pairs))

    def total_weight(self) -> float:
        return float(sum(w for _, w in self.weights))


NO_COVERAGE = WeightEntry(weights=(), covered=False)
