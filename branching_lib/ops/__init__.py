"""Operations for building and growing branching networks."""

from .build import (
    NetworkParams,
    NetworkBuilder,
    create_network,
    build_network_from_params,
)
from .growth import grow, grow_until_settled
from .pathfinding import find_path, mark_wall

__all__ = [
    "NetworkParams",
    "NetworkBuilder",
    "create_network",
    "build_network_from_params",
    "grow",
    "grow_until_settled",
    "find_path",
    "mark_wall",
]
