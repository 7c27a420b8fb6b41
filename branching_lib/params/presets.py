"""Parameter presets for common branching network layouts.

This module provides named NetworkParams presets so that callers can get a
reasonable site density, relaxation and lifetime for a given kind of
pattern without tuning each value.
"""

from ..ops.build import NetworkParams


def river_delta() -> NetworkParams:
    """
    Dense, well-relaxed sites with long-lived growth.

    Characteristics:
    - Many sites for smooth meandering channels
    - Two relaxation passes for even spacing
    - Long lifetime so branches commit late
    """
    return NetworkParams(
        num_sites=4000,
        bound_x=200.0,
        bound_y=100.0,
        edge_sites=True,
        relaxation_iterations=2,
        lifetime=12,
        seed=0,
    )


def road_grid() -> NetworkParams:
    """
    Strongly relaxed, nearly uniform sites with short lifetime.

    Characteristics:
    - Lloyd relaxation makes neighbor distances similar
    - Short lifetime gives frequent branching
    """
    return NetworkParams(
        num_sites=1500,
        bound_x=100.0,
        bound_y=100.0,
        edge_sites=True,
        relaxation_iterations=5,
        lifetime=4,
        seed=0,
    )


def crack_pattern() -> NetworkParams:
    """
    Unrelaxed random sites for jagged, irregular branches.
    """
    return NetworkParams(
        num_sites=2500,
        bound_x=100.0,
        bound_y=100.0,
        edge_sites=False,
        relaxation_iterations=0,
        lifetime=6,
        seed=0,
    )


def sparse_debug() -> NetworkParams:
    """
    Small network for debugging and tests.
    """
    return NetworkParams(
        num_sites=60,
        bound_x=10.0,
        bound_y=10.0,
        edge_sites=True,
        relaxation_iterations=1,
        lifetime=3,
        seed=42,
    )


PRESETS = {
    "river_delta": river_delta,
    "road_grid": road_grid,
    "crack_pattern": crack_pattern,
    "sparse_debug": sparse_debug,
}


def get_preset(name: str) -> NetworkParams:
    """
    Get a parameter preset by name.

    Parameters
    ----------
    name : str
        Preset name (e.g., "river_delta", "sparse_debug")

    Returns
    -------
    NetworkParams
        Parameter configuration

    Raises
    ------
    ValueError
        If preset name is not recognized
    """
    if name not in PRESETS:
        available = ", ".join(PRESETS.keys())
        raise ValueError(f"Unknown preset '{name}'. Available: {available}")

    return PRESETS[name]()


def list_presets() -> list:
    """List all available preset names."""
    return list(PRESETS.keys())
