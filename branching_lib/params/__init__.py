"""Parameter presets and validation for branching network generation."""

from .presets import (
    river_delta,
    road_grid,
    crack_pattern,
    sparse_debug,
    get_preset,
    list_presets,
    PRESETS,
)

from .validation import (
    validate_params,
    validate_and_warn,
    PARAM_BOUNDS,
)

__all__ = [
    # Presets
    "river_delta",
    "road_grid",
    "crack_pattern",
    "sparse_debug",
    "get_preset",
    "list_presets",
    "PRESETS",
    # Validation
    "validate_params",
    "validate_and_warn",
    "PARAM_BOUNDS",
]
