"""Parameter validation with bounds checking.

This module checks NetworkParams against reasonable ranges and catches
combinations that make triangulation or growth degenerate.
"""

import warnings
from typing import List, Tuple
from ..ops.build import NetworkParams


PARAM_BOUNDS = {
    "num_sites": (3, 1_000_000, "sites"),
    "bound_x": (1e-6, 1e9, "units"),
    "bound_y": (1e-6, 1e9, "units"),
    "edge_num_x": (0, 100_000, "sites"),
    "edge_num_y": (0, 100_000, "sites"),
    "relaxation_iterations": (0, 100, "iterations"),
    "lifetime": (0, 10_000, "steps"),
}


def validate_params(params: NetworkParams) -> Tuple[bool, List[str]]:
    """
    Validate NetworkParams against bounds.

    Parameters
    ----------
    params : NetworkParams
        Parameters to validate

    Returns
    -------
    is_valid : bool
        True if all parameters are valid
    warnings : list of str
        List of validation warnings/errors
    """
    issues = []

    for param_name, (min_val, max_val, unit) in PARAM_BOUNDS.items():
        value = getattr(params, param_name, None)

        if value is None:
            continue  # Optional parameter

        if value < min_val:
            issues.append(
                f"{param_name} = {value} {unit} is below minimum {min_val} {unit}"
            )
        elif value > max_val:
            issues.append(
                f"{param_name} = {value} {unit} exceeds maximum {max_val} {unit}"
            )

    if not params.edge_sites and (params.edge_num_x is not None or params.edge_num_y is not None):
        issues.append(
            "edge_num_x/edge_num_y are set but edge_sites is False, so they are ignored"
        )

    if params.lifetime is None:
        issues.append("lifetime is None; step() will do nothing until set_lifetime is called")
    elif params.lifetime <= 1:
        issues.append(
            f"lifetime = {params.lifetime} resolves every Live site on its first step, "
            "so branches cannot form children before resolving"
        )

    if params.bound_x > 0 and params.bound_y > 0:
        aspect = max(params.bound_x, params.bound_y) / min(params.bound_x, params.bound_y)
        if aspect > 20.0:
            issues.append(
                f"aspect ratio {aspect:.1f} is very elongated (> 20), "
                "triangulation will produce thin triangles"
            )

    is_valid = len(issues) == 0
    return is_valid, issues


def validate_and_warn(params: NetworkParams) -> NetworkParams:
    """
    Validate parameters and emit a UserWarning per problem.

    Parameters
    ----------
    params : NetworkParams
        Parameters to validate

    Returns
    -------
    params : NetworkParams
        Same parameters (for chaining)
    """
    is_valid, issues = validate_params(params)

    if not is_valid:
        for issue in issues:
            warnings.warn(f"Parameter validation: {issue}", UserWarning, stacklevel=2)

    return params
