"""
Growth operations for advancing branching networks.
"""

import logging
from typing import Optional

from ..core.network import BranchingNetwork
from ..core.result import ErrorCode, OperationResult
from ..core.types import StateKind

logger = logging.getLogger(__name__)


def _state_counts(network: BranchingNetwork) -> dict:
    counts = network.automaton.count_states()
    return {kind.value: counts.get(kind, 0) for kind in StateKind}


def grow(
    network: BranchingNetwork,
    steps: int,
    lifetime: Optional[int] = None,
) -> OperationResult:
    """
    Advance the network by a fixed number of generations.

    Parameters
    ----------
    network : BranchingNetwork
        Network to advance
    steps : int
        Number of generations
    lifetime : int, optional
        Lifetime to set before stepping (if None, the current one is used)

    Returns
    -------
    result : OperationResult
        Result with metadata['state_counts'] after the last step
    """
    if steps < 0:
        raise ValueError(f"steps must be non-negative, got {steps}")

    if lifetime is not None:
        network.set_lifetime(lifetime)

    if network.lifetime is None:
        return OperationResult.failure(
            "Lifetime is not set; call set_lifetime first",
            code=ErrorCode.LIFETIME_NOT_SET,
        )

    for _ in range(steps):
        network.step()

    return OperationResult.success(
        message=f"Advanced {steps} generations",
        metadata={
            "generation": network.generation,
            "state_counts": _state_counts(network),
        },
    )


def grow_until_settled(
    network: BranchingNetwork,
    max_steps: int = 1000,
    lifetime: Optional[int] = None,
) -> OperationResult:
    """
    Step until no site is Live any more.

    A network with no Live site cannot grow further; its Path sites can
    still die back on later steps but nothing new is reached.

    Parameters
    ----------
    network : BranchingNetwork
        Network to advance
    max_steps : int
        Upper bound on generations
    lifetime : int, optional
        Lifetime to set before stepping

    Returns
    -------
    result : OperationResult
        Success once settled, partial success if ``max_steps`` ran out
    """
    if lifetime is not None:
        network.set_lifetime(lifetime)

    if network.lifetime is None:
        return OperationResult.failure(
            "Lifetime is not set; call set_lifetime first",
            code=ErrorCode.LIFETIME_NOT_SET,
        )

    steps_taken = 0
    while network.automaton.count_states().get(StateKind.LIVE, 0) > 0:
        if steps_taken >= max_steps:
            result = OperationResult.partial_success(
                message=f"Still growing after {max_steps} generations",
                metadata={
                    "steps_taken": steps_taken,
                    "generation": network.generation,
                    "state_counts": _state_counts(network),
                },
            )
            result.add_warning("max_steps reached before growth settled")
            result.error_codes.append(ErrorCode.NOT_SETTLED.value)
            return result
        network.step()
        steps_taken += 1

    logger.info("growth settled after %d steps (generation %d)", steps_taken, network.generation)
    return OperationResult.success(
        message=f"Growth settled after {steps_taken} generations",
        metadata={
            "steps_taken": steps_taken,
            "generation": network.generation,
            "state_counts": _state_counts(network),
        },
    )
