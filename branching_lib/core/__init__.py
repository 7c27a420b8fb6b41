"""Core data structures for branching networks."""

from .types import (
    Site,
    StateKind,
    SiteState,
    SiteProperty,
    NumericProperty,
    WeightEntry,
    NO_COVERAGE,
)
from .graph import UndirectedGraph
from .ids import IDGenerator
from .result import OperationResult, OperationStatus, ErrorCode
from .automaton import GrowthAutomaton, AutomatonSnapshot, find_child
from .interpolation import InterpolationCache
from .network import BranchingNetwork

__all__ = [
    "Site",
    "StateKind",
    "SiteState",
    "SiteProperty",
    "NumericProperty",
    "WeightEntry",
    "NO_COVERAGE",
    "UndirectedGraph",
    "IDGenerator",
    "OperationResult",
    "OperationStatus",
    "ErrorCode",
    "GrowthAutomaton",
    "AutomatonSnapshot",
    "find_child",
    "InterpolationCache",
    "BranchingNetwork",
]
