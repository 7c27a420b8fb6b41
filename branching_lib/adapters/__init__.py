"""
Adapters for integrating branching_lib with NetworkX.
"""

from .networkx_adapter import to_networkx_graph, to_growth_tree, from_networkx_graph

__all__ = [
    "to_networkx_graph",
    "to_growth_tree",
    "from_networkx_graph",
]
