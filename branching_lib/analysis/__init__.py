"""Analysis and query functions for branching networks."""

from .query import (
    count_states,
    get_sites_in_state,
    get_parent_links,
    trace_path,
    get_path_roots,
)

__all__ = [
    "count_states",
    "get_sites_in_state",
    "get_parent_links",
    "trace_path",
    "get_path_roots",
]
