"""
Advanced example using individual functions from the branching network package.

This example demonstrates:
1. Building sites and the site graph step by step
2. Replaying growth from a snapshot
3. Analyzing the finalized paths with NetworkX
"""

import networkx as nx

from branching_lib.adapters import to_growth_tree, to_networkx_graph
from branching_lib.analysis import get_path_roots, trace_path
from branching_lib.ops.build import NetworkBuilder, create_network
from branching_lib.ops.growth import grow

print("Generating sites...")
builder = NetworkBuilder(800, 120.0, 80.0, seed=7).add_edge_sites().relax_sites(2)
sites, graph = builder.build_graph()
print(f"{len(sites)} sites, {graph.num_edges} edges")

network = create_network(sites, graph, metadata={"name": "delta"})
network.seed(60.0, 75.0)
network.seed(10.0, 40.0)

result = grow(network, 10, lifetime=8)
print(f"After 10 steps: {result.metadata['state_counts']}")

checkpoint = network.snapshot()
grow(network, 40)
final = network.snapshot()

network.restore(checkpoint)
grow(network, 40)
print(f"Replay identical: {network.snapshot() == final}")

print("\nFinalized branches:")
for root in get_path_roots(network):
    branch = trace_path(network, root)
    print(f"  root {root}: {len(branch)} sites")

G = to_networkx_graph(network)
print(f"\nSite graph connected: {nx.is_connected(G)}")

tree = to_growth_tree(network, path_only=True)
if tree.number_of_nodes():
    lengths = [G.edges[u, v]["length"] for u, v in tree.edges()]
    print(f"Total path length: {sum(lengths):.2f}")
