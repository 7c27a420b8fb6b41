"""
Basic example of growing a branching network.

This example demonstrates:
1. Building a network from a parameter preset
2. Seeding growth and carving a wall
3. Stepping until growth settles and sampling the result
"""

import logging

from branching_lib.ops.build import build_network_from_params
from branching_lib.ops.growth import grow_until_settled
from branching_lib.params import get_preset, validate_and_warn

logging.basicConfig(level=logging.INFO)

params = validate_and_warn(get_preset("road_grid"))

print("Building network...")
network = build_network_from_params(params)
print(network)

network.seed(50.0, 10.0)
wall = network.mark_wall(20.0, 60.0, 80.0, 60.0)
print(f"Wall: {wall.message}")

key = network.register_query(50.0, 50.0)

result = grow_until_settled(network)

print("\n=== Growth Results ===")
print(f"Status: {result.status.value}")
print(f"Steps taken: {result.metadata.get('steps_taken')}")
for state, count in result.metadata["state_counts"].items():
    print(f"  {state:>5}: {count}")

value = network.sample(key)
if value is None:
    print("Query point is outside the triangulated area")
else:
    print(f"Blended value at (50, 50): path={value.state_path:.3f}, dead={value.state_dead:.3f}")
