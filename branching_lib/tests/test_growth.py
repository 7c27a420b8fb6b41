"""
Tests for the growth automaton transition rules.
"""

import pytest
import numpy as np
from branching_lib.core.graph import UndirectedGraph
from branching_lib.core.types import SiteState, StateKind
from branching_lib.ops.build import create_network
from branching_lib.ops.growth import grow, grow_until_settled

NONE = SiteState.none()
DEAD = SiteState.dead()
WALL = SiteState.wall()
Live = SiteState.live
Path = SiteState.path


def states(network):
    return [network.state_of(i) for i in range(network.num_sites)]


def parents(network):
    return [network.parent_of(i) for i in range(network.num_sites)]


def test_step_is_noop_until_lifetime_set(line_network):
    """step() reports not-ready and changes nothing before set_lifetime."""
    line_network.seed(0.0, 0.0)
    before = states(line_network)

    assert line_network.step() is False
    assert states(line_network) == before
    assert line_network.generation == 0

    line_network.set_lifetime(2)
    assert line_network.step() is True
    assert line_network.generation == 1


def test_line_scenario_exact_states(line_network):
    """Line 0-1-2-3-4, lifetime 2, seeded at site 0."""
    line_network.set_lifetime(2)
    line_network.seed(0.0, 0.0)
    assert states(line_network) == [Live(0), NONE, NONE, NONE, NONE]

    line_network.step()
    assert states(line_network) == [Live(1), Live(0), NONE, NONE, NONE]
    assert parents(line_network) == [None, 0, None, None, None]

    line_network.step()
    assert states(line_network) == [Path(1), Live(1), Live(0), NONE, NONE]
    assert parents(line_network) == [None, 0, 1, None, None]

    line_network.step()
    assert states(line_network) == [Path(1), Path(2), Live(1), Live(0), NONE]
    assert parents(line_network) == [None, 0, 1, 2, None]

    line_network.step()
    assert states(line_network) == [Path(1), Path(2), Path(3), Live(1), Live(0)]

    line_network.step()
    assert states(line_network) == [Path(1), Path(2), Path(3), Path(4), Live(1)]

    # The tip has nobody to hand over to, so the path dies back one site per step.
    line_network.step()
    assert states(line_network) == [Path(1), Path(2), Path(3), Path(4), DEAD]
    assert parents(line_network)[4] is None

    line_network.step()
    assert states(line_network) == [Path(1), Path(2), Path(3), DEAD, DEAD]

    for _ in range(3):
        line_network.step()
    assert states(line_network) == [DEAD] * 5
    assert parents(line_network) == [None] * 5


def test_isolated_site_dies_without_path():
    """A seeded site with no neighbors never becomes Path."""
    network = create_network([(0.0, 0.0)], UndirectedGraph(1))
    network.set_lifetime(3)
    network.seed(0.0, 0.0)

    seen = []
    for _ in range(3):
        network.step()
        seen.append(network.state_of(0))

    assert seen == [Live(1), Live(2), DEAD]
    assert all(state.kind is not StateKind.PATH for state in seen)


def test_unconnected_site_stays_dormant():
    sites = [(0.0, 0.0), (1.0, 0.0), (5.0, 5.0)]
    network = create_network(sites, UndirectedGraph.from_edges(3, [(0, 1)]))
    network.set_lifetime(4)
    network.seed(0.0, 0.0)

    for _ in range(10):
        network.step()

    assert network.state_of(2) == NONE


def test_live_age_increments_until_lifetime(grid_network):
    grid_network.set_lifetime(5)
    grid_network.seed(1.0, 1.0)

    for expected_age in range(1, 5):
        grid_network.step()
        assert grid_network.state_of(4) == Live(expected_age)

    grid_network.step()
    assert grid_network.state_of(4).kind in (StateKind.PATH, StateKind.DEAD)


def test_zero_lifetime_resolves_immediately(line_network):
    line_network.set_lifetime(0)
    line_network.seed(4.0, 0.0)

    line_network.step()

    assert line_network.state_of(4) == DEAD
    assert line_network.state_of(3) == Live(0)


def test_parent_is_nearest_live_neighbor():
    """Site 2 sits closer to site 0, so site 0 becomes its parent."""
    sites = [(-1.0, 0.0), (1.0, 0.0), (-0.2, 0.0)]
    graph = UndirectedGraph.from_edges(3, [(2, 0), (2, 1)])
    network = create_network(sites, graph)
    network.set_lifetime(5)
    network.seed(-1.0, 0.0)
    network.seed(1.0, 0.0)

    network.step()

    assert network.state_of(2) == Live(0)
    assert network.parent_of(2) == 0


def test_parent_tie_goes_to_later_neighbor():
    """On an exact distance tie the later neighbor in graph order wins."""
    sites = [(-1.0, 0.0), (1.0, 0.0), (0.0, 0.0)]
    network = create_network(sites, UndirectedGraph.from_edges(3, [(2, 0), (2, 1)]))
    network.set_lifetime(5)
    network.seed(-1.0, 0.0)
    network.seed(1.0, 0.0)

    network.step()
    assert network.parent_of(2) == 1

    reordered = create_network(sites, UndirectedGraph.from_edges(3, [(2, 1), (2, 0)]))
    reordered.set_lifetime(5)
    reordered.seed(-1.0, 0.0)
    reordered.seed(1.0, 0.0)

    reordered.step()
    assert reordered.parent_of(2) == 0


@pytest.fixture
def fork_network():
    """Site 0 in the middle; site 1 is a leaf, site 2 continues to site 3."""
    sites = [(0.0, 0.0), (1.0, 0.0), (-1.0, 0.0), (-2.0, 0.0)]
    graph = UndirectedGraph.from_edges(4, [(0, 1), (0, 2), (2, 3)])
    network = create_network(sites, graph)
    network.set_lifetime(2)
    network.seed(0.0, 0.0)
    return network


def test_fork_keeps_first_child_in_neighbor_order(fork_network):
    fork_network.step()
    assert fork_network.parent_of(1) == 0
    assert fork_network.parent_of(2) == 0

    fork_network.step()
    assert fork_network.state_of(0) == Path(1)


def test_path_switches_to_surviving_child(fork_network):
    """When the recorded child stops claiming the site, another child is taken."""
    fork_network.step()
    fork_network.step()
    fork_network.step()
    # Leaf site 1 died this step; its Dead state is not visible to site 0 yet.
    assert fork_network.state_of(1) == DEAD
    assert fork_network.state_of(2) == Path(3)
    assert fork_network.state_of(0) == Path(1)

    fork_network.step()
    assert fork_network.state_of(0) == Path(2)


def test_wall_is_a_fixed_point(line_network):
    line_network.mark_wall(2.0, 0.0, 2.0, 0.0)
    line_network.seed(0.0, 0.0)

    for lifetime in (1, 2, 5):
        line_network.set_lifetime(lifetime)
        for _ in range(6):
            line_network.step()
            assert line_network.state_of(2) == WALL
            assert line_network.parent_of(2) is None


def test_growth_does_not_pass_walls(line_network):
    line_network.mark_wall(2.0, 0.0, 2.0, 0.0)
    line_network.seed(0.0, 0.0)
    line_network.set_lifetime(3)

    for _ in range(20):
        line_network.step()

    assert line_network.state_of(3) == NONE
    assert line_network.state_of(4) == NONE


def test_seed_overwrites_wall_and_touches_one_site(grid_network):
    grid_network.mark_wall(0.0, 0.0, 2.0, 0.0)
    before = states(grid_network)

    result = grid_network.seed(1.0, 0.1)

    assert result.is_success()
    assert result.new_ids["site"] == 1
    after = states(grid_network)
    assert after[1] == Live(0)
    assert grid_network.parent_of(1) is None
    changed = [i for i in range(9) if before[i] != after[i]]
    assert changed == [1]


def test_set_lifetime_validation(line_network):
    with pytest.raises(ValueError):
        line_network.set_lifetime(-1)
    with pytest.raises(ValueError):
        line_network.set_lifetime(2.5)


def test_out_of_range_site_fails_loudly(line_network):
    with pytest.raises(IndexError):
        line_network.property_of(5)
    with pytest.raises(IndexError):
        line_network.state_of(-1)
    with pytest.raises(IndexError):
        line_network.automaton.seed(10)


def test_grow_requires_lifetime(line_network):
    result = grow(line_network, 3)
    assert result.is_failure()
    assert "LIFETIME_NOT_SET" in result.error_codes

    result = grow(line_network, 3, lifetime=2)
    assert result.is_success()
    assert line_network.generation == 3
    assert sum(result.metadata["state_counts"].values()) == 5


def test_grow_until_settled(line_network):
    line_network.seed(0.0, 0.0)
    result = grow_until_settled(line_network, lifetime=2)

    assert result.is_success()
    assert result.metadata["state_counts"]["live"] == 0
    assert result.metadata["steps_taken"] == 6


def test_grow_until_settled_hits_step_bound(line_network):
    line_network.seed(0.0, 0.0)
    result = grow_until_settled(line_network, max_steps=2, lifetime=2)

    assert result.status.value == "partial_success"
    assert "NOT_SETTLED" in result.error_codes
    assert line_network.generation == 2


def test_set_lifetime_accepts_numpy_integers(line_network):
    line_network.set_lifetime(np.int64(3))
    assert line_network.lifetime == 3
    assert type(line_network.lifetime) is int

    line_network.seed(0.0, 0.0)
    assert line_network.step() is True
    assert line_network.state_of(0) == Live(1)

    with pytest.raises(ValueError):
        line_network.set_lifetime(True)
