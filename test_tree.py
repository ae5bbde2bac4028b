import matplotlib
matplotlib.use("Agg")

from dataclasses import FrozenInstanceError

import matplotlib.pyplot as plt
import pytest

from node_module import Point
from tree import Tree, path_length


@pytest.fixture
def tree():
    return Tree(Point(0.0, 0.0), Point(100.0, 0.0), step_size=10.0, goal_threshold=10.0, seed=0)


@pytest.fixture
def grown_tree(tree):
    for _ in range(200):
        sample = tree.random_point(-50.0, 150.0, -100.0, 100.0)
        nearest = tree.find_nearest(sample)
        tree.add_node(tree.steer(tree.nodes[nearest].point, sample), nearest)
    return tree


def assert_tree_invariants(tree):
    assert tree.nodes[0].parent is None
    for i, node in enumerate(tree.nodes[1:], start=1):
        assert node.parent is not None
        assert 0 <= node.parent < i


def test_new_tree_has_only_root(tree):
    assert len(tree) == 1
    assert tree.root.point == Point(0.0, 0.0)
    assert tree.root.parent is None


@pytest.mark.parametrize("step_size, threshold", [(0.0, 1.0), (-1.0, 1.0), (1.0, -0.5)])
def test_bad_parameters_fail_fast(step_size, threshold):
    with pytest.raises(AssertionError):
        Tree(Point(0.0, 0.0), Point(1.0, 1.0), step_size, threshold)


def test_invariants_hold_after_every_insertion(tree):
    for i in range(100):
        sample = tree.random_point(-50.0, 150.0, -100.0, 100.0)
        nearest = tree.find_nearest(sample)
        before = len(tree)
        index = tree.add_node(tree.steer(tree.nodes[nearest].point, sample), nearest)
        assert len(tree) == before + 1
        assert index == before
        assert_tree_invariants(tree)


def test_inserted_nodes_cannot_be_reparented(tree):
    tree.add_node(Point(10.0, 0.0), 0)
    with pytest.raises(FrozenInstanceError):
        tree.nodes[1].parent = 1
    assert tree.nodes[1].parent == 0
    assert tree.trace_path() == [Point(0.0, 0.0), Point(10.0, 0.0)]


def test_add_node_rejects_invalid_parent(tree):
    with pytest.raises(AssertionError):
        tree.add_node(Point(1.0, 1.0), 1)
    with pytest.raises(AssertionError):
        tree.add_node(Point(1.0, 1.0), -1)
    assert len(tree) == 1


def test_find_nearest_is_minimal(grown_tree):
    queries = [grown_tree.random_point(-50.0, 150.0, -100.0, 100.0) for _ in range(50)]
    for q in queries:
        index = grown_tree.find_nearest(q)
        assert 0 <= index < len(grown_tree)
        best = grown_tree.nodes[index].point.distance(q)
        assert all(best <= node.point.distance(q) for node in grown_tree.nodes)


def test_find_nearest_tie_goes_to_first_inserted():
    tree = Tree(Point(5.0, 5.0), Point(100.0, 0.0), step_size=1.0, goal_threshold=1.0)
    tree.add_node(Point(1.0, 0.0), 0)
    tree.add_node(Point(-1.0, 0.0), 0)
    assert tree.find_nearest(Point(0.0, 0.0)) == 1


def test_trace_path_from_latest_node(tree):
    tree.add_node(Point(10.0, 0.0), 0)
    tree.add_node(Point(0.0, 10.0), 0)
    tree.add_node(Point(20.0, 0.0), 1)
    assert tree.trace_path() == [Point(0.0, 0.0), Point(10.0, 0.0), Point(20.0, 0.0)]


def test_trace_path_of_root_is_root_only(tree):
    assert tree.trace_path() == [Point(0.0, 0.0)]


def test_trace_path_endpoints_and_depth(grown_tree):
    for index in range(0, len(grown_tree), 17):
        path = grown_tree.trace_path(index)
        assert path[0] == grown_tree.root.point
        assert path[-1] == grown_tree.nodes[index].point
        assert len(path) == grown_tree.depth(index)


def test_edges_skip_root(grown_tree):
    edges = list(grown_tree.edges())
    assert len(edges) == len(grown_tree) - 1
    parent_point, child_point = edges[0]
    assert parent_point == grown_tree.nodes[grown_tree.nodes[1].parent].point
    assert child_point == grown_tree.nodes[1].point


def test_collision_checker_is_pluggable():
    tree = Tree(Point(0.0, 0.0), Point(100.0, 0.0), step_size=10.0, goal_threshold=10.0,
                collision_checker=lambda p: p.y >= 0.0)
    assert tree.is_collision_free(Point(10.0, 0.0))
    assert not tree.is_collision_free(Point(10.0, -1.0))


def test_default_collision_checker_accepts_everything(tree):
    assert tree.is_collision_free(Point(-1e6, 1e6))


def test_path_length():
    path = [Point(0.0, 0.0), Point(3.0, 4.0), Point(3.0, 10.0)]
    assert path_length(path) == pytest.approx(11.0)
    assert path_length([Point(1.0, 1.0)]) == 0.0


def test_plot_tree_draws_edges_path_and_markers(grown_tree):
    fig, ax = plt.subplots()
    path = grown_tree.trace_path()
    returned = grown_tree.plot_tree(ax=ax, path=path)
    assert returned is ax
    # one line per edge, one for the path, one per marker
    assert len(ax.lines) == (len(grown_tree) - 1) + 1 + 2
    plt.close(fig)
