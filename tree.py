# tree.py

import numpy as np
import matplotlib.pyplot as plt

from node_module import Node, Point
from sampler import make_rng, sample_uniform
from steer import steer
from collision import make_checker


class Tree:
    """
    Growing RRT stored as an append-only list of nodes.

    Nodes refer to their parent by index into ``self.nodes``. Index 0 is the
    root and has no parent; every other parent index is smaller than the
    index of the node that holds it.
    """

    def __init__(self, start, goal, step_size, goal_threshold,
                 rng=None, seed=None, collision_checker=None):
        assert step_size > 0, f"step_size must be positive, got {step_size}"
        assert goal_threshold >= 0, f"goal_threshold must be non-negative, got {goal_threshold}"

        self.nodes = [Node(start, parent=None)]
        self.goal = goal
        self.step_size = float(step_size)
        self.goal_threshold = float(goal_threshold)
        self.rng = rng if rng is not None else make_rng(seed)
        self.collision_checker = make_checker(collision_checker)

    def __len__(self):
        return len(self.nodes)

    @property
    def root(self):
        return self.nodes[0]

    def random_point(self, min_x, max_x, min_y, max_y):
        return sample_uniform(self.rng, min_x, max_x, min_y, max_y)

    def find_nearest(self, point):
        """Index of the closest node; the earliest inserted wins ties."""
        assert self.nodes, "Tree has no nodes"
        best_index = 0
        best_dist = self.nodes[0].point.distance(point)
        for i in range(1, len(self.nodes)):
            d = self.nodes[i].point.distance(point)
            if d < best_dist:
                best_dist = d
                best_index = i
        return best_index

    def steer(self, from_point, to_point):
        return steer(from_point, to_point, self.step_size)

    def is_collision_free(self, point):
        return self.collision_checker(point)

    def add_node(self, point, parent_index):
        assert 0 <= parent_index < len(self.nodes), \
            f"Parent index {parent_index} out of range for tree of {len(self.nodes)} nodes"
        self.nodes.append(Node(point, parent=parent_index))
        return len(self.nodes) - 1

    def distance_to_goal(self, point):
        return point.distance(self.goal)

    def depth(self, index):
        """Number of nodes on the root path of ``index``, both ends included."""
        count = 1
        current = self.nodes[index].parent
        while current is not None:
            count += 1
            current = self.nodes[current].parent
        return count

    def trace_path(self, index=None):
        """
        Follow parent indices from a node back to the root.

        Parameters
        ----------
        index : int or None
            Node to start from. Defaults to the most recently inserted node.

        Returns
        -------
        list of Point
            Points ordered from the root to the requested node.
        """
        assert self.nodes, "Tree has no nodes"
        current = len(self.nodes) - 1 if index is None else index
        path = []
        while self.nodes[current].parent is not None:
            path.append(self.nodes[current].point)
            current = self.nodes[current].parent
        path.append(self.nodes[current].point)
        path.reverse()
        return path

    def edges(self):
        """Yield (parent point, child point) for every non-root node."""
        for node in self.nodes:
            if not node.is_root:
                yield self.nodes[node.parent].point, node.point

    def plot_tree(self, ax=None, path=None):
        if ax is None:
            _, ax = plt.subplots()

        for parent_point, child_point in self.edges():
            ax.plot([parent_point.x, child_point.x],
                    [parent_point.y, child_point.y],
                    color='blue', linewidth=1, alpha=0.6)

        if path is not None and len(path) >= 2:
            ax.plot([p.x for p in path], [p.y for p in path],
                    color='green', linewidth=2, label='Path')

        ax.plot(self.root.point.x, self.root.point.y, 'go', markersize=8, label='Start')
        ax.plot(self.goal.x, self.goal.y, 'ro', markersize=8, label='Goal')
        ax.set_aspect('equal')
        ax.legend()
        ax.set_title(f'RRT with {len(self.nodes)} nodes')
        return ax


def path_length(path):
    """Summed segment lengths of a list of points."""
    return sum(path[i].distance(path[i + 1]) for i in range(len(path) - 1))


if __name__ == "__main__":
    tree = Tree(Point(200.0, 200.0), Point(380.0, 380.0), step_size=10.0,
                goal_threshold=10.0, seed=0)

    for _ in range(300):
        sample = tree.random_point(0.0, 400.0, 0.0, 400.0)
        nearest = tree.find_nearest(sample)
        tree.add_node(tree.steer(tree.nodes[nearest].point, sample), nearest)
    print("Tree has", len(tree), "nodes.")

    deepest = int(np.argmax([tree.depth(i) for i in range(len(tree))]))
    tree.plot_tree(path=tree.trace_path(deepest))
    plt.show()
