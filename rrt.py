# rrt.py

from enum import Enum

from config import WORLD_BOUNDS
from sampler import UniformSampler
from tree import path_length


class PlannerState(Enum):
    """Growth state of the planner."""
    GROWING = "growing"
    REACHED = "reached"


class RRT:
    """
    Grows a Tree one sample per step until a new point lands near the goal.

    Once the goal is reached the path is traced once and cached; later steps
    leave the tree and the path untouched.
    """

    def __init__(self, tree, sampler=None, bounds=WORLD_BOUNDS):
        self.tree = tree
        self.sampler = sampler if sampler is not None else UniformSampler(tree.rng, bounds)
        self.state = PlannerState.GROWING
        self.path = ()
        self.iterations = 0
        self.last_sample = None
        self.last_new_point = None

    @property
    def goal_reached(self):
        return self.state is PlannerState.REACHED

    def step(self):
        """
        Run one growth iteration.

        Returns True only on the iteration that reached the goal.
        """
        if self.state is PlannerState.REACHED:
            return False

        self.iterations += 1

        x_rand = self.sampler()
        nearest_index = self.tree.find_nearest(x_rand)
        x_new = self.tree.steer(self.tree.nodes[nearest_index].point, x_rand)

        if self.tree.is_collision_free(x_new):
            self.tree.add_node(x_new, nearest_index)

        self.last_sample = x_rand
        self.last_new_point = x_new

        # Keyed to the steered point, whether or not it was inserted
        if self.tree.distance_to_goal(x_new) < self.tree.goal_threshold:
            self.state = PlannerState.REACHED
            self.path = tuple(self.tree.trace_path())
            print(f"Goal Reached! {len(self.tree)} nodes after {self.iterations} iterations, "
                  f"path of {len(self.path)} points, length {path_length(self.path):.2f}")
            return True

        return False

    def run(self, max_iterations):
        """Step until the goal is reached or the budget is spent; returns the path."""
        for _ in range(max_iterations):
            if self.goal_reached:
                break
            self.step()

        if not self.goal_reached:
            print(f"No path found after {self.iterations} iterations")
        return list(self.path)
