# sampler.py

import numpy as np

from config import WORLD_BOUNDS
from node_module import Point


def make_rng(seed=None):
    """Private generator for one tree; pass a seed for repeatable runs."""
    return np.random.default_rng(seed)


def sample_uniform(rng, min_x, max_x, min_y, max_y):
    """Draw x from [min_x, max_x) and y from [min_y, max_y) independently."""
    assert min_x < max_x, f"Empty x range [{min_x}, {max_x})"
    assert min_y < max_y, f"Empty y range [{min_y}, {max_y})"
    x = rng.uniform(min_x, max_x)
    y = rng.uniform(min_y, max_y)
    return Point(float(x), float(y))


class UniformSampler:
    """
    Sampling strategy drawing uniformly inside rectangular bounds.

    Parameters
    ----------
    bounds : array-like
        [[min_x, max_x], [min_y, max_y]]
    rng : np.random.Generator
        Generator to draw from, normally the one owned by the tree.
    """
    def __init__(self, rng, bounds=WORLD_BOUNDS):
        self.bounds = np.asarray(bounds, dtype=float)
        self.rng = rng

    def __call__(self):
        return sample_uniform(self.rng,
                              self.bounds[0, 0], self.bounds[0, 1],
                              self.bounds[1, 0], self.bounds[1, 1])


class FixedSampler:
    """Always returns the same point. Forces deterministic growth."""
    def __init__(self, point):
        self.point = point

    def __call__(self):
        return self.point
