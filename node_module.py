# node_module.py

from dataclasses import dataclass
from typing import Optional

import numpy as np


@dataclass(frozen=True)
class Point:
    """A position on the plane."""
    x: float
    y: float

    def distance(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return float(np.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2))

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y])


def distance(a: Point, b: Point) -> float:
    return a.distance(b)


@dataclass(frozen=True)
class Node:
    """
    A tree node.

    Parameters
    ----------
    point : Point
        Position of the node.
    parent : int or None
        Index of the parent node inside the owning tree. Only the root
        has no parent.
    """
    point: Point
    parent: Optional[int] = None

    @property
    def is_root(self):
        return self.parent is None
