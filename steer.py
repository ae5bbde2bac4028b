import numpy as np

from node_module import Point


def steer(from_point, to_point, step_size):
    """
    Simple geometric steering.
    Moves exactly step_size from from_point along the bearing toward to_point,
    even when to_point is closer than that. Coincident points give the
    atan2(0, 0) == 0 bearing.
    """
    angle = np.arctan2(to_point.y - from_point.y, to_point.x - from_point.x)
    return Point(float(from_point.x + step_size * np.cos(angle)),
                 float(from_point.y + step_size * np.sin(angle)))
