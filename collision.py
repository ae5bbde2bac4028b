# collision.py


def always_collision_free(point):
    """Obstacle-free world: every point is admissible."""
    return True


def make_checker(predicate=None):
    """
    Return the admissibility predicate a tree should use.

    Parameters
    ----------
    predicate : callable or None
        Function taking a Point and returning True if the point may be added
        to the tree. None selects the obstacle-free default.
    """
    if predicate is None:
        return always_collision_free
    assert callable(predicate), "Collision checker must be callable"
    return predicate
