# config.py

import json

import numpy as np

# Tree growth
STEP_SIZE = 10.0       # distance covered by each extension
GOAL_THRESHOLD = 10.0  # a new point strictly closer than this reaches the goal

# Headless run budget
MAX_ITERATIONS = 5000

# None draws a fresh seed every run
SEED = None

#World bounds
WORLD_BOUNDS = np.array([[0.0, 400.0],
                         [0.0, 400.0]])  # x, y

# Window
SCREEN_SIZE = 400
FPS = 60

DEFAULTS = {
    "step_size": STEP_SIZE,
    "goal_threshold": GOAL_THRESHOLD,
    "max_iterations": MAX_ITERATIONS,
    "seed": SEED,
    "world_bounds": WORLD_BOUNDS.tolist(),
    "screen_size": SCREEN_SIZE,
    "fps": FPS,
}


def load_config(filename="rrt_config.json"):
    """
    Load run settings, overriding the defaults above with a JSON file.

    A missing file is not an error; the defaults are returned unchanged.
    Keys that are not in DEFAULTS raise KeyError so typos do not pass silently.

    Returns
    -------
    dict
        Settings keyed like DEFAULTS, with ``world_bounds`` as a numpy array.
    """
    settings = dict(DEFAULTS)

    try:
        with open(filename, 'r') as f:
            data = json.load(f)
    except FileNotFoundError:
        print(f"Config file {filename} not found, using defaults")
        data = {}

    for key, value in data.items():
        if key not in DEFAULTS:
            raise KeyError(f"Unknown config key: {key}")
        settings[key] = value

    if data:
        print(f"Loaded {len(data)} settings from {filename}")

    settings["world_bounds"] = np.asarray(settings["world_bounds"], dtype=float)
    assert settings["world_bounds"].shape == (2, 2), "world_bounds must be [[min_x, max_x], [min_y, max_y]]"
    return settings
