# demo.py

import matplotlib.pyplot as plt

from config import load_config
from node_module import Point
from rrt import RRT
from tree import Tree

settings = load_config()
bounds = settings["world_bounds"]

tree = Tree(Point(20.0, 20.0), Point(380.0, 380.0),
            settings["step_size"], settings["goal_threshold"], seed=settings["seed"])
planner = RRT(tree, bounds=bounds)

for step in range(settings["max_iterations"]):
    if planner.step():
        break
    if step % 100 == 0:
        print(f"Step {step}: {len(tree)} nodes in tree")

if not planner.goal_reached:
    print(f"No path found after {planner.iterations} iterations")

tree.plot_tree(path=planner.path)
plt.show()
