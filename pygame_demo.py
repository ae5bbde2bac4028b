import sys
import pygame
import numpy as np

from config import load_config
from sampler import sample_uniform
from rrt import RRT
from tree import Tree, path_length

# ---------------------------
# Pygame / visualization setup
# ---------------------------

# Colors
COLOR_BG    = (255, 255, 255)
COLOR_TREE  = (0, 121, 241)
COLOR_PATH  = (0, 228, 48)
COLOR_START = (0, 228, 48)
COLOR_GOAL  = (230, 41, 55)
COLOR_TEXT  = (80, 80, 80)

MARKER_RADIUS = 5


def world_to_screen(p, bounds, screen_size):
    """Map a world point inside bounds to integer screen coords."""
    x = p.as_array()
    sx = int((x[0] - bounds[0, 0]) /
             (bounds[0, 1] - bounds[0, 0]) * screen_size)
    sy = int((x[1] - bounds[1, 0]) /
             (bounds[1, 1] - bounds[1, 0]) * screen_size)
    # Pygame y-axis is down, so flip:
    sy = screen_size - sy
    return sx, sy


def draw_tree(screen, tree, bounds, screen_size):
    for parent_point, child_point in tree.edges():
        x1 = world_to_screen(parent_point, bounds, screen_size)
        x2 = world_to_screen(child_point, bounds, screen_size)
        pygame.draw.line(screen, COLOR_TREE, x1, x2, width=1)


def draw_path(screen, path, bounds, screen_size):
    if len(path) < 2:
        return
    pts = [world_to_screen(p, bounds, screen_size) for p in path]
    pygame.draw.lines(screen, COLOR_PATH, False, pts, width=2)


def draw_start_and_goal(screen, tree, bounds, screen_size):
    pygame.draw.circle(screen, COLOR_START,
                       world_to_screen(tree.root.point, bounds, screen_size), MARKER_RADIUS)
    pygame.draw.circle(screen, COLOR_GOAL,
                       world_to_screen(tree.goal, bounds, screen_size), MARKER_RADIUS)


def draw_info(screen, font, planner, clock):
    state = "REACHED" if planner.goal_reached else "GROWING"
    info_texts = [
        f"Nodes: {len(planner.tree)}",
        f"State: {state}",
    ]
    if planner.goal_reached:
        info_texts.append(f"Path: {len(planner.path)} points, {path_length(planner.path):.1f}")
    info_texts.append(f"FPS: {int(clock.get_fps())}")

    for i, text in enumerate(info_texts):
        surf = font.render(text, True, COLOR_TEXT)
        screen.blit(surf, (10, 10 + i * 20))


def main():
    settings = load_config()
    bounds = settings["world_bounds"]
    screen_size = settings["screen_size"]

    pygame.init()
    screen = pygame.display.set_mode((screen_size, screen_size))
    pygame.display.set_caption("RRT Visualization")
    clock = pygame.time.Clock()
    font = pygame.font.Font(None, 20)

    rng = np.random.default_rng(settings["seed"])
    x_start = sample_uniform(rng, *bounds[0], *bounds[1])
    x_goal = sample_uniform(rng, *bounds[0], *bounds[1])

    tree = Tree(x_start, x_goal, settings["step_size"], settings["goal_threshold"], rng=rng)
    planner = RRT(tree, bounds=bounds)
    print(f"Starting RRT demo from ({x_start.x:.1f}, {x_start.y:.1f}) "
          f"to ({x_goal.x:.1f}, {x_goal.y:.1f}). Close window to exit.")
    running = True

    # Display state
    show_tree = True
    show_info = True

    while running:
        clock.tick(settings["fps"])

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            if event.type == pygame.KEYDOWN:
                # T to toggle tree visualization
                if event.key == pygame.K_t:
                    show_tree = not show_tree
                    status = "ON" if show_tree else "OFF"
                    print(f"Tree visualization: {status}")

                # I to toggle info display
                if event.key == pygame.K_i:
                    show_info = not show_info

        # One growth step per frame; a no-op once the goal is reached
        planner.step()

        screen.fill(COLOR_BG)
        if show_tree:
            draw_tree(screen, tree, bounds, screen_size)
        if planner.goal_reached:
            draw_path(screen, planner.path, bounds, screen_size)
        draw_start_and_goal(screen, tree, bounds, screen_size)
        if show_info:
            draw_info(screen, font, planner, clock)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
