# Grid Pathfinding Visualizer - Main Entry Point
# This file imports and runs the pygame visualization

import logging

from gridpath.gridpath_pygame.visualizer_app import PathfindingVisualizer

if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("--- Grid Pathfinding Visualization ---")
    print("Grid Size: 20x20")
    print("Starting GUI...")

    # Launch the visualization window
    visualizer = PathfindingVisualizer(rows=20, cols=20, cell_size=30, step_size=0.02)
    visualizer.run()
