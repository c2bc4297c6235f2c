"""
Main Runner for the Grid Pathfinding Visualizer
Provides menu-driven access to the pygame visualization and console demos
"""

import logging
import sys


def print_banner():
    """Print application banner"""
    print("=" * 70)
    print("    GRID PATHFINDING - DIJKSTRA / A* / BFS / DFS")
    print("=" * 70)
    print()


def print_menu():
    """Print the main menu"""
    print("Available Modes:")
    print()
    print("1. Pygame Visualization")
    print("   - Paint obstacles, pick an algorithm, watch the replay")
    print()
    print("2. Console Comparison")
    print("   - All four algorithms on the walled test environment")
    print()
    print("3. Random Maze Comparison")
    print("   - All four algorithms on a random maze")
    print()
    print("0. Exit")
    print()


def run_pygame_visualization():
    """Run the pygame visualization"""
    print("Starting Pygame visualization...")
    try:
        from gridpath.gridpath_pygame.visualizer_app import PathfindingVisualizer
    except ImportError as e:
        print(f"Error importing pygame visualization: {e}")
        print("Please install pygame with: pip install pygame")
        return
    visualizer = PathfindingVisualizer()
    visualizer.run()


def run_console_comparison():
    """Run every algorithm on the test environment"""
    from gridpath.gridpath_algorithm.main import run_console_test
    run_console_test()


def run_random_maze_comparison(seed=None):
    """Run every algorithm on one random maze"""
    from gridpath.gridpath_algorithm.constants import ALGORITHM_NAMES
    from gridpath.gridpath_algorithm.session import SearchSession

    session = SearchSession()
    session.generate_random_maze(seed=seed)
    print(f"Random maze with {len(session.grid.obstacles())} obstacles")
    print()
    for algorithm, name in ALGORITHM_NAMES.items():
        result = session.run(algorithm)
        session.finish()
        if result.found:
            print(f"  {name:<10} visited {len(result.visited):>4}  path {result.path_length:>3}")
        else:
            print(f"  {name:<10} visited {len(result.visited):>4}  no path")


def main():
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    print_banner()

    while True:
        print_menu()
        try:
            choice = input("Enter your choice (0-3): ").strip()
        except (KeyboardInterrupt, EOFError):
            print("\nGoodbye!")
            sys.exit(0)

        if choice == '1':
            run_pygame_visualization()
            break
        elif choice == '2':
            run_console_comparison()
        elif choice == '3':
            run_random_maze_comparison()
        elif choice == '0':
            print("Goodbye!")
            sys.exit(0)
        else:
            print("Invalid choice. Please enter 0, 1, 2 or 3.")
        print()


if __name__ == '__main__':
    main()
