import math

# --- Grid configuration ---
ROWS = 20
COLS = 20
START = (0, 0)
END = (ROWS - 1, COLS - 1)

INFINITY = math.inf

# Chance that a cell becomes an obstacle in a random maze
OBSTACLE_PROBABILITY = 0.3

# Seconds between two replay steps
STEP_DELAY = 0.02

# --- Cell states used in grid snapshots ---
EMPTY = 0
OBSTACLE = 1
START_CELL = 2
END_CELL = 3
VISITED = 4
PATH = 5

# --- Movement: 4 directions, order up, down, left, right ---
DIR4 = [
    (-1, 0),
    (1, 0),
    (0, -1),
    (0, 1),
]

# --- Algorithms ---
DIJKSTRA = 'dijkstra'
ASTAR = 'astar'
BFS = 'bfs'
DFS = 'dfs'

ALGORITHM_NAMES = {
    DIJKSTRA: "Dijkstra",
    ASTAR: "A*",
    BFS: "BFS",
    DFS: "DFS",
}
