"""
Main app: event loop, mouse painting, runs searches and steps their replay
"""

import logging
import sys

import pygame

from ..gridpath_algorithm.constants import ROWS, COLS, START, STEP_DELAY, DIJKSTRA, ASTAR, BFS, DFS
from ..gridpath_algorithm.session import SearchSession

from .visualizer_ui import (UIState, setup_ui_elements, set_running, handle_mouse_hover,
                            update_slider, cell_at)
from .visualizer_render import draw_grid, draw_info_panel
from .visualizer_callbacks import start_replay, advance_replay


ALGORITHM_KEYS = {
    pygame.K_1: DIJKSTRA,
    pygame.K_2: ASTAR,
    pygame.K_3: BFS,
    pygame.K_4: DFS,
}


class PathfindingVisualizer:
    def __init__(self, rows=ROWS, cols=COLS, cell_size=30, step_size=STEP_DELAY,
                 start=START, end=None):
        # ---------- configuration ----------
        self.rows = rows
        self.cols = cols
        self.cell_size = cell_size
        self.step_size = step_size
        self.window_size = max(rows, cols) * cell_size
        self.panel_width = 300
        self.total_width = self.window_size + self.panel_width
        self.total_height = max(self.window_size, 760)

        # ---------- search state ----------
        self.session = SearchSession(rows, cols, start, end)
        self.is_running = False
        self.is_paused = False
        self.mouse_pressed = False
        self.last_painted = None

        # ---------- display data ----------
        self.cells = self.session.grid.to_array(include_search_state=False)
        self.replay = None
        self.replay_clock = 0.0
        self.algorithm = None
        self.visited_count = 0
        self.path_count = 0
        self.status = ""

        # ---------- colors ----------
        self.colors = {
            'white': (255, 255, 255),
            'black': (0, 0, 0),
            'gray': (128, 128, 128),
            'light_gray': (211, 211, 211),
            'dark_gray': (64, 64, 64),
            'green': (0, 200, 0),
            'red': (220, 0, 0),
            'dark_red': (128, 0, 0),
            'blue': (0, 0, 255),
            'visited': (173, 216, 230),
            'panel_bg': (240, 240, 240),
            'button_normal': (200, 200, 200),
            'button_hover': (180, 180, 180),
            'path_dijkstra': (255, 215, 0),
            'path_astar': (255, 20, 147),
            'path_bfs': (255, 140, 0),
            'path_dfs': (138, 43, 226),
        }

        # ---------- pygame ----------
        pygame.init()
        self.screen = pygame.display.set_mode((self.total_width, self.total_height))
        pygame.display.set_caption("Grid Pathfinding Visualizer - Pygame")
        self.clock = pygame.time.Clock()

        self.font_large = pygame.font.Font(None, 28)
        self.font_medium = pygame.font.Font(None, 20)
        self.font_small = pygame.font.Font(None, 16)

        # UI state
        self.ui = UIState(self.window_size, self.panel_width, step_size)
        setup_ui_elements(self.ui, self.colors)

    # ---------- events ----------
    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.is_running = False
                return False
            elif event.type == pygame.MOUSEBUTTONDOWN:
                if event.button == 1:
                    self.handle_mouse_click(event.pos)
            elif event.type == pygame.MOUSEBUTTONUP:
                if event.button == 1:
                    self.ui.dragging_slider = False
                    self.mouse_pressed = False
                    self.last_painted = None
            elif event.type == pygame.MOUSEMOTION:
                if self.ui.dragging_slider:
                    self.step_size = update_slider(self.ui, event.pos[0])
                elif self.mouse_pressed:
                    self.paint_cell(event.pos)
                else:
                    handle_mouse_hover(self.ui, self.colors, event.pos)
            elif event.type == pygame.KEYDOWN:
                if event.key in ALGORITHM_KEYS:
                    self.start_algorithm(ALGORITHM_KEYS[event.key])
                elif event.key == pygame.K_SPACE:
                    self.toggle_pause()
                elif event.key == pygame.K_m:
                    self.generate_maze()
                elif event.key == pygame.K_c:
                    self.clear_grid()
        return True

    def handle_mouse_click(self, pos):
        if pos[0] < self.window_size:
            self.mouse_pressed = True
            self.paint_cell(pos)
            return

        for btn_id, btn_data in self.ui.buttons.items():
            if btn_data['rect'].collidepoint(pos) and btn_data['enabled']:
                if btn_id in (DIJKSTRA, ASTAR, BFS, DFS):
                    self.start_algorithm(btn_id)
                elif btn_id == 'pause':
                    self.toggle_pause()
                elif btn_id == 'maze':
                    self.generate_maze()
                elif btn_id == 'clear':
                    self.clear_grid()
        if self.ui.slider_rect.collidepoint(pos):
            self.ui.dragging_slider = True
            self.step_size = update_slider(self.ui, pos[0])

    def paint_cell(self, pos):
        cell = cell_at(pos, self.cell_size, self.rows, self.cols)
        # dragging toggles each cell once on entry
        if cell is None or cell == self.last_painted:
            return
        self.last_painted = cell
        if self.session.toggle_obstacle(*cell):
            self.refresh_cells()

    def toggle_pause(self):
        if self.replay is not None:
            self.is_paused = not self.is_paused
            self.ui.buttons['pause']['text'] = 'Resume' if self.is_paused else 'Pause'

    def generate_maze(self):
        if self.session.generate_random_maze():
            self.status = ""
            self.refresh_cells()

    def clear_grid(self):
        self.session.clear()
        self.replay = None
        self.is_paused = False
        self.algorithm = None
        self.visited_count = 0
        self.path_count = 0
        self.status = ""
        set_running(self.ui, False)
        self.refresh_cells()

    def refresh_cells(self):
        self.cells = self.session.grid.to_array(include_search_state=False)

    # ---------- algorithm ----------
    def start_algorithm(self, algorithm):
        result = self.session.run(algorithm)
        if result is None:
            return
        self.is_paused = False
        set_running(self.ui, True)
        start_replay(self, result)

    def on_replay_finished(self):
        self.is_paused = False
        set_running(self.ui, False)

    # ---------- draw ----------
    def path_color(self):
        return self.colors.get(f"path_{self.algorithm}", self.colors['path_dijkstra'])

    def draw_grid(self):
        return draw_grid(self.cells, self.cell_size, self.colors, self.path_color())

    def draw_info_panel(self):
        return draw_info_panel(
            self.panel_width, self.total_height,
            (self.font_large, self.font_medium, self.font_small), self.colors, self.path_color(),
            self.algorithm, self.visited_count, self.path_count, self.status,
            self.ui.slider_rect, self.ui.slider_handle, self.step_size,
            self.ui.buttons, self.window_size
        )

    # ---------- main loop ----------
    def run(self):
        self.is_running = True
        while self.is_running:
            if not self.handle_events():
                break
            elapsed = self.clock.tick(60) / 1000.0
            advance_replay(self, elapsed)

            self.screen.fill(self.colors['white'])
            self.screen.blit(self.draw_grid(), (0, 0))
            self.screen.blit(self.draw_info_panel(), (self.window_size, 0))
            pygame.display.flip()

        pygame.quit()
        sys.exit()


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    print("--- Grid Pathfinding Visualization (Pygame) ---")
    print(f"Grid Size: {ROWS}x{COLS}")
    print("Starting Pygame GUI...")
    visualizer = PathfindingVisualizer()
    visualizer.run()
