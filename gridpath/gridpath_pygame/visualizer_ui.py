import pygame

from ..gridpath_algorithm.constants import DIJKSTRA, ASTAR, BFS, DFS, STEP_DELAY

# slider range in milliseconds per replay step
SLIDER_MAX_MS = 200


class UIState:
    def __init__(self, window_size, panel_width, step_size=STEP_DELAY):
        self.window_size = window_size
        self.panel_width = panel_width
        self.buttons = {}
        self.slider_rect = pygame.Rect(window_size + 20, 200, 200, 20)
        self.slider_handle = pygame.Rect(window_size + 20, 195, 10, 30)
        self.slider_value = 0
        self.dragging_slider = False
        set_slider(self, step_size)


def setup_ui_elements(ui, colors):
    button_width = 120
    button_height = 30
    left_x = ui.window_size + 20
    right_x = left_x + button_width + 20
    start_y = 250
    button_configs = [
        (DIJKSTRA, 'Dijkstra', left_x, start_y),
        (ASTAR, 'A*', right_x, start_y),
        (BFS, 'BFS', left_x, start_y + 40),
        (DFS, 'DFS', right_x, start_y + 40),
        ('maze', 'Random Maze', left_x, start_y + 80),
        ('clear', 'Clear', right_x, start_y + 80),
        ('pause', 'Pause', left_x, start_y + 120),
    ]
    for btn_id, text, x_pos, y_pos in button_configs:
        ui.buttons[btn_id] = {
            'rect': pygame.Rect(x_pos, y_pos, button_width, button_height),
            'text': text,
            'enabled': btn_id != 'pause',
            'color': colors['button_normal'],
        }


def set_running(ui, running):
    """Grey out everything except Clear and Pause while a replay is playing"""
    for btn_id, btn_data in ui.buttons.items():
        if btn_id == 'clear':
            continue
        btn_data['enabled'] = running if btn_id == 'pause' else not running
    if not running:
        ui.buttons['pause']['text'] = 'Pause'


def handle_mouse_hover(ui, colors, pos):
    for btn_data in ui.buttons.values():
        if btn_data['rect'].collidepoint(pos) and btn_data['enabled']:
            btn_data['color'] = colors['button_hover']
        else:
            btn_data['color'] = colors['button_normal']


def update_slider(ui, mouse_x):
    relative_x = mouse_x - ui.slider_rect.x
    relative_x = max(0, min(relative_x, ui.slider_rect.width))
    ui.slider_handle.x = ui.slider_rect.x + relative_x - 5
    ui.slider_value = int((relative_x / ui.slider_rect.width) * SLIDER_MAX_MS)
    step_size = ui.slider_value / 1000.0
    return step_size


def set_slider(ui, step_size):
    ui.slider_value = max(0, min(int(round(step_size * 1000)), SLIDER_MAX_MS))
    relative_x = int(ui.slider_value / SLIDER_MAX_MS * ui.slider_rect.width)
    ui.slider_handle.x = ui.slider_rect.x + relative_x - 5


def cell_at(pos, cell_size, rows, cols):
    """Grid (row, col) under a pixel position, or None outside the grid"""
    x, y = pos
    if x < 0 or y < 0:
        return None
    row, col = y // cell_size, x // cell_size
    if row < rows and col < cols:
        return row, col
    return None
