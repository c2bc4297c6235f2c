"""
Tests for the pygame UI helpers and renderer (headless)
"""

import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
pygame = pytest.importorskip("pygame")

from gridpath.gridpath_algorithm.constants import (DIJKSTRA, ASTAR, BFS, DFS, VISITED,  # noqa: E402
                                                   OBSTACLE, END_CELL)
from gridpath.gridpath_pygame.visualizer_callbacks import advance_replay  # noqa: E402
from gridpath.gridpath_algorithm.grid import create_grid  # noqa: E402
from gridpath.gridpath_pygame.visualizer_render import draw_grid  # noqa: E402
from gridpath.gridpath_pygame.visualizer_ui import (UIState, setup_ui_elements, set_running,  # noqa: E402
                                                    handle_mouse_hover, update_slider, cell_at)

COLORS = {
    'white': (255, 255, 255),
    'black': (0, 0, 0),
    'light_gray': (211, 211, 211),
    'green': (0, 200, 0),
    'red': (220, 0, 0),
    'visited': (173, 216, 230),
    'button_normal': (200, 200, 200),
    'button_hover': (180, 180, 180),
}


def make_ui():
    ui = UIState(window_size=600, panel_width=300, step_size=0.02)
    setup_ui_elements(ui, COLORS)
    return ui


def test_cell_at():
    assert cell_at((0, 0), 30, 20, 20) == (0, 0)
    assert cell_at((95, 31), 30, 20, 20) == (1, 3)
    assert cell_at((600, 10), 30, 20, 20) is None
    assert cell_at((-1, 10), 30, 20, 20) is None


def test_slider_maps_position_to_step_size():
    ui = make_ui()
    assert ui.slider_value == 20

    assert update_slider(ui, ui.slider_rect.x) == 0.0
    assert update_slider(ui, ui.slider_rect.right + 50) == 0.2
    assert update_slider(ui, ui.slider_rect.x + 100) == 0.1


def test_set_running_toggles_buttons():
    ui = make_ui()
    assert not ui.buttons['pause']['enabled']

    set_running(ui, True)
    for algorithm in (DIJKSTRA, ASTAR, BFS, DFS, 'maze'):
        assert not ui.buttons[algorithm]['enabled']
    assert ui.buttons['pause']['enabled']
    assert ui.buttons['clear']['enabled']

    ui.buttons['pause']['text'] = 'Resume'
    set_running(ui, False)
    assert ui.buttons[BFS]['enabled']
    assert ui.buttons['pause']['text'] == 'Pause'


def test_hover_only_highlights_enabled_buttons():
    ui = make_ui()
    handle_mouse_hover(ui, COLORS, ui.buttons[BFS]['rect'].center)
    assert ui.buttons[BFS]['color'] == COLORS['button_hover']

    handle_mouse_hover(ui, COLORS, ui.buttons['pause']['rect'].center)
    assert ui.buttons['pause']['color'] == COLORS['button_normal']


def test_draw_grid_colors_cells():
    grid = create_grid(4, 5, (0, 0), (3, 4))
    grid.toggle_obstacle(1, 1)
    cells = grid.to_array()
    cells[2, 2] = VISITED

    surface = draw_grid(cells, 10, COLORS, (255, 20, 147))

    assert surface.get_size() == (50, 40)
    assert tuple(surface.get_at((5, 5)))[:3] == COLORS['green']
    assert tuple(surface.get_at((15, 15)))[:3] == COLORS['black']
    assert tuple(surface.get_at((25, 25)))[:3] == COLORS['visited']
    assert tuple(surface.get_at((45, 35)))[:3] == COLORS['red']


@pytest.fixture
def app():
    from gridpath.gridpath_pygame.visualizer_app import PathfindingVisualizer

    visualizer = PathfindingVisualizer(rows=5, cols=7, cell_size=10, step_size=0.5)
    yield visualizer
    pygame.quit()


def press(app, key):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=key))
    assert app.handle_events()


def test_app_size_override_uses_matching_end(app):
    assert app.session.grid.end == (4, 6)
    assert app.cells[4, 6] == END_CELL


def test_app_paint_run_clear_and_rerun(app):
    grid = app.session.grid

    # a drag toggles each cell once on entry
    app.handle_mouse_click((15, 15))
    app.paint_cell((18, 12))
    app.paint_cell((25, 15))
    assert grid.obstacles() == [(1, 1), (1, 2)]
    assert app.cells[1, 1] == OBSTACLE

    press(app, pygame.K_3)
    assert app.algorithm == BFS
    assert app.replay is not None
    assert app.session.is_running
    assert not app.ui.buttons[BFS]['enabled']

    # edits are refused while the replay is in flight
    app.last_painted = None
    app.handle_mouse_click((5, 35))
    app.generate_maze()
    assert grid.obstacles() == [(1, 1), (1, 2)]

    advance_replay(app, 0.5)
    assert app.visited_count == 1

    # legend swatch follows the running algorithm's path colour
    panel = app.draw_info_panel()
    assert tuple(panel.get_at((25, 579)))[:3] == app.colors['path_bfs']

    app.clear_grid()
    assert app.replay is None
    assert not app.session.is_running
    assert app.ui.buttons[BFS]['enabled']
    assert grid.obstacles() == []

    press(app, pygame.K_4)
    assert app.algorithm == DFS
    advance_replay(app, 1000.0)

    assert app.replay is None
    assert not app.session.is_running
    assert app.ui.buttons[DFS]['enabled']
    result = app.session.last_result
    assert result.found
    assert app.path_count == result.path_length
    assert app.status == f"Path found: {result.path_length} steps"
