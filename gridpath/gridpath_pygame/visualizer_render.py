import pygame

from ..gridpath_algorithm.constants import (EMPTY, OBSTACLE, START_CELL, END_CELL,
                                            VISITED, PATH, ALGORITHM_NAMES)


def draw_grid(cells, cell_size, colors, path_color):
    rows, cols = cells.shape
    grid_surface = pygame.Surface((cols * cell_size, rows * cell_size))
    grid_surface.fill(colors['white'])

    cell_colors = {
        EMPTY: colors['white'],
        OBSTACLE: colors['black'],
        START_CELL: colors['green'],
        END_CELL: colors['red'],
        VISITED: colors['visited'],
        PATH: path_color,
    }

    for r in range(rows):
        for c in range(cols):
            rect = pygame.Rect(c * cell_size, r * cell_size, cell_size, cell_size)
            color = cell_colors.get(int(cells[r, c]), colors['white'])
            pygame.draw.rect(grid_surface, color, rect)
            pygame.draw.rect(grid_surface, colors['light_gray'], rect, 1)

    return grid_surface


def draw_info_panel(panel_width, total_height, fonts, colors, path_color,
                    algorithm, visited_count, path_count, status,
                    slider_rect, slider_handle, step_size,
                    buttons, window_size):
    font_large, font_medium, font_small = fonts
    panel_surface = pygame.Surface((panel_width, total_height))
    panel_surface.fill(colors['panel_bg'])

    y_offset = 20
    title_text = font_large.render("Pathfinding Visualizer", True, colors['black'])
    panel_surface.blit(title_text, (20, y_offset))
    y_offset += 40

    info_texts = [
        f"Algorithm: {ALGORITHM_NAMES.get(algorithm, '-')}",
        f"Visited: {visited_count}",
        f"Path Length: {path_count}",
        "",
        "",
        "Speed Control:",
    ]
    for text in info_texts:
        if text:
            t = font_medium.render(text, True, colors['black'])
            panel_surface.blit(t, (20, y_offset))
        y_offset += 25

    # slider
    pygame.draw.rect(panel_surface, colors['light_gray'],
                     (slider_rect.x - window_size, slider_rect.y,
                      slider_rect.width, slider_rect.height))
    pygame.draw.rect(panel_surface, colors['blue'],
                     (slider_handle.x - window_size, slider_handle.y,
                      slider_handle.width, slider_handle.height))
    speed_text = f"{step_size:.3f}s / step"
    speed_surface = font_small.render(speed_text, True, colors['black'])
    panel_surface.blit(speed_surface, (slider_rect.x - window_size + slider_rect.width + 5,
                                       slider_rect.y + 4))

    # buttons
    for btn_data in buttons.values():
        btn_color = btn_data['color'] if btn_data['enabled'] else colors['gray']
        btn_rect_local = pygame.Rect(
            btn_data['rect'].x - window_size, btn_data['rect'].y,
            btn_data['rect'].width, btn_data['rect'].height
        )
        pygame.draw.rect(panel_surface, btn_color, btn_rect_local)
        pygame.draw.rect(panel_surface, colors['dark_gray'], btn_rect_local, 2)
        btn_text = font_medium.render(btn_data['text'], True,
                                      colors['black'] if btn_data['enabled'] else colors['dark_gray'])
        text_rect = btn_text.get_rect(center=btn_rect_local.center)
        panel_surface.blit(btn_text, text_rect)

    # status
    y_offset = 420
    if status:
        for line in wrap_text(status, font_small, panel_width - 40):
            panel_surface.blit(font_small.render(line, True, colors['dark_red']), (20, y_offset))
            y_offset += 18

    # legend
    legend_y = max(y_offset + 20, 470)
    panel_surface.blit(font_medium.render("Legend:", True, colors['black']), (20, legend_y))
    legend_y += 30
    legend_items = [
        ("Start", colors['green']),
        ("End", colors['red']),
        ("Obstacle", colors['black']),
        ("Visited", colors['visited']),
        (f"Path ({ALGORITHM_NAMES.get(algorithm, '-')})", path_color),
    ]
    for text, color in legend_items:
        pygame.draw.rect(panel_surface, color, (20, legend_y + 2, 12, 12))
        t = font_small.render(text, True, colors['dark_gray'])
        panel_surface.blit(t, (40, legend_y))
        legend_y += 18

    # controls
    controls_y = legend_y + 20
    panel_surface.blit(font_medium.render("Controls:", True, colors['black']), (20, controls_y))
    controls_y += 25
    for text in ["Click/drag: Toggle obstacles", "1-4: Dijkstra, A*, BFS, DFS",
                 "M: Random maze", "C: Clear grid", "SPACE: Pause/Resume"]:
        c_text = font_small.render(text, True, colors['dark_gray'])
        panel_surface.blit(c_text, (20, controls_y))
        controls_y += 18

    return panel_surface


def wrap_text(text, font, max_width):
    lines, current = [], ""
    for word in text.split():
        candidate = f"{current} {word}".strip()
        if current and font.size(candidate)[0] > max_width:
            lines.append(current)
            current = word
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines
