from ..gridpath_algorithm.constants import START_CELL, END_CELL, VISITED, PATH
from ..gridpath_algorithm.replay import Replay, VISITED_STEP
from ..gridpath_algorithm.result import PathNotFound


def start_replay(app, result):
    # app: PathfindingVisualizer instance (see visualizer_app)
    app.cells = app.session.grid.to_array(include_search_state=False)
    app.replay = Replay(result)
    app.replay_clock = 0.0
    app.algorithm = result.algorithm
    app.visited_count = 0
    app.path_count = 0
    app.status = ""


def advance_replay(app, elapsed):
    """Apply as many replay steps as `elapsed` seconds allow"""
    if app.replay is None or app.is_paused:
        return
    app.replay_clock += elapsed

    if app.step_size <= 0:
        steps = app.replay.take(app.replay.total)
        app.replay_clock = 0.0
    else:
        count = int(app.replay_clock // app.step_size)
        steps = app.replay.take(count)
        app.replay_clock -= count * app.step_size

    for step in steps:
        update_cell(app, step)

    if app.replay.done:
        finish_replay(app)


def update_cell(app, step):
    position = step.node.position
    if app.cells[position] not in (START_CELL, END_CELL):
        app.cells[position] = VISITED if step.kind == VISITED_STEP else PATH

    if step.kind == VISITED_STEP:
        app.visited_count += 1
    else:
        app.path_count += 1


def finish_replay(app):
    result = app.replay.result
    app.replay = None
    app.session.finish()
    app.on_replay_finished()
    try:
        result.raise_for_status()
        app.status = f"Path found: {result.path_length} steps"
    except PathNotFound as e:
        app.status = str(e)
