import matplotlib.pyplot as plt
from matplotlib.backend_bases import KeyEvent

import constants as const
from config import MazeConfig
from drawing import create_labyrinth
from visualization import plot_drawing, show_labyrinth, visualize_labyrinth


def test_saves_png_and_restores_toggle_state(tmp_path):
    drawing = create_labyrinth(MazeConfig(size=3, seed=1))
    target = tmp_path / "maze.png"
    visualize_labyrinth(drawing, filename=str(target), show_solution=True)
    assert target.exists() and target.stat().st_size > 0
    assert drawing.solution_visible is False
    assert all(drawing.ui_class(key) == const.CLASS_HIDDEN for key in drawing.togglable)


def test_plot_returns_one_artist_per_togglable_element():
    drawing = create_labyrinth(MazeConfig(size=4, seed=2))
    fig, ax = plt.subplots()
    artists = plot_drawing(ax, drawing)
    assert len(artists) == len(drawing.togglable)
    assert not any(artist.get_visible() for artist in artists)
    plt.close(fig)

    drawing.set_solution_visible(True)
    fig, ax = plt.subplots()
    assert all(artist.get_visible() for artist in plot_drawing(ax, drawing))
    plt.close(fig)


def _path_lines(fig):
    return [line for line in fig.axes[0].get_lines() if line.get_color() == const.VIS_PATH_COLOR]


def _press(fig, key):
    fig.canvas.callbacks.process("key_press_event", KeyEvent("key_press_event", fig.canvas, key))


def test_space_toggles_solution_in_viewer():
    drawing = create_labyrinth(MazeConfig(size=4, seed=3))
    fig = show_labyrinth(drawing)
    lines = _path_lines(fig)
    assert len(lines) == len(drawing.solution_path)
    assert sum(line.get_visible() for line in lines) == len(drawing.always_visible)

    _press(fig, " ")
    assert drawing.solution_visible is True
    assert all(line.get_visible() for line in lines)
    assert all(drawing.ui_class(key) == const.CLASS_PATH for key in drawing.togglable)

    _press(fig, "a")
    assert drawing.solution_visible is True

    _press(fig, " ")
    assert drawing.solution_visible is False
    assert sum(line.get_visible() for line in lines) == len(drawing.always_visible)
    plt.close(fig)
