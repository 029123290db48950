# visualization.py
import matplotlib.pyplot as plt
from typing import Tuple

# Import from other project modules
import constants as const
from drawing import MazeDrawing


# --- Visualization Helpers ---
def _setup_plot(drawing: MazeDrawing) -> Tuple[plt.Figure, plt.Axes]:
    """Creates a square, axis-free plot covering the drawing."""
    fig, ax = plt.subplots(figsize=const.VIS_FIGURE_SIZE)
    fig.patch.set_facecolor(const.VIS_BACKGROUND_COLOR)
    ax.set_facecolor(const.VIS_BACKGROUND_COLOR)
    min_x, min_y, max_x, max_y = drawing.bounds()
    ax.set_xlim(min_x - const.VIS_MARGIN, max_x + const.VIS_MARGIN)
    ax.set_ylim(min_y - const.VIS_MARGIN, max_y + const.VIS_MARGIN)
    ax.set_aspect("equal")
    ax.set_axis_off()
    return fig, ax


def _segment(drawing: MazeDrawing, edge) -> Tuple[list, list]:
    a, b = drawing.nodes[edge.source], drawing.nodes[edge.target]
    return [a.x, b.x], [a.y, b.y]


def plot_drawing(ax: plt.Axes, drawing: MazeDrawing) -> list:
    """
    Draws walls and every visible path element. Hidden path elements are not
    drawn at all. Returns the artists of togglable path elements, keyed in the
    same order as drawing.togglable, so callers can flip their visibility.
    """
    for edge in drawing.wall_edges():
        xs, ys = _segment(drawing, edge)
        ax.plot(xs, ys, color=const.VIS_WALL_COLOR, lw=const.VIS_WALL_LW, solid_capstyle="round")

    artists = []
    togglable = set(drawing.togglable)
    for key in drawing.solution_path:
        element = drawing.element(key)
        if key in drawing.edges:
            xs, ys = _segment(drawing, element)
            (artist,) = ax.plot(xs, ys, color=const.VIS_PATH_COLOR, lw=const.VIS_PATH_LW)
        else:
            (artist,) = ax.plot(
                [element.x], [element.y], "o", color=const.VIS_PATH_COLOR, markersize=const.VIS_NODE_SIZE
            )
        artist.set_visible(element.ui_class == const.CLASS_PATH)
        if key in togglable:
            artists.append(artist)
    return artists


# --- Main Visualization Functions ---
def visualize_labyrinth(drawing: MazeDrawing, filename="labyrinth.png", show_solution=False):
    """Saves the labyrinth to an image, optionally with the full solution."""
    print(f"--- Generating Labyrinth Visualization: {filename} ---")
    previous = drawing.solution_visible
    drawing.set_solution_visible(show_solution)
    try:
        fig, ax = _setup_plot(drawing)
        plot_drawing(ax, drawing)
        fig.savefig(filename, dpi=const.VIS_DPI, bbox_inches="tight", facecolor=fig.get_facecolor())
        plt.close(fig)
        print(f"  Labyrinth visualization saved to {filename}")
    finally:
        drawing.set_solution_visible(previous)


def show_labyrinth(drawing: MazeDrawing):
    """Opens an interactive window; press space to toggle the solution."""
    fig, ax = _setup_plot(drawing)
    artists = plot_drawing(ax, drawing)
    ax.set_title("Press space to toggle the solution", color=const.VIS_WALL_COLOR)

    def on_key(event):
        if event.key == const.VIS_TOGGLE_KEY:
            visible = drawing.toggle_solution()
            for artist in artists:
                artist.set_visible(visible)
            fig.canvas.draw_idle()

    fig.canvas.mpl_connect("key_press_event", on_key)
    plt.show()
    return fig
