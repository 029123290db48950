import math

# --- Grid Structure ---
DEFAULT_MAZE_SIZE = 10
MIN_MAZE_SIZE = 1
CORNER_OFFSET = 0.5  # Corners sit half a room away from room centers

# --- Styles ---
STYLE_GRID = "grid"
STYLE_DIAMOND = "diamond"
STYLE_CIRCLE = "circle"
STYLES = (STYLE_GRID, STYLE_DIAMOND, STYLE_CIRCLE)
# Accepted spellings on the command line; anything else falls back to grid
STYLE_ALIASES = {
    "default": STYLE_GRID,
    "grid": STYLE_GRID,
    "g": STYLE_GRID,
    "diamond": STYLE_DIAMOND,
    "d": STYLE_DIAMOND,
    "circle": STYLE_CIRCLE,
    "c": STYLE_CIRCLE,
}

# --- Geometry Transforms ---
DEFAULT_JITTER = 0.25  # Upper bound of the "doodle" noise in grid style
DIAMOND_ROTATION = math.pi / 4

# --- Element Classes (hand-off to renderers) ---
CLASS_WALL = "wall"
CLASS_PATH = "path"
CLASS_HIDDEN = "hidden"
UI_CLASSES = (CLASS_WALL, CLASS_PATH, CLASS_HIDDEN)

# --- Tolerances ---
GEOMETRY_TOLERANCE = 1e-9  # For floating point comparisons

# --- Visualization ---
VIS_BACKGROUND_COLOR = "#efefe8"
VIS_WALL_COLOR = "#333333"
VIS_PATH_COLOR = "#ab4598"
VIS_WALL_LW = 2.0
VIS_PATH_LW = 2.0
VIS_NODE_SIZE = 2.0
VIS_FIGURE_SIZE = (8, 8)
VIS_DPI = 150
VIS_MARGIN = 1.0
VIS_TOGGLE_KEY = " "

# --- STL Export ---
STL_WALL_THICKNESS = 0.15
STL_WALL_HEIGHT = 1.0
STL_BASE_HEIGHT = STL_WALL_HEIGHT / 3.0
STL_BASE_MARGIN = 0.5  # Extra base plate around the wall footprint
