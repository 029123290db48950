# drawing.py
import numpy as np
import random
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

# Import from other project modules
import constants as const
from config import MazeConfig
from geometry import WallGraph, derive_wall_graph, transform_positions
from grid_core import Door, Room, RoomGraph
from maze_gen import carve_spanning_tree, prune_non_tree_doors
from solver import SolutionPath, find_solution_path

NodeKey = Tuple[str, Tuple[int, int]]  # ("corner", (i, j)) or ("room", (x, y))
EdgeKey = Tuple[NodeKey, NodeKey]

CORNER = "corner"
ROOM = "room"


@dataclass
class RenderNode:
    key: NodeKey
    x: float
    y: float
    ui_class: str = const.CLASS_WALL


@dataclass
class RenderEdge:
    key: EdgeKey
    source: NodeKey
    target: NodeKey
    ui_class: str = const.CLASS_WALL


def room_key(room: Room) -> NodeKey:
    return (ROOM, room.id)


def door_key(door: Door) -> EdgeKey:
    return (room_key(door.a), room_key(door.b))


def _element_key(element):
    return room_key(element) if isinstance(element, Room) else door_key(element)


class MazeDrawing:
    """
    Finished labyrinth handed to a renderer: wall corners and walls, plus the
    rooms and doors of the solution path. Every element carries exactly one
    class; the only mutation allowed afterwards is the solution toggle.
    """

    def __init__(self, size: int, style: str):
        self.size = size
        self.style = style
        self.nodes: Dict[NodeKey, RenderNode] = {}
        self.edges: Dict[EdgeKey, RenderEdge] = {}
        self.always_visible: List = []
        self.togglable: List = []
        self.path_order: List = []
        self.solution_visible = False

    def element(self, key):
        """Returns the node or edge stored under `key`."""
        if key in self.nodes:
            return self.nodes[key]
        return self.edges[key]

    def ui_class(self, key) -> str:
        return self.element(key).ui_class

    @property
    def solution_path(self) -> List:
        """Path element keys in walking order, entry room first."""
        return list(self.path_order)

    def set_solution_visible(self, visible: bool):
        ui_class = const.CLASS_PATH if visible else const.CLASS_HIDDEN
        for key in self.togglable:
            self.element(key).ui_class = ui_class
        self.solution_visible = visible

    def toggle_solution(self) -> bool:
        self.set_solution_visible(not self.solution_visible)
        return self.solution_visible

    def wall_edges(self) -> Iterator[RenderEdge]:
        return (e for e in self.edges.values() if e.ui_class == const.CLASS_WALL)

    def path_edges(self) -> Iterator[RenderEdge]:
        return (e for e in self.edges.values() if e.ui_class != const.CLASS_WALL)

    def positions(self, keys) -> np.ndarray:
        return np.array([[self.nodes[k].x, self.nodes[k].y] for k in keys], dtype=float)

    def bounds(self) -> Tuple[float, float, float, float]:
        """Returns (min_x, min_y, max_x, max_y) over every node."""
        pts = self.positions(list(self.nodes))
        min_x, min_y = pts.min(axis=0)
        max_x, max_y = pts.max(axis=0)
        return float(min_x), float(min_y), float(max_x), float(max_y)


def build_drawing(
    graph: RoomGraph, walls: WallGraph, solution: SolutionPath, style: str
) -> MazeDrawing:
    """Collects corners, walls and the solution path, then maps them into the style."""
    print(f"--- Building Drawing (Style={style}) ---")
    drawing = MazeDrawing(graph.size, style)

    keys: List[NodeKey] = []
    points: List[Tuple[float, float]] = []
    for corner in walls.get_all_corners():
        keys.append((CORNER, corner.id))
        points.append((corner.x, corner.y))
    for room in solution.rooms:
        keys.append(room_key(room))
        points.append(room.position)

    mapped = transform_positions(np.array(points, dtype=float).reshape(-1, 2), graph.size, style)
    for key, (x, y) in zip(keys, mapped):
        drawing.nodes[key] = RenderNode(key, float(x), float(y))

    for wall in walls.get_all_walls():
        source, target = (CORNER, wall.key[0]), (CORNER, wall.key[1])
        drawing.edges[(source, target)] = RenderEdge((source, target), source, target)
    for door in solution.doors:
        key = door_key(door)
        drawing.edges[key] = RenderEdge(key, key[0], key[1])

    drawing.path_order = [_element_key(element) for element in solution.elements]

    # Boundary path elements always show, the rest starts hidden
    for element in solution.always_visible:
        key = _element_key(element)
        drawing.element(key).ui_class = const.CLASS_PATH
        drawing.always_visible.append(key)
    for element in solution.togglable:
        key = _element_key(element)
        drawing.element(key).ui_class = const.CLASS_HIDDEN
        drawing.togglable.append(key)

    print(
        f"  Drawing has {len(drawing.nodes)} nodes, {len(drawing.edges)} edges, "
        f"{len(drawing.togglable)} togglable path elements."
    )
    return drawing


def create_labyrinth(config: Optional[MazeConfig] = None, rng: Optional[random.Random] = None) -> MazeDrawing:
    """Runs the whole pipeline: build, carve, prune, solve, derive walls, map."""
    config = (config or MazeConfig()).validate()
    if rng is None:
        rng = config.make_rng()

    graph = RoomGraph(config.size)
    carve_spanning_tree(graph, graph.entry, rng)
    prune_non_tree_doors(graph)
    solution = find_solution_path(graph, graph.entry, graph.exit)
    walls = derive_wall_graph(graph, jitter=config.resolve_jitter(), rng=rng)
    return build_drawing(graph, walls, solution, config.style)
