# geometry.py
import numpy as np
import random
from typing import Dict, Iterator, List, Optional, Tuple

# Import from other project modules
import constants as const
from grid_core import Door, MazeConfigError, MazeInvariantError, RoomGraph, RoomId
from utils import center_points, rotate_points, square_to_circle

CornerId = Tuple[int, int]
WallKey = Tuple[CornerId, CornerId]


def wall_key(c0: CornerId, c1: CornerId) -> WallKey:
    """Canonical key of the wall between two corners, smaller corner first."""
    return (c0, c1) if c0 <= c1 else (c1, c0)


def wall_crossing_door(a: RoomId, b: RoomId) -> WallKey:
    """
    Returns the wall lying across the door between rooms `a` and `b`.

    Room (x, y) is bounded by corners (x, y) and (x+1, y+1). With (lx, ly) the
    lower of the two rooms, a horizontal door crosses the wall
    (lx+1, ly)-(lx+1, ly+1) and a vertical door crosses (lx, ly+1)-(lx+1, ly+1).
    Endpoint order does not matter.
    """
    (ax, ay), (bx, by) = a, b
    lx, ly = min(a, b)
    if abs(ax - bx) == 1 and ay == by:
        return wall_key((lx + 1, ly), (lx + 1, ly + 1))
    if ax == bx and abs(ay - by) == 1:
        return wall_key((lx, ly + 1), (lx + 1, ly + 1))
    raise MazeInvariantError(f"Rooms {a} and {b} do not share a wall.")


class Corner:
    """A room corner; node of the wall graph."""

    def __init__(self, i: int, j: int, x: float, y: float):
        self.i = i
        self.j = j
        self.id: CornerId = (i, j)
        self.x = x
        self.y = y

    def __repr__(self) -> str:
        return f"Corner({self.i};{self.j} @ {self.x:.2f},{self.y:.2f})"


class Wall:
    """A wall segment between two neighbouring corners."""

    def __init__(self, c0: Corner, c1: Corner):
        self.c0 = c0
        self.c1 = c1
        self.key: WallKey = wall_key(c0.id, c1.id)

    def __repr__(self) -> str:
        return f"Wall({self.key[0]}->{self.key[1]})"


class WallGraph:
    """
    Dual of the room graph: corners on a (size+1) x (size+1) lattice, with a
    wall between every pair of neighbouring corners until doors are opened.
    """

    def __init__(self, size: int, jitter: float = 0.0, rng: Optional[random.Random] = None):
        if jitter < 0:
            raise MazeConfigError(f"Jitter must be non-negative, got {jitter}.")
        self.size = size
        self.corners: Dict[CornerId, Corner] = {}
        self.walls: Dict[WallKey, Wall] = {}
        self._degree: Dict[CornerId, int] = {}
        if jitter and rng is None:
            rng = random.Random()

        for i in range(size + 1):
            for j in range(size + 1):
                # Offset by half a room so walls surround the rooms
                x = i - const.CORNER_OFFSET
                y = j - const.CORNER_OFFSET
                if jitter:
                    x += rng.random() * jitter
                    y += rng.random() * jitter
                self.corners[(i, j)] = Corner(i, j, x, y)
                self._degree[(i, j)] = 0

        for i in range(size + 1):
            for j in range(size + 1):
                corner = self.corners[(i, j)]
                right = self.corners.get((i + 1, j))
                if right:
                    self._add_wall(corner, right)
                bottom = self.corners.get((i, j + 1))
                if bottom:
                    self._add_wall(corner, bottom)

    def _add_wall(self, c0: Corner, c1: Corner):
        wall = Wall(c0, c1)
        self.walls[wall.key] = wall
        self._degree[c0.id] += 1
        self._degree[c1.id] += 1

    def has_wall(self, key: WallKey) -> bool:
        return wall_key(*key) in self.walls

    def remove_wall(self, key: WallKey) -> Wall:
        """Removes a wall; a missing wall means the door/wall mapping is broken."""
        key = wall_key(*key)
        wall = self.walls.pop(key, None)
        if wall is None:
            raise MazeInvariantError(f"No wall {key[0]}->{key[1]} to remove.")
        self._degree[wall.c0.id] -= 1
        self._degree[wall.c1.id] -= 1
        return wall

    def degree(self, corner_id: CornerId) -> int:
        return self._degree[corner_id]

    def remove_isolated_corners(self) -> int:
        isolated = [cid for cid, deg in self._degree.items() if deg == 0]
        for cid in isolated:
            del self.corners[cid]
            del self._degree[cid]
        return len(isolated)

    def get_all_corners(self) -> Iterator[Corner]:
        yield from self.corners.values()

    def get_all_walls(self) -> Iterator[Wall]:
        yield from self.walls.values()


def derive_wall_graph(
    graph: RoomGraph, jitter: float = 0.0, rng: Optional[random.Random] = None
) -> WallGraph:
    """
    Turns the carved room graph inside out: every open door removes the wall
    lying across it. Doors off the solution path are dropped from the room
    graph afterwards, since only the solution is drawn from it.
    """
    print(f"--- Deriving Wall Graph (Size={graph.size}, Jitter={jitter:.2f}) ---")
    walls = WallGraph(graph.size, jitter=jitter, rng=rng)
    print(f"  Created {len(walls.corners)} corners and {len(walls.walls)} walls.")

    boundary_doors: List[Door] = []
    opened = 0
    for door in graph.tree_doors():
        if graph.is_boundary_door(door):
            boundary_doors.append(door)
            continue
        walls.remove_wall(wall_crossing_door(door.a.id, door.b.id))
        opened += 1
        if not door.on_solution_path:
            graph.remove_door(door)

    # Entry and exit doors open the outer perimeter
    for door in boundary_doors:
        walls.remove_wall(wall_crossing_door(door.a.id, door.b.id))
        opened += 1
    if len(boundary_doors) != 2:
        raise MazeInvariantError(f"Expected 2 boundary tree doors, found {len(boundary_doors)}.")

    removed_corners = walls.remove_isolated_corners()
    print(
        f"--- Wall Graph Complete: Opened {opened} walls, {len(walls.walls)} remain, "
        f"{removed_corners} isolated corners removed. ---"
    )
    return walls


def transform_positions(points: np.ndarray, size: int, style: str) -> np.ndarray:
    """Centers (N, 2) maze coordinates on the origin and applies the style mapping."""
    centered = center_points(points, size)
    if style == const.STYLE_DIAMOND:
        return rotate_points(centered, const.DIAMOND_ROTATION)
    if style == const.STYLE_CIRCLE:
        return square_to_circle(centered)
    if style == const.STYLE_GRID:
        return centered
    raise MazeConfigError(f"Unknown style {style!r}.")
