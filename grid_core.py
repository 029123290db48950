# grid_core.py
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

# Import from other project modules
import constants as const

RoomId = Tuple[int, int]
DoorKey = Tuple[RoomId, RoomId]


class MazeConfigError(ValueError):
    """Raised for invalid generation parameters, before any graph is built."""


class MazeInvariantError(RuntimeError):
    """Raised when a pipeline stage finds the maze in an impossible state."""


class DoorState(Enum):
    """Lifecycle of a door: candidate until carved, then tree, then maybe solution."""

    CANDIDATE = "candidate"
    TREE = "tree"
    SOLUTION = "solution"


class Room:
    """Represents a single room (node) of the labyrinth graph."""

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y
        self.id: RoomId = (x, y)

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def __repr__(self) -> str:
        return f"Room({self.x},{self.y})"

    def __hash__(self):
        return hash(self.id)

    def __eq__(self, other):
        return isinstance(other, Room) and self.id == other.id


class Door:
    """
    A passage between two Von Neumann-adjacent rooms.
    Stored in construction orientation: `a` is the room the door was built from.
    """

    def __init__(self, a: Room, b: Room):
        self.a = a
        self.b = b
        self.key: DoorKey = (a.id, b.id)
        self.state = DoorState.CANDIDATE

    @property
    def in_tree(self) -> bool:
        return self.state in (DoorState.TREE, DoorState.SOLUTION)

    @property
    def on_solution_path(self) -> bool:
        return self.state is DoorState.SOLUTION

    def opposite(self, room: Room) -> Room:
        """Returns the room on the other side of the door."""
        if room == self.a:
            return self.b
        if room == self.b:
            return self.a
        raise ValueError(f"{room} is not an endpoint of {self}")

    def __repr__(self) -> str:
        return f"Door({self.a.id}->{self.b.id}, {self.state.value})"


def validate_size(size) -> int:
    """Checks the maze width, returning it as an int."""
    if isinstance(size, bool) or not isinstance(size, int):
        raise MazeConfigError(f"Maze size must be an integer, got {size!r}.")
    if size < const.MIN_MAZE_SIZE:
        raise MazeConfigError(f"Maze size must be at least {const.MIN_MAZE_SIZE}, got {size}.")
    return size


class RoomGraph:
    """
    Square grid of size x size rooms with an entry room left of (0,0) and an
    exit room right of (size-1,size-1). Every pair of neighbouring rooms
    starts with a candidate door.
    """

    def __init__(self, size: int):
        self.size = validate_size(size)
        self.rooms: Dict[RoomId, Room] = {}
        self.doors: Dict[DoorKey, Door] = {}
        # Incident doors per room, kept in insertion order so seeded runs repeat
        self._incident: Dict[RoomId, List[Door]] = {}
        self.entry: Optional[Room] = None
        self.exit: Optional[Room] = None

        print(f"--- Initializing Room Graph (Size={self.size}) ---")
        self._create_rooms()
        self._link_neighbours()
        self._attach_entry_exit()
        print(f"--- Room Graph Initialized: {len(self.rooms)} rooms, {len(self.doors)} doors ---")

    def _create_rooms(self):
        for i in range(self.size):
            for j in range(self.size):
                self._add_room(Room(i, j))

    def _link_neighbours(self):
        """Adds a door to the right and bottom neighbour of every room."""
        for i in range(self.size):
            for j in range(self.size):
                room = self.rooms[(i, j)]
                right = self.rooms.get((i + 1, j))
                if right:
                    self.add_door(room, right)
                bottom = self.rooms.get((i, j + 1))
                if bottom:
                    self.add_door(room, bottom)

    def _attach_entry_exit(self):
        """Entry and exit sit on opposite corners to make the maze longer."""
        last = self.size - 1
        self.entry = self._add_room(Room(-1, 0))
        self.add_door(self.rooms[(0, 0)], self.entry)

        self.exit = self._add_room(Room(self.size, last))
        self.add_door(self.rooms[(last, last)], self.exit)

    def _add_room(self, room: Room) -> Room:
        self.rooms[room.id] = room
        self._incident[room.id] = []
        return room

    def add_door(self, a: Room, b: Room) -> Door:
        """Creates a door between two adjacent rooms, refusing duplicates."""
        if abs(a.x - b.x) + abs(a.y - b.y) != 1:
            raise MazeInvariantError(f"Rooms {a.id} and {b.id} are not Von Neumann neighbours.")
        if self.get_door(a, b) is not None:
            raise MazeInvariantError(f"A door between {a.id} and {b.id} already exists.")
        door = Door(a, b)
        self.doors[door.key] = door
        self._incident[a.id].append(door)
        self._incident[b.id].append(door)
        return door

    def remove_door(self, door: Door):
        if door.key not in self.doors:
            raise MazeInvariantError(f"{door} is not part of the graph.")
        del self.doors[door.key]
        self._incident[door.a.id].remove(door)
        self._incident[door.b.id].remove(door)

    def get_room(self, x: int, y: int) -> Optional[Room]:
        return self.rooms.get((x, y))

    def get_door(self, a: Room, b: Room) -> Optional[Door]:
        """Looks a door up regardless of the endpoint order given."""
        return self.doors.get((a.id, b.id)) or self.doors.get((b.id, a.id))

    def doors_of(self, room: Room) -> List[Door]:
        return list(self._incident[room.id])

    def degree(self, room: Room) -> int:
        return len(self._incident[room.id])

    def is_boundary_door(self, door: Door) -> bool:
        """True for the doors that lead in from the entry or out to the exit."""
        return self.entry in (door.a, door.b) or self.exit in (door.a, door.b)

    def tree_doors(self) -> List[Door]:
        return [door for door in self.doors.values() if door.in_tree]

    def get_all_rooms(self) -> Iterator[Room]:
        yield from self.rooms.values()

    def get_all_doors(self) -> Iterator[Door]:
        yield from self.doors.values()

    def room_count(self) -> int:
        return len(self.rooms)
