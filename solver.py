# solver.py
from collections import deque
from typing import Dict, List, Optional, Tuple, Union

# Import from other project modules
from grid_core import Door, DoorState, MazeInvariantError, Room, RoomGraph, RoomId

PathElement = Union[Room, Door]


class SolutionPath:
    """Ordered rooms and doors from the entry to the exit: room, door, room, ..., room."""

    def __init__(self, elements: List[PathElement]):
        if len(elements) < 3 or len(elements) % 2 == 0:
            raise MazeInvariantError(f"Malformed solution path of {len(elements)} elements.")
        self.elements = elements

    @property
    def rooms(self) -> List[Room]:
        return self.elements[0::2]

    @property
    def doors(self) -> List[Door]:
        return self.elements[1::2]

    @property
    def start(self) -> Room:
        return self.elements[0]

    @property
    def end(self) -> Room:
        return self.elements[-1]

    @property
    def always_visible(self) -> List[PathElement]:
        """Entry and exit rooms plus the doors that connect them to the grid."""
        doors = self.doors
        boundary = [self.start, doors[0]]
        if len(doors) > 1:
            boundary.append(doors[-1])
        boundary.append(self.end)
        return boundary

    @property
    def togglable(self) -> List[PathElement]:
        """Interior path elements, shown or hidden on request."""
        fixed = set(id(e) for e in self.always_visible)
        return [e for e in self.elements if id(e) not in fixed]

    def __len__(self) -> int:
        return len(self.doors)

    def __repr__(self) -> str:
        return f"SolutionPath({self.start.id} -> {self.end.id}, {len(self)} doors)"


def find_solution_path(graph: RoomGraph, start: Room, end: Room) -> SolutionPath:
    """
    Finds the path between two rooms using Breadth-First Search on the pruned tree.
    Every door on the path is flagged as a solution door.
    """
    print(f"--- Finding path from {start.id} to {end.id} ---")
    if any(door.state is DoorState.CANDIDATE for door in graph.get_all_doors()):
        raise MazeInvariantError("Solver needs a pruned graph: candidate doors remain.")
    if start.id not in graph.rooms or end.id not in graph.rooms:
        raise MazeInvariantError("Start or end room is not part of the graph.")

    queue = deque([start])
    # Predecessor room and the door used to reach it
    predecessor: Dict[RoomId, Optional[Tuple[Room, Door]]] = {start.id: None}

    while queue:
        current = queue.popleft()
        if current == end:
            break
        for door in graph.doors_of(current):
            neighbour = door.opposite(current)
            if neighbour.id not in predecessor:
                predecessor[neighbour.id] = (current, door)
                queue.append(neighbour)

    if end.id not in predecessor:
        print("  Path not found!")
        raise MazeInvariantError(f"No path from {start.id} to {end.id}; the tree is disconnected.")

    # Reconstruct path
    elements: List[PathElement] = [end]
    step = predecessor[end.id]
    while step is not None:
        room, door = step
        elements.append(door)
        elements.append(room)
        step = predecessor[room.id]
    elements.reverse()

    path = SolutionPath(elements)
    for door in path.doors:
        door.state = DoorState.SOLUTION

    print(f"  Path length: {len(path.rooms)} rooms, {len(path)} doors.")
    return path
