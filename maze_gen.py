# maze_gen.py
import random
from typing import List, Optional, Set, Tuple

# Import from other project modules
from grid_core import Door, DoorState, MazeInvariantError, Room, RoomGraph, RoomId


def carve_spanning_tree(graph: RoomGraph, start: Room, rng: Optional[random.Random] = None):
    """
    Carves the maze with a randomized depth-first walk starting at `start`.
    The door used to first reach each room is flagged as a tree door, every
    other door stays a candidate.
    """
    print("--- Starting Maze Generation (Randomized Depth-First Walk) ---")
    if any(door.in_tree for door in graph.get_all_doors()):
        raise MazeInvariantError("Graph has already been carved.")
    if rng is None:
        rng = random.Random()

    visited: Set[RoomId] = set()
    # Each frontier room travels with the door that reached it
    stack: List[Tuple[Room, Optional[Door]]] = [(start, None)]
    tree_count = 0

    print(f"  Starting maze generation at room: {start.id}")
    while stack:
        room, via = stack.pop()
        if room.id in visited:
            continue  # Already resolved through another door
        visited.add(room.id)

        if via is not None:
            via.state = DoorState.TREE
            tree_count += 1

        next_doors = [
            door for door in graph.doors_of(room) if door.opposite(room).id not in visited
        ]
        rng.shuffle(next_doors)
        for door in next_doors:
            stack.append((door.opposite(room), door))

    print(
        f"--- Maze Generation Complete: Visited {len(visited)}/{graph.room_count()} rooms, "
        f"{tree_count} tree doors. ---"
    )
    if len(visited) < graph.room_count():
        raise MazeInvariantError(
            f"Depth-first walk reached only {len(visited)}/{graph.room_count()} rooms."
        )


def prune_non_tree_doors(graph: RoomGraph) -> int:
    """Removes every door that is not part of the spanning tree."""
    expected = graph.room_count() - 1
    tree_count = len(graph.tree_doors())
    if tree_count != expected:
        raise MazeInvariantError(
            f"Cannot prune: expected {expected} tree doors, found {tree_count}. Carve first."
        )

    to_prune = [door for door in graph.get_all_doors() if door.state is DoorState.CANDIDATE]
    for door in to_prune:
        graph.remove_door(door)
    print(f"  Pruned {len(to_prune)} closed doors, {len(graph.doors)} remain.")
    return len(to_prune)
