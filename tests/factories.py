"""Small builders shared by the pipeline tests."""

import random
from collections import deque
from typing import Set

from grid_core import RoomGraph, RoomId
from maze_gen import carve_spanning_tree, prune_non_tree_doors


def carved(size: int, seed: int = 0) -> RoomGraph:
    graph = RoomGraph(size)
    carve_spanning_tree(graph, graph.entry, random.Random(seed))
    return graph


def pruned(size: int, seed: int = 0) -> RoomGraph:
    graph = carved(size, seed)
    prune_non_tree_doors(graph)
    return graph


def reachable_through_tree(graph: RoomGraph) -> Set[RoomId]:
    seen = {graph.entry.id}
    queue = deque([graph.entry])
    while queue:
        room = queue.popleft()
        for door in graph.doors_of(room):
            if not door.in_tree:
                continue
            other = door.opposite(room)
            if other.id not in seen:
                seen.add(other.id)
                queue.append(other)
    return seen
