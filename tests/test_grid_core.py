"""Room graph construction tests."""

import pytest

from grid_core import DoorState, MazeConfigError, MazeInvariantError, Room, RoomGraph


@pytest.mark.parametrize("size", [1, 2, 3, 7])
def test_room_and_door_counts(size):
    graph = RoomGraph(size)
    assert graph.room_count() == size * size + 2
    # right/bottom doors inside the grid plus the entry and exit doors
    assert len(graph.doors) == 2 * size * (size - 1) + 2


def test_entry_and_exit_sit_on_opposite_corners():
    graph = RoomGraph(4)
    assert graph.entry.id == (-1, 0)
    assert graph.exit.id == (4, 3)
    assert graph.degree(graph.entry) == 1
    assert graph.degree(graph.exit) == 1
    assert graph.get_door(graph.entry, graph.get_room(0, 0)) is not None
    assert graph.get_door(graph.get_room(3, 3), graph.exit) is not None


def test_doors_are_built_rightward_or_downward():
    graph = RoomGraph(3)
    for door in graph.get_all_doors():
        if graph.is_boundary_door(door):
            continue
        dx, dy = door.b.x - door.a.x, door.b.y - door.a.y
        assert (dx, dy) in ((1, 0), (0, 1))


def test_all_doors_start_as_candidates():
    graph = RoomGraph(3)
    assert all(door.state is DoorState.CANDIDATE for door in graph.get_all_doors())
    assert graph.tree_doors() == []


def test_get_door_ignores_endpoint_order():
    graph = RoomGraph(2)
    a, b = graph.get_room(0, 0), graph.get_room(1, 0)
    assert graph.get_door(a, b) is graph.get_door(b, a)
    assert graph.get_door(a, graph.get_room(1, 1)) is None


@pytest.mark.parametrize("size", [0, -3, 2.5, "3", True, None])
def test_invalid_size_rejected(size):
    with pytest.raises(MazeConfigError):
        RoomGraph(size)


def test_duplicate_and_distant_doors_rejected():
    graph = RoomGraph(2)
    with pytest.raises(MazeInvariantError):
        graph.add_door(graph.get_room(1, 0), graph.get_room(0, 0))
    with pytest.raises(MazeInvariantError):
        graph.add_door(graph.get_room(0, 0), graph.get_room(1, 1))


def test_remove_door_updates_adjacency():
    graph = RoomGraph(2)
    room = graph.get_room(0, 0)
    door = graph.get_door(room, graph.get_room(0, 1))
    graph.remove_door(door)
    assert door not in graph.doors_of(room)
    with pytest.raises(MazeInvariantError):
        graph.remove_door(door)


def test_door_opposite():
    graph = RoomGraph(2)
    a, b = graph.get_room(0, 0), graph.get_room(1, 0)
    door = graph.get_door(a, b)
    assert door.opposite(a) == b
    assert door.opposite(b) == a
    with pytest.raises(ValueError):
        door.opposite(Room(5, 5))
