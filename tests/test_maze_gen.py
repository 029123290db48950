"""Spanning tree carving and pruning tests."""

import random

import pytest

from grid_core import DoorState, MazeInvariantError, RoomGraph
from maze_gen import carve_spanning_tree, prune_non_tree_doors
from tests.factories import carved, reachable_through_tree


@pytest.mark.parametrize("size", [1, 2, 3, 5, 8])
@pytest.mark.parametrize("seed", [0, 1, 99])
def test_tree_has_one_door_less_than_rooms(size, seed):
    graph = carved(size, seed)
    assert len(graph.tree_doors()) == size * size + 1
    assert len(graph.tree_doors()) == graph.room_count() - 1


@pytest.mark.parametrize("seed", range(5))
def test_every_room_reachable_through_tree(seed):
    graph = carved(6, seed)
    assert reachable_through_tree(graph) == set(graph.rooms)


def test_boundary_doors_always_in_tree():
    graph = carved(5, seed=3)
    boundary = [door for door in graph.get_all_doors() if graph.is_boundary_door(door)]
    assert len(boundary) == 2
    assert all(door.in_tree for door in boundary)


@pytest.mark.parametrize("size", [1, 3, 6])
def test_pruned_graph_is_a_tree(size):
    graph = carved(size, seed=size)
    candidates = sum(1 for door in graph.get_all_doors() if door.state is DoorState.CANDIDATE)
    removed = prune_non_tree_doors(graph)
    assert removed == candidates
    assert len(graph.doors) == graph.room_count() - 1
    assert all(door.state is DoorState.TREE for door in graph.get_all_doors())
    assert reachable_through_tree(graph) == set(graph.rooms)


def test_seeded_carving_is_reproducible():
    first = {door.key for door in carved(2, seed=1234).tree_doors()}
    second = {door.key for door in carved(2, seed=1234).tree_doors()}
    assert first == second


def test_different_seeds_give_different_mazes():
    mazes = {frozenset(door.key for door in carved(8, seed=s).tree_doors()) for s in range(5)}
    assert len(mazes) > 1


def test_carving_without_rng_still_spans():
    graph = RoomGraph(4)
    carve_spanning_tree(graph, graph.entry)
    assert len(graph.tree_doors()) == graph.room_count() - 1


def test_carving_twice_is_refused():
    graph = carved(3)
    with pytest.raises(MazeInvariantError):
        carve_spanning_tree(graph, graph.entry, random.Random(0))


def test_pruning_before_carving_is_refused():
    graph = RoomGraph(3)
    with pytest.raises(MazeInvariantError):
        prune_non_tree_doors(graph)
    assert len(graph.doors) == 2 * 3 * 2 + 2
