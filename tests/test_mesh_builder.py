import numpy as np
import pytest

from config import MazeConfig
from drawing import create_labyrinth
from mesh_builder import build_maze_mesh, create_maze_stl, extrude_quad, wall_base_quad


def test_wall_quad_is_extended_by_half_thickness():
    quad = wall_base_quad(np.array([0.0, 0.0]), np.array([1.0, 0.0]), 0.2)
    assert quad.shape == (4, 2)
    assert quad[:, 0].min() == pytest.approx(-0.1)
    assert quad[:, 0].max() == pytest.approx(1.1)
    assert quad[:, 1].min() == pytest.approx(-0.1)
    assert quad[:, 1].max() == pytest.approx(0.1)


def test_degenerate_wall_has_no_quad():
    assert wall_base_quad(np.array([1.0, 1.0]), np.array([1.0, 1.0]), 0.2) is None


def test_extruded_prism():
    quad = wall_base_quad(np.array([0.0, 0.0]), np.array([0.0, 2.0]), 0.5)
    prism = extrude_quad(quad, 3.0)
    assert len(prism.vertices) == 8
    assert len(prism.faces) == 12
    assert prism.bounds[1][2] == pytest.approx(3.0)


def test_maze_mesh_stands_on_base():
    drawing = create_labyrinth(MazeConfig(size=3, seed=1, jitter=0.0))
    mesh = build_maze_mesh(drawing, wall_thickness=0.1, wall_height=1.0, base_height=0.25)
    assert len(mesh.faces) > 0
    assert mesh.bounds[0][2] == pytest.approx(-0.25)
    assert mesh.bounds[1][2] == pytest.approx(1.0)


def test_invalid_wall_dimensions():
    drawing = create_labyrinth(MazeConfig(size=2, seed=1))
    with pytest.raises(ValueError):
        build_maze_mesh(drawing, wall_thickness=0.0)


def test_stl_export(tmp_path):
    drawing = create_labyrinth(MazeConfig(size=2, style="circle", seed=3))
    target = tmp_path / "maze.stl"
    create_maze_stl(drawing, str(target))
    assert target.exists() and target.stat().st_size > 0
