# mesh_builder.py
import numpy as np
import trimesh
import trimesh.creation
import trimesh.util
from typing import List, Optional

import constants as const
from drawing import MazeDrawing

# Side, top and bottom faces of a prism whose vertices 0-3 are the base quad
# and 4-7 the same quad lifted to the top.
_PRISM_FACES = np.array(
    [
        [0, 1, 5],
        [0, 5, 4],
        [1, 2, 6],
        [1, 6, 5],
        [2, 3, 7],
        [2, 7, 6],
        [3, 0, 4],
        [3, 4, 7],  # Sides
        [4, 5, 6],
        [4, 6, 7],  # Top cap
        [3, 2, 1],
        [3, 1, 0],  # Bottom cap (reversed)
    ],
    dtype=np.int64,
)


def wall_base_quad(p1: np.ndarray, p2: np.ndarray, wall_thickness: float) -> Optional[np.ndarray]:
    """
    Returns the 2D footprint (4, 2) of a wall centered on segment p1-p2.
    Both ends are extended by half the thickness so neighbouring walls overlap
    at their shared corner.
    """
    direction = np.asarray(p2, dtype=float) - np.asarray(p1, dtype=float)
    dist = np.linalg.norm(direction)
    if dist < const.GEOMETRY_TOLERANCE:
        return None
    dir_norm = direction / dist
    perp = np.array([-dir_norm[1], dir_norm[0]])
    half = wall_thickness / 2.0
    start = p1 - dir_norm * half
    end = p2 + dir_norm * half
    return np.array([start - perp * half, end - perp * half, end + perp * half, start + perp * half])


def extrude_quad(quad: np.ndarray, height: float) -> trimesh.Trimesh:
    """Extrudes a 2D quad along +Z into a closed prism."""
    base = np.column_stack((quad, np.zeros(4)))
    top = base + np.array([0.0, 0.0, height])
    return trimesh.Trimesh(vertices=np.vstack((base, top)), faces=_PRISM_FACES, process=False)


def build_maze_mesh(
    drawing: MazeDrawing,
    wall_thickness: float = const.STL_WALL_THICKNESS,
    wall_height: float = const.STL_WALL_HEIGHT,
    base_height: float = const.STL_BASE_HEIGHT,
) -> trimesh.Trimesh:
    """Extrudes every wall of the drawing and sets the result on a flat base plate."""
    print(f"--- Building Maze Mesh (Wall T/H={wall_thickness:.2f}/{wall_height:.2f}, Base H={base_height:.2f}) ---")
    if wall_thickness <= 0 or wall_height <= 0:
        raise ValueError("Wall thickness and height must be positive.")

    meshes: List[trimesh.Trimesh] = []
    skipped = 0
    for edge in drawing.wall_edges():
        p1 = drawing.positions([edge.source])[0]
        p2 = drawing.positions([edge.target])[0]
        quad = wall_base_quad(p1, p2, wall_thickness)
        if quad is None:
            skipped += 1
            continue
        meshes.append(extrude_quad(quad, wall_height))
    print(f"  Extruded {len(meshes)} walls, skipped {skipped} degenerate segments.")
    if not meshes:
        raise RuntimeError("No walls to extrude.")

    if base_height > const.GEOMETRY_TOLERANCE:
        min_x, min_y, max_x, max_y = drawing.bounds()
        margin = const.STL_BASE_MARGIN
        base = trimesh.creation.box(
            extents=[max_x - min_x + 2 * margin, max_y - min_y + 2 * margin, base_height]
        )
        # Top of the base at z=0, under the wall footprint
        base.apply_translation([(min_x + max_x) / 2.0, (min_y + max_y) / 2.0, -base_height / 2.0])
        meshes.append(base)

    combined = trimesh.util.concatenate(meshes)
    combined.merge_vertices()
    print(f"  Combined mesh: {len(combined.vertices)}V, {len(combined.faces)}F")
    return combined


def create_maze_stl(drawing: MazeDrawing, output_filename: str, **kwargs) -> trimesh.Trimesh:
    """Builds the maze mesh and exports it as STL."""
    mesh = build_maze_mesh(drawing, **kwargs)
    mesh.export(output_filename)
    print(f"  Exported maze mesh to {output_filename}")
    return mesh
