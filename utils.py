# utils.py
import numpy as np
import math

import constants as const


def center_points(points: np.ndarray, size: int) -> np.ndarray:
    """Shifts maze coordinates so the maze is centered on the origin."""
    offset = size / 2.0 - const.CORNER_OFFSET
    return np.asarray(points, dtype=float) - offset


def rotate_points(points: np.ndarray, angle: float) -> np.ndarray:
    """
    Rotates (N, 2) points clockwise by `angle` radians:
    x' = x cos(a) + y sin(a), y' = -x sin(a) + y cos(a).
    """
    c, s = math.cos(angle), math.sin(angle)
    rotation = np.array([[c, -s], [s, c]])
    return np.asarray(points, dtype=float) @ rotation


def square_to_circle(points: np.ndarray) -> np.ndarray:
    """
    Maps (N, 2) points from concentric squares onto concentric circles.
    Uses max(|x|,|y|) as the radius; euclidean distance would change nothing.
    """
    pts = np.asarray(points, dtype=float)
    if pts.size == 0:
        return pts.reshape(0, 2)
    r = np.maximum(np.abs(pts[:, 0]), np.abs(pts[:, 1]))
    theta = np.arctan2(pts[:, 1], pts[:, 0])
    return np.column_stack((r * np.cos(theta), r * np.sin(theta)))
