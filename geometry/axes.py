"""
Axis remap between the data model and render space.

The data model is Z-up: (x, y, z) run along the container's
(length, width, height).  Render space is Y-up: (X, Y, Z) run along
(length, height, width).  Every geometry emission point goes through
the functions below; no caller swaps axes on its own.

Rotation angles map into render Euler slots as:
    render X ← data x angle
    render Y ← data z angle
    render Z ← data y angle

Euler angles are intrinsic XYZ (R = Rx · Ry · Rz), radians.
"""

import math
from typing import Sequence, Tuple

import numpy as np

from config import Rotation

Vec3 = Tuple[float, float, float]

IDENTITY_EULER: Vec3 = (0.0, 0.0, 0.0)


def to_render(x: float, y: float, z: float) -> Vec3:
    """Map a data-space triple (length, width, height axes) to render space."""
    return (x, z, y)


def render_euler(rotation: Rotation) -> Vec3:
    """Render-space Euler angles (radians) for a data-space rotation."""
    return (
        math.radians(rotation.x),
        math.radians(rotation.z),
        math.radians(rotation.y),
    )


def degrees_euler(x: float, y: float, z: float) -> Vec3:
    return (math.radians(x), math.radians(y), math.radians(z))


def euler_matrix(euler: Sequence[float]) -> np.ndarray:
    """3×3 rotation matrix for intrinsic XYZ Euler angles."""
    ax, ay, az = euler
    cx, sx = math.cos(ax), math.sin(ax)
    cy, sy = math.cos(ay), math.sin(ay)
    cz, sz = math.cos(az), math.sin(az)

    rx = np.array([[1.0, 0.0, 0.0], [0.0, cx, -sx], [0.0, sx, cx]])
    ry = np.array([[cy, 0.0, sy], [0.0, 1.0, 0.0], [-sy, 0.0, cy]])
    rz = np.array([[cz, -sz, 0.0], [sz, cz, 0.0], [0.0, 0.0, 1.0]])
    return rx @ ry @ rz


def rotated_extents(size: Sequence[float], euler: Sequence[float]) -> np.ndarray:
    """World-aligned extents of a box of *size* rotated by *euler*."""
    return np.abs(euler_matrix(euler)) @ np.asarray(size, dtype=np.float64)
