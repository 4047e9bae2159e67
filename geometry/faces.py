"""
Face table — one row per face of a cuboid, in render space.

Render axes are indexed 0 = X (length), 1 = Y (height), 2 = Z (width).
A face sits at ``center ± size[axis] / 2`` along its normal axis, its
grid spans ``size[extent_axes[0]] × size[extent_axes[1]]`` and is turned
onto the face plane by ``rotation`` (degrees, Euler XYZ).

Usage:
    from geometry.faces import face_grids
    grids = face_grids(center, (length, height, width), owner="box-1")
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from geometry.axes import Vec3, degrees_euler
from geometry.primitives import GridPrimitive


@dataclass(frozen=True)
class FaceSpec:
    name: str
    axis: int
    sign: int
    extent_axes: Tuple[int, int]
    rotation: Tuple[float, float, float]

    @property
    def euler(self) -> Vec3:
        return degrees_euler(*self.rotation)


FACES: Tuple[FaceSpec, ...] = (
    FaceSpec("bottom", axis=1, sign=-1, extent_axes=(0, 2), rotation=(0, 0, 0)),
    FaceSpec("top", axis=1, sign=+1, extent_axes=(0, 2), rotation=(0, 0, 0)),
    FaceSpec("front", axis=2, sign=+1, extent_axes=(0, 1), rotation=(90, 0, 0)),
    FaceSpec("back", axis=2, sign=-1, extent_axes=(0, 1), rotation=(90, 0, 0)),
    FaceSpec("left", axis=0, sign=-1, extent_axes=(1, 2), rotation=(0, 0, 90)),
    FaceSpec("right", axis=0, sign=+1, extent_axes=(1, 2), rotation=(0, 0, 90)),
)

FACE_NAMES: Tuple[str, ...] = tuple(f.name for f in FACES)


def face_center(center: Sequence[float], size: Sequence[float], face: FaceSpec) -> Vec3:
    c = [float(center[0]), float(center[1]), float(center[2])]
    c[face.axis] += face.sign * size[face.axis] / 2
    return (c[0], c[1], c[2])


def face_grids(
    center: Sequence[float],
    size: Sequence[float],
    owner: str,
) -> List[GridPrimitive]:
    """
    Build the six face grids of an axis-aligned cuboid.

    Args:
        center: Render-space center of the cuboid.
        size:   Render-space extents (X, Y, Z) = (length, height, width).
        owner:  Id of the box or container the grids decorate.
    """
    grids = []
    for face in FACES:
        u, v = face.extent_axes
        grids.append(GridPrimitive(
            owner=owner,
            face=face.name,
            center=face_center(center, size, face),
            rotation=face.euler,
            extents=(size[u], size[v]),
        ))
    return grids
