"""
geometry — data model → positioned, oriented render primitives.

Public API:
    from geometry.rotation import effective_dimensions, box_effective_dimensions
    from geometry.axes import to_render, render_euler, euler_matrix
    from geometry.faces import FACES, face_grids
    from geometry.placement import place_box, BoxPlacement
    from geometry.frame import build_frame, ContainerFrame
    from geometry.primitives import VolumePrimitive, GridPrimitive, LabelPrimitive
"""

from geometry.rotation import effective_dimensions, box_effective_dimensions
from geometry.axes import to_render, render_euler, euler_matrix, rotated_extents
from geometry.faces import FACES, FaceSpec, face_grids
from geometry.primitives import (
    VolumePrimitive, GridPrimitive, LabelPrimitive, Primitive,
)
from geometry.placement import BoxPlacement, place_box
from geometry.frame import ContainerFrame, build_frame

__all__ = [
    "effective_dimensions", "box_effective_dimensions",
    "to_render", "render_euler", "euler_matrix", "rotated_extents",
    "FACES", "FaceSpec", "face_grids",
    "VolumePrimitive", "GridPrimitive", "LabelPrimitive", "Primitive",
    "BoxPlacement", "place_box",
    "ContainerFrame", "build_frame",
]
