"""
Render primitives — the positioned, oriented shapes handed to a surface.

All coordinates are render space (Y-up), angles are Euler XYZ radians.
Primitives carry the id of the container or box that produced them in
``owner`` so a surface can group or pick them.
"""

from dataclasses import dataclass
from typing import Tuple, Union

import numpy as np

from geometry.axes import IDENTITY_EULER, Vec3, euler_matrix

# Fixed grid styling
GRID_CELL_SIZE = 10.0
GRID_SECTION_SIZE = 50.0
GRID_CELL_THICKNESS = 0.5
GRID_SECTION_THICKNESS = 0.5
GRID_CELL_COLOR = "#6f6f6f"
GRID_SECTION_COLOR = "#4a6f9e"
GRID_FADE_DISTANCE = 400.0
GRID_FADE_STRENGTH = 1.0

# Fixed label styling
LABEL_FONT_SIZE = 2.0
LABEL_COLOR = "#484848"

BOX_OPACITY = 0.3
CONTAINER_OPACITY = 0.1


@dataclass(frozen=True)
class VolumePrimitive:
    """A filled or wireframe cuboid, ``size`` given in its own local frame."""
    owner: str
    center: Vec3
    size: Vec3
    rotation: Vec3
    color: str
    opacity: float
    wireframe: bool = False
    show_edges: bool = False

    @property
    def matrix(self) -> np.ndarray:
        return euler_matrix(self.rotation)


@dataclass(frozen=True)
class GridPrimitive:
    """
    A finite plane grid.

    In its local frame the plane spans ``extents[0]`` along X and
    ``extents[1]`` along Z with its normal on +Y; ``rotation`` turns that
    frame onto the face it decorates.
    """
    owner: str
    face: str
    center: Vec3
    rotation: Vec3
    extents: Tuple[float, float]
    cell_size: float = GRID_CELL_SIZE
    section_size: float = GRID_SECTION_SIZE
    cell_thickness: float = GRID_CELL_THICKNESS
    section_thickness: float = GRID_SECTION_THICKNESS
    cell_color: str = GRID_CELL_COLOR
    section_color: str = GRID_SECTION_COLOR
    fade_distance: float = GRID_FADE_DISTANCE
    fade_strength: float = GRID_FADE_STRENGTH
    follow_camera: bool = False
    infinite_grid: bool = False

    @property
    def matrix(self) -> np.ndarray:
        return euler_matrix(self.rotation)

    @property
    def normal(self) -> np.ndarray:
        return self.matrix @ np.array([0.0, 1.0, 0.0])

    @property
    def axes(self) -> Tuple[np.ndarray, np.ndarray]:
        """World directions of the two extents."""
        m = self.matrix
        return m @ np.array([1.0, 0.0, 0.0]), m @ np.array([0.0, 0.0, 1.0])


@dataclass(frozen=True)
class LabelPrimitive:
    """Billboard text; never inherits the orientation of its owner."""
    owner: str
    position: Vec3
    text: str
    font_size: float = LABEL_FONT_SIZE
    color: str = LABEL_COLOR
    rotation: Vec3 = IDENTITY_EULER


Primitive = Union[VolumePrimitive, GridPrimitive, LabelPrimitive]
