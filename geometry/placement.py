"""
Box placement builder — world geometry for one box.

From a Box and its effective dimensions this produces:
  - the volume primitive: nominal size, oriented by the box rotation,
    centered on the effective bounding volume
  - six face grids outlining the effective bounding volume
  - a label just outside the front face, always unrotated

Pure functions, no side effects.
"""

from dataclasses import dataclass
from typing import Iterator, List

from config import Box
from geometry.axes import IDENTITY_EULER, Vec3, render_euler, to_render
from geometry.faces import face_grids
from geometry.primitives import (
    BOX_OPACITY, GridPrimitive, LabelPrimitive, Primitive, VolumePrimitive,
)
from geometry.rotation import box_effective_dimensions

# Gap between the front face and the label anchor
LABEL_MARGIN = 1.0


@dataclass(frozen=True)
class BoxPlacement:
    """Everything a surface needs to draw one box."""
    box: Box
    effective: Vec3          # (length, width, height) after rotation
    center: Vec3             # render space
    volume: VolumePrimitive
    grids: List[GridPrimitive]
    label: LabelPrimitive

    def primitives(self) -> Iterator[Primitive]:
        yield self.volume
        yield from self.grids
        yield self.label


def box_center(box: Box, effective: Vec3) -> Vec3:
    """Render-space center: origin + (effL/2, effH/2, effW/2)."""
    ox, oy, oz = to_render(*box.origin)
    dx, dy, dz = to_render(effective[0] / 2, effective[1] / 2, effective[2] / 2)
    return (ox + dx, oy + dy, oz + dz)


def label_position(center: Vec3, effective: Vec3) -> Vec3:
    offset = to_render(0.0, effective[1] / 2 + LABEL_MARGIN, 0.0)
    return (center[0] + offset[0], center[1] + offset[1], center[2] + offset[2])


def place_box(box: Box) -> BoxPlacement:
    effective = box_effective_dimensions(box)
    center = box_center(box, effective)

    volume = VolumePrimitive(
        owner=box.id,
        center=center,
        size=to_render(*box.dimensions),
        rotation=render_euler(box.rotation),
        color=box.color,
        opacity=BOX_OPACITY,
        wireframe=False,
        show_edges=True,
    )
    label = LabelPrimitive(
        owner=box.id,
        position=label_position(center, effective),
        text=box.name,
        rotation=IDENTITY_EULER,
    )
    return BoxPlacement(
        box=box,
        effective=effective,
        center=center,
        volume=volume,
        grids=face_grids(center, to_render(*effective), owner=box.id),
        label=label,
    )
