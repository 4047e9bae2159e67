"""
Container frame builder — the wireframe outer volume and its face grids.

Same face layout as a box, but never rotated and always anchored at the
container origin.
"""

from dataclasses import dataclass
from typing import Iterator, List

from config import Container
from geometry.axes import IDENTITY_EULER, Vec3, to_render
from geometry.faces import face_grids
from geometry.primitives import (
    CONTAINER_OPACITY, GridPrimitive, Primitive, VolumePrimitive,
)


@dataclass(frozen=True)
class ContainerFrame:
    container: Container
    center: Vec3
    volume: VolumePrimitive
    grids: List[GridPrimitive]

    def primitives(self) -> Iterator[Primitive]:
        yield self.volume
        yield from self.grids


def build_frame(container: Container) -> ContainerFrame:
    size = to_render(*container.dimensions)
    center = (size[0] / 2, size[1] / 2, size[2] / 2)
    volume = VolumePrimitive(
        owner=container.id,
        center=center,
        size=size,
        rotation=IDENTITY_EULER,
        color=container.color,
        opacity=CONTAINER_OPACITY,
        wireframe=True,
    )
    return ContainerFrame(
        container=container,
        center=center,
        volume=volume,
        grids=face_grids(center, size, owner=container.id),
    )
