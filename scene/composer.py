"""
Scene composer — full primitive list for a container and its boxes.

Emission order:
    container volume, 6 container grids,
    then per box (model order): volume, 6 grids, label

so a scene with N boxes always has 1 + 6 + N * 8 primitives.  The
composer keeps no state between calls; every model replacement is
composed from scratch.
"""

from typing import List, Optional

from config import Container
from geometry.frame import build_frame
from geometry.placement import place_box
from geometry.primitives import Primitive

CONTAINER_PRIMITIVES = 1 + 6
BOX_PRIMITIVES = 1 + 6 + 1


def expected_primitive_count(box_count: int) -> int:
    return CONTAINER_PRIMITIVES + box_count * BOX_PRIMITIVES


def compose_scene(container: Optional[Container]) -> List[Primitive]:
    """Return the primitives for *container*, or an empty list for no model."""
    if container is None:
        return []

    primitives: List[Primitive] = list(build_frame(container).primitives())
    for box in container.boxes:
        primitives.extend(place_box(box).primitives())
    return primitives
