"""
Rotation resolver — effective (post-rotation) bounding dimensions of a box.

Rotations are restricted to quarter turns, so a box's bounding size is
never recomputed with trigonometry.  Each axis angle either swaps one
pair of dimensions (90°, 270°) or leaves them alone (0°, 180°).

Swap order (fixed, not commutative for multi-axis rotations):
    1. rotation.x  → (width, height)
    2. rotation.y  → (length, width)
    3. rotation.z  → (length, height)

Usage:
    from geometry.rotation import effective_dimensions
    l, w, h = effective_dimensions(10, 20, 5, Rotation(x=90))   # (10, 5, 20)
"""

from typing import Dict, Tuple

from config import Box, Rotation, check_angle

Dimensions = Tuple[float, float, float]

# angle -> whether its axis swap applies
_SWAPS: Dict[int, bool] = {0: False, 90: True, 180: False, 270: True}

# (rotation axis, pair of indices into (length, width, height)), in apply order
SWAP_ORDER: Tuple[Tuple[str, Tuple[int, int]], ...] = (
    ("x", (1, 2)),
    ("y", (0, 1)),
    ("z", (0, 2)),
)


def is_quarter_swap(angle: int) -> bool:
    """True if a rotation by *angle* exchanges the two dimensions of its axis."""
    return _SWAPS[angle]


def effective_dimensions(
    length: float,
    width: float,
    height: float,
    rotation: Rotation,
) -> Dimensions:
    """
    Return (length, width, height) after applying the rotation swaps.

    Raises:
        InvalidRotationError: If an angle is outside {0, 90, 180, 270}.
    """
    dims = [length, width, height]
    for axis, (i, j) in SWAP_ORDER:
        angle = check_angle(axis, getattr(rotation, axis))
        if _SWAPS[angle]:
            dims[i], dims[j] = dims[j], dims[i]
    return (dims[0], dims[1], dims[2])


def box_effective_dimensions(box: Box) -> Dimensions:
    """Effective dimensions of *box* under its own rotation."""
    return effective_dimensions(box.length, box.width, box.height, box.rotation)
