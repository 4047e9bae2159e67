"""
Central configuration and data models for the packing viewer.

All modules import their core types from here to ensure consistency
across the snapshot, geometry, scene, and visualization layers.

Classes:
    Rotation     — per-axis quarter-turn rotation of a box (degrees)
    Box          — a placed, sized, colored item inside a container
    Container    — the outer bounding volume and its ordered boxes
    ViewerConfig — tuneable runtime settings of the live viewer

Coordinates in this module follow the data convention: x along the
container length, y along its width, z up along its height.
"""

from dataclasses import dataclass, field, fields
from typing import Optional, Tuple

import yaml


# ─────────────────────────────────────────────────────────────────────────────
# Rotation
# ─────────────────────────────────────────────────────────────────────────────

QUARTER_TURNS: Tuple[int, ...] = (0, 90, 180, 270)
AXES: Tuple[str, ...] = ("x", "y", "z")


class InvalidRotationError(ValueError):
    """A rotation angle is not one of 0, 90, 180 or 270 degrees."""


def check_angle(axis: str, angle) -> int:
    """Validate one rotation angle and return it as an int."""
    if isinstance(angle, bool) or not isinstance(angle, (int, float)):
        raise InvalidRotationError(f"rotation.{axis} must be a number, got {angle!r}")
    if angle not in QUARTER_TURNS:
        raise InvalidRotationError(
            f"rotation.{axis}={angle!r} is not one of {list(QUARTER_TURNS)}"
        )
    return int(angle)


@dataclass(frozen=True)
class Rotation:
    """
    Discrete orientation of a box, one quarter-turn angle per data axis.

    Attributes:
        x: Angle about the length axis (degrees).
        y: Angle about the width axis.
        z: Angle about the height axis.
    """
    x: int = 0
    y: int = 0
    z: int = 0

    def __post_init__(self) -> None:
        for axis in AXES:
            object.__setattr__(self, axis, check_angle(axis, getattr(self, axis)))

    @property
    def is_identity(self) -> bool:
        return self.x == 0 and self.y == 0 and self.z == 0

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "z": self.z}

    @classmethod
    def from_dict(cls, d: dict) -> "Rotation":
        return cls(x=d.get("x", 0), y=d.get("y", 0), z=d.get("z", 0))


# ─────────────────────────────────────────────────────────────────────────────
# Box & Container
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Box:
    """
    A placed box inside a container.

    Attributes:
        id:       Identifier, unique within its container.
        name:     Display name, shown as the box label.
        length:   Nominal X-axis extent (pre-rotation).
        width:    Nominal Y-axis extent.
        height:   Nominal Z-axis extent.
        x, y, z:  Minimum corner in container-local space.
        color:    Hex color code, e.g. '#ff0000'.
        rotation: Quarter-turn rotation applied to the box.
    """
    id: str
    name: str
    length: float
    width: float
    height: float
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    color: str = "#808080"
    rotation: Rotation = field(default_factory=Rotation)

    @property
    def origin(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @property
    def dimensions(self) -> Tuple[float, float, float]:
        """Nominal (length, width, height)."""
        return (self.length, self.width, self.height)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "length": self.length,
            "width": self.width,
            "height": self.height,
            "x": self.x,
            "y": self.y,
            "z": self.z,
            "color": self.color,
            "rotation": self.rotation.to_dict(),
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Box":
        return cls(
            id=d["id"], name=d["name"],
            length=d["length"], width=d["width"], height=d["height"],
            x=d.get("x", 0.0), y=d.get("y", 0.0), z=d.get("z", 0.0),
            color=d.get("color", "#808080"),
            rotation=Rotation.from_dict(d.get("rotation") or {}),
        )


@dataclass(frozen=True)
class Container:
    """
    The outer bounding volume and the boxes it owns.

    Frozen (immutable) so a rendered model can only ever be replaced
    wholesale, never edited in place.

    Attributes:
        id:     Identifier.
        length: X-axis dimension.
        width:  Y-axis dimension.
        height: Z-axis dimension.
        color:  Hex color code of the wireframe.
        boxes:  Boxes in render order.
    """
    id: str
    length: float
    width: float
    height: float
    color: str = "#808080"
    boxes: Tuple[Box, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "boxes", tuple(self.boxes))

    @property
    def dimensions(self) -> Tuple[float, float, float]:
        return (self.length, self.width, self.height)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "length": self.length,
            "width": self.width,
            "height": self.height,
            "color": self.color,
            "boxes": [b.to_dict() for b in self.boxes],
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Container":
        return cls(
            id=d["id"], length=d["length"], width=d["width"], height=d["height"],
            color=d.get("color", "#808080"),
            boxes=tuple(Box.from_dict(b) for b in d.get("boxes", [])),
        )


# ─────────────────────────────────────────────────────────────────────────────
# Viewer Configuration
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ViewerConfig:
    """
    Runtime settings of the live viewer and CLI.

    Scene constants (camera, lights, grid styling) are fixed and live in
    visualization.render_3d, not here.

    Attributes:
        poll_interval:         Seconds between snapshot file checks.
        window_size:           Interactive window size in pixels.
        screenshot_resolution: Off-screen render size in pixels.
        log_level:             Logging level name.
        log_file:              Optional log file path.
        http_timeout:          Timeout (s) for fetching URL snapshots.
    """
    poll_interval: float = 0.5
    window_size: Tuple[int, int] = (1280, 720)
    screenshot_resolution: Tuple[int, int] = (1920, 1080)
    log_level: str = "INFO"
    log_file: Optional[str] = None
    http_timeout: float = 10.0

    def to_dict(self) -> dict:
        return {
            "poll_interval": self.poll_interval,
            "window_size": list(self.window_size),
            "screenshot_resolution": list(self.screenshot_resolution),
            "log_level": self.log_level,
            "log_file": self.log_file,
            "http_timeout": self.http_timeout,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "ViewerConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(d) - known)
        if unknown:
            raise ValueError(f"Unknown viewer config keys: {unknown}")
        values = dict(d)
        for key in ("window_size", "screenshot_resolution"):
            if key in values:
                values[key] = tuple(int(v) for v in values[key])
        return cls(**values)

    @classmethod
    def from_yaml(cls, path: str) -> "ViewerConfig":
        """Load settings from a YAML mapping; an empty file gives defaults."""
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a mapping at the top level")
        return cls.from_dict(data)
