"""
Snapshot schema — pydantic models for the JSON record ``{"container": ...}``.

The schema checks shape and types only.  Dimensions and positions are
not range-checked: degenerate values are passed on to the geometry
layer unchanged.  Rotation angles and colors are the two closed sets
that are enforced here.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from config import QUARTER_TURNS

HEX_COLOR = r"^#[0-9a-fA-F]{6}$"


class _Model(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)


class RotationSchema(_Model):
    x: int = 0
    y: int = 0
    z: int = 0

    @field_validator("x", "y", "z")
    @classmethod
    def _quarter_turn(cls, v: int) -> int:
        if v not in QUARTER_TURNS:
            raise ValueError(f"angle must be one of {list(QUARTER_TURNS)}, got {v}")
        return int(v)


class BoxSchema(_Model):
    id: str
    name: str
    length: float
    width: float
    height: float
    x: float
    y: float
    z: float
    color: str = Field(pattern=HEX_COLOR)
    rotation: RotationSchema = Field(default_factory=RotationSchema)


class ContainerSchema(_Model):
    id: str
    length: float
    width: float
    height: float
    color: str = Field(pattern=HEX_COLOR)
    boxes: List[BoxSchema] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_box_ids(self) -> "ContainerSchema":
        seen = set()
        duplicates = []
        for box in self.boxes:
            if box.id in seen:
                duplicates.append(box.id)
            seen.add(box.id)
        if duplicates:
            raise ValueError(f"duplicate box ids: {sorted(set(duplicates))}")
        return self


class SnapshotSchema(_Model):
    container: ContainerSchema
