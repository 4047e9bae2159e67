"""
3D visualization — PyVista rendering surface for composed primitives.

Draws the primitive list produced by scene.composer as:
  - Light gray background
  - Box volumes as semi-transparent solids with an edge outline
  - The container as a faint wireframe
  - Face grids as line grids (cell lines + section lines)
  - Box names as billboard labels
  - Fixed camera at (150, 150, 150) looking at the origin, Y up
  - An ambient fill (headlight, 0.5) plus one point light at (100, 100, 100)

Scene constants are fixed, not configurable.
"""

import logging
import math
import os
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np
import pyvista as pv

from geometry.primitives import (
    GridPrimitive, LabelPrimitive, Primitive, VolumePrimitive,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SceneSettings:
    camera_position: Tuple[float, float, float] = (150.0, 150.0, 150.0)
    camera_focal_point: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    camera_up: Tuple[float, float, float] = (0.0, 1.0, 0.0)
    fov: float = 50.0
    background: str = "#f0f0f0"
    ambient_intensity: float = 0.5
    point_light_position: Tuple[float, float, float] = (100.0, 100.0, 100.0)
    point_light_intensity: float = 1.0


SCENE = SceneSettings()

# Label font size is in world units; pyvista wants points
LABEL_POINTS_PER_UNIT = 6
# Grid thickness is in world-ish units; pyvista wants pixels
LINE_WIDTH_PER_UNIT = 2.0


def _transform(center: Sequence[float], matrix: np.ndarray) -> np.ndarray:
    m = np.eye(4)
    m[:3, :3] = matrix
    m[:3, 3] = center
    return m


def is_degenerate(prim: Primitive) -> bool:
    """True for volumes or grids with a zero, negative or non-finite extent."""
    if isinstance(prim, VolumePrimitive):
        extents = prim.size
    elif isinstance(prim, GridPrimitive):
        extents = prim.extents
    else:
        return False
    return any(not math.isfinite(e) or e <= 0 for e in extents)


# ─────────────────────────────────────────────────────────────────────────────
# Mesh builders (no plotter needed)
# ─────────────────────────────────────────────────────────────────────────────

def volume_mesh(prim: VolumePrimitive) -> pv.PolyData:
    """Cuboid of the primitive's local size, rotated and moved into place."""
    sx, sy, sz = prim.size
    mesh = pv.Cube(center=(0.0, 0.0, 0.0), x_length=sx, y_length=sy, z_length=sz)
    return mesh.transform(_transform(prim.center, prim.matrix), inplace=False)


def _line_offsets(length: float, spacing: float) -> np.ndarray:
    """Offsets from -length/2 every *spacing*, always closing at +length/2."""
    half = length / 2
    if spacing <= 0:
        return np.array([-half, half])
    n = int(math.floor(length / spacing + 1e-9))
    offsets = -half + spacing * np.arange(n + 1)
    if offsets[-1] < half - 1e-9:
        offsets = np.append(offsets, half)
    return offsets


def grid_mesh(prim: GridPrimitive, spacing: float) -> pv.PolyData:
    """Line grid over the primitive's plane with lines every *spacing*."""
    a, b = prim.extents
    segments: List[Tuple[Tuple[float, float, float], Tuple[float, float, float]]] = []
    for u in _line_offsets(a, spacing):
        segments.append(((u, 0.0, -b / 2), (u, 0.0, b / 2)))
    for v in _line_offsets(b, spacing):
        segments.append(((-a / 2, 0.0, v), (a / 2, 0.0, v)))

    local = np.array([p for seg in segments for p in seg], dtype=np.float64)
    points = local @ prim.matrix.T + np.asarray(prim.center, dtype=np.float64)

    n = len(segments)
    lines = np.column_stack([
        np.full(n, 2), np.arange(0, 2 * n, 2), np.arange(1, 2 * n, 2),
    ]).ravel()
    return pv.PolyData(points, lines=lines)


# ─────────────────────────────────────────────────────────────────────────────
# Drawing
# ─────────────────────────────────────────────────────────────────────────────

def _draw_volume(plotter: pv.Plotter, prim: VolumePrimitive) -> None:
    mesh = volume_mesh(prim)
    plotter.add_mesh(
        mesh,
        color=prim.color,
        opacity=prim.opacity,
        style="wireframe" if prim.wireframe else "surface",
        ambient=SCENE.ambient_intensity,
    )
    if prim.show_edges:
        plotter.add_mesh(mesh.extract_all_edges(), color=prim.color, line_width=1.0)


def _draw_grid(plotter: pv.Plotter, prim: GridPrimitive) -> None:
    plotter.add_mesh(
        grid_mesh(prim, prim.cell_size),
        color=prim.cell_color,
        line_width=max(1.0, prim.cell_thickness * LINE_WIDTH_PER_UNIT),
    )
    plotter.add_mesh(
        grid_mesh(prim, prim.section_size),
        color=prim.section_color,
        line_width=max(1.0, prim.section_thickness * LINE_WIDTH_PER_UNIT),
    )


def _draw_label(plotter: pv.Plotter, prim: LabelPrimitive) -> None:
    plotter.add_point_labels(
        [prim.position], [prim.text],
        font_size=int(round(prim.font_size * LABEL_POINTS_PER_UNIT)),
        text_color=prim.color,
        shape_opacity=0.0,
        show_points=False,
        always_visible=True,
    )


def draw_scene(plotter: pv.Plotter, primitives: Iterable[Primitive]) -> int:
    """
    Add every primitive to *plotter*.

    Degenerate volumes and grids are skipped.

    Returns:
        Number of primitives drawn.
    """
    drawn = 0
    for prim in primitives:
        if is_degenerate(prim):
            logger.debug("Skipping degenerate %s of %s", type(prim).__name__, prim.owner)
            continue
        if isinstance(prim, VolumePrimitive):
            _draw_volume(plotter, prim)
        elif isinstance(prim, GridPrimitive):
            _draw_grid(plotter, prim)
        elif isinstance(prim, LabelPrimitive):
            _draw_label(plotter, prim)
        else:
            raise TypeError(f"Unknown primitive type: {type(prim).__name__}")
        drawn += 1
    return drawn


def scene_lights() -> List[pv.Light]:
    """
    The fixed light rig: an ambient fill and one point light.

    VTK has no ambient light type; the fill is a headlight at the ambient
    intensity.
    """
    ambient = pv.Light(light_type="headlight", intensity=SCENE.ambient_intensity)
    point = pv.Light(
        position=SCENE.point_light_position,
        focal_point=SCENE.camera_focal_point,
        intensity=SCENE.point_light_intensity,
        positional=True,
        light_type="scene light",
    )
    return [ambient, point]


def setup_camera_and_lights(plotter: pv.Plotter) -> None:
    plotter.set_background(SCENE.background)

    plotter.remove_all_lights()
    for light in scene_lights():
        plotter.add_light(light)

    plotter.camera.position = SCENE.camera_position
    plotter.camera.focal_point = SCENE.camera_focal_point
    plotter.camera.up = SCENE.camera_up
    plotter.camera.view_angle = SCENE.fov


def configure_plotter(
    primitives: Iterable[Primitive],
    off_screen: bool = True,
    window_size: Optional[Tuple[int, int]] = None,
) -> pv.Plotter:
    """Build a pyvista Plotter holding the full scene."""
    plotter = pv.Plotter(off_screen=off_screen, window_size=window_size)
    draw_scene(plotter, primitives)
    setup_camera_and_lights(plotter)
    return plotter


def render_scene(
    primitives: Iterable[Primitive],
    save_path: str,
    resolution: Tuple[int, int] = (1920, 1080),
) -> str:
    """Render the scene off-screen as a PNG image."""
    os.makedirs(os.path.dirname(save_path) or ".", exist_ok=True)
    plotter = configure_plotter(primitives, off_screen=True, window_size=resolution)
    try:
        plotter.screenshot(save_path, return_img=False)
    finally:
        plotter.close()
    logger.info("Saved scene render to %s", save_path)
    return save_path
