"""
visualization — pyvista rendering surface and live viewer.

Public API:
    from visualization.render_3d import draw_scene, configure_plotter, render_scene
    from visualization.render_3d import volume_mesh, grid_mesh, scene_lights, SCENE
    from visualization.live_viewer import LiveViewer, SnapshotWatcher
"""

from visualization.render_3d import (
    SCENE, configure_plotter, draw_scene, grid_mesh, render_scene, scene_lights,
    volume_mesh,
)
from visualization.live_viewer import LiveViewer, SnapshotWatcher

__all__ = [
    "SCENE", "configure_plotter", "draw_scene", "grid_mesh",
    "render_scene", "scene_lights", "volume_mesh",
    "LiveViewer", "SnapshotWatcher",
]
