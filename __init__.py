"""
packview — live 3D viewer for bin-packing layouts.

Public API:
    from config import Box, Container, Rotation, ViewerConfig
    from geometry.rotation import effective_dimensions
    from geometry.placement import place_box
    from geometry.frame import build_frame
    from scene.composer import compose_scene
    from scene.state import SceneState
    from snapshot.codec import parse_snapshot, dump_snapshot
    from snapshot.source import load_snapshot
    from visualization.render_3d import render_scene
    from visualization.live_viewer import LiveViewer
"""
