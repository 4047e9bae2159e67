"""
scene — composition of the full primitive list and the live model holder.

Public API:
    from scene.composer import compose_scene, expected_primitive_count
    from scene.state import SceneState
"""

from scene.composer import compose_scene, expected_primitive_count
from scene.state import SceneState

__all__ = ["compose_scene", "expected_primitive_count", "SceneState"]
