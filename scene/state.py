"""
Scene state — the last valid model and the primitives composed from it.

The model is only ever replaced wholesale.  A snapshot that fails to
parse is logged and otherwise ignored: the previous model and its
primitives stay in place, while the offending text is kept as typed so
the user can keep editing it.

Usage:
    state = SceneState()
    await state.load("dataset/data_sample.json")
    if state.apply_text(edited_text):
        redraw(state.primitives)
"""

import logging
from typing import List, Optional

from config import Container
from scene.composer import compose_scene
from geometry.primitives import Primitive
from snapshot.codec import dump_snapshot, parse_snapshot
from snapshot.errors import SnapshotLoadError, SnapshotParseError
from snapshot.source import load_snapshot_text

logger = logging.getLogger(__name__)


class SceneState:
    """Holds the rendered model; single mutator, last valid write wins."""

    def __init__(self, container: Optional[Container] = None) -> None:
        self.text: str = ""
        self.last_error: Optional[SnapshotParseError] = None
        self.container: Optional[Container] = None
        self.primitives: List[Primitive] = []
        if container is not None:
            self.replace(container)
            self.text = dump_snapshot(container)

    @property
    def has_model(self) -> bool:
        return self.container is not None

    def replace(self, container: Container) -> None:
        """Swap in a new model and its freshly composed primitives."""
        primitives = compose_scene(container)
        self.container, self.primitives = container, primitives
        logger.info(
            "Scene updated: container %s with %d boxes (%d primitives)",
            container.id, len(container.boxes), len(primitives),
        )

    def apply_text(self, text: str) -> bool:
        """
        Apply an edited snapshot.

        Returns:
            True if the text parsed and the scene was replaced, False if
            the previous scene was kept.
        """
        self.text = text
        try:
            container = parse_snapshot(text)
        except SnapshotParseError as e:
            self.last_error = e
            logger.warning("Ignoring invalid snapshot, keeping previous scene: %s", e)
            return False

        self.last_error = None
        self.replace(container)
        return True

    async def load(self, source: str, timeout: float = 10.0, transport=None) -> bool:
        """
        Load the initial snapshot from *source* (path or URL).

        A load error is logged and leaves the state untouched.
        """
        try:
            text = await load_snapshot_text(source, timeout=timeout, transport=transport)
        except SnapshotLoadError as e:
            logger.error("Error loading snapshot: %s", e)
            return False
        return self.apply_text(text)

    def snapshot_text(self) -> str:
        """Current model serialized back to text ("" when there is none)."""
        if self.container is None:
            return ""
        return dump_snapshot(self.container)
