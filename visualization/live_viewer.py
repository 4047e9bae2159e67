"""
Live viewer — re-render the scene whenever the snapshot file is edited.

The snapshot file is the editing surface: save it from any editor and
the window redraws from the new content.  Invalid edits are logged and
the last valid scene stays on screen.

Polling runs on the plotter's own timer, so parsing, composing and
drawing all happen on the UI thread; there is never more than one
model update in flight.

Usage:
    viewer = LiveViewer("dataset/data_sample.json", ViewerConfig())
    viewer.run()
"""

import asyncio
import logging
import os
from typing import Optional

import pyvista as pv

from config import ViewerConfig
from scene.state import SceneState
from snapshot.source import is_url
from visualization.render_3d import draw_scene, setup_camera_and_lights

logger = logging.getLogger(__name__)

# pyvista timers need a step limit
MAX_TIMER_STEPS = 2**31 - 1


class SnapshotWatcher:
    """Detects changes of a snapshot file by modification time and size."""

    def __init__(self, path: str, state: SceneState) -> None:
        self.path = path
        self.state = state
        self._stamp: Optional[tuple] = self._current_stamp()

    def _current_stamp(self) -> Optional[tuple]:
        try:
            st = os.stat(self.path)
        except OSError:
            return None
        return (st.st_mtime_ns, st.st_size)

    def check(self) -> bool:
        """
        Re-read the file if it changed since the last check.

        Returns:
            True if the scene was replaced by new content.
        """
        stamp = self._current_stamp()
        if stamp is None or stamp == self._stamp:
            return False
        self._stamp = stamp

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not re-read %s: %s", self.path, e)
            return False
        if text == self.state.text:
            return False
        return self.state.apply_text(text)


class LiveViewer:
    """Interactive pyvista window bound to one snapshot source."""

    def __init__(self, source: str, config: Optional[ViewerConfig] = None) -> None:
        self.source = source
        self.config = config or ViewerConfig()
        self.state = SceneState()
        self.watcher: Optional[SnapshotWatcher] = None
        self.plotter: Optional[pv.Plotter] = None

    def load(self) -> bool:
        loaded = asyncio.run(self.state.load(self.source, timeout=self.config.http_timeout))
        if is_url(self.source):
            logger.info("Source %s is a URL; live reload is disabled", self.source)
        else:
            self.watcher = SnapshotWatcher(self.source, self.state)
        return loaded

    def redraw(self) -> None:
        self.plotter.clear_actors()
        draw_scene(self.plotter, self.state.primitives)
        self.plotter.render()

    def _on_timer(self, step: int) -> None:
        if self.watcher is not None and self.watcher.check():
            self.redraw()

    def run(self) -> None:
        """Load the snapshot, open the window and block until it is closed."""
        self.load()
        self.plotter = pv.Plotter(window_size=self.config.window_size, title="packview")
        draw_scene(self.plotter, self.state.primitives)
        setup_camera_and_lights(self.plotter)

        if self.watcher is not None:
            interval_ms = max(1, int(self.config.poll_interval * 1000))
            self.plotter.add_timer_event(MAX_TIMER_STEPS, interval_ms, self._on_timer)
        self.plotter.show()
