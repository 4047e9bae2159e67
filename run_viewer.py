"""
Viewer runner — main entry point for the packing viewer.

Modes:
  1. Live (default): open a window and redraw whenever SOURCE is saved
  2. --screenshot:   render SOURCE off-screen to a PNG and exit
  3. --dump:         print the normalized snapshot and primitive count

Usage (CLI):
    python run_viewer.py
    python run_viewer.py dataset/data_sample.json --screenshot output/scene.png
    python run_viewer.py https://example.com/layout.json --dump
    python run_viewer.py layout.json --config viewer.yaml --verbose
"""

import argparse
import asyncio
import logging
import os
import sys
from typing import List, Optional

# Put the project root on the path so all packages resolve cleanly
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config import ViewerConfig
from logging_config import setup_logging
from scene.state import SceneState
from snapshot.source import DEFAULT_SOURCE

logger = logging.getLogger("packview")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render a 3D bin-packing snapshot (container + boxes)",
    )
    parser.add_argument(
        "source", nargs="?", default=DEFAULT_SOURCE,
        help="Snapshot JSON file or http(s) URL (default: bundled sample)",
    )
    parser.add_argument("--config", help="YAML file with viewer settings")
    parser.add_argument("--screenshot", metavar="PNG", help="Render off-screen to PNG and exit")
    parser.add_argument("--dump", action="store_true", help="Print normalized snapshot and exit")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser


def load_state(source: str, config: ViewerConfig) -> SceneState:
    state = SceneState()
    asyncio.run(state.load(source, timeout=config.http_timeout))
    return state


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config = ViewerConfig.from_yaml(args.config) if args.config else ViewerConfig()
    setup_logging("DEBUG" if args.verbose else config.log_level, config.log_file)

    if args.screenshot or args.dump:
        state = load_state(args.source, config)
        if not state.has_model:
            logger.error("No valid snapshot loaded from %s", args.source)
            return 1

        if args.dump:
            print(state.snapshot_text())
            print(f"\n  Boxes:      {len(state.container.boxes)}")
            print(f"  Primitives: {len(state.primitives)}")

        if args.screenshot:
            from visualization.render_3d import render_scene
            path = render_scene(
                state.primitives, args.screenshot,
                resolution=config.screenshot_resolution,
            )
            print(f"  Saved render to {path}")
        return 0

    from visualization.live_viewer import LiveViewer
    LiveViewer(args.source, config).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
