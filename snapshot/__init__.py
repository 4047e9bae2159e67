"""
snapshot — the textual JSON boundary of the viewer.

Public API:
    from snapshot.codec import parse_snapshot, dump_snapshot
    from snapshot.source import load_snapshot, load_snapshot_text
    from snapshot.errors import SnapshotError, SnapshotParseError, SnapshotLoadError
"""

from snapshot.errors import SnapshotError, SnapshotParseError, SnapshotLoadError
from snapshot.codec import parse_snapshot, dump_snapshot
from snapshot.source import load_snapshot, load_snapshot_text

__all__ = [
    "SnapshotError", "SnapshotParseError", "SnapshotLoadError",
    "parse_snapshot", "dump_snapshot",
    "load_snapshot", "load_snapshot_text",
]
