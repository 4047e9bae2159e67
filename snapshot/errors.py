"""Snapshot errors — the recoverable failures at the data source boundary."""


class SnapshotError(Exception):
    """Base class for snapshot errors."""


class SnapshotParseError(SnapshotError):
    """Snapshot text is not valid JSON or does not match the container schema."""


class SnapshotLoadError(SnapshotError):
    """Snapshot could not be fetched from its file or URL."""
