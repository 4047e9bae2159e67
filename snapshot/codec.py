"""
Snapshot codec — text ⇄ Container.

Usage:
    from snapshot.codec import parse_snapshot, dump_snapshot
    container = parse_snapshot(text)
    text = dump_snapshot(container)

``dump_snapshot`` output parses back to an equal Container.
"""

import json
from typing import Union

from pydantic import ValidationError

from config import Container
from snapshot.errors import SnapshotParseError
from snapshot.schema import SnapshotSchema

INDENT = 2


def parse_snapshot(text: Union[str, bytes]) -> Container:
    """
    Parse a snapshot document into a Container.

    Raises:
        SnapshotParseError: On invalid UTF-8, malformed JSON or a record
            that does not match the container schema.
    """
    if isinstance(text, (bytes, bytearray)):
        try:
            text = bytes(text).decode("utf-8")
        except UnicodeDecodeError as e:
            raise SnapshotParseError(f"Snapshot is not valid UTF-8: {e}") from e

    # Deeply nested input exhausts the recursion limit inside json.
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as e:
        raise SnapshotParseError(f"Invalid JSON: {e}") from e

    try:
        schema = SnapshotSchema.model_validate(data)
    except ValidationError as e:
        raise SnapshotParseError(f"Invalid snapshot: {e}") from e
    return Container.from_dict(schema.container.model_dump())


def snapshot_dict(container: Container) -> dict:
    return {"container": container.to_dict()}


def dump_snapshot(container: Container) -> str:
    """Serialize *container* as a pretty-printed snapshot document."""
    return json.dumps(snapshot_dict(container), indent=INDENT)
