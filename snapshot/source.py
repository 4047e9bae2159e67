"""
Snapshot source — fetch snapshot text from a file or an HTTP(S) URL.

Loading is the only asynchronous step of the viewer; everything after
it (parsing, composing) runs synchronously.

Usage:
    import asyncio
    from snapshot.source import load_snapshot
    container = asyncio.run(load_snapshot("dataset/data_sample.json"))
"""

from __future__ import annotations

import asyncio
import logging

import httpx

from config import Container
from dataset import SAMPLE_SNAPSHOT
from snapshot.codec import parse_snapshot
from snapshot.errors import SnapshotLoadError

logger = logging.getLogger(__name__)

DEFAULT_SOURCE = SAMPLE_SNAPSHOT


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _read_file(path: str) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


async def fetch_url(
    url: str,
    timeout: float = 10.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """GET *url* and return the body text.

    Args:
        url: Snapshot URL.
        timeout: Request timeout in seconds.
        transport: Optional transport override (tests use httpx.MockTransport).

    Raises:
        SnapshotLoadError: On connection errors or a non-2xx response.
    """
    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            resp = await client.get(url)
            resp.raise_for_status()
            return resp.text
    except httpx.HTTPError as e:
        raise SnapshotLoadError(f"Could not fetch {url}: {e}") from e


async def load_snapshot_text(
    source: str,
    timeout: float = 10.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """Return the raw snapshot text of *source* (file path or URL).

    Raises:
        SnapshotLoadError: If the source cannot be read.
    """
    if is_url(source):
        logger.debug("Fetching snapshot from %s", source)
        return await fetch_url(source, timeout=timeout, transport=transport)

    logger.debug("Reading snapshot from %s", source)
    try:
        return await asyncio.to_thread(_read_file, source)
    except (OSError, UnicodeDecodeError) as e:
        raise SnapshotLoadError(f"Could not read {source}: {e}") from e


async def load_snapshot(
    source: str,
    timeout: float = 10.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Container:
    """Load and parse *source*; raises SnapshotLoadError or SnapshotParseError."""
    text = await load_snapshot_text(source, timeout=timeout, transport=transport)
    return parse_snapshot(text)
