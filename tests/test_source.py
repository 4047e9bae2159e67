"""
Tests for the snapshot data source (file and HTTP).

Run with:
    python -m pytest tests/test_source.py -v
"""

import ast
import os

import httpx
import pytest

import dataset
from snapshot.codec import dump_snapshot
from snapshot.errors import SnapshotLoadError, SnapshotParseError
from snapshot.source import DEFAULT_SOURCE, is_url, load_snapshot, load_snapshot_text

SETUP_PY = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "setup.py")

URL = "https://layouts.example.com/data_sample.json"


def _transport(status: int, body: str) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        assert str(request.url) == URL
        return httpx.Response(status, text=body)
    return httpx.MockTransport(handler)


class TestIsUrl:
    @pytest.mark.parametrize("source,expected", [
        ("http://host/a.json", True),
        ("https://host/a.json", True),
        ("dataset/data_sample.json", False),
        ("/abs/path.json", False),
    ])
    def test_is_url(self, source, expected):
        assert is_url(source) is expected


def _setup_kwargs() -> dict:
    with open(SETUP_PY, "r", encoding="utf-8") as f:
        tree = ast.parse(f.read())
    call = next(
        node for node in ast.walk(tree)
        if isinstance(node, ast.Call) and getattr(node.func, "id", None) == "setup"
    )
    return {kw.arg: ast.literal_eval(kw.value) for kw in call.keywords if kw.arg in ("packages", "package_data")}


class TestDefaultSource:
    def test_lives_inside_dataset_package(self):
        package_dir = os.path.dirname(os.path.abspath(dataset.__file__))
        assert os.path.dirname(DEFAULT_SOURCE) == package_dir
        assert os.path.isfile(DEFAULT_SOURCE)

    def test_shipped_as_package_data(self):
        kwargs = _setup_kwargs()
        assert "dataset" in kwargs["packages"]
        assert os.path.basename(DEFAULT_SOURCE) in kwargs["package_data"]["dataset"]

    @pytest.mark.asyncio
    async def test_default_loads(self):
        container = await load_snapshot(DEFAULT_SOURCE)
        assert len(container.boxes) == 4


class TestFileSource:
    @pytest.mark.asyncio
    async def test_reads_text(self, tmp_path):
        path = tmp_path / "s.json"
        path.write_text("hello", encoding="utf-8")
        assert await load_snapshot_text(str(path)) == "hello"

    @pytest.mark.asyncio
    async def test_missing_file(self, tmp_path):
        with pytest.raises(SnapshotLoadError):
            await load_snapshot_text(str(tmp_path / "nope.json"))

    @pytest.mark.asyncio
    async def test_load_and_parse(self, tmp_path, sample_container):
        path = tmp_path / "s.json"
        path.write_text(dump_snapshot(sample_container), encoding="utf-8")
        assert await load_snapshot(str(path)) == sample_container


class TestHttpSource:
    @pytest.mark.asyncio
    async def test_fetch(self, single_box_container):
        body = dump_snapshot(single_box_container)
        container = await load_snapshot(URL, transport=_transport(200, body))
        assert container == single_box_container

    @pytest.mark.asyncio
    async def test_http_error_status(self):
        with pytest.raises(SnapshotLoadError):
            await load_snapshot_text(URL, transport=_transport(404, "not found"))

    @pytest.mark.asyncio
    async def test_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)
        with pytest.raises(SnapshotLoadError):
            await load_snapshot_text(URL, transport=httpx.MockTransport(handler))

    @pytest.mark.asyncio
    async def test_bad_body_is_parse_error(self):
        with pytest.raises(SnapshotParseError):
            await load_snapshot(URL, transport=_transport(200, "<html>"))
