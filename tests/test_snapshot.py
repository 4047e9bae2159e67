"""
Tests for the snapshot schema and codec.

Run with:
    python -m pytest tests/test_snapshot.py -v
"""

import json
import os

import pytest

from config import Container, Rotation
from snapshot.codec import dump_snapshot, parse_snapshot
from snapshot.errors import SnapshotError, SnapshotParseError
from snapshot.source import DEFAULT_SOURCE


def _box(**overrides) -> dict:
    box = {
        "id": "b1", "name": "A",
        "length": 10, "width": 10, "height": 10,
        "x": 0, "y": 0, "z": 0,
        "color": "#ff0000",
        "rotation": {"x": 0, "y": 0, "z": 0},
    }
    box.update(overrides)
    return box


def _snapshot(*boxes, **overrides) -> str:
    container = {
        "id": "c1", "length": 100, "width": 100, "height": 100,
        "color": "#808080", "boxes": list(boxes),
    }
    container.update(overrides)
    return json.dumps({"container": container})


class TestParse:
    def test_minimal(self):
        container = parse_snapshot(_snapshot(_box()))
        assert isinstance(container, Container)
        assert container.dimensions == (100, 100, 100)
        assert len(container.boxes) == 1
        assert container.boxes[0].name == "A"
        assert container.boxes[0].rotation == Rotation()

    def test_bundled_sample(self):
        with open(DEFAULT_SOURCE, "r", encoding="utf-8") as f:
            container = parse_snapshot(f.read())
        assert len(container.boxes) == 4
        assert os.path.basename(DEFAULT_SOURCE) == "data_sample.json"

    def test_matches_model_from_dict(self):
        text = _snapshot(_box(), _box(id="b2", rotation={"x": 90, "y": 0, "z": 180}))
        assert parse_snapshot(text) == Container.from_dict(json.loads(text)["container"])

    def test_bytes_input(self):
        container = parse_snapshot(_snapshot(_box()).encode("utf-8"))
        assert container.id == "c1"

    def test_missing_rotation_is_identity(self):
        box = _box()
        del box["rotation"]
        assert parse_snapshot(_snapshot(box)).boxes[0].rotation.is_identity

    def test_float_angles_accepted(self):
        rotation = parse_snapshot(_snapshot(_box(rotation={"x": 90.0, "y": 0, "z": 270}))).boxes[0].rotation
        assert rotation == Rotation(x=90, z=270)
        assert isinstance(rotation.x, int)

    def test_numeric_ids_become_strings(self):
        container = parse_snapshot(_snapshot(_box(id=7), id=1))
        assert container.id == "1"
        assert container.boxes[0].id == "7"

    def test_degenerate_dimensions_accepted(self):
        container = parse_snapshot(_snapshot(_box(length=0, width=-3)))
        assert container.boxes[0].length == 0
        assert container.boxes[0].width == -3

    def test_boxes_optional(self):
        text = json.dumps({"container": {
            "id": "c", "length": 1, "width": 1, "height": 1, "color": "#000000",
        }})
        assert parse_snapshot(text).boxes == ()


class TestParseErrors:
    @pytest.mark.parametrize("text", [
        "",
        "{",
        '{"container": {"id": "c", "length": 1',
        "not json",
        "[]",
        '{"boxes": []}',
        "[" * 200000,
    ])
    def test_malformed(self, text):
        with pytest.raises(SnapshotParseError):
            parse_snapshot(text)

    def test_invalid_utf8(self):
        with pytest.raises(SnapshotParseError):
            parse_snapshot(b'{"container": "\xff\xfe"}')

    @pytest.mark.parametrize("angle", [45, -90, 360, 12.5])
    def test_bad_angle(self, angle):
        with pytest.raises(SnapshotParseError):
            parse_snapshot(_snapshot(_box(rotation={"x": angle, "y": 0, "z": 0})))

    @pytest.mark.parametrize("color", ["red", "#fff", "#gg0000", "ff0000", "#ff00000"])
    def test_bad_color(self, color):
        with pytest.raises(SnapshotParseError):
            parse_snapshot(_snapshot(_box(color=color)))

    def test_duplicate_box_ids(self):
        with pytest.raises(SnapshotParseError, match="duplicate box ids"):
            parse_snapshot(_snapshot(_box(id="x"), _box(id="x")))

    def test_missing_dimension(self):
        box = _box()
        del box["height"]
        with pytest.raises(SnapshotParseError):
            parse_snapshot(_snapshot(box))

    def test_parse_error_is_snapshot_error(self):
        assert issubclass(SnapshotParseError, SnapshotError)


class TestRoundTrip:
    def test_dump_then_parse_is_identical(self, sample_container):
        assert parse_snapshot(dump_snapshot(sample_container)) == sample_container

    def test_parse_dump_parse(self):
        first = parse_snapshot(_snapshot(_box(), _box(id="b2", rotation={"x": 0, "y": 90, "z": 180})))
        assert parse_snapshot(dump_snapshot(first)) == first

    def test_dump_is_pretty_json(self, single_box_container):
        text = dump_snapshot(single_box_container)
        assert text.startswith('{\n  "container": {')
        data = json.loads(text)
        assert data["container"]["boxes"][0]["rotation"] == {"x": 0, "y": 0, "z": 0}
