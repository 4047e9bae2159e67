"""
Tests for the data model value types and ViewerConfig.

Run with:
    python -m pytest tests/test_config.py -v
"""

import pytest

from config import Box, Container, Rotation, ViewerConfig


class TestModel:
    def test_container_boxes_become_tuple(self, cube_box):
        container = Container(id="c", length=1, width=1, height=1, boxes=[cube_box])
        assert container.boxes == (cube_box,)

    def test_container_is_frozen(self, single_box_container):
        with pytest.raises(AttributeError):
            single_box_container.length = 5

    def test_dict_round_trip(self, sample_container):
        assert Container.from_dict(sample_container.to_dict()) == sample_container

    def test_box_defaults(self):
        box = Box.from_dict({"id": "b", "name": "B", "length": 1, "width": 2, "height": 3})
        assert box.origin == (0.0, 0.0, 0.0)
        assert box.rotation == Rotation()
        assert box.dimensions == (1, 2, 3)

    def test_dict_is_the_snapshot_shape(self, cube_box):
        assert cube_box.to_dict()["rotation"] == {"x": 0, "y": 0, "z": 0}
        assert Box.from_dict(cube_box.to_dict()) == cube_box


class TestViewerConfig:
    def test_defaults(self):
        config = ViewerConfig()
        assert config.poll_interval == 0.5
        assert config.window_size == (1280, 720)
        assert config.log_file is None

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "viewer.yaml"
        path.write_text(
            "poll_interval: 1.5\n"
            "window_size: [800, 600]\n"
            "log_level: DEBUG\n",
            encoding="utf-8",
        )
        config = ViewerConfig.from_yaml(str(path))
        assert config.poll_interval == 1.5
        assert config.window_size == (800, 600)
        assert config.log_level == "DEBUG"
        assert config.http_timeout == 10.0

    def test_empty_yaml_gives_defaults(self, tmp_path):
        path = tmp_path / "viewer.yaml"
        path.write_text("", encoding="utf-8")
        assert ViewerConfig.from_yaml(str(path)) == ViewerConfig()

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "viewer.yaml"
        path.write_text("camera_fov: 70\n", encoding="utf-8")
        with pytest.raises(ValueError, match="camera_fov"):
            ViewerConfig.from_yaml(str(path))

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "viewer.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(ValueError):
            ViewerConfig.from_yaml(str(path))

    def test_dict_round_trip(self):
        config = ViewerConfig(poll_interval=2.0, log_file="viewer.log")
        assert ViewerConfig.from_dict(config.to_dict()) == config
