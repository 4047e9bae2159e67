"""Shared fixtures for the packview test-suite."""

import os
import sys

import pytest

# Ensure the project root is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from config import Box, Container, Rotation


@pytest.fixture
def cube_box():
    """10×10×10 red box 'A' at the container origin."""
    return Box(
        id="a", name="A", length=10, width=10, height=10,
        x=0, y=0, z=0, color="#ff0000", rotation=Rotation(),
    )


@pytest.fixture
def flat_box():
    """Non-cubic box so every axis swap is observable."""
    return Box(
        id="flat", name="Flat", length=10, width=20, height=5,
        x=0, y=0, z=0, color="#00ff00",
    )


@pytest.fixture
def single_box_container(cube_box):
    """100³ container holding the cube box only."""
    return Container(
        id="c1", length=100, width=100, height=100,
        color="#808080", boxes=(cube_box,),
    )


@pytest.fixture
def sample_container():
    """Container with three boxes, one of them rotated."""
    return Container(
        id="c2", length=120, width=80, height=60, color="#333333",
        boxes=(
            Box(id="b1", name="One", length=30, width=20, height=10,
                x=0, y=0, z=0, color="#ff0000"),
            Box(id="b2", name="Two", length=10, width=20, height=5,
                x=30, y=0, z=0, color="#00ff00", rotation=Rotation(x=90)),
            Box(id="b3", name="Three", length=40, width=30, height=15,
                x=50, y=10, z=5, color="#0000ff", rotation=Rotation(y=270, z=180)),
        ),
    )
