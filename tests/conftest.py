"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import pytest

# Add the project root to the path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from spheretrace import Bulb, Color, RenderConfig, Scene, Sphere, Vector3


@pytest.fixture
def red_sphere():
    """Sphere at the origin, radius 5, no mirror."""
    return Sphere(Vector3(0, 0, 0), 5, Color(1.0, 0.5, 0.5), 0.0)


@pytest.fixture
def lit_scene(red_sphere):
    """One sphere and one bulb positioned for full power at the front face."""
    return Scene([red_sphere], [Bulb(Vector3(-10, 0, 0), Color(0.5, 0.5, 0.5))])


@pytest.fixture
def tiny_config(tmp_path, red_sphere):
    """Small, fast render of a single sphere writing into tmp_path."""
    return RenderConfig(
        scene=Scene([red_sphere], []),
        resolution=10,
        supersample=4,
        output_path=str(tmp_path / "output.png"),
    )
