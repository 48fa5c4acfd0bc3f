"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Add src/ to the path so the packages import without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from core.point import Point  # noqa: E402
from geometry.world import World  # noqa: E402
from materials.material import Material  # noqa: E402


@pytest.fixture
def default_world():
    """Two concentric spheres and one white light."""
    return World.default()


@pytest.fixture
def default_material():
    return Material()


@pytest.fixture
def origin():
    return Point(0, 0, 0)
