"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Add the source root to the path
src_root = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_root))

from core.color import ColorRGBA  # noqa: E402
from core.ray import Ray  # noqa: E402
from core.vector import Point, Vector  # noqa: E402
from geometry.intersection import Intersection  # noqa: E402
from geometry.sphere import RawSphere  # noqa: E402
from geometry.world import WorldInfo  # noqa: E402
from lights.light import Lights  # noqa: E402
from lights.point_light import PointLight  # noqa: E402


@pytest.fixture
def forward_ray():
    """Ray from z = -5 looking down +z at the origin."""
    return Ray(Point(0.0, 0.0, -5.0), Vector(0.0, 0.0, 1.0))


@pytest.fixture
def raw_sphere():
    return RawSphere()


@pytest.fixture
def front_lights():
    """A white light in front of the unit sphere, 9 units from its near pole."""
    return Lights([PointLight(Point(0.0, 0.0, -10.0), ColorRGBA(1.0, 1.0, 1.0, 81.0))])


@pytest.fixture
def back_lights():
    """A white light behind the unit sphere."""
    return Lights([PointLight(Point(0.0, 0.0, 10.0), ColorRGBA(1.0, 1.0, 1.0, 81.0))])


@pytest.fixture
def near_pole_hit(raw_sphere, forward_ray):
    """The hit at the sphere's near pole, (0, 0, -1), facing the viewer."""
    return Intersection(4.0, raw_sphere, forward_ray)


@pytest.fixture
def lit_world(raw_sphere, front_lights):
    return WorldInfo(raw_sphere, front_lights)


@pytest.fixture
def dark_world(raw_sphere, back_lights):
    return WorldInfo(raw_sphere, back_lights)
