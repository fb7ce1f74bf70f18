"""Tests for the pinhole camera and the projection wall viewer."""

import math

import pytest

from camera.camera import Camera
from camera.projection import ProjectionWall
from core.ray import Ray
from core.rotation import Rotation
from core.vector import Point, Vector


@pytest.fixture
def camera():
    return Camera(Point.origin(), Vector(0.0, 0.0, 1.0), Vector(0.0, 1.0, 0.0),
                  1.0, 1.0, Rotation.from_degrees(90.0))


class TestCamera:
    def test_construction(self, camera):
        assert camera.position == Point.origin()
        assert camera.forward == Vector(0.0, 0.0, 1.0)
        assert camera.up == Vector(0.0, 1.0, 0.0)
        assert camera.hsize == 1.0
        assert camera.vsize == 1.0
        assert camera.z == pytest.approx(0.5)

    def test_basis_vectors_are_normalized(self):
        camera = Camera(Point.origin(), Vector(0.0, 0.0, 3.0), Vector(0.0, 2.0, 0.0), 1.0, 1.0, math.pi / 2)
        assert camera.forward == Vector(0.0, 0.0, 1.0)
        assert camera.up == Vector(0.0, 1.0, 0.0)

    def test_wider_sensor_uses_larger_side(self):
        camera = Camera(Point.origin(), Vector(0.0, 0.0, 1.0), Vector(0.0, 1.0, 0.0), 2.0, 1.0, math.pi / 2)
        assert camera.z == pytest.approx(1.0)

    def test_center_ray(self, camera):
        assert camera.ray_for_pos(0.5, 0.5) == Ray(Point.origin(), Vector(0.0, 0.0, 1.0))

    def test_edge_rays(self, camera):
        # right = forward x up, so the left edge of the image looks towards +x
        assert camera.ray_for_pos(0.0, 0.5).direction == Vector(1.0, 0.0, 1.0).normalize()
        assert camera.ray_for_pos(0.5, 0.0).direction == Vector(0.0, 1.0, 1.0).normalize()
        assert camera.ray_for_pos(0.5, 1.0).direction == Vector(0.0, -1.0, 1.0).normalize()

    def test_rays_start_at_camera(self):
        position = Point(1.0, 2.0, 3.0)
        camera = Camera(position, Vector(0.0, 0.0, 1.0), Vector(0.0, 1.0, 0.0), 1.0, 1.0, math.pi / 3)
        assert camera.ray_for_pos(0.2, 0.7).origin == position

    def test_from_yaw_pitch(self):
        straight = Camera.from_yaw_pitch(Point.origin(), 0.0, 0.0, 1.0, 1.0, math.pi / 2)
        assert straight.forward == Vector(0.0, 0.0, 1.0)

        turned = Camera.from_yaw_pitch(Point.origin(), math.pi / 2, 0.0, 1.0, 1.0, math.pi / 2)
        assert turned.forward == Vector(1.0, 0.0, 0.0)

        looking_up = Camera.from_yaw_pitch(Point.origin(), 0.0, math.pi / 4, 1.0, 1.0, math.pi / 2)
        assert looking_up.forward == Vector(0.0, 1.0, 1.0).normalize()


class TestProjectionWall:
    def test_center_ray(self):
        wall = ProjectionWall()
        assert wall.ray_for_pos(0.5, 0.5) == Ray(Point(0.0, 0.0, -5.0), Vector(0.0, 0.0, 1.0))

    def test_corner_ray(self):
        wall = ProjectionWall(Point(0.0, 0.0, -5.0), wall_z=5.0, wall_size=10.0)
        ray = wall.ray_for_pos(0.0, 0.0)
        assert ray.direction == Vector(-5.0, 5.0, 10.0).normalize()
        assert ray.at(math.sqrt(150.0)) == Point(-5.0, 5.0, 5.0)
