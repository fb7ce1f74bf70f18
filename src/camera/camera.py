# camera/camera.py
import math
from typing import Union

from core.ray import Ray
from core.rotation import Rotation, as_radians
from core.vector import Point, Vector


class Camera:
    """
    Pinhole camera. hsize and vsize are the sensor extents (their ratio is
    the aspect ratio); fov spans the larger of the two.
    """

    def __init__(self, position: Point, forward: Vector, up: Vector,
                 hsize: float, vsize: float, fov: Union[Rotation, float]):
        self.position = position
        self.forward = forward.normalize()
        self.up = up.normalize()
        self.hsize = hsize
        self.vsize = vsize
        self.fov = as_radians(fov)
        # Distance from the eye to a sensor of the given size
        self.z = 0.5 * max(hsize, vsize) / math.tan(self.fov / 2.0)

    @classmethod
    def from_yaw_pitch(cls, position: Point, yaw: float, pitch: float,
                       hsize: float, vsize: float, fov: Union[Rotation, float]) -> "Camera":
        """
        Builds a camera from yaw/pitch in radians. Yaw 0 and pitch 0 look
        down +z; positive pitch looks up.
        """
        global_up = Vector(0.0, 1.0, 0.0)

        forward = Vector(
            math.sin(yaw) * math.cos(pitch),
            math.sin(pitch),
            math.cos(yaw) * math.cos(pitch)
        ).normalize()

        return cls(position, forward, global_up, hsize, vsize, fov)

    def ray_for_pos(self, x: float, y: float) -> Ray:
        """Takes x, y in [0, 1] (y grows downwards) and returns the primary ray."""
        x = (x - 0.5) * self.hsize
        y = (0.5 - y) * self.vsize

        right = self.forward.cross(self.up).normalize()
        up = right.cross(self.forward).normalize()

        direction = right * x + up * y + self.forward * self.z
        return Ray(self.position, direction)

    def __repr__(self) -> str:
        return (f"Camera(position={self.position!r}, forward={self.forward!r}, up={self.up!r}, "
                f"hsize={self.hsize}, vsize={self.vsize}, fov={self.fov})")
