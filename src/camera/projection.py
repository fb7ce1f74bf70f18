# camera/projection.py
from core.ray import Ray
from core.vector import Point


class ProjectionWall:
    """
    Fixed eye looking through a square wall at z = wall_z. Pixel positions
    in [0, 1] map onto the wall, so the wall size (not a field of view)
    decides how much of the scene is visible.
    """

    def __init__(self, origin: Point = None, wall_z: float = 5.0, wall_size: float = 10.0):
        self.origin = origin if origin is not None else Point(0.0, 0.0, -5.0)
        self.wall_z = wall_z
        self.wall_size = wall_size

    def ray_for_pos(self, x: float, y: float) -> Ray:
        wall_point = Point(
            (x - 0.5) * self.wall_size,
            (0.5 - y) * self.wall_size,
            self.wall_z,
        )
        return Ray(self.origin, wall_point - self.origin)

    def __repr__(self) -> str:
        return f"ProjectionWall({self.origin!r}, wall_z={self.wall_z}, wall_size={self.wall_size})"
