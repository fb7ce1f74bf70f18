# core/ray.py
from core.vector import Point, Vector


class Ray:
    """
    Represents a ray in 3D space with an origin and direction.
    The direction is normalized on construction unless told otherwise.
    """
    __slots__ = ("origin", "direction")

    def __init__(self, origin: Point, direction: Vector, normalize: bool = True):
        self.origin = origin
        self.direction = direction.normalize() if normalize else direction

    def at(self, t: float) -> Point:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def transform(self, matrix) -> "Ray":
        """
        Applies a Matrix4 to origin and direction. The direction is left
        unnormalized so that t means the same thing before and after.
        """
        return Ray(matrix * self.origin, matrix * self.direction, normalize=False)

    def fuzzy_eq(self, other: "Ray") -> bool:
        return self.origin.fuzzy_eq(other.origin) and self.direction.fuzzy_eq(other.direction)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ray):
            return NotImplemented
        return self.fuzzy_eq(other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r})"
