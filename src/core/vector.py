# core/vector.py
import math
from numbers import Real
from typing import Iterator

from core.errors import HomogeneousTagError
from core.fuzzy import EPSILON, f64_fuzzy_eq

POINT_W = 1.0
VECTOR_W = 0.0


class ThreePart:
    """
    An immutable homogeneous 4-tuple (a, b, c, w).
    w == 1 tags a position, w == 0 tags a direction. Equality is fuzzy.
    """
    __slots__ = ("a", "b", "c", "w")

    def __init__(self, a: float, b: float, c: float, w: float):
        object.__setattr__(self, "a", float(a))
        object.__setattr__(self, "b", float(b))
        object.__setattr__(self, "c", float(c))
        object.__setattr__(self, "w", float(w))

    def __setattr__(self, name, value):
        raise AttributeError("ThreePart is immutable")

    def __iter__(self) -> Iterator[float]:
        return iter((self.a, self.b, self.c, self.w))

    def fuzzy_eq(self, other: "ThreePart") -> bool:
        return (f64_fuzzy_eq(self.a, other.a)
                and f64_fuzzy_eq(self.b, other.b)
                and f64_fuzzy_eq(self.c, other.c)
                and f64_fuzzy_eq(self.w, other.w))

    def __eq__(self, other) -> bool:
        if not isinstance(other, ThreePart):
            return NotImplemented
        return self.fuzzy_eq(other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"ThreePart({self.a}, {self.b}, {self.c}, {self.w})"


def _check_tag(part: ThreePart, expected: float, kind: str) -> None:
    if abs(part.w - expected) >= EPSILON:
        raise HomogeneousTagError(f"{kind} needs w == {expected}, got {part!r}")


class Point:
    """
    A position in space. Supports only the operations that keep w == 1:
    point + vector, point - vector and point - point (which yields a Vector).
    """
    __slots__ = ("part",)

    def __init__(self, x: float, y: float, z: float):
        self.part = ThreePart(x, y, z, POINT_W)

    @classmethod
    def origin(cls) -> "Point":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_part(cls, part: ThreePart) -> "Point":
        _check_tag(part, POINT_W, "Point")
        return cls(part.a, part.b, part.c)

    @property
    def x(self) -> float:
        return self.part.a

    @property
    def y(self) -> float:
        return self.part.b

    @property
    def z(self) -> float:
        return self.part.c

    @property
    def w(self) -> float:
        return self.part.w

    def __add__(self, other: "Vector") -> "Point":
        if not isinstance(other, Vector):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def fuzzy_eq(self, other: "Point") -> bool:
        return self.part.fuzzy_eq(other.part)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.fuzzy_eq(other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Point({self.x}, {self.y}, {self.z})"


class Vector:
    """
    A direction or displacement (w == 0). Dot and cross products are named
    methods rather than operators.
    """
    __slots__ = ("part",)

    def __init__(self, x: float, y: float, z: float):
        self.part = ThreePart(x, y, z, VECTOR_W)

    @classmethod
    def zero(cls) -> "Vector":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_part(cls, part: ThreePart) -> "Vector":
        _check_tag(part, VECTOR_W, "Vector")
        return cls(part.a, part.b, part.c)

    @property
    def x(self) -> float:
        return self.part.a

    @property
    def y(self) -> float:
        return self.part.b

    @property
    def z(self) -> float:
        return self.part.c

    @property
    def w(self) -> float:
        return self.part.w

    def __add__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: float) -> "Vector":
        if not isinstance(other, Real):
            return NotImplemented
        return Vector(self.x * other, self.y * other, self.z * other)

    def __rmul__(self, other: float) -> "Vector":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Vector":
        if not isinstance(t, Real):
            return NotImplemented
        return Vector(self.x / t, self.y / t, self.z / t)

    def __neg__(self) -> "Vector":
        return Vector(-self.x, -self.y, -self.z)

    def dot(self, other: "Vector") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector") -> "Vector":
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def sqr_magnitude(self) -> float:
        return self.dot(self)

    def magnitude(self) -> float:
        return math.sqrt(self.sqr_magnitude())

    def normalize(self) -> "Vector":
        l = self.magnitude()
        if l == 0:
            return Vector.zero()
        return self / l

    def reflect_across(self, normal: "Vector") -> "Vector":
        """
        Reflects this vector about the normal n: v - n * 2(v.n).
        """
        return self - normal * (2.0 * self.dot(normal))

    def fuzzy_eq(self, other: "Vector") -> bool:
        return self.part.fuzzy_eq(other.part)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.fuzzy_eq(other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Vector({self.x}, {self.y}, {self.z})"


def dot(a: Vector, b: Vector) -> float:
    return a.dot(b)


def cross(a: Vector, b: Vector) -> Vector:
    return a.cross(b)
