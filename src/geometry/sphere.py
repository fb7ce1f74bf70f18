# geometry/sphere.py
import math
from typing import Optional, Tuple

from numba import njit

from core.matrix import Matrix4
from core.ray import Ray
from core.vector import Vector
from geometry.body import Body
from geometry.intersection import Intersection, IntersectionList
from geometry.transform import TransformedBody
from materials.material import Material
from materials.phong import Phong


@njit(cache=True)
def solve_unit_sphere(ox, oy, oz, dx, dy, dz) -> Tuple[int, float, float]:
    """
    Ray vs. unit sphere at the origin. Returns (count, t1, t2) with t1 <= t2;
    a tangent ray reports count 1 and t1 == t2.
    """
    a = dx * dx + dy * dy + dz * dz
    b = 2.0 * (dx * ox + dy * oy + dz * oz)
    c = ox * ox + oy * oy + oz * oz - 1.0
    discriminant = b * b - 4.0 * a * c

    if discriminant < 0.0:
        return 0, 0.0, 0.0
    if discriminant == 0.0:
        t = -b / (2.0 * a)
        return 1, t, t

    sqrt_disc = math.sqrt(discriminant)
    return 2, (-b - sqrt_disc) / (2.0 * a), (-b + sqrt_disc) / (2.0 * a)


class RawSphere(Body):
    """
    Unit sphere centered at the local origin. Place it in the world by
    wrapping it in a TransformedBody (see Sphere).
    """

    def __init__(self, material: Optional[Material] = None):
        self.material = material if material is not None else Phong()

    def intersect(self, ray: Ray) -> IntersectionList:
        o = ray.origin
        d = ray.direction
        count, t1, t2 = solve_unit_sphere(o.x, o.y, o.z, d.x, d.y, d.z)
        hits = IntersectionList()
        if count >= 1:
            hits.append(Intersection(t1, self, ray))
        if count == 2:
            hits.append(Intersection(t2, self, ray))
        return hits

    def normal_raw(self, x: float, y: float, z: float) -> Vector:
        return Vector(x, y, z).normalize()

    def get_material(self) -> Material:
        return self.material

    def with_material(self, material: Material) -> "RawSphere":
        return RawSphere(material)

    def __repr__(self) -> str:
        return f"RawSphere({self.material!r})"


class Sphere(TransformedBody):
    """
    A unit sphere moved into the world by `transformation`.
    """

    def __init__(self, transformation: Optional[Matrix4] = None, material: Optional[Material] = None):
        super().__init__(transformation, RawSphere(material))
