# geometry/body.py
from typing import TYPE_CHECKING

from core.ray import Ray
from core.vector import Point, Vector
from geometry.intersection import IntersectionList

if TYPE_CHECKING:
    from materials.material import Material


class Body:
    """
    Abstract class for anything a ray can be intersected with.
    """

    def intersect(self, ray: Ray) -> IntersectionList:
        """
        Returns every intersection of the ray with this body, including the
        ones behind the ray origin.
        """
        raise NotImplementedError("intersect() must be implemented by subclasses.")

    def normal_raw(self, x: float, y: float, z: float) -> Vector:
        raise NotImplementedError("normal_raw() must be implemented by subclasses.")

    def normal(self, point: Point) -> Vector:
        return self.normal_raw(point.x, point.y, point.z)

    def get_material(self) -> "Material":
        raise NotImplementedError("get_material() must be implemented by subclasses.")

    def with_material(self, material: "Material") -> "Body":
        """Returns a copy of this body that renders with the given material."""
        raise NotImplementedError("with_material() must be implemented by subclasses.")
