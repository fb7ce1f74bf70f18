# geometry/transform.py
import copy
from typing import Optional

from core.errors import SingularMatrixError
from core.matrix import Matrix4
from core.ray import Ray
from core.vector import Point, Vector
from geometry.body import Body
from geometry.intersection import Intersection, IntersectionList


class TransformedBody(Body):
    """
    Places a body in the world through an affine transform.

    Rays are taken into the body's local space with the inverse transform;
    normals come back out with the transpose of the inverse, which stays
    correct under non-uniform scale and shear.
    """

    def __init__(self, transformation: Optional[Matrix4], body: Body):
        self.body = body
        self.set_transformation(transformation if transformation is not None else Matrix4.identity())

    def set_transformation(self, transformation: Matrix4) -> None:
        inverse = transformation.inverse()
        if inverse is None:
            raise SingularMatrixError(
                f"Transform of {type(self.body).__name__} must be invertible: {transformation!r}")
        self.transformation = transformation
        self.inverse_transformation = inverse
        self.transpose_inverse_transformation = inverse.transpose().fix_transform()

    def intersect(self, ray: Ray) -> IntersectionList:
        local_ray = ray.transform(self.inverse_transformation)
        hits = IntersectionList()
        for local_hit in self.body.intersect(local_ray):
            if local_hit.object is self.body:
                hits.append(Intersection(local_hit.t, self, ray))
            else:
                # Hit inside a nested group: keep the inner object, but lift
                # its (group-local) normal into our parent's space.
                hits.append(Intersection(
                    local_hit.t,
                    local_hit.object,
                    ray,
                    world_normal=self.normal_to_world(local_hit.world_normal),
                    top_level_object=local_hit.top_level_object,
                ))
        return hits

    def normal_to_world(self, local_normal: Vector) -> Vector:
        return (self.transpose_inverse_transformation * local_normal).normalize()

    def normal_raw(self, x: float, y: float, z: float) -> Vector:
        local_point = self.inverse_transformation * Point(x, y, z)
        return self.normal_to_world(self.body.normal(local_point))

    def get_material(self):
        return self.body.get_material()

    def with_material(self, material) -> "TransformedBody":
        clone = copy.copy(self)
        clone.body = self.body.with_material(material)
        return clone

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.body!r})"
