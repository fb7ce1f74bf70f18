# geometry/scene.py
from typing import Iterable, List

from core.errors import SceneAccessError
from core.ray import Ray
from core.vector import Vector
from geometry.body import Body
from geometry.intersection import IntersectionList


class Scene(Body):
    """
    A group of bodies. Intersecting a scene intersects every child (brute
    force, no acceleration structure) and tags each hit with the scene as
    its top-level object.

    A scene is never itself a surface: asking it for a normal or a material
    is a bug in the caller.
    """

    def __init__(self, bodies: Iterable[Body] = ()):
        self.bodies: List[Body] = list(bodies)

    def add(self, body: Body) -> None:
        self.bodies.append(body)

    def intersect(self, ray: Ray) -> IntersectionList:
        hits = IntersectionList()
        for body in self.bodies:
            hits.extend(hit.with_top_level_object(self) for hit in body.intersect(ray))
        return hits

    def normal_raw(self, x: float, y: float, z: float) -> Vector:
        raise SceneAccessError(
            "normal_raw() called on a Scene; Intersection.object should never be a Scene")

    def get_material(self):
        raise SceneAccessError(
            "get_material() called on a Scene; only call it on Intersection.object")

    def with_material(self, material):
        raise SceneAccessError("A Scene has no material of its own")

    def __len__(self) -> int:
        return len(self.bodies)

    def __repr__(self) -> str:
        return f"Scene({len(self.bodies)} bodies)"
