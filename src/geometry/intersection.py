# geometry/intersection.py
from functools import cached_property
from typing import TYPE_CHECKING, Optional

from core.ray import Ray
from core.vector import Point, Vector

if TYPE_CHECKING:
    from geometry.body import Body


class Intersection:
    """
    Records where a ray met a body.

    t is the ray parameter, object is the body that answers normal and
    material queries, top_level_object is the outermost container the ray
    went through. world_pos and world_normal are derived from the world ray
    on first access and never change afterwards.
    """

    def __init__(self, t: float, object: "Body", ray: Ray,
                 world_normal: Optional[Vector] = None,
                 top_level_object: Optional["Body"] = None):
        self.t = t
        self.object = object
        self.ray = ray
        self.top_level_object = top_level_object if top_level_object is not None else object
        if world_normal is not None:
            self.__dict__["world_normal"] = world_normal

    @cached_property
    def world_pos(self) -> Point:
        return self.ray.at(self.t)

    @cached_property
    def world_normal(self) -> Vector:
        return self.object.normal(self.world_pos)

    def with_top_level_object(self, top_level_object: "Body") -> "Intersection":
        """Returns a copy tagged with another top-level container."""
        copy = Intersection.__new__(Intersection)
        copy.__dict__.update(self.__dict__)
        copy.top_level_object = top_level_object
        return copy

    def __repr__(self) -> str:
        return f"Intersection(t={self.t}, object={self.object!r})"


class IntersectionList(list):
    """
    A plain list of intersections with hit selection on top.
    """

    def hit(self) -> Optional[Intersection]:
        """
        Nearest intersection the ray reaches going forward (smallest t >= 0).
        On equal t the first one seen is kept. Returns None if nothing qualifies.
        """
        nearest = None
        for intersection in self:
            if intersection.t < 0.0:
                continue
            if nearest is None or intersection.t < nearest.t:
                nearest = intersection
        return nearest

    def hit_assume_sorted(self) -> Optional[Intersection]:
        """
        First intersection with t >= 0. Only correct if the list is already
        sorted by ascending t.
        """
        return next((i for i in self if i.t >= 0.0), None)
