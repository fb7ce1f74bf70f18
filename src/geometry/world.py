# geometry/world.py
from typing import Optional

from geometry.body import Body


class Limits:
    """
    Render limits. max_light_bounces is carried for materials that recurse;
    none of the current ones do.
    """
    __slots__ = ("max_light_bounces",)

    def __init__(self, max_light_bounces: int = 5):
        self.max_light_bounces = max_light_bounces

    def __repr__(self) -> str:
        return f"Limits(max_light_bounces={self.max_light_bounces})"


class WorldInfo:
    """
    Everything shading needs to know about the world: the root body
    (usually a Scene), the lights and the render limits.
    Built once per render and shared read-only by every pixel task.
    """
    __slots__ = ("root_object", "lights", "limits")

    def __init__(self, root_object: Body, lights, limits: Optional[Limits] = None):
        self.root_object = root_object
        self.lights = lights
        self.limits = limits if limits is not None else Limits()

    def __repr__(self) -> str:
        return f"WorldInfo({self.root_object!r}, {self.lights!r}, {self.limits!r})"
