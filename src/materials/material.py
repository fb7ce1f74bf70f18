# materials/material.py
from typing import TYPE_CHECKING

from core.color import ColorRGBA

if TYPE_CHECKING:
    from geometry.intersection import Intersection
    from geometry.world import WorldInfo


class Material:
    """
    Abstract material class. Subclasses must implement render(), which turns
    an intersection into a color using whatever it needs from the world
    (lights, limits, the root body).
    """

    def render(self, intersection: "Intersection", world_info: "WorldInfo") -> ColorRGBA:
        raise NotImplementedError("render() must be implemented by subclasses.")
