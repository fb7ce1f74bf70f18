# materials/stack.py
from typing import Iterable, List

from core.color import ColorRGBA, MixMode
from materials.material import Material

# Shows through wherever no opaque layer covers it
MISSING_LAYER_COLOR = ColorRGBA(1.0, 0.0, 1.0, 1.0)


class MaterialStack(Material):
    """
    Layers single-effect materials bottom to top, alpha-compositing each
    layer over the result so far.
    """

    def __init__(self, materials: Iterable[Material]):
        self.materials: List[Material] = list(materials)

    def render(self, intersection, world_info) -> ColorRGBA:
        color = MISSING_LAYER_COLOR
        for material in self.materials:
            color = color.mix(material.render(intersection, world_info), MixMode.ALPHA)
        return color

    def __repr__(self) -> str:
        return f"MaterialStack({self.materials!r})"
