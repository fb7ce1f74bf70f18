# materials/multiply.py
from typing import Iterable, List

from core.color import ColorRGBA, MixMode
from materials.material import Material


class Multiply(Material):
    """
    Multiplies the colors of its materials channel by channel, starting from white.
    Useful to tint a pattern with a lit material.
    """

    def __init__(self, materials: Iterable[Material]):
        self.materials: List[Material] = list(materials)

    def render(self, intersection, world_info) -> ColorRGBA:
        color = ColorRGBA(1.0, 1.0, 1.0, 1.0)
        for material in self.materials:
            color = color.mix(material.render(intersection, world_info), MixMode.MUL)
        return color

    def __repr__(self) -> str:
        return f"Multiply({self.materials!r})"
