# materials/ambient.py
from core.color import ColorRGBA
from materials.material import Material


class Ambient(Material):
    """
    A constant color, independent of lights. Usually the bottom layer of a MaterialStack.
    """

    def __init__(self, color: ColorRGBA):
        self.color = color

    def render(self, intersection, world_info) -> ColorRGBA:
        return self.color

    def __repr__(self) -> str:
        return f"Ambient({self.color!r})"
