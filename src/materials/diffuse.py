# materials/diffuse.py
from core.color import ColorRGBA, MixMode
from materials.material import Material
from materials.phong import diffuse_probe


class Diffuse(Material):
    """
    Lambert-style diffuse layer: the lights seen along the surface normal,
    tinted by `color`.
    """

    def __init__(self, color: ColorRGBA):
        self.color = color

    def render(self, intersection, world_info) -> ColorRGBA:
        light_dot_normal = world_info.lights.light_effectiveness(diffuse_probe(intersection))
        if light_dot_normal.a <= 0.0:
            return ColorRGBA.blank()
        return light_dot_normal.mix(self.color, MixMode.MUL)

    def __repr__(self) -> str:
        return f"Diffuse({self.color!r})"
