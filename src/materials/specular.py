# materials/specular.py
from core.color import ColorRGBA, MixMode
from materials.material import Material
from materials.phong import specular_probe


class Specular(Material):
    """
    Specular highlight layer. Higher shininess gives a tighter highlight.
    """

    def __init__(self, color: ColorRGBA, shininess: float):
        self.color = color
        self.shininess = shininess

    def render(self, intersection, world_info) -> ColorRGBA:
        reflect_dot_light = world_info.lights.light_effectiveness_exp(
            specular_probe(intersection), self.shininess)
        if reflect_dot_light.a <= 0.0:
            return ColorRGBA.blank()
        return reflect_dot_light.mix(self.color, MixMode.MUL)

    def __repr__(self) -> str:
        return f"Specular({self.color!r}, shininess={self.shininess})"
