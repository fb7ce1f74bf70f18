# lights/point_light.py
from core.color import ColorRGBA
from core.ray import Ray
from core.vector import Point
from lights.light import Light


class PointLight(Light):
    """
    Light radiating from a point with inverse-square falloff.
    The alpha of `intensity` is the light's power: roughly the squared
    distance at which it should read as full brightness.
    """

    def __init__(self, position: Point, intensity: ColorRGBA):
        self.position = position
        self.intensity = intensity

    def light_effectiveness(self, ray: Ray) -> ColorRGBA:
        to_light = self.position - ray.origin
        distance = to_light.magnitude()
        cosine = ray.direction.dot(to_light.normalize())
        if cosine <= 0.0:
            return ColorRGBA.blank()
        return self.intensity.intensify().mul_all(cosine / (distance * distance))

    def __repr__(self) -> str:
        return f"PointLight({self.position!r}, {self.intensity!r})"
