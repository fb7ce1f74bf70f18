# lights/directional_light.py
from core.color import ColorRGBA
from core.ray import Ray
from core.vector import Vector
from lights.light import Light


class DirectionalLight(Light):
    """
    Light arriving from infinitely far away along `direction`; position of
    the probe does not matter and there is no falloff.
    """

    def __init__(self, direction: Vector, intensity: ColorRGBA):
        self.direction = direction.normalize()
        self.intensity = intensity

    def light_effectiveness(self, ray: Ray) -> ColorRGBA:
        # The probe has to face against the direction the light travels
        cosine = -ray.direction.dot(self.direction)
        if cosine <= 0.0:
            return ColorRGBA.blank()
        return self.intensity.mul_all(cosine)

    def __repr__(self) -> str:
        return f"DirectionalLight({self.direction!r}, {self.intensity!r})"
