# lights/light.py
from typing import Iterable, List

from core.color import ColorRGBA
from core.ray import Ray


class Light:
    """
    Abstract light source.

    A light answers how strongly it reaches along a probe ray: the probe
    starts at the shaded point and points along the normal (diffuse) or the
    reflected view direction (specular).
    """

    def light_effectiveness(self, ray: Ray) -> ColorRGBA:
        raise NotImplementedError("light_effectiveness() must be implemented by subclasses.")

    def light_effectiveness_exp(self, ray: Ray, shininess: float) -> ColorRGBA:
        """
        Effectiveness raised per channel to `shininess`, for specular highlights.
        The power is applied after any distance falloff.
        """
        color = self.light_effectiveness(ray)
        if color.a <= 0.0:
            return ColorRGBA.blank()
        return color.powf(shininess)


class Lights(Light):
    """
    A set of lights acting as one. Contributions are summed per channel and
    rgb is then divided by the summed alpha, so alpha works as a combined
    weight across all lights.
    """

    def __init__(self, lights: Iterable[Light] = ()):
        self.lights: List[Light] = list(lights)

    def add(self, light: Light) -> None:
        self.lights.append(light)

    @staticmethod
    def _normalize(total: ColorRGBA) -> ColorRGBA:
        if total.a == 0.0:
            return ColorRGBA.blank()
        return ColorRGBA(total.r / total.a, total.g / total.a, total.b / total.a, total.a)

    def light_effectiveness(self, ray: Ray) -> ColorRGBA:
        total = ColorRGBA.blank()
        for light in self.lights:
            total = total + light.light_effectiveness(ray)
        return self._normalize(total)

    def light_effectiveness_exp(self, ray: Ray, shininess: float) -> ColorRGBA:
        total = ColorRGBA.blank()
        for light in self.lights:
            total = total + light.light_effectiveness_exp(ray, shininess)
        return self._normalize(total)

    def __len__(self) -> int:
        return len(self.lights)

    def __repr__(self) -> str:
        return f"Lights({self.lights!r})"
