# materials/phong.py
from typing import TYPE_CHECKING, Optional, Tuple

from core.color import ColorRGBA, MixMode
from core.ray import Ray
from materials.material import Material

if TYPE_CHECKING:
    from geometry.intersection import Intersection
    from geometry.world import WorldInfo
    from lights.light import Light


def diffuse_probe(intersection: "Intersection") -> Ray:
    """Probe from the hit point along the surface normal."""
    return Ray(intersection.world_pos, intersection.world_normal)


def specular_probe(intersection: "Intersection") -> Ray:
    """Probe from the hit point along the incoming direction mirrored about the normal."""
    reflected = intersection.ray.direction.reflect_across(intersection.world_normal)
    return Ray(intersection.world_pos, reflected)


class Phong(Material):
    """
    Ambient + diffuse + specular in one material with a single shininess.
    Ambient is the base layer, diffuse is composited over it and specular
    over both.
    """

    def __init__(self, ambient: Optional[ColorRGBA] = None, diffuse: Optional[ColorRGBA] = None,
                 specular: Optional[ColorRGBA] = None, shininess: float = 0.0):
        self.ambient = ambient if ambient is not None else ColorRGBA(0.1, 0.1, 0.1, 1.0)
        self.diffuse = diffuse if diffuse is not None else ColorRGBA(0.9, 0.9, 0.9, 1.0)
        self.specular = specular if specular is not None else ColorRGBA(0.9, 0.9, 0.9, 1.0)
        self.shininess = shininess

    def with_ambient(self, ambient: ColorRGBA) -> "Phong":
        return Phong(ambient, self.diffuse, self.specular, self.shininess)

    def with_diffuse(self, diffuse: ColorRGBA) -> "Phong":
        return Phong(self.ambient, diffuse, self.specular, self.shininess)

    def with_specular(self, specular: ColorRGBA) -> "Phong":
        return Phong(self.ambient, self.diffuse, specular, self.shininess)

    def with_shininess(self, shininess: float) -> "Phong":
        return Phong(self.ambient, self.diffuse, self.specular, shininess)

    def lighting_terms(self, intersection: "Intersection", lights: "Light") -> Tuple[ColorRGBA, ColorRGBA]:
        """
        Returns the (diffuse, specular) terms. Both are blank when the light
        does not reach the surface along its normal.
        """
        light_dot_normal = lights.light_effectiveness(diffuse_probe(intersection))
        if light_dot_normal.a <= 0.0:
            return ColorRGBA.blank(), ColorRGBA.blank()

        reflect_dot_light = lights.light_effectiveness_exp(specular_probe(intersection), self.shininess)
        if reflect_dot_light.a <= 0.0:
            specular = ColorRGBA.blank()
        else:
            specular = reflect_dot_light.mix(self.specular, MixMode.MUL)

        return light_dot_normal.mix(self.diffuse, MixMode.MUL), specular

    def render(self, intersection: "Intersection", world_info: "WorldInfo") -> ColorRGBA:
        diffuse, specular = self.lighting_terms(intersection, world_info.lights)
        return self.ambient.mix(diffuse, MixMode.ALPHA).mix(specular, MixMode.ALPHA)

    def __repr__(self) -> str:
        return (f"Phong(ambient={self.ambient!r}, diffuse={self.diffuse!r}, "
                f"specular={self.specular!r}, shininess={self.shininess})")
