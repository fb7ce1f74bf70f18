# materials/presets.py
from core.color import ColorRGBA
from core.vector import Point, Vector
from lights.directional_light import DirectionalLight
from lights.point_light import PointLight
from materials.ambient import Ambient
from materials.checkerboard import CheckerBoard
from materials.diffuse import Diffuse
from materials.multiply import Multiply
from materials.phong import Phong
from materials.specular import Specular
from materials.stack import MaterialStack


def phong_stack(ambient: ColorRGBA, diffuse: ColorRGBA, specular: ColorRGBA,
                shininess: float) -> MaterialStack:
    """
    The Phong model built from modular layers instead of the monolithic Phong material.
    """
    return MaterialStack([
        Ambient(ambient),
        Diffuse(diffuse),
        Specular(specular, shininess),
    ])


class ColorPresets:
    """Common color presets for materials."""

    # Warm colors
    RED = ColorRGBA(0.9, 0.2, 0.2, 1.0)
    ORANGE = ColorRGBA(0.9, 0.6, 0.1, 1.0)
    YELLOW = ColorRGBA(0.9, 0.9, 0.1, 1.0)

    # Cool colors
    BLUE = ColorRGBA(0.2, 0.3, 0.9, 1.0)
    GREEN = ColorRGBA(0.2, 0.8, 0.2, 1.0)
    PURPLE = ColorRGBA(0.6, 0.2, 0.8, 1.0)

    # Neutral colors
    WHITE = ColorRGBA(0.9, 0.9, 0.9, 1.0)
    GRAY = ColorRGBA(0.5, 0.5, 0.5, 1.0)
    BLACK = ColorRGBA(0.1, 0.1, 0.1, 1.0)


class PhongPresets:
    """Predefined Phong materials."""

    @staticmethod
    def matte(color: ColorRGBA) -> Phong:
        """Broad, dull highlight."""
        return Phong().with_diffuse(color).with_specular(ColorRGBA(0.2, 0.2, 0.2, 0.5)).with_shininess(2.0)

    @staticmethod
    def plastic(color: ColorRGBA) -> Phong:
        return Phong().with_diffuse(color).with_shininess(30.0)

    @staticmethod
    def glossy(color: ColorRGBA) -> Phong:
        return Phong().with_diffuse(color).with_specular(ColorRGBA(1.0, 1.0, 1.0, 1.0)).with_shininess(200.0)


class PatternPresets:
    """Procedural pattern materials."""

    @staticmethod
    def checkerboard(color1: ColorRGBA = None, color2: ColorRGBA = None, scale: float = 4.0) -> CheckerBoard:
        """Create a checkerboard with default or custom colors."""
        if color1 is None:
            color1 = ColorPresets.WHITE
        if color2 is None:
            color2 = ColorPresets.BLACK
        return CheckerBoard(color1, color2, scale)

    @staticmethod
    def lit_checkerboard(color1: ColorRGBA = None, color2: ColorRGBA = None,
                         scale: float = 4.0, shininess: float = 30.0) -> Multiply:
        """A checkerboard multiplied with a white Phong stack, so the pattern is shaded."""
        return Multiply([
            PatternPresets.checkerboard(color1, color2, scale),
            phong_stack(ColorRGBA(0.1, 0.1, 0.1, 1.0), ColorRGBA(1.0, 1.0, 1.0, 1.0),
                        ColorRGBA(0.9, 0.9, 0.9, 1.0), shininess),
        ])


class LightPresets:
    """Predefined light sources with different colors and intensities."""

    @staticmethod
    def key_light(position: Point = None, power: float = 270.0) -> PointLight:
        """White point light. Power is about the squared distance to the subject."""
        if position is None:
            position = Point(-10.0, 10.0, -10.0)
        return PointLight(position, ColorRGBA(1.0, 1.0, 1.0, power))

    @staticmethod
    def warm_light(position: Point, power: float = 250.0) -> PointLight:
        return PointLight(position, ColorRGBA(1.0, 0.95, 0.9, power))

    @staticmethod
    def cool_light(position: Point, power: float = 250.0) -> PointLight:
        return PointLight(position, ColorRGBA(0.9, 0.95, 1.0, power))

    @staticmethod
    def sunset_light(direction: Vector = None) -> DirectionalLight:
        if direction is None:
            direction = Vector(1.0, -0.3, 1.0)
        return DirectionalLight(direction, ColorRGBA(1.0, 0.6, 0.3, 1.0))
