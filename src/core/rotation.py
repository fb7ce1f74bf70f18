# core/rotation.py
import math
from typing import Union


class Rotation:
    """
    An angle. Stored in radians; build it from whichever unit is handy.
    """
    __slots__ = ("radians",)

    def __init__(self, radians: float):
        self.radians = float(radians)

    @classmethod
    def from_radians(cls, radians: float) -> "Rotation":
        return cls(radians)

    @classmethod
    def from_degrees(cls, degrees: float) -> "Rotation":
        return cls(degrees * math.pi / 180.0)

    @property
    def degrees(self) -> float:
        return self.radians * 180.0 / math.pi

    def __repr__(self) -> str:
        return f"Rotation({self.radians})"


def as_radians(angle: Union[Rotation, float]) -> float:
    if isinstance(angle, Rotation):
        return angle.radians
    return float(angle)
