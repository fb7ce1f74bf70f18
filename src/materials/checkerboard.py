# materials/checkerboard.py
from core.color import ColorRGBA
from materials.material import Material


class CheckerBoard(Material):
    """
    3D checker pattern in world space. Cells are 1/scale wide along each axis.
    """

    def __init__(self, color1: ColorRGBA, color2: ColorRGBA, scale: float = 4.0):
        self.color1 = color1
        self.color2 = color2
        self.scale = scale

    def render(self, intersection, world_info) -> ColorRGBA:
        p = intersection.world_pos
        # int() truncates toward zero, so the cells either side of 0 share a color
        x = int(p.x * self.scale)
        y = int(p.y * self.scale)
        z = int(p.z * self.scale)
        is_even = (x + y + z) % 2 == 0
        return self.color1 if is_even else self.color2

    def __repr__(self) -> str:
        return f"CheckerBoard({self.color1!r}, {self.color2!r}, scale={self.scale})"
