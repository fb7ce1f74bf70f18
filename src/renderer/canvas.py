# renderer/canvas.py
import numpy as np

from core.color import ColorRGBA


class Canvas:
    """
    The pixel sink: a (height, width, 4) float buffer of linear RGBA.
    Starts out fully transparent black.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 4), dtype=np.float64)

    def set_color_at(self, x: int, y: int, color: ColorRGBA) -> None:
        self.pixels[y, x] = (color.r, color.g, color.b, color.a)

    def color_at(self, x: int, y: int) -> ColorRGBA:
        r, g, b, a = self.pixels[y, x]
        return ColorRGBA(r, g, b, a)

    def to_rgba8(self) -> np.ndarray:
        """Clamped to [0, 1] then truncated to 8 bits per channel."""
        return (np.clip(self.pixels, 0.0, 1.0) * 255.0).astype(np.uint8)

    def __repr__(self) -> str:
        return f"Canvas({self.width}x{self.height})"
