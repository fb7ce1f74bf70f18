# core/color.py
from enum import Enum
from typing import List

from core.fuzzy import f64_fuzzy_eq


class MixMode(Enum):
    AVG = "avg"
    ALPHA = "alpha"
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    MIN = "min"
    MAX = "max"
    MIN_ALL = "min_all"
    MAX_ALL = "max_all"


def _safe_div(numerator: float, denominator: float) -> float:
    # 0/0 and x/0 collapse to 0 instead of NaN/Inf
    if denominator == 0.0:
        return 0.0
    return numerator / denominator


class ColorRGBA:
    """
    A floating point RGBA color. Channels are nominally in [0, 1] but may
    exceed that range while shading; clamping happens on export.

    In mix(), self is the destination (the layer underneath) and the
    argument is the source drawn on top of it.
    """
    __slots__ = ("r", "g", "b", "a")

    def __init__(self, r: float, g: float, b: float, a: float = 1.0):
        self.r = float(r)
        self.g = float(g)
        self.b = float(b)
        self.a = float(a)

    @classmethod
    def blank(cls) -> "ColorRGBA":
        return cls(0.0, 0.0, 0.0, 0.0)

    def __iter__(self):
        return iter((self.r, self.g, self.b, self.a))

    def __add__(self, other: "ColorRGBA") -> "ColorRGBA":
        return ColorRGBA(self.r + other.r, self.g + other.g, self.b + other.b, self.a + other.a)

    def __sub__(self, other: "ColorRGBA") -> "ColorRGBA":
        return ColorRGBA(self.r - other.r, self.g - other.g, self.b - other.b, self.a - other.a)

    def __mul__(self, factor: float) -> "ColorRGBA":
        return self.mul_all(factor)

    def __rmul__(self, factor: float) -> "ColorRGBA":
        return self.mul_all(factor)

    def __truediv__(self, factor: float) -> "ColorRGBA":
        return ColorRGBA(self.r / factor, self.g / factor, self.b / factor, self.a / factor)

    def mul_all(self, factor: float) -> "ColorRGBA":
        return ColorRGBA(self.r * factor, self.g * factor, self.b * factor, self.a * factor)

    def invert(self) -> "ColorRGBA":
        return ColorRGBA(1.0 - self.r, 1.0 - self.g, 1.0 - self.b, self.a)

    def intensify(self) -> "ColorRGBA":
        """
        Premultiplies rgb by alpha. Light intensities use alpha as their power,
        so this turns (color, power) into per-channel energy.
        """
        return ColorRGBA(self.r * self.a, self.g * self.a, self.b * self.a, self.a)

    def powf(self, exponent: float) -> "ColorRGBA":
        return ColorRGBA(self.r ** exponent, self.g ** exponent, self.b ** exponent, self.a ** exponent)

    @property
    def lightness(self) -> float:
        return max(self.r, self.g, self.b)

    def gamma(self) -> float:
        return self.r ** 2.2 + self.g ** 2.2 + self.b ** 2.2

    def mix(self, other: "ColorRGBA", mode: MixMode) -> "ColorRGBA":
        if mode is MixMode.AVG:
            return ColorRGBA((self.r + other.r) * 0.5, (self.g + other.g) * 0.5,
                             (self.b + other.b) * 0.5, (self.a + other.a) * 0.5)
        if mode is MixMode.ALPHA:
            # Standard "over": other is drawn on top of self
            below = self.a * (1.0 - other.a)
            alpha = other.a + below
            return ColorRGBA(
                _safe_div(other.r * other.a + self.r * below, alpha),
                _safe_div(other.g * other.a + self.g * below, alpha),
                _safe_div(other.b * other.a + self.b * below, alpha),
                alpha,
            )
        if mode is MixMode.ADD:
            return ColorRGBA(self.r + other.r, self.g + other.g, self.b + other.b, self.a)
        if mode is MixMode.SUB:
            return ColorRGBA(self.r - other.r, self.g - other.g, self.b - other.b, self.a)
        if mode is MixMode.MUL:
            return ColorRGBA(self.r * other.r, self.g * other.g, self.b * other.b, self.a * other.a)
        if mode is MixMode.DIV:
            return ColorRGBA(_safe_div(self.r, other.r), _safe_div(self.g, other.g),
                             _safe_div(self.b, other.b), _safe_div(self.a, other.a))
        if mode is MixMode.MIN:
            return ColorRGBA(min(self.r, other.r), min(self.g, other.g),
                             min(self.b, other.b), min(self.a, other.a))
        if mode is MixMode.MAX:
            return ColorRGBA(max(self.r, other.r), max(self.g, other.g),
                             max(self.b, other.b), max(self.a, other.a))
        if mode is MixMode.MIN_ALL:
            return self if self.lightness < other.lightness else other
        if mode is MixMode.MAX_ALL:
            return self if self.lightness > other.lightness else other
        raise ValueError(f"Unknown mix mode: {mode!r}")

    def as_bytes(self) -> bytes:
        return bytes(int(min(max(channel, 0.0), 1.0) * 255.0) for channel in self)

    def fuzzy_eq(self, other: "ColorRGBA") -> bool:
        return (f64_fuzzy_eq(self.r, other.r)
                and f64_fuzzy_eq(self.g, other.g)
                and f64_fuzzy_eq(self.b, other.b)
                and f64_fuzzy_eq(self.a, other.a))

    def __eq__(self, other) -> bool:
        if not isinstance(other, ColorRGBA):
            return NotImplemented
        return self.fuzzy_eq(other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"ColorRGBA({self.r}, {self.g}, {self.b}, {self.a})"


class ColorHSLA:
    """
    A color in HSLA form.
    Hue is in revolutions around the color wheel, saturation and lightness in [0, 1].
    """
    __slots__ = ("h", "s", "l", "a")

    def __init__(self, h: float, s: float, l: float, a: float = 1.0):
        self.h = float(h)
        self.s = float(s)
        self.l = float(l)
        self.a = float(a)

    def invert(self) -> "ColorHSLA":
        return ColorHSLA(self.h, 1.0 - self.s, 1.0 - self.l, self.a)

    @classmethod
    def from_rgba(cls, color: ColorRGBA) -> "ColorHSLA":
        r, g, b, a = color
        high = max(r, g, b)
        low = min(r, g, b)
        sixth = 1.0 / 6.0

        if high == low:
            h = 0.0
        elif high == r:
            h = (sixth * ((g - b) / (high - low))) % 1.0
        elif high == g:
            h = (sixth * ((b - r) / (high - low)) + sixth * 2.0) % 1.0
        else:
            h = (sixth * ((r - g) / (high - low)) + sixth * 4.0) % 1.0

        s = 0.0 if high == 0.0 else (high - low) / high
        l = (high + low) * 0.5
        return cls(h, s, l, a)

    def to_rgba(self) -> ColorRGBA:
        if self.s == 0.0:
            return ColorRGBA(self.l, self.l, self.l, self.a)

        def hue_to_rgb(p: float, q: float, t: float) -> float:
            t %= 1.0
            if t < 1.0 / 6.0:
                return p + (q - p) * 6.0 * t
            if t < 0.5:
                return q
            if t < 2.0 / 3.0:
                return p + (q - p) * (2.0 / 3.0 - t) * 6.0
            return p

        q = self.l * (1.0 + self.s) if self.l < 0.5 else self.l + self.s - self.l * self.s
        p = 2.0 * self.l - q
        return ColorRGBA(
            hue_to_rgb(p, q, self.h + 1.0 / 3.0),
            hue_to_rgb(p, q, self.h),
            hue_to_rgb(p, q, self.h - 1.0 / 3.0),
            self.a,
        )

    def fuzzy_eq(self, other: "ColorHSLA") -> bool:
        return (f64_fuzzy_eq(self.h, other.h)
                and f64_fuzzy_eq(self.s, other.s)
                and f64_fuzzy_eq(self.l, other.l)
                and f64_fuzzy_eq(self.a, other.a))

    def __eq__(self, other) -> bool:
        if not isinstance(other, ColorHSLA):
            return NotImplemented
        return self.fuzzy_eq(other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"ColorHSLA({self.h}, {self.s}, {self.l}, {self.a})"


class FullBright:
    """Fully saturated, opaque palette."""
    RED = ColorRGBA(1.0, 0.0, 0.0, 1.0)
    YELLOW = ColorRGBA(1.0, 1.0, 0.0, 1.0)
    GREEN = ColorRGBA(0.0, 1.0, 0.0, 1.0)
    CYAN = ColorRGBA(0.0, 1.0, 1.0, 1.0)
    BLUE = ColorRGBA(0.0, 0.0, 1.0, 1.0)
    MAGENTA = ColorRGBA(1.0, 0.0, 1.0, 1.0)
    WHITE = ColorRGBA(1.0, 1.0, 1.0, 1.0)
    BLACK = ColorRGBA(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def all(cls) -> List[ColorRGBA]:
        return [cls.RED, cls.YELLOW, cls.GREEN, cls.CYAN, cls.BLUE, cls.MAGENTA, cls.WHITE, cls.BLACK]
