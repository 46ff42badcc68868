# core/color.py
from core.utils import float_equal

def channel_to_u8(value: float) -> int:
    """
    Clamps a normalized channel to [0, 1] and scales it to a byte.
    """
    if value > 1.0:
        value = 1.0
    elif not value > 0.0:
        # Also catches nan.
        value = 0.0
    return int(255.0 * value)

class Color:
    """
    RGB color with float channels and an 8-bit opacity.

    Channels are nominally in [0, 1] but are never clamped during arithmetic,
    so lighting sums can overshoot until the final byte conversion. Opacity
    is taken from the left operand and otherwise carried through unchanged.
    """
    __slots__ = ("r", "g", "b", "a")

    def __init__(self, r: float, g: float, b: float, a: int = 255):
        self.r = r
        self.g = g
        self.b = b
        self.a = a

    @staticmethod
    def black() -> "Color":
        return Color(0.0, 0.0, 0.0)

    @staticmethod
    def white() -> "Color":
        return Color(1.0, 1.0, 1.0)

    def __add__(self, other: "Color") -> "Color":
        return Color(self.r + other.r, self.g + other.g, self.b + other.b, self.a)

    def __sub__(self, other: "Color") -> "Color":
        return Color(self.r - other.r, self.g - other.g, self.b - other.b, self.a)

    def __mul__(self, other):
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b, self.a)
        return Color(self.r * other, self.g * other, self.b * other, self.a)

    def __rmul__(self, k: float) -> "Color":
        return Color(self.r * k, self.g * k, self.b * k, self.a)

    def to_rgba8(self) -> tuple:
        return (channel_to_u8(self.r), channel_to_u8(self.g), channel_to_u8(self.b), self.a)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (float_equal(self.r, other.r) and float_equal(self.g, other.g) and
                float_equal(self.b, other.b) and self.a == other.a)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b}, a={self.a})"
