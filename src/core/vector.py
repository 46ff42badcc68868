# core/vector.py
import math
from core.utils import float_equal, ieee_divide

class Tuple:
    """
    Homogeneous 4-component tuple. Points carry w = 1, free vectors w = 0.
    Point + point is meaningless but not rejected.
    """
    __slots__ = ("x", "y", "z", "w")

    def __init__(self, x: float, y: float, z: float, w: float):
        self.x = x
        self.y = y
        self.z = z
        self.w = w

    @classmethod
    def point(cls, x: float, y: float, z: float) -> "Tuple":
        return cls(x, y, z, 1.0)

    @classmethod
    def vector(cls, x: float, y: float, z: float) -> "Tuple":
        return cls(x, y, z, 0.0)

    def is_point(self) -> bool:
        return self.w == 1.0

    def is_vector(self) -> bool:
        return self.w == 0.0

    def __add__(self, other: "Tuple") -> "Tuple":
        return Tuple(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: "Tuple") -> "Tuple":
        return Tuple(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> "Tuple":
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, k: float) -> "Tuple":
        return Tuple(self.x * k, self.y * k, self.z * k, self.w * k)

    def __rmul__(self, k: float) -> "Tuple":
        return self.__mul__(k)

    def __truediv__(self, k: float) -> "Tuple":
        return Tuple(
            ieee_divide(self.x, k),
            ieee_divide(self.y, k),
            ieee_divide(self.z, k),
            ieee_divide(self.w, k)
        )

    def dot(self, other: "Tuple") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def cross(self, other: "Tuple") -> "Tuple":
        # Always a direction, whatever the operands are tagged as.
        return Tuple.vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def magnitude(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> "Tuple":
        # Unguarded: a zero-length tuple comes back as nan components.
        return self / self.magnitude()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return (float_equal(self.x, other.x) and float_equal(self.y, other.y) and
                float_equal(self.z, other.z) and float_equal(self.w, other.w))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Tuple({self.x}, {self.y}, {self.z}, {self.w})"
