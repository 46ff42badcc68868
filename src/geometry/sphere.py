# geometry/sphere.py
import math
from typing import Tuple as Pair
from core.color import Color
from core.utils import INFINITY, ieee_divide
from core.vector import Tuple
from geometry.hittable import Hittable

# Specular exponent that turns the highlight off.
NO_SPECULAR = -1.0

class Sphere(Hittable):
    """
    Represents a sphere defined by its radius, center and surface properties.

    specular is the Phong exponent (NO_SPECULAR disables the highlight) and
    reflective is the share of the shaded color taken from the mirror ray.
    """
    def __init__(self, radius: float, center: Tuple, color: Color,
                 specular: float = NO_SPECULAR, reflective: float = 0.0):
        self.radius = radius
        self.center = center
        self.color = color
        self.specular = specular
        self.reflective = reflective

    def intersect(self, origin: Tuple, direction: Tuple) -> Pair[float, float]:
        co = origin - self.center
        a = direction.dot(direction)
        b = 2.0 * co.dot(direction)
        c = co.dot(co) - self.radius * self.radius

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0:
            return INFINITY, INFINITY

        # Roots are returned unordered; a == 0 is left to IEEE division.
        sqrt_disc = math.sqrt(discriminant)
        t1 = ieee_divide(-b + sqrt_disc, 2.0 * a)
        t2 = ieee_divide(-b - sqrt_disc, 2.0 * a)
        return t1, t2

    def __repr__(self) -> str:
        return (f"Sphere(radius={self.radius}, center={self.center}, color={self.color}, "
                f"specular={self.specular}, reflective={self.reflective})")
