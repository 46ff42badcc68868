# geometry/hittable.py
from typing import Tuple as Pair
from core.vector import Tuple

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def intersect(self, origin: Tuple, direction: Tuple) -> Pair[float, float]:
        """
        Returns the two parametric distances at which the ray meets the surface.
        """
        raise NotImplementedError("intersect() must be implemented by subclasses.")
