# geometry/world.py
from typing import Iterable, Optional, Tuple as Pair
from core.utils import INFINITY
from core.vector import Tuple
from geometry.sphere import Sphere

class Scene:
    """
    The spheres and lights of one render. Both are frozen into tuples so the
    tracer only ever sees read-only views.
    """
    def __init__(self, spheres: Iterable[Sphere], lights: Iterable = ()):
        self.spheres = tuple(spheres)
        self.lights = tuple(lights)

    def closest_intersection(self, origin: Tuple, direction: Tuple,
                             t_min: float, t_max: float) -> Optional[Pair[Sphere, float]]:
        """
        Finds the nearest sphere hit with t in [t_min, t_max].

        Both roots of every sphere are tested against the running minimum, so
        whichever valid root is smaller wins. Ties keep the sphere scanned
        first. Returns (sphere, t) or None.
        """
        closest_t = INFINITY
        closest_sphere = None

        for sphere in self.spheres:
            t1, t2 = sphere.intersect(origin, direction)
            if t_min <= t1 <= t_max and t1 < closest_t:
                closest_t = t1
                closest_sphere = sphere
            if t_min <= t2 <= t_max and t2 < closest_t:
                closest_t = t2
                closest_sphere = sphere

        if closest_sphere is None:
            return None
        return closest_sphere, closest_t

    def __len__(self) -> int:
        return len(self.spheres)
