# lights/point.py
from core.vector import Tuple
from lights.light import Light

class PointLight(Light):
    """
    Light emitted from a single position.

    Shadow rays are cut off at t = 1.0 along the unnormalized light vector,
    which is exactly where the light sits.
    """
    shadow_t_max = 1.0

    def __init__(self, intensity: float, position: Tuple):
        super().__init__(intensity)
        object.__setattr__(self, "position", position)

    def light_vector(self, point: Tuple) -> Tuple:
        return self.position - point

    def __repr__(self) -> str:
        return f"PointLight({self.intensity}, {self.position})"
