# lights/directional.py
from core.utils import INFINITY
from core.vector import Tuple
from lights.light import Light

class DirectionalLight(Light):
    """
    Light arriving from infinitely far away; direction points toward the source.
    """
    shadow_t_max = INFINITY

    def __init__(self, intensity: float, direction: Tuple):
        super().__init__(intensity)
        object.__setattr__(self, "direction", direction)

    def light_vector(self, point: Tuple) -> Tuple:
        return self.direction

    def __repr__(self) -> str:
        return f"DirectionalLight({self.intensity}, {self.direction})"
