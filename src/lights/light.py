# lights/light.py
from typing import Optional
from core.vector import Tuple

class Light:
    """
    Abstract light. Every light has exactly one scalar intensity and is
    immutable once built. Subclasses that cast shadows implement
    light_vector() and set shadow_t_max.
    """
    shadow_t_max: Optional[float] = None

    def __init__(self, intensity: float):
        object.__setattr__(self, "intensity", intensity)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def light_vector(self, point: Tuple) -> Tuple:
        """
        Returns the (unnormalized) vector from point toward the light.
        """
        raise NotImplementedError("light_vector() must be implemented by subclasses.")
