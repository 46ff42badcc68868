# lights/ambient.py
from lights.light import Light

class AmbientLight(Light):
    """
    Uniform light that reaches every surface regardless of geometry.
    """
    def __repr__(self) -> str:
        return f"AmbientLight({self.intensity})"
