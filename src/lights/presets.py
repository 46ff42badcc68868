# lights/presets.py
from core.vector import Tuple
from lights.ambient import AmbientLight
from lights.directional import DirectionalLight
from lights.point import PointLight

class LightPresets:
    """Predefined lights for scenes that don't bring their own."""

    @staticmethod
    def ambient(intensity: float = 0.2) -> AmbientLight:
        return AmbientLight(intensity)

    @staticmethod
    def key_light(intensity: float = 0.6) -> PointLight:
        return PointLight(intensity, Tuple.point(2.0, 1.0, 0.0))

    @staticmethod
    def sun(intensity: float = 0.2) -> DirectionalLight:
        return DirectionalLight(intensity, Tuple.vector(1.0, 4.0, 4.0))

def default_lights() -> list:
    """
    The standard three-light rig: dim ambient, a point key light and a sun.
    """
    return [LightPresets.ambient(), LightPresets.key_light(), LightPresets.sun()]
