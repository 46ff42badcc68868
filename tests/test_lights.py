import pytest
import sys
import os

# Add src directory to path to allow imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

from core.utils import INFINITY
from core.vector import Tuple
from lights.ambient import AmbientLight
from lights.directional import DirectionalLight
from lights.point import PointLight
from lights.presets import default_lights

def test_point_light_vector_points_at_the_light():
    light = PointLight(0.6, Tuple.point(2, 1, 0))
    assert light.light_vector(Tuple.point(0, 0, 3)) == Tuple.vector(2, 1, -3)
    assert light.shadow_t_max == 1.0

def test_directional_light_vector_is_fixed():
    light = DirectionalLight(0.2, Tuple.vector(1, 4, 4))
    assert light.light_vector(Tuple.point(5, 5, 5)) == Tuple.vector(1, 4, 4)
    assert light.shadow_t_max == INFINITY

@pytest.mark.parametrize("light", [
    AmbientLight(0.2),
    PointLight(0.6, Tuple.point(2, 1, 0)),
    DirectionalLight(0.2, Tuple.vector(1, 4, 4)),
])
def test_lights_are_immutable(light):
    with pytest.raises(AttributeError):
        light.intensity = 1.0

def test_default_rig():
    ambient, point, directional = default_lights()
    assert isinstance(ambient, AmbientLight) and ambient.intensity == 0.2
    assert isinstance(point, PointLight) and point.intensity == 0.6
    assert point.position == Tuple.point(2, 1, 0)
    assert isinstance(directional, DirectionalLight) and directional.intensity == 0.2
    assert directional.direction == Tuple.vector(1, 4, 4)
