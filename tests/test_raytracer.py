import pytest
import sys
import os

# Add src directory to path to allow imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

from camera.viewport import Viewport
from core.color import Color
from core.utils import INFINITY
from core.vector import Tuple
from geometry.sphere import NO_SPECULAR, Sphere
from geometry.world import Scene
from lights.ambient import AmbientLight
from lights.presets import default_lights
from renderer.canvas import Canvas
from renderer.raytracer import Renderer

ORIGIN = Tuple.point(0, 0, 0)
FORWARD = Tuple.vector(0, 0, 1)
ORANGE = Color(1.0, 0.5, 0.0)

def make_renderer(spheres, lights=None, viewport=None):
    scene = Scene(spheres, [AmbientLight(1.0)] if lights is None else lights)
    return Renderer(scene, viewport or Viewport(1.0, 1.0))

def test_miss_is_black_under_any_lighting():
    renderer = make_renderer([Sphere(1.0, Tuple.point(0, 0, 3), ORANGE, 500, 0.5)],
                             default_lights() + [AmbientLight(1.0)])
    color = renderer.trace_ray(ORIGIN, Tuple.vector(0, 1, 0), 1.0, INFINITY, 3)
    assert color == Color.black()

def test_ambient_only_returns_base_color_through_center_pixel():
    renderer = make_renderer([Sphere(1.0, Tuple.point(0, 0, 3), ORANGE, NO_SPECULAR, 0.0)])
    direction = renderer.viewport.canvas_to_viewport(Canvas(1, 1), 0, 0)
    assert renderer.trace_ray(ORIGIN, direction, 1.0, INFINITY, 3) == ORANGE

def mirror_scene(reflective):
    front = Sphere(1.0, Tuple.point(0, 0, 3), Color(1, 0, 0), NO_SPECULAR, reflective)
    # Sits behind the eye, so only the mirrored ray can see it.
    behind = Sphere(1.0, Tuple.point(0, 0, -3), Color(0, 1, 0), NO_SPECULAR, 0.0)
    return make_renderer([front, behind])

@pytest.mark.parametrize("reflective, expected", [
    (1.0, Color(0, 1, 0)),
    (0.5, Color(0.5, 0.5, 0)),
    (0.0, Color(1, 0, 0)),
])
def test_reflection_blends_local_and_mirrored_color(reflective, expected):
    color = mirror_scene(reflective).trace_ray(ORIGIN, FORWARD, 1.0, INFINITY, 3)
    assert color == expected

def test_vanishing_reflectivity_converges_to_local_color():
    color = mirror_scene(1e-9).trace_ray(ORIGIN, FORWARD, 1.0, INFINITY, 3)
    assert color == Color(1, 0, 0)

def test_zero_depth_stops_recursion():
    color = mirror_scene(1.0).trace_ray(ORIGIN, FORWARD, 1.0, INFINITY, 0)
    assert color == Color(1, 0, 0)

def test_facing_mirrors_stop_when_depth_runs_out():
    front = Sphere(1.0, Tuple.point(0, 0, 3), Color(1, 0, 0), NO_SPECULAR, 1.0)
    behind = Sphere(1.0, Tuple.point(0, 0, -3), Color(0, 1, 0), NO_SPECULAR, 1.0)
    renderer = make_renderer([front, behind])
    depths = []
    original = renderer.trace_ray

    def counting_trace(*args):
        depths.append(args[-1])
        return original(*args)

    renderer.trace_ray = counting_trace
    color = renderer.trace_ray(ORIGIN, FORWARD, 1.0, INFINITY, 3)
    assert depths == [3, 2, 1, 0]
    # The last bounce lands on the green sphere and returns its local color.
    assert color == Color(0, 1, 0)

def test_render_writes_every_pixel_once_for_odd_and_even_sizes():
    renderer = make_renderer([Sphere(1.0, Tuple.point(0, 0, 3), ORANGE, NO_SPECULAR, 0.0)])
    for width, height in [(3, 3), (4, 4), (5, 2)]:
        canvas = renderer.render(Canvas(width, height))
        # Misses are opaque black, so an untouched pixel would still have alpha 0.
        assert (canvas.draw()[:, :, 3] == 255).all()

def test_render_center_hits_and_corner_misses():
    renderer = make_renderer([Sphere(1.0, Tuple.point(0, 0, 3), ORANGE, NO_SPECULAR, 0.0)])
    canvas = renderer.render(Canvas(3, 3))
    assert canvas.get_pixel(0, 0) == (255, 127, 0, 255)
    assert canvas.get_pixel(-1, -1) == (0, 0, 0, 255)
    assert canvas.get_pixel(1, 1) == (0, 0, 0, 255)

def test_render_puts_scene_up_at_the_top_of_the_image():
    above = Sphere(1.0, Tuple.point(0, 4, 4), ORANGE, NO_SPECULAR, 0.0)
    renderer = make_renderer([above], viewport=Viewport(2.0, 2.0))
    canvas = renderer.render(Canvas(4, 4))
    assert canvas.get_pixel(0, -2) == (255, 127, 0, 255)
    assert canvas.get_pixel(0, 1) == (0, 0, 0, 255)

def test_geometry_in_front_of_near_plane_is_ignored():
    # Whole sphere lies between the eye and t = 1.
    close = Sphere(0.25, Tuple.point(0, 0, 0.5), ORANGE, NO_SPECULAR, 0.0)
    canvas = make_renderer([close]).render(Canvas(1, 1))
    assert canvas.get_pixel(0, 0) == (0, 0, 0, 255)

def test_debug_mode_prints_progress(capsys):
    renderer = make_renderer([])
    renderer.debug_mode = True
    renderer.render(Canvas(2, 2))
    out = capsys.readouterr().out
    assert "=== Rendering ===" in out
    assert "Render complete." in out
