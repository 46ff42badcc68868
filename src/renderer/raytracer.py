# renderer/raytracer.py
from typing import Mapping

from camera.viewport import Viewport
from core.color import Color
from core.utils import INFINITY, reflect
from core.vector import Tuple
from geometry.world import Scene
from renderer.canvas import Canvas
from renderer.lighting import SHADOW_EPSILON, compute_lighting
from scene.loader import parse_scene

MAX_DEPTH = 3
# Primary rays ignore anything in front of the image plane.
NEAR_PLANE = 1.0

class Renderer:
    """
    Recursive Whitted-style ray tracer over a scene of spheres.
    """
    def __init__(self, scene: Scene, viewport: Viewport, max_depth: int = MAX_DEPTH,
                 debug_mode: bool = False):
        self.scene = scene
        self.viewport = viewport
        self.max_depth = max_depth
        self.debug_mode = debug_mode
        self.origin = Tuple.point(0.0, 0.0, 0.0)

    def trace_ray(self, origin: Tuple, direction: Tuple, t_min: float, t_max: float,
                  depth: int) -> Color:
        """
        Color seen along a ray.

        Shades the nearest hit locally and, while depth remains and the
        surface is reflective, blends in the color of the mirrored ray.
        Misses are black.
        """
        hit = self.scene.closest_intersection(origin, direction, t_min, t_max)
        if hit is None:
            return Color.black()
        sphere, t = hit

        point = origin + direction * t
        normal = (point - sphere.center).normalize()
        view = -direction
        local_color = sphere.color * compute_lighting(self.scene, point, normal, view, sphere.specular)

        r = sphere.reflective
        if depth <= 0 or r <= 0:
            return local_color

        reflected = self.trace_ray(point, reflect(view, normal), SHADOW_EPSILON, INFINITY, depth - 1)
        return local_color * (1 - r) + reflected * r

    def render(self, canvas: Canvas) -> Canvas:
        """
        Trace one primary ray per canvas pixel and write the result into it.
        """
        if self.debug_mode:
            print("\n=== Rendering ===")
            print(f"Canvas: {canvas.width}x{canvas.height}, viewport: {self.viewport}")
            print(f"Spheres: {len(self.scene.spheres)}, lights: {len(self.scene.lights)}, max depth: {self.max_depth}")

        half_w = canvas.width // 2
        half_h = canvas.height // 2
        for y in range(-half_h, canvas.height - half_h):
            if self.debug_mode and (y + half_h) % 50 == 0:
                print(f"Row {y + half_h}/{canvas.height}")
            for x in range(-half_w, canvas.width - half_w):
                direction = self.viewport.canvas_to_viewport(canvas, x, y)
                color = self.trace_ray(self.origin, direction, NEAR_PLANE, INFINITY, self.max_depth)
                canvas.put_pixel(x, y, color)

        if self.debug_mode:
            print("Render complete.")
        return canvas

def render_scene(width: int, height: int, description: Mapping,
                 max_depth: int = MAX_DEPTH, debug_mode: bool = False) -> Canvas:
    """
    Validate a scene description and render it onto a new canvas.

    The description is fully validated first; a SceneError is raised before
    any pixel is traced.
    """
    parsed = parse_scene(description)
    canvas = Canvas(width, height)
    renderer = Renderer(Scene(parsed.spheres, parsed.lights), parsed.viewport,
                        max_depth=max_depth, debug_mode=debug_mode)
    return renderer.render(canvas)

def render_to_buffer(width: int, height: int, description: Mapping,
                     max_depth: int = MAX_DEPTH) -> bytes:
    """
    Render to a flat RGBA buffer of width*height*4 bytes, top-left origin.
    """
    return render_scene(width, height, description, max_depth=max_depth).to_bytes()
