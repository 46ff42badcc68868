# renderer/lighting.py
from core.utils import ieee_pow, reflect
from core.vector import Tuple
from geometry.sphere import NO_SPECULAR
from geometry.world import Scene
from lights.ambient import AmbientLight
from lights.directional import DirectionalLight
from lights.point import PointLight

# Shadow rays start this far out to avoid re-hitting their own surface.
SHADOW_EPSILON = 0.001

def compute_lighting(scene: Scene, point: Tuple, normal: Tuple, view: Tuple,
                     specular: float) -> float:
    """
    Total light intensity arriving at a surface point.

    Sums the ambient, point and directional contributions of every light in
    the scene. The result is not clamped; it is multiplied into the surface
    color by the tracer.

    Parameters:
        scene: The scene supplying lights and shadow casters
        point: Surface point being shaded
        normal: Surface normal at point
        view: Vector from point back toward the viewer
        specular: Phong exponent of the surface, or NO_SPECULAR
    """
    intensity = 0.0
    for light in scene.lights:
        if isinstance(light, AmbientLight):
            intensity += light.intensity
        elif isinstance(light, (PointLight, DirectionalLight)):
            intensity += _light_contribution(scene, point, normal, view, light, specular)
        else:
            raise TypeError(f"Unsupported light type: {type(light).__name__}")
    return intensity

def _light_contribution(scene, point, normal, view, light, specular) -> float:
    l = light.light_vector(point)

    # Anything between the point and the light blocks it entirely.
    if scene.closest_intersection(point, l, SHADOW_EPSILON, light.shadow_t_max) is not None:
        return 0.0

    contribution = 0.0
    n_dot_l = normal.dot(l)
    if n_dot_l > 0:
        contribution += light.intensity * n_dot_l / (normal.magnitude() * l.magnitude())

    if specular != NO_SPECULAR:
        r = reflect(l, normal)
        r_dot_v = r.dot(view)
        if r_dot_v > 0:
            contribution += light.intensity * ieee_pow(r_dot_v / (r.magnitude() * view.magnitude()), specular)
    return contribution
