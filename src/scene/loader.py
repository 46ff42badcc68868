# scene/loader.py
import json
import numbers
import os
from collections.abc import Mapping
from typing import List

from camera.viewport import Viewport
from core.color import Color
from core.vector import Tuple
from geometry.sphere import Sphere
from lights.ambient import AmbientLight
from lights.directional import DirectionalLight
from lights.light import Light
from lights.point import PointLight
from lights.presets import default_lights

class SceneError(ValueError):
    """
    Raised when a scene description fails validation.

    path points at the offending entry, e.g. "spheres[2].radius".
    """
    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason

class SceneDescription:
    """
    Validated render input: a viewport plus the spheres and lights it looks at.
    """
    def __init__(self, viewport: Viewport, spheres: List[Sphere], lights: List[Light]):
        self.viewport = viewport
        self.spheres = spheres
        self.lights = lights

def _mapping(data, path: str) -> Mapping:
    if not isinstance(data, Mapping):
        raise SceneError(path, f"expected an object, got {type(data).__name__}")
    return data

def _field(data: Mapping, key: str, path: str):
    if key not in data:
        raise SceneError(f"{path}.{key}", "missing field")
    return data[key]

def _number(data: Mapping, key: str, path: str) -> float:
    value = _field(data, key, path)
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise SceneError(f"{path}.{key}", f"expected a number, got {value!r}")
    return float(value)

def _positive(data: Mapping, key: str, path: str) -> float:
    value = _number(data, key, path)
    if not value > 0:
        raise SceneError(f"{path}.{key}", f"must be positive, got {value}")
    return value

def _xyz(data, path: str):
    data = _mapping(data, path)
    return (_number(data, "x", path), _number(data, "y", path), _number(data, "z", path))

def _parse_color(data, path: str) -> Color:
    data = _mapping(data, path)
    alpha = data.get("a", 255)
    # Whole-number floats such as 255.0 are accepted.
    if (isinstance(alpha, bool) or not isinstance(alpha, numbers.Real)
            or not 0 <= alpha <= 255 or alpha != int(alpha)):
        raise SceneError(f"{path}.a", f"expected an integer in [0, 255], got {alpha!r}")
    return Color(_number(data, "r", path), _number(data, "g", path), _number(data, "b", path), int(alpha))

def parse_viewport(data, path: str = "viewport") -> Viewport:
    data = _mapping(data, path)
    return Viewport(_positive(data, "width", path), _positive(data, "height", path))

def parse_sphere(data, path: str) -> Sphere:
    data = _mapping(data, path)
    radius = _positive(data, "radius", path)
    center = Tuple.point(*_xyz(_field(data, "center", path), f"{path}.center"))
    color = _parse_color(_field(data, "color", path), f"{path}.color")
    specular = _number(data, "specular", path)
    reflective = _number(data, "reflective", path)
    if not 0.0 <= reflective <= 1.0:
        raise SceneError(f"{path}.reflective", f"must be within [0, 1], got {reflective}")
    return Sphere(radius, center, color, specular, reflective)

def parse_light(data, path: str) -> Light:
    data = _mapping(data, path)
    kind = _field(data, "type", path)
    intensity = _number(data, "intensity", path)
    if kind == "ambient":
        return AmbientLight(intensity)
    if kind == "point":
        return PointLight(intensity, Tuple.point(*_xyz(_field(data, "position", path), f"{path}.position")))
    if kind == "directional":
        return DirectionalLight(intensity, Tuple.vector(*_xyz(_field(data, "direction", path), f"{path}.direction")))
    raise SceneError(f"{path}.type", f"unknown light type {kind!r}")

def _parse_list(data: Mapping, key: str, parse) -> list:
    items = data[key]
    if not isinstance(items, list):
        raise SceneError(key, f"expected a list, got {type(items).__name__}")
    return [parse(item, f"{key}[{i}]") for i, item in enumerate(items)]

def parse_scene(data) -> SceneDescription:
    """
    Validate a decoded scene description.

    The whole description is checked before anything is returned, so a bad
    entry anywhere surfaces as a single SceneError and nothing is rendered.

    Args:
        data: Mapping with "viewport", "spheres" and an optional "lights" list

    Returns:
        SceneDescription with the parsed viewport, spheres and lights

    Raises:
        SceneError: If any entry is missing or malformed
    """
    data = _mapping(data, "<root>")
    viewport = parse_viewport(_field(data, "viewport", "<root>"))
    _field(data, "spheres", "<root>")
    spheres = _parse_list(data, "spheres", parse_sphere)
    if "lights" in data:
        lights = _parse_list(data, "lights", parse_light)
    else:
        lights = default_lights()
    return SceneDescription(viewport, spheres, lights)

def load_scene(scene_path: str) -> SceneDescription:
    """
    Load and validate a JSON scene file.

    Raises:
        FileNotFoundError: If the scene file doesn't exist
        SceneError: If the file isn't valid JSON or fails validation
    """
    if not os.path.exists(scene_path):
        raise FileNotFoundError(f"Scene file not found: {scene_path}")

    with open(scene_path, "r") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise SceneError("<root>", f"invalid JSON: {e}") from e
    return parse_scene(data)
