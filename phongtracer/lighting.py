"""
Phong shading with hard shadows and recursive mirror reflection.

Implements:
- Ambient, diffuse and specular Phong terms
- Per-light shadow rays
- Mirror reflection up to a fixed recursion depth
"""

from __future__ import annotations
from enum import Enum
from typing import Optional, Sequence

from .vec3 import Vec3, Point3, Color
from .ray import Ray
from .shapes import SceneObject
from .materials import Material
from .lights import Light
from .scene import RAY_EPSILON, nearest_hit
from .errors import InvalidArgumentError

# Hard cap on reflection bounces; shading at this depth adds no reflection
MAX_REFLECTION_DEPTH = 5

MAX_CHANNEL = 1.0


class AmbientMode(Enum):
    """How the global ambient term is gathered from the light list."""
    FIRST_LIGHT = "first_light"
    ALL_LIGHTS = "all_lights"


def compute_ambient(material: Material, light: Light) -> Color:
    """Ambient reflectance times the light's ambient color."""
    if material is None or light is None:
        raise InvalidArgumentError("Material and light are required for ambient calculation")
    return material.ambient * light.ambient


def compute_diffuse(material: Material, light: Light, normal: Vec3, light_dir: Vec3) -> Color:
    """Lambertian term: kd * Ld * max(N·L, 0)."""
    if material is None or light is None or normal is None or light_dir is None:
        raise InvalidArgumentError("All parameters are required for diffuse calculation")
    n_dot_l = max(normal.dot(light_dir), 0.0)
    return material.diffuse * light.diffuse * n_dot_l


def compute_specular(
    material: Material,
    light: Light,
    normal: Vec3,
    light_dir: Vec3,
    view_dir: Vec3
) -> Color:
    """Phong highlight: ks * Ls * max(V·R, 0)^shininess with R = reflect(-L, N)."""
    if material is None or light is None or normal is None or light_dir is None or view_dir is None:
        raise InvalidArgumentError("All parameters are required for specular calculation")
    reflect_dir = (-light_dir).reflect(normal)
    spec = max(view_dir.dot(reflect_dir), 0.0) ** material.shininess
    return material.specular * light.specular * spec


def global_ambient(
    material: Material,
    lights: Sequence[Light],
    mode: AmbientMode = AmbientMode.FIRST_LIGHT
) -> Color:
    """The ambient term shared by every shaded point.

    With FIRST_LIGHT only lights[0] contributes, regardless of how many
    lights the scene has. ALL_LIGHTS sums the ambient of every light.
    """
    if not lights:
        raise InvalidArgumentError("At least one light is required")
    if mode is AmbientMode.ALL_LIGHTS:
        total = Color(0, 0, 0)
        for light in lights:
            total = total + compute_ambient(material, light)
        return total
    return compute_ambient(material, lights[0])


def in_shadow(
    point: Point3,
    light_position: Point3,
    objects: Sequence[SceneObject],
    exclude: Optional[SceneObject] = None
) -> bool:
    """Check whether anything blocks the segment from point to the light.

    Args:
        point: Surface point being shaded
        light_position: Position of the light
        objects: Scene objects that may occlude
        exclude: The surface being shaded; it never shadows itself

    Returns:
        True if an object lies strictly between the point and the light
    """
    to_light = light_position - point
    distance = to_light.length()
    if distance == 0:
        return False

    light_dir = to_light / distance
    shadow_ray = Ray(point + light_dir * RAY_EPSILON, light_dir)
    blocker = nearest_hit(shadow_ray, objects, exclude)

    return blocker.hit and blocker.t < distance


def shade(
    material: Material,
    lights: Sequence[Light],
    normal: Vec3,
    view_dir: Vec3,
    point: Point3,
    objects: Sequence[SceneObject],
    current: Optional[SceneObject] = None,
    depth: int = 0,
    ambient_mode: AmbientMode = AmbientMode.FIRST_LIGHT
) -> Color:
    """Compute the color of a surface point.

    The result is ambient + sum of unshadowed diffuse and specular terms
    + reflectivity * reflected color, with each channel clamped to 1.0.

    Args:
        material: Material of the surface
        lights: Ordered light list (must not be empty)
        normal: Unit surface normal at the point
        view_dir: Unit direction from the point toward the viewer
        point: World-space surface point
        objects: All scene objects, used for shadow and reflection rays
        current: The object being shaded (excluded from its own shadow test)
        depth: Current reflection recursion depth (0 for primary rays)
        ambient_mode: How the global ambient term is gathered

    Returns:
        The shaded color
    """
    if material is None or normal is None or view_dir is None or point is None or objects is None:
        raise InvalidArgumentError("All parameters are required for Phong lighting calculation")

    color = global_ambient(material, lights, ambient_mode)

    for light in lights:
        to_light = light.position - point
        if to_light.length_squared() == 0:
            continue
        light_dir = to_light.normalize()

        if in_shadow(point, light.position, objects, current):
            continue

        color = (
            color
            + compute_diffuse(material, light, normal, light_dir)
            + compute_specular(material, light, normal, light_dir, view_dir)
        )

    if material.is_reflective and depth < MAX_REFLECTION_DEPTH:
        reflected = trace_reflection(
            lights, normal, view_dir, point, objects, depth, ambient_mode
        )
        if reflected is not None:
            color = color + reflected * material.reflectivity

    return color.clamp(None, MAX_CHANNEL)


def trace_reflection(
    lights: Sequence[Light],
    normal: Vec3,
    view_dir: Vec3,
    point: Point3,
    objects: Sequence[SceneObject],
    depth: int,
    ambient_mode: AmbientMode = AmbientMode.FIRST_LIGHT
) -> Optional[Color]:
    """Follow the mirror direction from a point and shade whatever it hits.

    Returns:
        The color seen along the reflection ray, or None if it hits nothing
    """
    reflect_dir = (-view_dir).reflect(normal).normalize()
    origin = point + reflect_dir * RAY_EPSILON
    hit = nearest_hit(Ray(origin, reflect_dir), objects)

    if not hit.hit:
        return None

    return shade(
        hit.obj.material,
        lights,
        hit.obj.normal_at(hit.point),
        (origin - hit.point).normalize(),
        hit.point,
        objects,
        hit.obj,
        depth + 1,
        ambient_mode
    )
