"""
Scene container and the nearest-hit query.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence
import math

from .vec3 import Point3
from .ray import Ray
from .shapes import SceneObject
from .lights import Light
from .errors import InvalidArgumentError

# Minimum accepted ray parameter; suppresses self-intersection of secondary rays
RAY_EPSILON = 1e-3


@dataclass
class Intersection:
    """Result of a nearest-hit query.

    Attributes:
        t: Ray parameter of the hit (infinity on a miss)
        obj: The object that was hit, or None
        point: World-space hit point, or None
    """
    t: float = math.inf
    obj: Optional[SceneObject] = None
    point: Optional[Point3] = None

    @property
    def hit(self) -> bool:
        return self.obj is not None


def nearest_hit(
    ray: Ray,
    objects: Iterable[SceneObject],
    exclude: Optional[SceneObject] = None
) -> Intersection:
    """Find the closest intersection along a ray.

    Objects are tested in iteration order and only parameters strictly
    greater than RAY_EPSILON are accepted. On equal t the earlier object wins.

    Args:
        ray: The ray to trace
        objects: Ordered collection of scene objects
        exclude: Object to skip (the surface a shadow ray starts on)

    Returns:
        Intersection describing the winning object, or a miss
    """
    if ray is None or objects is None:
        raise InvalidArgumentError("Ray and objects are required")

    closest = Intersection()

    for obj in objects:
        if obj is exclude:
            continue

        t = obj.intersect(ray)
        if t is not None and RAY_EPSILON < t < closest.t:
            closest = Intersection(t=t, obj=obj, point=obj.get_point(ray, t))

    return closest


class Scene:
    """An ordered collection of scene objects plus the lights illuminating them."""

    def __init__(
        self,
        objects: Optional[Sequence[SceneObject]] = None,
        lights: Optional[Sequence[Light]] = None
    ):
        self.objects: list[SceneObject] = list(objects) if objects is not None else []
        self.lights: list[Light] = list(lights) if lights is not None else []

    def add(self, obj: SceneObject) -> None:
        """Add an object to the scene."""
        if not isinstance(obj, SceneObject):
            raise InvalidArgumentError(f"Expected a SceneObject, got {type(obj).__name__}")
        self.objects.append(obj)

    def add_light(self, light: Light) -> None:
        """Add a light; the first light added supplies the global ambient term."""
        if not isinstance(light, Light):
            raise InvalidArgumentError(f"Expected a Light, got {type(light).__name__}")
        self.lights.append(light)

    def nearest_hit(self, ray: Ray, exclude: Optional[SceneObject] = None) -> Intersection:
        return nearest_hit(ray, self.objects, exclude)

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[SceneObject]:
        return iter(self.objects)
