"""
Geometric shapes for the ray tracer.

Every shape implements the SceneObject interface: `intersect` returns the ray
parameter of the hit (or None), `normal_at` returns the unit surface normal at
a point, and `get_point` maps a ray parameter back to world space. The set of
shapes is closed: spheres and infinite planes.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional
import math

from .vec3 import Vec3, Point3, require_number, require_vec3
from .ray import Ray
from .materials import Material
from .errors import ConstructionError, DegenerateVectorError, InvalidArgumentError

# Rays this close to parallel with a plane are treated as misses
PARALLEL_EPSILON = 1e-4


def _require_material(material: Material, owner: str) -> Material:
    if not isinstance(material, Material):
        raise ConstructionError(f"{owner} requires a Material, got {type(material).__name__}")
    return material


class SceneObject(ABC):
    """Abstract base class for all objects that can be hit by rays."""

    material: Material

    @abstractmethod
    def intersect(self, ray: Ray) -> Optional[float]:
        """Test if ray intersects this object.

        Args:
            ray: The ray to test

        Returns:
            The ray parameter t of the intersection, or None on a miss.
            The value is not range-checked against any epsilon here.
        """
        pass

    @abstractmethod
    def normal_at(self, point: Point3) -> Vec3:
        """Return the unit surface normal at a point on the surface."""
        pass

    def get_point(self, ray: Ray, t: float) -> Point3:
        """Return the world-space point at parameter t along the ray."""
        if ray is None or t is None:
            raise InvalidArgumentError("Ray and t parameter are required")
        return ray.at(t)


class Sphere(SceneObject):
    """A sphere defined by center and radius."""

    def __init__(self, center: Point3, radius: float, material: Material):
        """Create a sphere.

        Args:
            center: Center point of the sphere
            radius: Radius of the sphere (must be positive)
            material: Material for shading
        """
        self.center = require_vec3(center, "Sphere center")
        self.radius = require_number(radius, "Sphere radius")
        if not self.radius > 0:
            raise ConstructionError(f"Sphere radius must be positive, got {self.radius}")
        self.material = _require_material(material, "Sphere")

    def intersect(self, ray: Ray) -> Optional[float]:
        """Test ray-sphere intersection using the quadratic formula.

        The equation (P-C)·(P-C) = r² where P = ray.at(t)
        expands to: t²(d·d) + 2t(d·(O-C)) + (O-C)·(O-C) - r² = 0
        which is the quadratic at² + bt + c = 0.

        Only the nearer root is returned, so a ray starting inside the
        sphere reports a non-positive t and is filtered out by the caller.
        """
        if ray is None:
            raise InvalidArgumentError("Ray is required")

        oc = ray.origin - self.center
        a = ray.direction.length_squared()
        if a == 0:
            raise InvalidArgumentError("Ray direction must be non-zero")
        b = 2.0 * oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius

        discriminant = b * b - 4 * a * c
        if discriminant < 0:
            return None

        return (-b - math.sqrt(discriminant)) / (2.0 * a)

    def normal_at(self, point: Point3) -> Vec3:
        if point is None:
            raise InvalidArgumentError("Intersection point is required")
        return (point - self.center).normalize()

    def __repr__(self) -> str:
        return f"Sphere(center={self.center}, radius={self.radius})"


class Plane(SceneObject):
    """An infinite plane defined by a point and normal."""

    def __init__(self, point: Point3, normal: Vec3, material: Material):
        """Create a plane.

        Args:
            point: Any point on the plane
            normal: The plane's normal vector (will be normalized)
            material: Material for shading
        """
        self.point = require_vec3(point, "Plane point")
        try:
            self.normal = require_vec3(normal, "Plane normal").normalize()
        except DegenerateVectorError as exc:
            raise ConstructionError("Plane normal must be non-zero") from exc
        self.material = _require_material(material, "Plane")

    def intersect(self, ray: Ray) -> Optional[float]:
        """Test ray-plane intersection."""
        if ray is None:
            raise InvalidArgumentError("Ray is required")

        denom = ray.direction.dot(self.normal)

        # Ray is parallel (or nearly) to plane
        if abs(denom) < PARALLEL_EPSILON:
            return None

        t = (self.point - ray.origin).dot(self.normal) / denom
        return t if t > 0 else None

    def normal_at(self, point: Optional[Point3] = None) -> Vec3:
        """The normal is the same everywhere on the plane."""
        return self.normal

    def __repr__(self) -> str:
        return f"Plane(point={self.point}, normal={self.normal})"
