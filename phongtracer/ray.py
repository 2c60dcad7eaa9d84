"""
Ray class for representing rays in 3D space.

A ray is defined by an origin point and a direction vector.
Ray(t) = origin + t * direction
"""

from __future__ import annotations
from .vec3 import Vec3, Point3
from .errors import InvalidArgumentError


class Ray:
    """A ray with origin and direction.

    The parametric form is: P(t) = origin + t * direction
    where t >= 0 represents points along the ray. The direction is stored
    as given; callers normalize it before constructing camera, shadow and
    reflection rays.
    """

    __slots__ = ('origin', 'direction')

    def __init__(self, origin: Point3, direction: Vec3):
        """Create a ray with given origin and direction.

        Args:
            origin: The starting point of the ray
            direction: The direction vector
        """
        if origin is None or direction is None:
            raise InvalidArgumentError("Ray requires origin and direction")
        self.origin = origin
        self.direction = direction

    def at(self, t: float) -> Point3:
        """Get the point along the ray at parameter t.

        Args:
            t: The parameter value (distance if direction is normalized)

        Returns:
            The point at origin + t * direction
        """
        if t is None:
            raise InvalidArgumentError("Ray parameter t is required")
        return self.origin + self.direction * t

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin}, direction={self.direction})"
