"""
Camera module for generating primary rays.

A fixed pinhole camera at the origin looking down -Z through a projection
plane at unit depth, which gives a 90 degree field of view along each axis.
"""

from __future__ import annotations
from .vec3 import Vec3, Point3
from .ray import Ray
from .errors import InvalidArgumentError


class PinholeCamera:
    """Pinhole camera mapping pixel coordinates to primary rays."""

    def __init__(self):
        self.origin = Point3(0, 0, 0)

    def get_ray(self, x: int, y: int, width: int, height: int) -> Ray:
        """Generate the primary ray for pixel (x, y).

        Args:
            x: Pixel column (0 = left)
            y: Pixel row (0 = top)
            width: Image width in pixels
            height: Image height in pixels

        Returns:
            A ray from the eye with normalized direction
        """
        if width <= 0 or height <= 0:
            raise InvalidArgumentError(f"Viewport must be positive, got {width}x{height}")

        ndc_x, ndc_y = self.to_ndc(x, y, width, height)
        direction = Vec3(ndc_x, ndc_y, -1.0).normalize()
        return Ray(self.origin, direction)

    @staticmethod
    def to_ndc(x: int, y: int, width: int, height: int) -> tuple[float, float]:
        """Map a pixel to normalized device coordinates; Y is flipped so row 0 is the top."""
        return 2.0 * x / width - 1.0, 1.0 - 2.0 * y / height

    def __repr__(self) -> str:
        return f"PinholeCamera(origin={self.origin})"
