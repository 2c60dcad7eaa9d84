"""
PhongTracer - A Python Whitted-style Ray Tracer

Renders spheres and planes with:
- Multi-light Phong shading (ambient, diffuse, specular)
- Hard shadows from point lights
- Recursive mirror reflections
- 8-bit RGBA output
"""

__version__ = "0.1.0"
__author__ = "PhongTracer Team"

from .errors import PhongTracerError, ConstructionError, InvalidArgumentError, DegenerateVectorError
from .vec3 import Vec3, Point3, Color, as_vec3
from .ray import Ray
from .materials import Material
from .shapes import SceneObject, Sphere, Plane, PARALLEL_EPSILON
from .lights import Light
from .scene import Scene, Intersection, nearest_hit, RAY_EPSILON
from .lighting import (
    AmbientMode, MAX_REFLECTION_DEPTH,
    compute_ambient, compute_diffuse, compute_specular, global_ambient,
    in_shadow, shade, trace_reflection
)
from .camera import PinholeCamera
from .renderer import Renderer, RenderSettings, render, to_bytes, color_to_rgba
