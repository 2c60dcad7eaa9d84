"""
Phong surface materials.

A material carries the ambient, diffuse and specular reflectance colors of a
surface, its specular exponent, and how much mirror reflection it blends in.
Materials are immutable and shared by reference between scene objects.
"""

from __future__ import annotations
from dataclasses import dataclass

from .vec3 import Color, require_number, require_vec3
from .errors import ConstructionError


@dataclass(frozen=True, eq=False)
class Material:
    """Lambertian + specular + mirror material.

    Attributes:
        ambient: Reflectance of the global ambient term
        diffuse: Lambertian reflectance
        specular: Specular highlight reflectance
        shininess: Phong exponent (> 0)
        reflectivity: Weight of the recursive mirror reflection, in [0, 1]
    """
    ambient: Color
    diffuse: Color
    specular: Color
    shininess: float = 32.0
    reflectivity: float = 0.0

    def __post_init__(self):
        for name in ('ambient', 'diffuse', 'specular'):
            color = require_vec3(getattr(self, name), f"Material {name}")
            if min(color) < 0:
                raise ConstructionError(f"Material {name} channels must be non-negative, got {color}")
            object.__setattr__(self, name, color)

        shininess = require_number(self.shininess, "Material shininess")
        if not shininess > 0:
            raise ConstructionError(f"Material shininess must be positive, got {shininess}")
        reflectivity = require_number(self.reflectivity, "Material reflectivity")
        if not 0.0 <= reflectivity <= 1.0:
            raise ConstructionError(f"Material reflectivity must be in [0, 1], got {reflectivity}")

        object.__setattr__(self, "shininess", shininess)
        object.__setattr__(self, "reflectivity", reflectivity)

    @property
    def is_reflective(self) -> bool:
        return self.reflectivity > 0.0
