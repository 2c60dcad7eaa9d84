"""
Point light sources.

A light has a position and separate ambient, diffuse and specular colors.
Lights have no falloff; the scene's ordered light list decides shading, and
the first light also supplies the global ambient term.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .vec3 import Color, Point3, require_vec3
from .errors import ConstructionError

DEFAULT_AMBIENT = Color(0.2, 0.2, 0.2)
DEFAULT_DIFFUSE = Color(0.8, 0.8, 0.8)
DEFAULT_SPECULAR = Color(1.0, 1.0, 1.0)


@dataclass(frozen=True, eq=False)
class Light:
    """A point light with Phong color terms.

    Attributes:
        position: Position of the light (required)
        ambient: Ambient color (defaults to 0.2 grey)
        diffuse: Diffuse color (defaults to 0.8 grey)
        specular: Specular color (defaults to white)
    """
    position: Point3
    ambient: Optional[Color] = None
    diffuse: Optional[Color] = None
    specular: Optional[Color] = None

    def __post_init__(self):
        if self.position is None:
            raise ConstructionError("Light requires position")
        object.__setattr__(self, 'position', require_vec3(self.position, "Light position"))

        defaults = {
            'ambient': DEFAULT_AMBIENT,
            'diffuse': DEFAULT_DIFFUSE,
            'specular': DEFAULT_SPECULAR,
        }
        for name, default in defaults.items():
            value = getattr(self, name)
            color = default if value is None else require_vec3(value, f"Light {name}")
            if min(color) < 0:
                raise ConstructionError(f"Light {name} channels must be non-negative, got {color}")
            object.__setattr__(self, name, color)
