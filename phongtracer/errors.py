"""
Exceptions raised by the ray tracer.

Construction errors fire when a scene entity is built, never while rendering.
Argument errors fire at the call site of a ray-dependent function.
"""


class PhongTracerError(Exception):
    """Base class for all ray tracer errors."""
    pass


class ConstructionError(PhongTracerError, ValueError):
    """A sphere, plane, material or light was built from missing or invalid data."""
    pass


class InvalidArgumentError(PhongTracerError, ValueError):
    """A ray, object or intersection parameter was missing or invalid."""
    pass


class DegenerateVectorError(PhongTracerError, ArithmeticError):
    """Attempted to normalize a zero-length vector."""
    pass
