"""
Vector3 class for 3D math operations.

This is the fundamental building block of the ray tracer, used for:
- Points in 3D space
- Direction vectors
- RGB color values
"""

from __future__ import annotations
from typing import Optional, Sequence, Union
import math
import numpy as np

from .errors import ConstructionError, DegenerateVectorError


class Vec3:
    """An immutable 3D vector.

    Uses numpy internally for the arithmetic while providing a clean,
    Pythonic API. Every operation returns a fresh vector.
    """

    __slots__ = ('_data',)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._data = np.array([x, y, z], dtype=np.float64)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Vec3:
        """Create Vec3 from numpy array.

        The data is copied so later changes to arr do not leak in.
        """
        v = cls.__new__(cls)
        v._data = np.array(arr, dtype=np.float64)
        return v

    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    @property
    def z(self) -> float:
        return float(self._data[2])

    # Aliases for color operations
    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    def __repr__(self) -> str:
        return f"Vec3({self.x:.4f}, {self.y:.4f}, {self.z:.4f})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return np.allclose(self._data, other._data)

    # Equality is approximate, so no hash consistent with it exists
    __hash__ = None

    def __iter__(self):
        return iter(float(c) for c in self._data)

    def __neg__(self) -> Vec3:
        return Vec3.from_array(-self._data)

    def __add__(self, other: Union[Vec3, float]) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3.from_array(self._data + other._data)
        return Vec3.from_array(self._data + other)

    def __radd__(self, other: float) -> Vec3:
        return Vec3.from_array(other + self._data)

    def __sub__(self, other: Union[Vec3, float]) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3.from_array(self._data - other._data)
        return Vec3.from_array(self._data - other)

    def __mul__(self, other: Union[Vec3, float]) -> Vec3:
        # Vec3 * Vec3 is the componentwise (Hadamard) product used for colors
        if isinstance(other, Vec3):
            return Vec3.from_array(self._data * other._data)
        return Vec3.from_array(self._data * other)

    def __rmul__(self, other: float) -> Vec3:
        return Vec3.from_array(other * self._data)

    def __truediv__(self, other: float) -> Vec3:
        return Vec3.from_array(self._data / other)

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def length(self) -> float:
        """Return the magnitude (length) of the vector."""
        return float(np.linalg.norm(self._data))

    def length_squared(self) -> float:
        """Return the squared magnitude (avoids sqrt for comparisons)."""
        return float(np.dot(self._data, self._data))

    def normalize(self) -> Vec3:
        """Return a unit vector in the same direction.

        Raises:
            DegenerateVectorError: if the vector has zero length
        """
        length = self.length()
        if length == 0:
            raise DegenerateVectorError(f"Cannot normalize zero-length vector {self!r}")
        return Vec3.from_array(self._data / length)

    def dot(self, other: Vec3) -> float:
        """Compute dot product with another vector."""
        return float(np.dot(self._data, other._data))

    def reflect(self, normal: Vec3) -> Vec3:
        """Reflect this vector around the given normal."""
        return self - normal * 2 * self.dot(normal)

    def to_array(self) -> np.ndarray:
        """Return the underlying numpy array (copy)."""
        return self._data.copy()

    def clamp(self, min_val: float = 0.0, max_val: float = 1.0) -> Vec3:
        """Clamp all components to the given range.

        Either bound may be None to leave that side open.
        """
        return Vec3.from_array(np.clip(self._data, min_val, max_val))


def as_vec3(value: Union[Vec3, Sequence[float]]) -> Vec3:
    """Coerce a Vec3 or any 3-element numeric sequence into a Vec3.

    Raises:
        TypeError: if value is None or not numeric
        ValueError: if value does not have exactly three components
    """
    if isinstance(value, Vec3):
        return value
    if value is None:
        raise TypeError("Expected a 3-component vector, got None")
    arr = np.asarray(value, dtype=np.float64)
    if arr.shape != (3,):
        raise ValueError(f"Expected 3 components, got shape {arr.shape}")
    return Vec3.from_array(arr)


def require_vec3(value: Union[Vec3, Sequence[float], None], field: str) -> Vec3:
    """Coerce a required constructor field, raising ConstructionError on bad input."""
    if value is None:
        raise ConstructionError(f"{field} is required")
    try:
        vec = as_vec3(value)
    except (TypeError, ValueError) as exc:
        raise ConstructionError(f"{field} must be a 3-component vector: {exc}") from exc
    if not np.all(np.isfinite(vec._data)):
        raise ConstructionError(f"{field} must be finite, got {vec}")
    return vec


def require_number(value: Optional[float], field: str) -> float:
    """Coerce a required scalar constructor field to a finite float."""
    if value is None:
        raise ConstructionError(f"{field} is required")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ConstructionError(f"{field} must be a number, got {value!r}") from exc
    if not math.isfinite(number):
        raise ConstructionError(f"{field} must be finite, got {number}")
    return number


# Convenience type aliases
Point3 = Vec3
Color = Vec3
