# FILE: spheretrace/core/vector.py
"""
3D vector used for points, directions and RGB colors
"""
import math
from dataclasses import dataclass

import numpy as np

from ..errors import DegenerateVectorError


@dataclass(frozen=True)
class Vector3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other):
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self):
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other):
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other):
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length(self):
        return math.sqrt(self.length_squared())

    def length_squared(self):
        return self.x*self.x + self.y*self.y + self.z*self.z

    def normalize(self):
        length = self.length()
        if length == 0.0:
            raise DegenerateVectorError(f"cannot normalize zero-length vector {self}")
        return self * (1.0 / length)

    def reflect(self, n):
        """Mirror this direction about the unit normal n"""
        return self - n * (2 * self.dot(n))

    def to_array(self):
        return np.array([self.x, self.y, self.z])

    @staticmethod
    def of(value) -> "Vector3":
        """Coerce a Vector3 or any 3-sequence into a Vector3"""
        if isinstance(value, Vector3):
            return value
        x, y, z = value
        return Vector3(float(x), float(y), float(z))


# Colors share the vector arithmetic: (r, g, b) == (x, y, z)
Color = Vector3


def reflect(direction: Vector3, normal: Vector3) -> Vector3:
    return direction.reflect(normal)
