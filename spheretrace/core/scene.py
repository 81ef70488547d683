# FILE: spheretrace/core/scene.py
"""
Scene geometry: rays, hit records and intersectable shapes
"""
import math
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

from .lights import Light
from .vector import Color, Vector3


@dataclass(frozen=True)
class Ray:
    origin: Vector3
    direction: Vector3  # unit length


@dataclass(frozen=True)
class Hit:
    point: Vector3
    normal: Vector3      # unit
    reflection: Vector3  # unit


class Shape:
    """Base class for anything a ray can hit"""

    def __init__(self, color: Color = Color(1, 0, 0), mirror: float = 0.0):
        if not 0.0 <= mirror <= 1.0:
            raise ValueError(f"mirror coefficient must lie in [0, 1], got {mirror}")
        self.color = Vector3.of(color)
        self.mirror = float(mirror)

    def intersect(self, origin: Vector3, direction: Vector3) -> Optional[Hit]:
        """
        Intersect a ray with the surface

        Args:
            origin: Ray origin
            direction: Unit ray direction

        Returns:
            Optional[Hit]: The nearest intersection, or None on a miss
        """
        raise NotImplementedError


class Sphere(Shape):
    """Sphere with analytic intersection"""
    __slots__ = ['center', 'radius']

    def __init__(self, center: Vector3, radius: float, color: Color = Color(1, 0, 0),
                 mirror: float = 0.0):
        super().__init__(color, mirror)
        if radius <= 0:
            raise ValueError(f"sphere radius must be positive, got {radius}")
        self.center = Vector3.of(center)
        self.radius = float(radius)

    def intersect(self, origin: Vector3, direction: Vector3) -> Optional[Hit]:
        m = origin - self.center
        b = direction.dot(m)
        c = m.dot(m) - self.radius * self.radius

        # Origin outside and pointing away
        if c > 0.0 and b > 0.0:
            return None

        discriminant = b * b - c
        if discriminant < 0.0:
            return None

        # Clamp to the origin when starting inside the sphere
        t = max(0.0, -b - math.sqrt(discriminant))
        point = origin + direction * t

        offset = point - self.center
        if offset.length_squared() == 0.0:
            # Ray starts at the center: face the incoming ray
            normal = -direction
        else:
            normal = offset.normalize()

        return Hit(point, normal, direction.reflect(normal))

    def __repr__(self) -> str:
        return (f"Sphere(center={self.center}, radius={self.radius}, "
                f"color={self.color}, mirror={self.mirror})")


class Scene:
    """Read-only collection of shapes and lights for one render"""

    def __init__(self, shapes: Iterable[Shape] = (), lights: Iterable[Light] = ()):
        self._shapes: Tuple[Shape, ...] = tuple(shapes)
        self._lights: Tuple[Light, ...] = tuple(lights)

    @property
    def shapes(self) -> Sequence[Shape]:
        return self._shapes

    @property
    def lights(self) -> Sequence[Light]:
        return self._lights

    def __repr__(self) -> str:
        return f"Scene({len(self._shapes)} shapes, {len(self._lights)} lights)"
