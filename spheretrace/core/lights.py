# FILE: spheretrace/core/lights.py
"""
Light sources exposing an irradiance falloff at a surface point
"""
import math

from .vector import Color, Vector3


class Light:
    """Base light: a colored source positioned at `center`"""

    def __init__(self, center: Vector3, color: Color = Color(1, 1, 1)):
        self.center = Vector3.of(center)
        self.color = Vector3.of(color)

    def power(self, point: Vector3, normal: Vector3) -> float:
        """
        Fraction of the light's color reaching a surface

        Args:
            point: Surface point
            normal: Unit surface normal at `point`

        Returns:
            float: Non-negative power
        """
        raise NotImplementedError


class Bulb(Light):
    """
    Light with a linear angular falloff.

    Power is 1 when the bulb-to-point vector is aligned with the normal and
    drops linearly to 0 at 90 degrees. There is no distance attenuation.
    """

    def power(self, point: Vector3, normal: Vector3) -> float:
        v1 = (point - self.center).normalize()
        cosine = max(-1.0, min(1.0, v1.dot(normal)))
        rad = math.acos(cosine)
        if abs(rad) > math.pi / 2:
            return 0.0
        return 1.0 - abs(rad) / (math.pi / 2)

    def __repr__(self) -> str:
        return f"Bulb(center={self.center}, color={self.color})"
