# FILE: spheretrace/core/raytracer.py
"""
Recursive Whitted-style caster: nearest hit, mirror blending and binary shadows
"""
import logging
from typing import AbstractSet, Optional, Sequence, Tuple

from .lights import Light
from .scene import Hit, Ray, Scene, Shape
from .vector import Color, Vector3

logger = logging.getLogger(__name__)

NO_EXCLUSIONS: AbstractSet[int] = frozenset()


def nearest_hit(shapes: Sequence[Shape], origin: Vector3, direction: Vector3,
                excluded: AbstractSet[int] = NO_EXCLUSIONS) -> Tuple[int, Optional[Hit]]:
    """Return (index, hit) of the closest shape, or (-1, None) on a miss"""
    shortest = float('inf')
    best_index = -1
    best_hit = None
    for index, shape in enumerate(shapes):
        if index in excluded:
            continue
        hit = shape.intersect(origin, direction)
        if hit is None:
            continue
        distance_squared = (hit.point - origin).length_squared()
        # Strict comparison keeps the first of equally distant hits
        if distance_squared >= shortest:
            continue
        shortest = distance_squared
        best_index = index
        best_hit = hit
    return best_index, best_hit


def is_blocked(shapes: Sequence[Shape], origin: Vector3, direction: Vector3,
               excluded: AbstractSet[int]) -> bool:
    """Occlusion probe: does any remaining shape intersect the ray?"""
    for index, shape in enumerate(shapes):
        if index in excluded:
            continue
        if shape.intersect(origin, direction) is not None:
            return True
    return False


def cast(shapes: Sequence[Shape],
         lights: Sequence[Light],
         origin: Vector3,
         direction: Vector3,
         color_on_miss: Color,
         color_on_full_shade: Color,
         excluded: AbstractSet[int] = NO_EXCLUSIONS) -> Color:
    """
    Color seen along a ray.

    Every sub-query (reflection and shadow probes) skips the shapes already
    hit on this path, so recursion depth never exceeds len(shapes).

    Args:
        shapes: All scene shapes, shared across the recursion
        lights: Scene lights
        origin: Ray origin
        direction: Unit ray direction
        color_on_miss: Returned when nothing is hit
        color_on_full_shade: Ambient floor of the light accumulator
        excluded: Indices of shapes to ignore

    Returns:
        Color: Unclamped RGB
    """
    index, hit = nearest_hit(shapes, origin, direction, excluded)
    if hit is None:
        return color_on_miss

    shape = shapes[index]
    others = excluded | {index}

    color_self = shape.color
    if shape.mirror > 0.0:
        color_mirrored = cast(shapes, lights, hit.point, hit.reflection,
                              color_on_miss, color_on_full_shade, others)
        color_self = color_self * (1 - shape.mirror) + color_mirrored * shape.mirror

    color_mask = color_on_full_shade
    for light in lights:
        probe = (hit.point - light.center).normalize()
        if is_blocked(shapes, hit.point, probe, others):
            continue
        power = light.power(hit.point, hit.normal)
        if power <= 0.0:
            continue
        color_mask = color_mask + light.color * power

    return color_self * color_mask


class RayTracer:
    """Casts primary rays against a fixed scene"""

    def __init__(self, scene: Scene,
                 color_on_miss: Color = Color(0, 0, 1),
                 color_on_full_shade: Color = Color(0.1, 0.1, 0.1)):
        self.scene = scene
        self.color_on_miss = Vector3.of(color_on_miss)
        self.color_on_full_shade = Vector3.of(color_on_full_shade)
        self.rays_cast = 0

        logger.debug(f"RayTracer initialized: {scene}")

    def trace(self, ray: Ray) -> Color:
        self.rays_cast += 1
        return cast(self.scene.shapes, self.scene.lights, ray.origin, ray.direction,
                    self.color_on_miss, self.color_on_full_shade)

    def reset_statistics(self):
        self.rays_cast = 0
