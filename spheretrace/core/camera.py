# FILE: spheretrace/core/camera.py
"""
Orthographic (parallel-ray) camera
"""
from typing import Iterator, Tuple

from ..errors import DegenerateVectorError
from .scene import Ray
from .vector import Vector3


class OrthographicCamera:
    """
    Sweeps ray origins across a square plane of side `size` centered on
    `position`; every ray shares the same `direction`.

    Image x runs along `right`, image y along `down`. With the default
    up hint (0, 0, 1) and direction (-1, 0, 0), right is +y and down is +z.
    """

    def __init__(self,
                 position: Vector3 = None,
                 direction: Vector3 = None,
                 size: float = 30.0,
                 up: Vector3 = None):
        if size <= 0:
            raise ValueError(f"camera size must be positive, got {size}")

        self.position = Vector3.of(position) if position is not None else Vector3(100, 0, 0)
        direction = Vector3.of(direction) if direction is not None else Vector3(-1, 0, 0)
        self.direction = direction.normalize()
        self.up = Vector3.of(up) if up is not None else Vector3(0, 0, 1)
        self.size = float(size)
        self._update_coordinate_system()

    def _update_coordinate_system(self):
        """Derive the image-plane axes from direction and up hint"""
        try:
            self.right = self.direction.cross(self.up).normalize()
        except DegenerateVectorError:
            raise DegenerateVectorError(
                f"camera direction {self.direction} is parallel to up {self.up}"
            ) from None
        self.down = self.right.cross(self.direction)

    def get_ray(self, x: int, y: int, resolution: int) -> Ray:
        """Ray through pixel (x, y) of a resolution x resolution image"""
        step = self.size / resolution
        half = self.size * 0.5
        origin = (self.position
                  + self.right * (x * step - half)
                  + self.down * (y * step - half))
        return Ray(origin, self.direction)

    def pixels(self, resolution: int) -> Iterator[Tuple[int, int, Ray]]:
        """Yield (x, y, ray) for every pixel in row-major order"""
        for y in range(resolution):
            for x in range(resolution):
                yield x, y, self.get_ray(x, y, resolution)
