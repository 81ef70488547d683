from .vector import Color, Vector3, reflect
from .lights import Bulb, Light
from .scene import Hit, Ray, Scene, Shape, Sphere
from .raytracer import RayTracer, cast, nearest_hit
from .camera import OrthographicCamera

__all__ = [
    'Color', 'Vector3', 'reflect',
    'Bulb', 'Light',
    'Hit', 'Ray', 'Scene', 'Shape', 'Sphere',
    'RayTracer', 'cast', 'nearest_hit',
    'OrthographicCamera',
]
