# FILE: spheretrace/default_scene.py
"""
The stock scene: five mirrored spheres over two large backdrop spheres,
lit by a pair of nearby bulbs
"""
from .core import Bulb, Color, Scene, Sphere, Vector3


def create_default_scene() -> Scene:
    """Create the default demo scene"""
    shapes = [
        Sphere(Vector3(0, 0, 0), 5, Color(1.0, 0.5, 0.5), 0.9),
        Sphere(Vector3(0, -12, 0), 4, Color(0.5, 1.0, 0.5), 0.9),
        Sphere(Vector3(5, 8, 7), 3, Color(1, 1, 1), 0.5),
        Sphere(Vector3(7, 5, 5), 2, Color(0.5, 0.5, 1.0), 0),
        Sphere(Vector3(12, 4, 5), 1, Color(0.5, 0.5, 0.2), 0),
        # Backdrop
        Sphere(Vector3(-100, 0, -50), 100, Color(0.5, 0.5, 0.5), 0.4),
        Sphere(Vector3(-100, 0, 50), 100, Color(1, 1, 1), 0.4),
    ]
    lights = [
        Bulb(Vector3(-20, -10, 20), Color(1, 1, 1) * 0.7),
        Bulb(Vector3(-20, -12, 22), Color(1, 1, 1) * 0.7),
    ]
    return Scene(shapes, lights)
