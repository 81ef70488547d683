"""
spheretrace - recursive ray tracer for mirrored spheres lit by bulbs
"""
from .core import (Bulb, Color, Hit, Light, OrthographicCamera, Ray, RayTracer,
                   Scene, Shape, Sphere, Vector3, cast)
from .config import RenderConfig, load_config
from .default_scene import create_default_scene
from .errors import ConfigError, DegenerateVectorError, OutputWriteError, SphereTraceError
from .renderer import Renderer, resolution_levels

__version__ = "1.0.0"

__all__ = [
    'Bulb', 'Color', 'Hit', 'Light', 'OrthographicCamera', 'Ray', 'RayTracer',
    'Scene', 'Shape', 'Sphere', 'Vector3', 'cast',
    'RenderConfig', 'load_config', 'create_default_scene',
    'ConfigError', 'DegenerateVectorError', 'OutputWriteError', 'SphereTraceError',
    'Renderer', 'resolution_levels',
]
