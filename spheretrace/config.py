"""
Configuration settings for the sphere tracer
"""
import json
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from .core import Bulb, Color, Scene, Sphere, Vector3
from .default_scene import create_default_scene
from .errors import ConfigError, DegenerateVectorError

logger = logging.getLogger(__name__)

# Rendering settings
RENDER_SETTINGS = {
    'resolution': 512,
    'supersample': 2,
    'output_path': 'output.png',
    'progressive': True,
}

# Camera settings
CAMERA_SETTINGS = {
    'camera_origin': (100.0, 0.0, 0.0),
    'camera_direction': (-1.0, 0.0, 0.0),
    'camera_up': (0.0, 0.0, 1.0),
    'camera_size': 30.0,
}

# Scene settings
SCENE_SETTINGS = {
    'color_on_miss': (0.0, 0.0, 1.0),
    'color_on_full_shade': (0.1, 0.1, 0.1),
}

_VECTOR_KEYS = ('camera_origin', 'camera_direction', 'camera_up',
                'color_on_miss', 'color_on_full_shade')


@dataclass
class RenderConfig:
    """Everything a render needs: the scene, the camera and the output"""
    scene: Scene = field(default_factory=create_default_scene)
    camera_origin: Vector3 = Vector3(*CAMERA_SETTINGS['camera_origin'])
    camera_direction: Vector3 = Vector3(*CAMERA_SETTINGS['camera_direction'])
    camera_up: Vector3 = Vector3(*CAMERA_SETTINGS['camera_up'])
    camera_size: float = CAMERA_SETTINGS['camera_size']
    resolution: int = RENDER_SETTINGS['resolution']
    supersample: int = RENDER_SETTINGS['supersample']
    color_on_miss: Color = Color(*SCENE_SETTINGS['color_on_miss'])
    color_on_full_shade: Color = Color(*SCENE_SETTINGS['color_on_full_shade'])
    output_path: Optional[str] = RENDER_SETTINGS['output_path']
    progressive: bool = RENDER_SETTINGS['progressive']

    def __post_init__(self):
        for key in _VECTOR_KEYS:
            try:
                setattr(self, key, Vector3.of(getattr(self, key)))
            except (TypeError, ValueError) as e:
                raise ConfigError(f"'{key}' must be a 3-component vector: {e}") from None
        try:
            self.camera_size = float(self.camera_size)
        except (TypeError, ValueError):
            raise ConfigError(f"camera_size must be a number, got {self.camera_size!r}") from None
        self.validate()

    def validate(self):
        if not isinstance(self.scene, Scene):
            raise ConfigError(f"scene must be a Scene, got {type(self.scene).__name__}")
        if not isinstance(self.resolution, int) or self.resolution <= 0:
            raise ConfigError(f"resolution must be a positive integer, got {self.resolution!r}")
        if not isinstance(self.supersample, int) or self.supersample <= 0:
            raise ConfigError(f"supersample must be a positive integer, got {self.supersample!r}")
        if self.camera_size <= 0:
            raise ConfigError(f"camera_size must be positive, got {self.camera_size!r}")
        if self.output_path is not None and not isinstance(self.output_path, str):
            raise ConfigError(f"output_path must be a string, got {self.output_path!r}")
        if not isinstance(self.progressive, bool):
            raise ConfigError(f"progressive must be true or false, got {self.progressive!r}")
        try:
            direction = self.camera_direction.normalize()
            direction.cross(self.camera_up).normalize()
        except DegenerateVectorError as e:
            raise ConfigError(f"invalid camera orientation: {e}") from None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RenderConfig":
        """Build a config from a plain mapping, falling back to defaults"""
        data = dict(data)
        # The scene is only ever built from shapes and lights
        known = ({f.name for f in fields(cls)} - {'scene'}) | {'shapes', 'lights'}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"unknown configuration keys: {', '.join(unknown)}")

        shapes = data.pop('shapes', None)
        lights = data.pop('lights', None)
        if shapes is not None or lights is not None:
            default = create_default_scene()
            data['scene'] = Scene(
                _parse_spheres(shapes) if shapes is not None else default.shapes,
                _parse_bulbs(lights) if lights is not None else default.lights,
            )
        return cls(**data)


def _parse_spheres(entries) -> list:
    spheres = []
    for i, entry in enumerate(entries):
        try:
            spheres.append(Sphere(
                Vector3.of(entry['center']),
                float(entry['radius']),
                Vector3.of(entry.get('color', (1.0, 0.0, 0.0))),
                float(entry.get('mirror', 0.0)),
            ))
        except (KeyError, TypeError, ValueError) as e:
            raise ConfigError(f"invalid shape #{i}: {e}") from None
    return spheres


def _parse_bulbs(entries) -> list:
    bulbs = []
    for i, entry in enumerate(entries):
        try:
            bulbs.append(Bulb(
                Vector3.of(entry['center']),
                Vector3.of(entry.get('color', (1.0, 1.0, 1.0))),
            ))
        except (KeyError, TypeError, ValueError) as e:
            raise ConfigError(f"invalid light #{i}: {e}") from None
    return bulbs


def load_config(path: Union[str, Path]) -> RenderConfig:
    """Load a RenderConfig from a JSON file"""
    path = Path(path)
    try:
        with path.open('r', encoding='utf-8') as f:
            data: Dict[str, Any] = json.load(f)
    except OSError as e:
        raise ConfigError(f"cannot read config {path}: {e}") from None
    except json.JSONDecodeError as e:
        raise ConfigError(f"malformed config {path}: {e}") from None
    if not isinstance(data, dict):
        raise ConfigError(f"config {path} must contain a JSON object")

    logger.info(f"Loaded configuration from {path}")
    return RenderConfig.from_dict(data)
