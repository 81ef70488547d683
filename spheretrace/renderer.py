# FILE: spheretrace/renderer.py
"""
Multi-resolution supersampling renderer
"""
import logging
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

import numpy as np

from .config import RenderConfig
from .core import OrthographicCamera, RayTracer
from .image_io import rescale, save_png, to_rgb8

logger = logging.getLogger(__name__)

# Levels at or below this size are not worth rendering
MIN_LEVEL_RESOLUTION = 16

LevelCallback = Callable[[int, np.ndarray], None]


def resolution_levels(resolution: int, supersample: int,
                      floor: int = MIN_LEVEL_RESOLUTION) -> List[int]:
    """
    Supersample resolutions in render order, smallest first.

    Halves resolution * supersample while it stays above `floor`; the full
    supersample is always last. If nothing exceeds the floor the full
    supersample is rendered on its own.
    """
    levels = []
    level = resolution * supersample
    while level > floor:
        levels.insert(0, level)
        level //= 2
    return levels or [resolution * supersample]


@dataclass
class LevelStats:
    resolution: int
    seconds: float
    rays: int


class Renderer:
    """Renders a config at successively finer supersample levels"""

    def __init__(self, config: RenderConfig):
        self.config = config
        self.camera = OrthographicCamera(
            position=config.camera_origin,
            direction=config.camera_direction,
            size=config.camera_size,
            up=config.camera_up,
        )
        self.tracer = RayTracer(config.scene, config.color_on_miss, config.color_on_full_shade)
        self.stats: List[LevelStats] = []

        logger.info(f"Renderer initialized: {config.resolution}x{config.resolution}, "
                    f"supersample {config.supersample}, {config.scene}")

    def levels(self) -> List[int]:
        if not self.config.progressive:
            return [self.config.resolution * self.config.supersample]
        return resolution_levels(self.config.resolution, self.config.supersample)

    def render_level(self, resolution: int) -> np.ndarray:
        """Trace one ray per pixel; returns an unclamped float HxWx3 image"""
        image = np.zeros((resolution, resolution, 3), dtype=np.float64)
        for x, y, ray in self.camera.pixels(resolution):
            image[y, x] = self.tracer.trace(ray).to_array()
        return image

    def render(self, on_level: Optional[LevelCallback] = None) -> np.ndarray:
        """
        Render every level and return the last one scaled to the output size

        Args:
            on_level: Called with (level resolution, output image) after each level

        Returns:
            np.ndarray: resolution x resolution x 3 uint8 image

        Raises:
            OutputWriteError: If the output file cannot be written
        """
        self.stats = []
        output = None
        for level in self.levels():
            start_time = time.time()
            self.tracer.reset_statistics()

            pixels = to_rgb8(self.render_level(level))
            output = rescale(pixels, self.config.resolution)

            elapsed = time.time() - start_time
            self.stats.append(LevelStats(level, elapsed, self.tracer.rays_cast))
            logger.info(f"Rendered level {level}x{level} in {elapsed:.3f}s "
                        f"({self.tracer.rays_cast} rays)")

            if self.config.output_path:
                save_png(self.config.output_path, output)
            if on_level is not None:
                on_level(level, output)

        return output

    def get_statistics(self) -> Dict[str, object]:
        """Return rendering statistics as a dictionary"""
        return {
            'levels': [s.resolution for s in self.stats],
            'total_seconds': sum(s.seconds for s in self.stats),
            'total_rays': sum(s.rays for s in self.stats),
        }
