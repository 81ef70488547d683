# FILE: spheretrace/image_io.py
"""
Pixel conversion, smooth rescaling and PNG output
"""
import logging
import struct
from pathlib import Path
from typing import Union

import cv2
import numpy as np
from PIL import Image
from PIL.PngImagePlugin import PngInfo

from .errors import OutputWriteError

logger = logging.getLogger(__name__)

# gAMA is stored as gamma * 100000; 1.0 tags the data as linear
LINEAR_GAMMA = 100000


def to_rgb8(image: np.ndarray) -> np.ndarray:
    """Convert an unclamped float HxWx3 image to uint8, truncating then clamping to [0, 255]"""
    scaled = (np.asarray(image, dtype=np.float64) * 255).astype(np.int64)
    return np.clip(scaled, 0, 255).astype(np.uint8)


def rescale(image: np.ndarray, resolution: int) -> np.ndarray:
    """Smoothly resize a square uint8 image to resolution x resolution"""
    height, width = image.shape[:2]
    if (width, height) == (resolution, resolution):
        return image.copy()
    interpolation = cv2.INTER_AREA if width > resolution else cv2.INTER_LINEAR
    return cv2.resize(np.ascontiguousarray(image), (resolution, resolution),
                      interpolation=interpolation)


def save_png(path: Union[str, Path], image: np.ndarray):
    """
    Write an RGB uint8 image as a PNG tagged with linear gamma

    Raises:
        OutputWriteError: If the file cannot be written
    """
    info = PngInfo()
    info.add(b"gAMA", struct.pack(">I", LINEAR_GAMMA))
    try:
        Image.fromarray(np.ascontiguousarray(image, dtype=np.uint8)).save(
            path, format="PNG", pnginfo=info
        )
    except (OSError, ValueError) as e:
        raise OutputWriteError(path, e) from e
    logger.debug(f"Wrote {image.shape[1]}x{image.shape[0]} image to {path}")
