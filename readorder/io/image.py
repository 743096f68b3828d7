"""Image file loading utilities."""

from __future__ import annotations

import logging
from pathlib import Path

import cv2
import numpy as np

from readorder.exceptions import FileLoadError

logger = logging.getLogger(__name__)

__all__ = ["load_image"]

_RGBA_CHANNELS = 4


def load_image(image_path: Path) -> np.ndarray:
    """Load an image file for recognition.

    Supports common image formats: JPEG, PNG, BMP, TIFF, WebP, etc. An alpha
    channel is dropped.

    Args:
        image_path: Path to the image file

    Returns:
        Image as numpy array in BGR format (OpenCV convention)

    Raises:
        FileLoadError: If the file is missing or cannot be decoded

    Example:
        >>> image = load_image(Path("photo.jpg"))
        >>> image.shape
        (1080, 1920, 3)
    """
    if not image_path.exists():
        raise FileLoadError(f"Image not found: {image_path}")

    image = cv2.imread(str(image_path), cv2.IMREAD_UNCHANGED)
    if image is None:
        raise FileLoadError(f"Could not load image: {image_path}")

    if image.ndim == 2:
        image = cv2.cvtColor(image, cv2.COLOR_GRAY2BGR)
    elif image.shape[2] == _RGBA_CHANNELS:
        image = cv2.cvtColor(image, cv2.COLOR_BGRA2BGR)
        logger.debug("Dropped alpha channel from %s", image_path)

    logger.info("Loaded image: %s, shape: %s", image_path, image.shape)
    return image
