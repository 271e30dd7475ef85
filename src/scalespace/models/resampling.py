# Copyright 2025 Thousand Brains Project
#
# Copyright may exist in Contributors' modifications
# and/or contributions to the work.
#
# Use of this source code is governed by the MIT
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.
from __future__ import annotations

import logging

import cv2
import numpy as np

from .image import Image

logger = logging.getLogger(__name__)

INTERPOLATIONS = {
    "nearest": cv2.INTER_NEAREST,
    "linear": cv2.INTER_LINEAR,
    "cubic": cv2.INTER_CUBIC,
    "area": cv2.INTER_AREA,
}


def resize(
    image: np.ndarray,
    shape: tuple[int, int],
    interpolation: int = cv2.INTER_LINEAR,
) -> np.ndarray:
    """Resize an image.

    Wraps opencv.resize so that the "shape" argument is ordered (height, width).

    Args:
        image: Image array.
        shape: Target shape (height, width).
        interpolation: Interpolation method. Defaults to cv2.INTER_LINEAR.

    Returns:
        Resized image array.
    """
    return cv2.resize(image, (shape[1], shape[0]), interpolation=interpolation)


def _interpolation_flag(name: str) -> int:
    try:
        return INTERPOLATIONS[name]
    except KeyError:
        raise ValueError(
            f"Unsupported interpolation: {name}. "
            f"Expected one of {sorted(INTERPOLATIONS)}"
        ) from None


class InterpolatingUpScaler:
    """Doubles the resolution of an image by interpolation."""

    def __init__(self, interpolation: str = "linear"):
        self.interpolation = interpolation
        self._flag = _interpolation_flag(interpolation)

    def up_scale(self, image: Image) -> Image:
        if image.is_empty:
            raise ValueError(f"Cannot upscale an image without pixels: {image!r}")
        shape = (2 * image.height, 2 * image.width)
        return Image(resize(image.to_array(), shape, interpolation=self._flag))


class HalvingDownScaler:
    """Halves the resolution of an image by taking every second pixel.

    Returns a 0x0 image once either halved dimension would drop below
    ``min_size``, which ends the pyramid.
    """

    def __init__(self, min_size: int = 1):
        """Initialize the down scaler.

        Args:
            min_size: Smallest width or height, in pixels, an output image may
                have. Defaults to 1.
        """
        if min_size < 1:
            raise ValueError(f"min_size must be at least 1, got {min_size}")
        self.min_size = min_size

    def down_scale(self, image: Image) -> Image:
        shape = (image.height // 2, image.width // 2)
        if min(shape) < self.min_size:
            logger.debug(
                "Halving %r gives %dx%d, below min_size=%d",
                image,
                shape[1],
                shape[0],
                self.min_size,
            )
            return Image.zeros(0, 0)
        return Image(resize(image.to_array(), shape, interpolation=cv2.INTER_NEAREST))
