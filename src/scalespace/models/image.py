# Copyright 2025 Thousand Brains Project
#
# Copyright may exist in Contributors' modifications
# and/or contributions to the work.
#
# Use of this source code is governed by the MIT
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.
from __future__ import annotations

from dataclasses import dataclass

import cv2
import numpy as np


@dataclass(frozen=True, eq=False)
class Image:
    """Single-channel float32 pixel grid.

    The wrapped array is copied on construction and marked read-only, so an
    image never changes once built. Images compare and hash by identity.

    A zero-extent image (width or height of 0) is only ever produced by a
    down scaler to signal that the pyramid cannot continue.
    """

    data: np.ndarray

    def __post_init__(self):
        data = np.array(self.data, dtype=np.float32)
        if data.ndim != 2:
            raise ValueError(f"Image data must be 2D, got shape {data.shape}")
        data.setflags(write=False)
        object.__setattr__(self, "data", data)

    @classmethod
    def zeros(cls, height: int, width: int) -> Image:
        return cls(np.zeros((height, width), dtype=np.float32))

    @classmethod
    def from_array(cls, array: np.ndarray) -> Image:
        """Create an image from a grayscale, RGB or RGBA array.

        Integer arrays are assumed to be in [0, 255] and are rescaled to
        [0, 1]. Color arrays are converted to gray.

        Args:
            array: Array of shape (H, W), (H, W, 3) or (H, W, 4).

        Returns:
            A new image.

        Raises:
            ValueError: If the array has an unsupported shape.
        """
        if np.issubdtype(array.dtype, np.integer):
            array = (array / 255.0).astype(np.float32)
        else:
            array = np.asarray(array, dtype=np.float32)

        if array.ndim == 3 and array.shape[2] in (3, 4):
            array = cv2.cvtColor(
                np.ascontiguousarray(array[:, :, :3]), cv2.COLOR_RGB2GRAY
            )
        elif array.ndim != 2:
            raise ValueError(f"Unsupported image shape: {array.shape}")
        return cls(array)

    @property
    def height(self) -> int:
        return self.data.shape[0]

    @property
    def width(self) -> int:
        return self.data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        """Shape ordered (height, width), as for numpy arrays."""
        return self.data.shape

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def to_array(self) -> np.ndarray:
        """Returns a writable copy of the pixel data."""
        return self.data.copy()

    def __sub__(self, other: Image) -> Image:
        if not isinstance(other, Image):
            return NotImplemented
        if self.shape != other.shape:
            raise ValueError(
                f"Cannot subtract image of shape {other.shape} "
                f"from image of shape {self.shape}"
            )
        return Image(self.data - other.data)

    def __repr__(self) -> str:
        return f"Image(width={self.width}, height={self.height})"
