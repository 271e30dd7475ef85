# Copyright 2025 Thousand Brains Project
#
# Copyright may exist in Contributors' modifications
# and/or contributions to the work.
#
# Use of this source code is governed by the MIT
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.
from __future__ import annotations

import math

import cv2
from scipy import ndimage

from .image import Image


def sigma_difference(from_sigma: float, to_sigma: float) -> float:
    """Sigma of the Gaussian that takes a blur of ``from_sigma`` to ``to_sigma``.

    Gaussian blurs compose in quadrature, so the result ``d`` satisfies
    ``sqrt(from_sigma**2 + d**2) == to_sigma``.

    Raises:
        ValueError: If ``from_sigma`` is negative or ``to_sigma <= from_sigma``.
    """
    if from_sigma < 0.0:
        raise ValueError(f"from_sigma must not be negative, got {from_sigma}")
    if to_sigma <= from_sigma:
        raise ValueError(
            f"to_sigma ({to_sigma}) must be greater than from_sigma ({from_sigma})"
        )
    return math.sqrt(to_sigma**2 - from_sigma**2)


def _check_sigma(sigma: float) -> None:
    if sigma <= 0.0:
        raise ValueError(f"sigma must be greater than 0, got {sigma}")


class GaussianLowPassFilter:
    """Gaussian blur using OpenCV."""

    def __init__(self, truncate: float = 4.0):
        """Initialize the filter.

        Args:
            truncate: Kernel radius in units of sigma.
        """
        if truncate <= 0.0:
            raise ValueError(f"truncate must be greater than 0, got {truncate}")
        self.truncate = truncate

    def kernel_size(self, sigma: float) -> int:
        return 2 * math.ceil(self.truncate * sigma) + 1

    def filter(self, image: Image, sigma: float) -> Image:
        _check_sigma(sigma)
        ksize = self.kernel_size(sigma)
        blurred = cv2.GaussianBlur(
            image.to_array(),
            (ksize, ksize),
            sigma,
            borderType=cv2.BORDER_REPLICATE,
        )
        return Image(blurred)

    def sigma_difference(self, from_sigma: float, to_sigma: float) -> float:
        return sigma_difference(from_sigma, to_sigma)


class ScipyGaussianLowPassFilter:
    """Gaussian blur using ``scipy.ndimage``."""

    def __init__(self, truncate: float = 4.0):
        if truncate <= 0.0:
            raise ValueError(f"truncate must be greater than 0, got {truncate}")
        self.truncate = truncate

    def filter(self, image: Image, sigma: float) -> Image:
        _check_sigma(sigma)
        blurred = ndimage.gaussian_filter(
            image.data, sigma, mode="nearest", truncate=self.truncate
        )
        return Image(blurred)

    def sigma_difference(self, from_sigma: float, to_sigma: float) -> float:
        return sigma_difference(from_sigma, to_sigma)
