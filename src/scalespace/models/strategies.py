# Copyright 2025 Thousand Brains Project
#
# Copyright may exist in Contributors' modifications
# and/or contributions to the work.
#
# Use of this source code is governed by the MIT
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

from .image import Image

if TYPE_CHECKING:
    from .octave import Octave


class UpScaler(Protocol):
    def up_scale(self, image: Image) -> Image:
        """Double the linear resolution of an image."""
        ...


class DownScaler(Protocol):
    def down_scale(self, image: Image) -> Image:
        """Halve the linear resolution of an image.

        A result with zero width or height means the image is too small to be
        halved again.
        """
        ...


class LowPassFilter(Protocol):
    def filter(self, image: Image, sigma: float) -> Image:
        """Blur an image with a Gaussian of standard deviation ``sigma`` pixels."""
        ...

    def sigma_difference(self, from_sigma: float, to_sigma: float) -> float:
        """Sigma to pass to ``filter`` to take a blur of ``from_sigma`` to ``to_sigma``."""
        ...


class OctaveFactory(Protocol):
    def create_octave(
        self,
        base_scale: float,
        scale_images: Sequence[Image],
        dogs: Sequence[Image],
    ) -> Octave: ...
