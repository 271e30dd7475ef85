# Copyright 2025 Thousand Brains Project
#
# Copyright may exist in Contributors' modifications
# and/or contributions to the work.
#
# Use of this source code is governed by the MIT
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.
from __future__ import annotations

from typing import Sequence

from .image import Image


class Octave:
    """A scale interval of the scale-space over which the scale doubles.

    All images in an octave share the same width and height. The scale-image
    with index ``i`` has nominal blur ``b * 2 ** (i / s)`` and the
    difference-of-Gaussian image with index ``i`` has nominal blur
    ``b * 2 ** ((i + 0.5) / s)``, where ``b`` is the base scale and ``s`` the
    number of scales per octave.
    """

    __slots__ = ("_base_scale", "_scale_images", "_dogs")

    def __init__(
        self,
        base_scale: float,
        scale_images: Sequence[Image],
        dogs: Sequence[Image],
    ) -> None:
        """Initialize the octave.

        Args:
            base_scale: Scale of the scale-image with the lowest scale.
            scale_images: Scale-images, ordered by increasing scale.
            dogs: Difference-of-Gaussian images. Entry ``i`` is the difference
                between scale-images ``i + 1`` and ``i``.

        Raises:
            TypeError: If ``scale_images`` or ``dogs`` is None.
            ValueError: If there are fewer than four scale-images, if there is
                not exactly one DoG image less than scale-images, if the images
                differ in size or if ``base_scale`` is not strictly positive.
        """
        if scale_images is None:
            raise TypeError("scale_images must not be None")
        if dogs is None:
            raise TypeError("dogs must not be None")
        if not base_scale > 0.0:
            raise ValueError(f"base_scale must be greater than 0, got {base_scale}")
        scale_images = tuple(scale_images)
        dogs = tuple(dogs)
        if len(scale_images) < 4:
            raise ValueError(
                f"Need at least four scale-images, got {len(scale_images)}"
            )
        if len(dogs) != len(scale_images) - 1:
            raise ValueError(
                "Need exactly one DoG image less than scale-images, got "
                f"{len(dogs)} DoG images for {len(scale_images)} scale-images"
            )

        shape = scale_images[0].shape
        for i, image in enumerate(scale_images):
            if image.shape != shape:
                raise ValueError(
                    f"scale-image {i} has a different size than the first scale-image"
                )
        for i, image in enumerate(dogs):
            if image.shape != shape:
                raise ValueError(
                    f"DoG image {i} has a different size than the first scale-image"
                )

        self._base_scale = float(base_scale)
        self._scale_images = scale_images
        self._dogs = dogs

    @property
    def base_scale(self) -> float:
        """Scale of the scale-image with the lowest scale in this octave."""
        return self._base_scale

    @property
    def scales_per_octave(self) -> int:
        return len(self._scale_images) - 3

    @property
    def scale_images(self) -> tuple[Image, ...]:
        """The ``scales_per_octave + 3`` scale-images."""
        return self._scale_images

    @property
    def difference_of_gaussians(self) -> tuple[Image, ...]:
        """The ``scales_per_octave + 2`` difference-of-Gaussian images."""
        return self._dogs

    @property
    def width(self) -> int:
        return self._scale_images[0].width

    @property
    def height(self) -> int:
        return self._scale_images[0].height

    def scale_sigmas(self) -> list[float]:
        """Nominal blur of each scale-image."""
        s = self.scales_per_octave
        return [
            self._base_scale * 2.0 ** (i / s) for i in range(len(self._scale_images))
        ]

    def dog_sigmas(self) -> list[float]:
        """Nominal blur of each DoG image.

        This is the geometric mean of the blur of the two scale-images the DoG
        was taken from.
        """
        s = self.scales_per_octave
        return [self._base_scale * 2.0 ** ((i + 0.5) / s) for i in range(len(self._dogs))]

    def __repr__(self) -> str:
        return (
            f"Octave(base_scale={self._base_scale}, "
            f"scales_per_octave={self.scales_per_octave}, "
            f"width={self.width}, height={self.height})"
        )


class DefaultOctaveFactory:
    """Octave factory that uses the validating ``Octave`` constructor."""

    def create_octave(
        self,
        base_scale: float,
        scale_images: Sequence[Image],
        dogs: Sequence[Image],
    ) -> Octave:
        return Octave(base_scale, scale_images, dogs)
