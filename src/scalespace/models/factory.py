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
import numbers
from pprint import pformat

from .image import Image
from .scale_space import ScaleSpace
from .strategies import DownScaler, LowPassFilter, OctaveFactory, UpScaler

logger = logging.getLogger(__name__)


class ScaleSpaceFactory:
    """Builds a Gaussian scale-space pyramid following Lowe 2004.

    The input image is upscaled once, then each octave is built by a ladder of
    incremental Gaussian blurs. The scale-image at twice the base scale is
    downscaled to seed the next octave, which therefore starts at the same
    nominal blur as the previous one. Octaves are added until the down scaler
    returns an image without pixels.

    The factory holds no state, so one instance can be shared between threads.
    """

    def create(
        self,
        image: Image,
        scales_per_octave: int,
        initial_blur: float,
        target_blur: float,
        up_scaler: UpScaler,
        down_scaler: DownScaler,
        low_pass_filter: LowPassFilter,
        octave_factory: OctaveFactory,
    ) -> ScaleSpace:
        """Create the scale-space of an image.

        Args:
            image: Input image.
            scales_per_octave: Number of blur intervals per octave. Each octave
                gets ``scales_per_octave + 3`` scale-images.
            initial_blur: Nominal blur already present in ``image``.
            target_blur: Nominal blur of the first scale-image of each octave.
                Must be greater than ``2 * initial_blur``, since upscaling
                doubles the blur of the input image.
            up_scaler: Doubles the resolution of the input image.
            down_scaler: Halves the resolution between octaves.
            low_pass_filter: Gaussian filter used for the blur ladder.
            octave_factory: Freezes the images of each octave.

        Returns:
            The scale-space, with at least one octave.

        Raises:
            TypeError: If the image or one of the collaborators is None, or if
                ``scales_per_octave`` is not an int.
            ValueError: If ``scales_per_octave < 1``, ``initial_blur`` is not
                greater than 0 or ``target_blur`` is not greater than
                ``2 * initial_blur``. NaN blurs are rejected.
        """
        for name, value in (
            ("image", image),
            ("up_scaler", up_scaler),
            ("down_scaler", down_scaler),
            ("low_pass_filter", low_pass_filter),
            ("octave_factory", octave_factory),
        ):
            if value is None:
                raise TypeError(f"{name} must not be None")
        if isinstance(scales_per_octave, bool) or not isinstance(
            scales_per_octave, numbers.Integral
        ):
            raise TypeError(
                f"scales_per_octave must be an int, got {scales_per_octave!r}"
            )
        if scales_per_octave < 1:
            raise ValueError(
                f"scales_per_octave must be at least 1, got {scales_per_octave}"
            )
        # NaN fails both comparisons.
        if not initial_blur > 0.0:
            raise ValueError(f"initial_blur must be greater than 0, got {initial_blur}")
        if not target_blur > 2.0 * initial_blur:
            raise ValueError(
                "target_blur must be greater than twice initial_blur, got "
                f"target_blur={target_blur} and initial_blur={initial_blur}"
            )

        logger.debug(
            "Creating scale-space for %r: scales_per_octave=%d, initial_blur=%g, "
            "target_blur=%g",
            image,
            scales_per_octave,
            initial_blur,
            target_blur,
        )

        # Upscaling spreads the same physical blur over twice as many pixels.
        upscaled = up_scaler.up_scale(image)
        upscaled_blur = 2.0 * initial_blur
        base = low_pass_filter.filter(
            upscaled, low_pass_filter.sigma_difference(upscaled_blur, target_blur)
        )

        octaves = []
        while True:
            scale_images = self._blur_ladder(
                base, scales_per_octave, target_blur, low_pass_filter
            )
            dogs = [
                scale_images[i + 1] - scale_images[i]
                for i in range(len(scale_images) - 1)
            ]
            octave = octave_factory.create_octave(target_blur, scale_images, dogs)
            octaves.append(octave)
            logger.debug(
                "Octave %d: %dx%d", len(octaves) - 1, octave.width, octave.height
            )

            # The scale-image at index s has twice the base blur. Halving the
            # resolution brings it back to the base blur.
            base = down_scaler.down_scale(scale_images[scales_per_octave])
            if base.width <= 0 or base.height <= 0:
                logger.debug(
                    "Stopping after %d octaves, next octave would be %dx%d",
                    len(octaves),
                    base.width,
                    base.height,
                )
                break

        scale_space = ScaleSpace(octaves)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(pformat(scale_space.summary()))
        return scale_space

    def _blur_ladder(
        self,
        base: Image,
        scales_per_octave: int,
        base_blur: float,
        low_pass_filter: LowPassFilter,
    ) -> list[Image]:
        """Blur ``base`` up the ``scales_per_octave + 3`` scale-images of an octave."""
        scale_images = [base]
        sigma_prev = base_blur
        for scale in range(1, scales_per_octave + 3):
            sigma_total = base_blur * 2.0 ** (scale / scales_per_octave)
            sigma_diff = low_pass_filter.sigma_difference(sigma_prev, sigma_total)
            scale_images.append(low_pass_filter.filter(scale_images[-1], sigma_diff))
            sigma_prev = sigma_total
        return scale_images


_default_factory = ScaleSpaceFactory()


def create_scale_space(
    image: Image,
    scales_per_octave: int,
    initial_blur: float,
    target_blur: float,
    up_scaler: UpScaler,
    down_scaler: DownScaler,
    low_pass_filter: LowPassFilter,
    octave_factory: OctaveFactory,
) -> ScaleSpace:
    """Create a scale-space with a shared ``ScaleSpaceFactory``.

    See ``ScaleSpaceFactory.create``.
    """
    return _default_factory.create(
        image,
        scales_per_octave,
        initial_blur,
        target_blur,
        up_scaler,
        down_scaler,
        low_pass_filter,
        octave_factory,
    )
