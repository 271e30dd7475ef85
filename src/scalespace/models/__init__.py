# Copyright 2025 Thousand Brains Project
#
# Copyright may exist in Contributors' modifications
# and/or contributions to the work.
#
# Use of this source code is governed by the MIT
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

from .factory import ScaleSpaceFactory, create_scale_space
from .filters import GaussianLowPassFilter, ScipyGaussianLowPassFilter
from .image import Image
from .octave import DefaultOctaveFactory, Octave
from .resampling import HalvingDownScaler, InterpolatingUpScaler
from .scale_space import ScaleSpace
from .strategies import DownScaler, LowPassFilter, OctaveFactory, UpScaler

__all__ = [
    "DefaultOctaveFactory",
    "DownScaler",
    "GaussianLowPassFilter",
    "HalvingDownScaler",
    "Image",
    "InterpolatingUpScaler",
    "LowPassFilter",
    "Octave",
    "OctaveFactory",
    "ScaleSpace",
    "ScaleSpaceFactory",
    "ScipyGaussianLowPassFilter",
    "UpScaler",
    "create_scale_space",
]
