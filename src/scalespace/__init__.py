# Copyright 2025 Thousand Brains Project
#
# Copyright may exist in Contributors' modifications
# and/or contributions to the work.
#
# Use of this source code is governed by the MIT
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

from .models import (
    DefaultOctaveFactory,
    Image,
    Octave,
    ScaleSpace,
    ScaleSpaceFactory,
    create_scale_space,
)

__all__ = [
    "DefaultOctaveFactory",
    "Image",
    "Octave",
    "ScaleSpace",
    "ScaleSpaceFactory",
    "create_scale_space",
]
