# Copyright 2025 Thousand Brains Project
#
# Copyright may exist in Contributors' modifications
# and/or contributions to the work.
#
# Use of this source code is governed by the MIT
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.
from __future__ import annotations

from typing import Any, Iterable, Iterator

from .octave import Octave


class ScaleSpace:
    """Ordered octaves of a scale-space pyramid.

    Octave 0 has the finest resolution; each following octave has half the
    resolution of the previous one.
    """

    __slots__ = ("_octaves",)

    def __init__(self, octaves: Iterable[Octave]) -> None:
        octaves = tuple(octaves)
        if not octaves:
            raise ValueError("A scale-space needs at least one octave")
        self._octaves = octaves

    @property
    def octaves(self) -> tuple[Octave, ...]:
        return self._octaves

    def summary(self) -> list[dict[str, Any]]:
        """Geometry and nominal blur of every octave as plain dicts."""
        return [
            {
                "octave": i,
                "width": octave.width,
                "height": octave.height,
                "base_scale": octave.base_scale,
                "scale_sigmas": octave.scale_sigmas(),
                "dog_sigmas": octave.dog_sigmas(),
            }
            for i, octave in enumerate(self._octaves)
        ]

    def __len__(self) -> int:
        return len(self._octaves)

    def __iter__(self) -> Iterator[Octave]:
        return iter(self._octaves)

    def __getitem__(self, index: int) -> Octave:
        return self._octaves[index]

    def __repr__(self) -> str:
        return f"ScaleSpace(n_octaves={len(self._octaves)})"
