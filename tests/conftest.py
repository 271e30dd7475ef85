# Copyright 2025 Thousand Brains Project
#
# Copyright may exist in Contributors' modifications
# and/or contributions to the work.
#
# Use of this source code is governed by the MIT
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.
"""Collaborators that record the nominal blur of every image they produce."""

from __future__ import annotations

import math

import pytest

from scalespace.models.image import Image
from scalespace.models.octave import DefaultOctaveFactory


class SigmaTracker:
    """Maps images to their nominal blur. Unknown images have ``default``."""

    def __init__(self, default: float = 0.5):
        self.default = default
        self.sigmas: dict[Image, float] = {}

    def sigma(self, image: Image) -> float:
        return self.sigmas.get(image, self.default)


class GrowingUpScaler:
    """Adds one pixel to each dimension and doubles the blur."""

    def __init__(self, tracker: SigmaTracker):
        self.tracker = tracker

    def up_scale(self, image: Image) -> Image:
        result = Image.zeros(image.height + 1, image.width + 1)
        self.tracker.sigmas[result] = self.tracker.sigma(image) * 2.0
        return result


class ShrinkingDownScaler:
    """Removes one pixel from each dimension and halves the blur."""

    def __init__(self, tracker: SigmaTracker):
        self.tracker = tracker

    def down_scale(self, image: Image) -> Image:
        result = Image.zeros(image.height - 1, image.width - 1)
        self.tracker.sigmas[result] = self.tracker.sigma(image) / 2.0
        return result


class AdditiveFilter:
    """Blurs compose by addition."""

    def __init__(self, tracker: SigmaTracker):
        self.tracker = tracker
        self.calls: list[float] = []

    def filter(self, image: Image, sigma: float) -> Image:
        self.calls.append(sigma)
        result = Image.zeros(image.height, image.width)
        self.tracker.sigmas[result] = self.tracker.sigma(image) + sigma
        return result

    def sigma_difference(self, from_sigma: float, to_sigma: float) -> float:
        return to_sigma - from_sigma


class QuadratureFilter(AdditiveFilter):
    """Blurs compose in quadrature, as Gaussian blurs do."""

    def filter(self, image: Image, sigma: float) -> Image:
        self.calls.append(sigma)
        result = Image.zeros(image.height, image.width)
        self.tracker.sigmas[result] = math.hypot(self.tracker.sigma(image), sigma)
        return result

    def sigma_difference(self, from_sigma: float, to_sigma: float) -> float:
        return math.sqrt(to_sigma**2 - from_sigma**2)


@pytest.fixture
def tracker() -> SigmaTracker:
    return SigmaTracker()


@pytest.fixture
def up_scaler(tracker: SigmaTracker) -> GrowingUpScaler:
    return GrowingUpScaler(tracker)


@pytest.fixture
def down_scaler(tracker: SigmaTracker) -> ShrinkingDownScaler:
    return ShrinkingDownScaler(tracker)


@pytest.fixture
def additive_filter(tracker: SigmaTracker) -> AdditiveFilter:
    return AdditiveFilter(tracker)


@pytest.fixture
def quadrature_filter(tracker: SigmaTracker) -> QuadratureFilter:
    return QuadratureFilter(tracker)


@pytest.fixture
def octave_factory() -> DefaultOctaveFactory:
    return DefaultOctaveFactory()
