# Copyright 2025 Thousand Brains Project
#
# Copyright may exist in Contributors' modifications
# and/or contributions to the work.
#
# Use of this source code is governed by the MIT
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.
from __future__ import annotations

import numpy as np
import pytest
from hydra.utils import instantiate

from scalespace.config import create_from_config, load_config
from scalespace.models.filters import GaussianLowPassFilter, ScipyGaussianLowPassFilter
from scalespace.models.image import Image
from scalespace.models.octave import DefaultOctaveFactory
from scalespace.models.resampling import HalvingDownScaler, InterpolatingUpScaler


@pytest.fixture
def image() -> Image:
    return Image(np.random.default_rng(7).random((40, 60)))


class TestLoadConfig:
    def test_default(self):
        cfg = load_config()
        assert cfg.scales_per_octave == 3
        assert cfg.initial_blur == 0.5
        assert cfg.target_blur == 1.6
        assert cfg.target_blur > 2 * cfg.initial_blur

    def test_default_collaborators(self):
        cfg = load_config()
        assert isinstance(instantiate(cfg.up_scaler), InterpolatingUpScaler)
        down_scaler = instantiate(cfg.down_scaler)
        assert isinstance(down_scaler, HalvingDownScaler)
        assert down_scaler.min_size == 8
        assert isinstance(instantiate(cfg.low_pass_filter), GaussianLowPassFilter)
        assert isinstance(instantiate(cfg.octave_factory), DefaultOctaveFactory)

    def test_overrides(self):
        cfg = load_config(
            overrides=["scales_per_octave=2", "up_scaler.interpolation=cubic"]
        )
        assert cfg.scales_per_octave == 2
        assert instantiate(cfg.up_scaler).interpolation == "cubic"

    def test_scipy_config(self):
        cfg = load_config("scipy")
        assert isinstance(instantiate(cfg.low_pass_filter), ScipyGaussianLowPassFilter)
        assert cfg.scales_per_octave == 3


class TestCreateFromConfig:
    def test_default(self, image):
        scale_space = create_from_config(image)
        # 80x120 after upscaling, stopping before an octave narrower than 8 pixels.
        assert [(octave.height, octave.width) for octave in scale_space] == [
            (80, 120),
            (40, 60),
            (20, 30),
            (10, 15),
        ]
        for octave in scale_space:
            assert octave.scales_per_octave == 3
            assert octave.base_scale == pytest.approx(1.6)

    def test_overridden_config(self, image):
        cfg = load_config(overrides=["scales_per_octave=1", "down_scaler.min_size=16"])
        scale_space = create_from_config(image, cfg)
        assert len(scale_space) == 3
        assert all(len(octave.scale_images) == 4 for octave in scale_space)

    def test_invalid_blur_in_config(self, image):
        cfg = load_config(overrides=["target_blur=0.9"])
        with pytest.raises(ValueError, match="target_blur"):
            create_from_config(image, cfg)
