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
from pathlib import Path
from typing import Sequence

from hydra import compose, initialize_config_dir
from hydra.utils import instantiate
from omegaconf import DictConfig, OmegaConf

from scalespace.models.factory import ScaleSpaceFactory
from scalespace.models.image import Image
from scalespace.models.scale_space import ScaleSpace

logger = logging.getLogger(__name__)

CONF_DIR = Path(__file__).parent / "conf"


def load_config(
    config_name: str = "default",
    overrides: Sequence[str] | None = None,
) -> DictConfig:
    """Compose a scale-space config from the packaged YAML files.

    Args:
        config_name: Name of a config in ``scalespace/conf`` without extension.
        overrides: Hydra overrides, e.g. ``["scales_per_octave=2"]``.

    Returns:
        The composed config.
    """
    with initialize_config_dir(config_dir=str(CONF_DIR), version_base=None):
        cfg = compose(config_name=config_name, overrides=list(overrides or []))
    logger.debug("Loaded config %s:\n%s", config_name, OmegaConf.to_yaml(cfg))
    return cfg


def create_from_config(image: Image, cfg: DictConfig | None = None) -> ScaleSpace:
    """Create the scale-space of an image with collaborators chosen by a config.

    Args:
        image: Input image.
        cfg: Config with the keys of ``conf/default.yaml``. Defaults to the
            default config.

    Returns:
        The scale-space of ``image``.
    """
    if cfg is None:
        cfg = load_config()
    return ScaleSpaceFactory().create(
        image,
        scales_per_octave=cfg.scales_per_octave,
        initial_blur=cfg.initial_blur,
        target_blur=cfg.target_blur,
        up_scaler=instantiate(cfg.up_scaler),
        down_scaler=instantiate(cfg.down_scaler),
        low_pass_filter=instantiate(cfg.low_pass_filter),
        octave_factory=instantiate(cfg.octave_factory),
    )
