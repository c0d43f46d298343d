from __future__ import annotations

import logging
from importlib.resources import files as resource_files
from typing import Optional

import yaml
from pydantic import BaseModel, Field, model_validator

from ..song import DEFAULT_END, DEFAULT_START

logger = logging.getLogger(__name__)


class SongConfig(BaseModel):
    """Range of the countdown, inclusive on both ends."""

    start: int = Field(DEFAULT_START, ge=0, description="Bottles on the wall in the first verse")
    end: int = Field(DEFAULT_END, ge=0, description="Bottles on the wall in the last verse")

    @model_validator(mode="after")
    def check_counts_down(self) -> "SongConfig":
        if self.start < self.end:
            raise ValueError(f"start ({self.start}) must be >= end ({self.end})")
        return self


def load_song_config(path: Optional[str] = None) -> SongConfig:
    """Load the song configuration from YAML.

    If path is None, loads the embedded default resource at
    bottles/config/song.yaml. Missing keys fall back to the model defaults.
    """
    if path is None:
        data = resource_files("bottles.config").joinpath("song.yaml").read_text(encoding="utf-8")
        logger.debug("Loaded embedded song config resource")
    else:
        with open(path, "r", encoding="utf-8") as f:
            data = f.read()
        logger.debug("Loaded song config from path: %s", path)

    raw = yaml.safe_load(data) or {}
    config = SongConfig.model_validate(raw)
    logger.info("Song config: start=%d end=%d", config.start, config.end)
    return config
