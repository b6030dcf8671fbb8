# Path: config/gallery_config.py
# Purpose: Load the site-wide gallery display configuration.
# Layer: config.
# Details: Reads pluto-config.json once and falls back to fixed defaults on read or parse failure.

from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)


class GalleryElementAlignment(str, Enum):
    CENTER = "center"
    LEFT = "left"
    RIGHT = "right"


class DescriptionPosition(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"


class GalleryStyle(str, Enum):
    LARGE = "large"
    THUMBNAILS = "thumbnails"


class GalleryConfig(BaseModel):
    """Display configuration consumed by the page-rendering layer."""

    gallery_name: str = Field(default="Pluto", description="Site-wide gallery title.")
    gallery_alignment: GalleryElementAlignment = Field(default=GalleryElementAlignment.CENTER)
    gallery_style: GalleryStyle = Field(default=GalleryStyle.LARGE)
    description_position: DescriptionPosition = Field(default=DescriptionPosition.TOP)
    description_alignment: GalleryElementAlignment = Field(default=GalleryElementAlignment.CENTER)
    base_path: Optional[str] = Field(default=None, description="Optional URL prefix when the site is not served from /.")

    def to_dict(self) -> dict:
        return self.model_dump(mode="json")


def load_gallery_config(path: Path | str) -> GalleryConfig:
    """Load the gallery config, returning defaults when the file cannot be used."""

    cfg_path = Path(path)
    try:
        payload = json.loads(cfg_path.read_text(encoding="utf-8"))
        return GalleryConfig.model_validate(payload)
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        logger.warning("Error reading gallery config file %s, using defaults: %s", cfg_path, exc)
        return GalleryConfig()


__all__ = [
    "DescriptionPosition",
    "GalleryConfig",
    "GalleryElementAlignment",
    "GalleryStyle",
    "load_gallery_config",
]
