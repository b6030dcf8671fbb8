# Path: config/settings.py
# Purpose: Provide typed application configuration models.
# Layer: config.
# Details: Centralizes gallery/thumbnail locations, URL prefixes, and thumbnail encoding parameters.

import os
from pathlib import Path
from typing import FrozenSet

from pydantic import BaseModel, Field

DEFAULT_IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".gif", ".webp", ".svg"})


class ThumbnailSettings(BaseModel):
    """Settings describing the fixed-size folder thumbnails."""

    width: int = Field(default=400, gt=0, description="Target thumbnail width in pixels.")
    height: int = Field(default=400, gt=0, description="Target thumbnail height in pixels.")
    quality: int = Field(default=85, ge=1, le=95, description="JPEG quality used when encoding thumbnails.")

    @property
    def size(self) -> tuple:
        return (self.width, self.height)


class AppSettings(BaseModel):
    """Top-level settings shared by the indexer, thumbnail tool, API, and export script."""

    gallery_root: Path = Field(default=Path("public/galleries"), description="Root folder of the gallery tree.")
    thumbnail_root: Path = Field(default=Path("public/thumbnails"), description="Root folder of generated thumbnails.")
    config_path: Path = Field(default=Path("pluto-config.json"), description="Path to the gallery display config.")
    gallery_url_prefix: str = Field(default="/galleries", description="URL prefix under which gallery images are served.")
    thumbnail_url_prefix: str = Field(default="/thumbnails", description="URL prefix under which thumbnails are served.")
    description_filename: str = Field(default="gallery.md", description="Per-folder description file (case-insensitive).")
    root_breadcrumb_name: str = Field(default="Gallery", description="Label of the first breadcrumb.")
    image_extensions: FrozenSet[str] = Field(default=DEFAULT_IMAGE_EXTENSIONS, description="Recognized image extensions.")
    thumbnail: ThumbnailSettings = Field(default_factory=ThumbnailSettings)
    log_level: str = Field(default="INFO", description="Verbosity level for application logs.")

    @classmethod
    def from_env(cls, **overrides) -> "AppSettings":
        """Instantiate settings, applying PLUTO_* environment variables when set.

        Explicit keyword overrides win over the environment.
        """

        env_map = {
            "gallery_root": "PLUTO_GALLERY_ROOT",
            "thumbnail_root": "PLUTO_THUMBNAIL_ROOT",
            "config_path": "PLUTO_CONFIG_PATH",
            "log_level": "PLUTO_LOG_LEVEL",
        }
        values = {}
        for field_name, env_name in env_map.items():
            value = os.environ.get(env_name)
            if value:
                values[field_name] = value
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)


__all__ = ["AppSettings", "ThumbnailSettings", "DEFAULT_IMAGE_EXTENSIONS"]
