# Path: config/__init__.py
# Purpose: Package initializer for configuration module.
# Layer: config.
# Details: Exposes application settings and the gallery display config loader.

from .gallery_config import (
    DescriptionPosition,
    GalleryConfig,
    GalleryElementAlignment,
    GalleryStyle,
    load_gallery_config,
)
from .settings import AppSettings, ThumbnailSettings

__all__ = [
    "AppSettings",
    "DescriptionPosition",
    "GalleryConfig",
    "GalleryElementAlignment",
    "GalleryStyle",
    "ThumbnailSettings",
    "load_gallery_config",
]
