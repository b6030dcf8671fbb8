# Path: core/service.py
# Purpose: Expose the gallery query surface used by page rendering, export, and the HTTP API.
# Layer: core.
# Details: Bundles settings, the loaded display config, the folder indexer, and path enumeration.

from __future__ import annotations

from typing import List, Optional

from config.gallery_config import GalleryConfig, load_gallery_config
from config.settings import AppSettings
from core.indexing.gallery_indexer import GalleryIndexer
from core.indexing.paths import all_gallery_paths
from core.models.domain import GalleryData


class GalleryService:
    """High-level service bridging the API and export layers with the gallery indexer."""

    def __init__(
        self,
        settings: Optional[AppSettings] = None,
        config: Optional[GalleryConfig] = None,
        indexer: Optional[GalleryIndexer] = None,
    ) -> None:
        self.settings = settings or AppSettings()
        self.config = config or load_gallery_config(self.settings.config_path)
        self.indexer = indexer or GalleryIndexer(self.settings)

    def get_gallery_data(self, gallery_path: str) -> GalleryData:
        """Return a fresh snapshot of the folder at ``gallery_path``."""

        return self.indexer.index(gallery_path)

    def get_gallery_config(self) -> GalleryConfig:
        return self.config

    def get_all_gallery_paths(self) -> List[str]:
        """Return every gallery page path, root first."""

        return all_gallery_paths(self.settings.gallery_root)
