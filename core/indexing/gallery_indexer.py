# Path: core/indexing/gallery_indexer.py
# Purpose: Build the GalleryData snapshot of a single gallery folder.
# Layer: core/indexing.
# Details: Classifies immediate children into folders, images, and the description file; read-only.

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from config.settings import AppSettings
from core.models.domain import GalleryData, GalleryItem

from .paths import (
    build_breadcrumbs,
    join_url,
    normalize_gallery_path,
    parent_path,
    resolve_gallery_dir,
    thumbnail_file_for,
)
from .scanner import ImageScanner
from .sorting import name_sort_key

logger = logging.getLogger(__name__)


class GalleryIndexer:
    """Index one gallery folder at a time against the configured gallery root."""

    def __init__(self, settings: AppSettings, scanner: Optional[ImageScanner] = None) -> None:
        self.settings = settings
        self.scanner = scanner or ImageScanner(settings.image_extensions)

    def index(self, gallery_path: str) -> GalleryData:
        """
        Return the folders, images, description, and navigation of ``gallery_path``.

        External calls:
        - core/indexing/scanner.py::ImageScanner.image_count - recursive count per subfolder.
        - core/indexing/scanner.py::ImageScanner.first_image - thumbnail fallback per subfolder.
        """

        clean_path = normalize_gallery_path(gallery_path)
        data = GalleryData(
            current_path=gallery_path,
            parent_path=parent_path(clean_path),
            breadcrumbs=build_breadcrumbs(clean_path, self.settings.root_breadcrumb_name),
        )

        folder = resolve_gallery_dir(self.settings.gallery_root, clean_path)
        if folder is None or not folder.is_dir():
            return data

        try:
            with os.scandir(folder) as entries:
                children = list(entries)
        except OSError as exc:
            logger.warning("Error reading gallery path %s: %s", folder, exc)
            children = []

        for entry in children:
            relative = f"{clean_path}/{entry.name}" if clean_path else entry.name
            try:
                if entry.is_dir():
                    data.folders.append(self._folder_item(Path(entry.path), entry.name, relative))
                elif entry.is_file() and self.scanner.is_image(entry.name):
                    data.images.append(
                        GalleryItem(
                            name=entry.name,
                            path=join_url(self.settings.gallery_url_prefix, relative),
                            is_folder=False,
                        )
                    )
                elif entry.is_file() and entry.name.lower() == self.settings.description_filename.lower():
                    data.description = Path(entry.path).read_text(encoding="utf-8", errors="replace")
            except OSError as exc:
                logger.warning("Error reading gallery entry %s: %s", entry.path, exc)

        data.folders.sort(key=lambda item: name_sort_key(item.name))
        data.images.sort(key=lambda item: name_sort_key(item.name))
        data.images_count = len(data.images)
        return data

    def _folder_item(self, folder: Path, name: str, relative: str) -> GalleryItem:
        return GalleryItem(
            name=name,
            path=f"/{relative}",
            is_folder=True,
            thumbnail=self._thumbnail_for(folder, relative),
            count=self.scanner.image_count(folder),
        )

    def _thumbnail_for(self, folder: Path, relative: str) -> Optional[str]:
        """Prefer a pre-generated thumbnail, else fall back to the folder's first image."""

        if thumbnail_file_for(self.settings.thumbnail_root, relative).is_file():
            return join_url(self.settings.thumbnail_url_prefix, f"{relative}.jpg")
        first = self.scanner.first_image(folder)
        if first:
            return join_url(self.settings.gallery_url_prefix, f"{relative}/{first}")
        return None
