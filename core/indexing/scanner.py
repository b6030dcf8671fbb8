# Path: core/indexing/scanner.py
# Purpose: Recursive folder scans used for folder thumbnails and image counts.
# Layer: core/indexing.
# Details: Depth-first pre-order walks in directory-listing order; unreadable folders count as empty.

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import AbstractSet, FrozenSet, List, Optional

from .classifier import IMAGE_EXTENSIONS, is_image
from .paths import enter_folder

logger = logging.getLogger(__name__)


class ImageScanner:
    """Scan gallery folders for images."""

    def __init__(self, extensions: AbstractSet[str] = IMAGE_EXTENSIONS) -> None:
        self.extensions = extensions

    def is_image(self, filename: str) -> bool:
        return is_image(filename, self.extensions)

    def first_image(self, folder: Path) -> Optional[str]:
        """Return the folder-relative path of the first image found, or None.

        Entries are visited in listing order; a subfolder is searched completely
        before the next sibling, and a hit inside it is returned as ``"<sub>/<image>"``.
        """

        return self._first_image(Path(folder), frozenset())

    def image_count(self, folder: Path) -> int:
        """Return the number of images in ``folder`` and all of its subfolders."""

        return self._image_count(Path(folder), frozenset())

    def _first_image(self, folder: Path, ancestors: FrozenSet[str]) -> Optional[str]:
        ancestors = enter_folder(folder, ancestors)
        if ancestors is None:
            return None
        try:
            with os.scandir(folder) as entries:
                for entry in entries:
                    if entry.is_file() and self.is_image(entry.name):
                        return entry.name
                    if entry.is_dir():
                        found = self._first_image(Path(entry.path), ancestors)
                        if found:
                            return f"{entry.name}/{found}"
        except OSError as exc:
            logger.warning("Error reading folder %s: %s", folder, exc)
        return None

    def _image_count(self, folder: Path, ancestors: FrozenSet[str]) -> int:
        ancestors = enter_folder(folder, ancestors)
        if ancestors is None:
            return 0
        count = 0
        subfolders: List[Path] = []
        try:
            with os.scandir(folder) as entries:
                for entry in entries:
                    if entry.is_dir():
                        subfolders.append(Path(entry.path))
                    elif entry.is_file() and self.is_image(entry.name):
                        count += 1
        except OSError as exc:
            logger.warning("Error reading folder %s: %s", folder, exc)
            return 0
        return count + sum(self._image_count(subfolder, ancestors) for subfolder in subfolders)
