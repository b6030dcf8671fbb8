# Path: core/errors.py
# Purpose: Define the exception types raised by gallery tools.
# Layer: core.
# Details: Filesystem read failures are absorbed where they occur; only a missing gallery root is fatal.

from __future__ import annotations

from pathlib import Path


class GalleryError(Exception):
    """Base class for gallery errors."""


class GalleryRootNotFoundError(GalleryError):
    """Raised when a tool starts against a gallery root that does not exist."""

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root)
        super().__init__(f'Gallery root "{self.root}" does not exist.')
