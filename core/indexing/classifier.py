# Path: core/indexing/classifier.py
# Purpose: Decide whether a filename denotes a gallery image.
# Layer: core/indexing.
# Details: Pure extension lookup, no filesystem access.

from __future__ import annotations

import os
from typing import AbstractSet

from config.settings import DEFAULT_IMAGE_EXTENSIONS

IMAGE_EXTENSIONS = DEFAULT_IMAGE_EXTENSIONS


def is_image(filename: str, extensions: AbstractSet[str] = IMAGE_EXTENSIONS) -> bool:
    """Return True when the lowercased extension of ``filename`` is a recognized image extension."""

    _, ext = os.path.splitext(filename)
    return ext.lower() in extensions
