# Path: core/thumbnails/__init__.py
# Purpose: Package initializer for the offline thumbnail cache builder.
# Layer: core/thumbnails.
# Details: Exposes ThumbnailGenerator and a one-call helper.

from .generator import ThumbnailGenerator, generate_thumbnails

__all__ = ["ThumbnailGenerator", "generate_thumbnails"]
