# Path: core/models/__init__.py
# Purpose: Package initializer for domain model definitions.
# Layer: core/models.
# Details: Exposes dataclasses used across indexing, thumbnail, export, and API layers.

from .domain import Breadcrumb, GalleryData, GalleryItem, ThumbnailReport

__all__ = ["Breadcrumb", "GalleryData", "GalleryItem", "ThumbnailReport"]
