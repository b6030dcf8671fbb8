# Path: core/indexing/__init__.py
# Purpose: Package initializer for gallery indexing utilities.
# Layer: core/indexing.
# Details: Exposes the image classifier, recursive scanner, folder indexer, and path enumerator.

from .classifier import IMAGE_EXTENSIONS, is_image
from .gallery_indexer import GalleryIndexer
from .paths import all_gallery_paths
from .scanner import ImageScanner

__all__ = ["IMAGE_EXTENSIONS", "GalleryIndexer", "ImageScanner", "all_gallery_paths", "is_image"]
