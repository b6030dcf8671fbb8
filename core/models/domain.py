# Path: core/models/domain.py
# Purpose: Define domain models shared across indexing, export, and API layers.
# Layer: core/models.
# Details: Lightweight dataclasses with to_dict() producing the JSON shape consumed by page renderers.

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class GalleryItem:
    """A folder or image entry listed inside a gallery folder."""

    name: str
    path: str
    is_folder: bool
    thumbnail: Optional[str] = None
    count: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"name": self.name, "path": self.path, "isFolder": self.is_folder}
        if self.thumbnail is not None:
            payload["thumbnail"] = self.thumbnail
        if self.count is not None:
            payload["count"] = self.count
        return payload


@dataclass(frozen=True)
class Breadcrumb:
    """One step of the root-to-current navigation chain."""

    name: str
    path: str

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "path": self.path}


@dataclass
class GalleryData:
    """Snapshot of one gallery folder, recomputed from the filesystem on every call."""

    current_path: str
    description: str = ""
    folders: List[GalleryItem] = field(default_factory=list)
    images: List[GalleryItem] = field(default_factory=list)
    parent_path: Optional[str] = None
    breadcrumbs: List[Breadcrumb] = field(default_factory=list)
    images_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "currentPath": self.current_path,
            "description": self.description,
            "folders": [item.to_dict() for item in self.folders],
            "images": [item.to_dict() for item in self.images],
            "parentPath": self.parent_path,
            "breadcrumbs": [crumb.to_dict() for crumb in self.breadcrumbs],
            "imagesCount": self.images_count,
        }


@dataclass
class ThumbnailReport:
    """Outcome counters of one thumbnail generation run."""

    generated: int = 0
    skipped: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.generated + self.skipped + self.failed
