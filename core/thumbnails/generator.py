# Path: core/thumbnails/generator.py
# Purpose: Pre-generate one square thumbnail per gallery folder.
# Layer: core/thumbnails.
# Details: Mirrors the gallery tree under the thumbnail root and skips thumbnails newer than their source.

from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path
from typing import Optional

from PIL import Image, ImageOps
from tqdm import tqdm

from config.settings import AppSettings
from core.errors import GalleryRootNotFoundError
from core.indexing.paths import all_gallery_paths, thumbnail_file_for
from core.indexing.scanner import ImageScanner
from core.models.domain import ThumbnailReport

logger = logging.getLogger(__name__)


class ThumbnailGenerator:
    """Walk the gallery tree and encode a center-cropped JPEG for every folder holding images."""

    def __init__(self, settings: AppSettings, scanner: Optional[ImageScanner] = None) -> None:
        self.settings = settings
        self.scanner = scanner or ImageScanner(settings.image_extensions)

    def run(self, progress: bool = True) -> ThumbnailReport:
        """
        Generate missing or stale thumbnails for the whole tree.

        Per-folder failures are logged and counted; only a missing gallery root is raised.
        """

        root = self.settings.gallery_root
        if not root.is_dir():
            raise GalleryRootNotFoundError(root)
        self.settings.thumbnail_root.mkdir(parents=True, exist_ok=True)

        report = ThumbnailReport()
        folders = [path.lstrip("/") for path in all_gallery_paths(root)[1:]]
        for relative in tqdm(folders, desc="Generating thumbnails", unit="folder", disable=not progress):
            folder = root.joinpath(*relative.split("/"))
            first = self.scanner.first_image(folder)
            if not first:
                continue

            source = folder.joinpath(*first.split("/"))
            target = thumbnail_file_for(self.settings.thumbnail_root, relative)
            try:
                if self.is_up_to_date(source, target):
                    logger.debug("Skipped (up-to-date): %s", target)
                    report.skipped += 1
                    continue
                self.render(source, target)
            except (OSError, ValueError, SyntaxError, RuntimeError, Image.DecompressionBombError) as exc:
                logger.warning("Error generating thumbnail for %s: %s", source, exc)
                report.failed += 1
                continue

            logger.info("Generated thumbnail: %s", target)
            report.generated += 1

        return report

    @staticmethod
    def is_up_to_date(source: Path, target: Path) -> bool:
        """Return True when ``target`` exists and is not older than ``source``."""

        if not target.exists():
            return False
        return target.stat().st_mtime >= source.stat().st_mtime

    def render(self, source: Path, target: Path) -> None:
        """Encode ``source`` as a fixed-size, center-cropped JPEG at ``target``."""

        thumb_settings = self.settings.thumbnail
        target.parent.mkdir(parents=True, exist_ok=True)
        with self._open_source(source) as image:
            image = ImageOps.exif_transpose(image)
            if image.mode in ("RGBA", "LA") or (image.mode == "P" and "transparency" in image.info):
                image = image.convert("RGBA")
                background = Image.new("RGBA", image.size, (255, 255, 255, 255))
                image = Image.alpha_composite(background, image).convert("RGB")
            elif image.mode != "RGB":
                image = image.convert("RGB")
            thumbnail = ImageOps.fit(
                image,
                thumb_settings.size,
                method=Image.Resampling.LANCZOS,
                centering=(0.5, 0.5),
            )
            thumbnail.save(target, "JPEG", quality=thumb_settings.quality, optimize=True)

    @staticmethod
    def _open_source(source: Path) -> Image.Image:
        """Open ``source`` with Pillow, rasterizing SVG files to PNG first."""

        if source.suffix.lower() != ".svg":
            return Image.open(source)
        try:
            import cairosvg
        except ImportError as exc:  # pragma: no cover - runtime dependency
            raise RuntimeError("cairosvg package is required to thumbnail SVG images.") from exc
        return Image.open(BytesIO(cairosvg.svg2png(url=str(source))))


def generate_thumbnails(settings: AppSettings, progress: bool = True) -> ThumbnailReport:
    """Convenience wrapper running a ThumbnailGenerator with default scanning."""

    return ThumbnailGenerator(settings).run(progress=progress)
