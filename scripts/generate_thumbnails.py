# Path: scripts/generate_thumbnails.py
# Purpose: CLI tool to pre-generate folder thumbnails for the gallery.
# Layer: scripts.
# Details: Exits with status 1 when the gallery root is missing; per-folder failures are only logged.

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Ensure project root is on sys.path when running as a script.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config import AppSettings, ThumbnailSettings
from core.errors import GalleryRootNotFoundError
from core.logging_utils import configure_logging
from core.thumbnails import ThumbnailGenerator

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate folder thumbnails for the Pluto gallery")
    parser.add_argument("--gallery-root", type=Path, default=None, help="Folder containing the gallery tree")
    parser.add_argument("--thumbnail-root", type=Path, default=None, help="Folder receiving generated thumbnails")
    parser.add_argument("--size", type=int, default=400, help="Edge length of the square thumbnails in pixels")
    parser.add_argument("--quality", type=int, default=85, help="JPEG quality of the thumbnails")
    parser.add_argument("--log-level", type=str, default=None, help="Logging level (DEBUG, INFO, WARNING...)")
    parser.add_argument("--no-progress", action="store_true", help="Disable the progress bar")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run thumbnail generation over the gallery tree and return the exit status."""

    args = build_parser().parse_args(argv)
    settings = AppSettings.from_env(
        gallery_root=args.gallery_root,
        thumbnail_root=args.thumbnail_root,
        log_level=args.log_level,
        thumbnail=ThumbnailSettings(width=args.size, height=args.size, quality=args.quality),
    )
    configure_logging(settings.log_level)

    logger.info("Generating thumbnails...")
    try:
        report = ThumbnailGenerator(settings).run(progress=not args.no_progress)
    except GalleryRootNotFoundError as exc:
        logger.error("%s", exc)
        return 1

    logger.info(
        "Thumbnail generation complete: %d generated, %d up-to-date, %d failed",
        report.generated,
        report.skipped,
        report.failed,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
