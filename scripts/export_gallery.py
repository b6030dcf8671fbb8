# Path: scripts/export_gallery.py
# Purpose: CLI tool to export gallery metadata as static JSON for every gallery page.
# Layer: scripts.
# Details: Writes index.json per enumerated path plus config.json and paths.json at the output root.

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

# Ensure project root is on sys.path when running as a script.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config import AppSettings
from core.errors import GalleryRootNotFoundError
from core.logging_utils import configure_logging
from core.service import GalleryService

logger = logging.getLogger(__name__)


def _write_json(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")


def export_gallery(service: GalleryService, output_dir: Path) -> List[str]:
    """Write one JSON document per gallery path under ``output_dir`` and return the paths."""

    root = service.settings.gallery_root
    if not root.is_dir():
        raise GalleryRootNotFoundError(root)

    paths = service.get_all_gallery_paths()
    for gallery_path in paths:
        relative = gallery_path.strip("/")
        target = output_dir.joinpath(*relative.split("/"), "index.json") if relative else output_dir / "index.json"
        _write_json(target, service.get_gallery_data(gallery_path).to_dict())

    _write_json(output_dir / "config.json", service.get_gallery_config().to_dict())
    _write_json(output_dir / "paths.json", paths)
    return paths


def main(argv: Optional[List[str]] = None) -> int:
    """Export the gallery tree and return the exit status."""

    parser = argparse.ArgumentParser(description="Export Pluto gallery metadata as JSON")
    parser.add_argument("--gallery-root", type=Path, default=None, help="Folder containing the gallery tree")
    parser.add_argument("--thumbnail-root", type=Path, default=None, help="Folder holding generated thumbnails")
    parser.add_argument("--config", type=Path, default=None, help="Path to pluto-config.json")
    parser.add_argument("--output", type=Path, default=Path("dist/gallery"), help="Output folder for JSON files")
    parser.add_argument("--log-level", type=str, default=None, help="Logging level (DEBUG, INFO, WARNING...)")
    args = parser.parse_args(argv)

    settings = AppSettings.from_env(
        gallery_root=args.gallery_root,
        thumbnail_root=args.thumbnail_root,
        config_path=args.config,
        log_level=args.log_level,
    )
    configure_logging(settings.log_level)

    try:
        paths = export_gallery(GalleryService(settings), args.output)
    except GalleryRootNotFoundError as exc:
        logger.error("%s", exc)
        return 1

    logger.info("Exported %d gallery pages into %s", len(paths), args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
