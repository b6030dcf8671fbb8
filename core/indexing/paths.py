# Path: core/indexing/paths.py
# Purpose: Derive and enumerate root-relative gallery paths.
# Layer: core/indexing.
# Details: Paths are always "/"-separated regardless of os.sep; the thumbnail cache mirrors them.

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import FrozenSet, List, Optional

from core.models.domain import Breadcrumb

logger = logging.getLogger(__name__)

ROOT_PATH = "/"


def normalize_gallery_path(gallery_path: str) -> str:
    """Turn a request path into a relative subtree path ("" for the root)."""

    if gallery_path == ROOT_PATH:
        return ""
    return "/".join(part for part in gallery_path.split("/") if part)


def resolve_gallery_dir(root: Path, clean_path: str) -> Optional[Path]:
    """Map a normalized path onto the filesystem, refusing segments that would leave ``root``."""

    if not clean_path:
        return root
    parts = clean_path.split("/")
    if any(part in (".", "..") for part in parts):
        return None
    return root.joinpath(*parts)


def enter_folder(folder: Path, ancestors: FrozenSet[str]) -> Optional[FrozenSet[str]]:
    """Return ``ancestors`` extended with ``folder``, or None if ``folder`` loops back onto one of them."""

    real = os.path.realpath(folder)
    if real in ancestors:
        logger.warning("Skipping symlink loop at %s", folder)
        return None
    return ancestors | {real}


def join_url(prefix: str, relative: str) -> str:
    return f"{prefix.rstrip('/')}/{relative}"


def parent_path(clean_path: str) -> Optional[str]:
    if not clean_path:
        return None
    parts = clean_path.split("/")[:-1]
    return f"/{'/'.join(parts)}" if parts else ROOT_PATH


def build_breadcrumbs(clean_path: str, root_name: str = "Gallery") -> List[Breadcrumb]:
    """Return the breadcrumb chain from the root down to ``clean_path``."""

    crumbs = [Breadcrumb(name=root_name, path=ROOT_PATH)]
    current = ""
    for part in clean_path.split("/") if clean_path else []:
        current = f"{current}/{part}" if current else part
        crumbs.append(Breadcrumb(name=part, path=f"/{current}"))
    return crumbs


def thumbnail_file_for(thumbnail_root: Path, relative: str) -> Path:
    """Return the cached thumbnail location mirroring the folder ``relative``."""

    parts = relative.split("/")
    return thumbnail_root.joinpath(*parts[:-1], f"{parts[-1]}.jpg")


def all_gallery_paths(root: Path | str) -> List[str]:
    """Return "/" followed by every folder under ``root`` in depth-first pre-order."""

    paths = [ROOT_PATH]
    root = Path(root)
    if root.exists():
        _collect_folders(root, "", paths, frozenset())
    return paths


def _collect_folders(folder: Path, relative: str, paths: List[str], ancestors: FrozenSet[str]) -> None:
    ancestors = enter_folder(folder, ancestors)
    if ancestors is None:
        return
    try:
        with os.scandir(folder) as entries:
            subfolders = [entry.name for entry in entries if entry.is_dir()]
    except OSError as exc:
        logger.warning("Error scanning directory %s: %s", folder, exc)
        return
    for name in subfolders:
        child = f"{relative}/{name}" if relative else name
        paths.append(f"/{child}")
        _collect_folders(folder / name, child, paths, ancestors)
