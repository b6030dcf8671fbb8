# Path: api/app.py
# Purpose: Expose a FastAPI application serving gallery metadata at request time.
# Layer: api.
# Details: Provides health checks plus config, path listing, and per-folder gallery endpoints.

from __future__ import annotations

from typing import Any, Dict, List, Optional

from config.settings import AppSettings
from core.logging_utils import configure_logging
from core.service import GalleryService


def create_app(service: Optional[GalleryService] = None):  # type: ignore[override]
    """Create a FastAPI app instance backed by the provided gallery service."""

    from fastapi import FastAPI

    if service is None:
        settings = AppSettings.from_env()
        configure_logging(settings.log_level)
        service = GalleryService(settings)

    app = FastAPI(title="Pluto Gallery API", version="0.1.0")

    @app.get("/health")
    def health() -> Dict[str, str]:
        """Return a simple health status payload."""

        return {"status": "ok"}

    @app.get("/config")
    def gallery_config() -> Dict[str, Any]:
        return service.get_gallery_config().to_dict()

    @app.get("/paths")
    def gallery_paths() -> List[str]:
        """List every gallery path that has a page."""

        return service.get_all_gallery_paths()

    @app.get("/gallery")
    def gallery_root() -> Dict[str, Any]:
        return service.get_gallery_data("/").to_dict()

    @app.get("/gallery/{gallery_path:path}")
    def gallery(gallery_path: str) -> Dict[str, Any]:
        """Return the folders, images, and navigation of one gallery folder."""

        return service.get_gallery_data(gallery_path or "/").to_dict()

    return app
