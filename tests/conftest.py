from pathlib import Path

import pytest
from PIL import Image

from config import AppSettings


@pytest.fixture
def gallery_root(tmp_path: Path) -> Path:
    root = tmp_path / "galleries"
    root.mkdir()
    return root


@pytest.fixture
def settings(tmp_path: Path, gallery_root: Path) -> AppSettings:
    return AppSettings(
        gallery_root=gallery_root,
        thumbnail_root=tmp_path / "thumbnails",
        config_path=tmp_path / "pluto-config.json",
    )


@pytest.fixture
def make_image():
    """Return a helper writing a small solid-color image (format from the extension)."""

    def _make(path: Path, size=(64, 48), color=(200, 30, 30), mode="RGB") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.new(mode, size, color).save(path)
        return path

    return _make


@pytest.fixture
def nested_tree(gallery_root: Path, make_image) -> Path:
    """Root with A/x.jpg and A/B/y.png."""

    make_image(gallery_root / "A" / "x.jpg")
    make_image(gallery_root / "A" / "B" / "y.png")
    return gallery_root
