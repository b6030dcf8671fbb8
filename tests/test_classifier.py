import pytest

from core.indexing.classifier import is_image


@pytest.mark.parametrize(
    "filename",
    ["photo.jpg", "photo.JPEG", "scan.Png", "anim.gif", "pic.webp", "logo.SVG", "a.b.c.jpg"],
)
def test_recognized_extensions_are_images(filename):
    assert is_image(filename)


@pytest.mark.parametrize(
    "filename",
    ["gallery.md", "notes.txt", "archive.jpg.zip", "jpg", ".jpg", "folder", "raw.tiff", ""],
)
def test_other_names_are_not_images(filename):
    assert not is_image(filename)


def test_custom_extension_set():
    assert is_image("scan.tiff", {".tiff"})
    assert not is_image("photo.jpg", {".tiff"})
