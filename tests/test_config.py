import json

import pytest

from config import (
    AppSettings,
    DescriptionPosition,
    GalleryConfig,
    GalleryElementAlignment,
    GalleryStyle,
    load_gallery_config,
)


def test_missing_file_returns_defaults(tmp_path):
    config = load_gallery_config(tmp_path / "absent.json")

    assert config == GalleryConfig()
    assert config.gallery_name == "Pluto"
    assert config.gallery_alignment is GalleryElementAlignment.CENTER
    assert config.description_position is DescriptionPosition.TOP
    assert config.description_alignment is GalleryElementAlignment.CENTER
    assert config.base_path is None


@pytest.mark.parametrize(
    "content",
    ["{not json", '{"gallery_alignment": "diagonal"}', '["a", "list"]'],
)
def test_unusable_file_returns_defaults(tmp_path, content):
    path = tmp_path / "pluto-config.json"
    path.write_text(content, encoding="utf-8")

    assert load_gallery_config(path) == GalleryConfig()


def test_valid_file_is_loaded(tmp_path):
    path = tmp_path / "pluto-config.json"
    path.write_text(
        json.dumps(
            {
                "gallery_name": "Travels",
                "gallery_alignment": "left",
                "gallery_style": "thumbnails",
                "description_position": "bottom",
                "description_alignment": "right",
                "base_path": "/photos",
            }
        ),
        encoding="utf-8",
    )

    config = load_gallery_config(path)

    assert config.gallery_name == "Travels"
    assert config.gallery_alignment is GalleryElementAlignment.LEFT
    assert config.gallery_style is GalleryStyle.THUMBNAILS
    assert config.description_position is DescriptionPosition.BOTTOM
    assert config.description_alignment is GalleryElementAlignment.RIGHT
    assert config.to_dict()["base_path"] == "/photos"


def test_missing_keys_take_defaults(tmp_path):
    path = tmp_path / "pluto-config.json"
    path.write_text('{"gallery_name": "Mine"}', encoding="utf-8")

    config = load_gallery_config(path)

    assert config.gallery_name == "Mine"
    assert config.gallery_style is GalleryStyle.LARGE


def test_settings_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("PLUTO_GALLERY_ROOT", str(tmp_path / "g"))
    monkeypatch.setenv("PLUTO_LOG_LEVEL", "DEBUG")
    monkeypatch.delenv("PLUTO_THUMBNAIL_ROOT", raising=False)

    settings = AppSettings.from_env(log_level="WARNING", thumbnail_root=None)

    assert settings.gallery_root == tmp_path / "g"
    assert settings.log_level == "WARNING"
    assert settings.thumbnail.size == (400, 400)
