import json

from scripts import export_gallery, generate_thumbnails


def test_thumbnail_cli_missing_root_exits_non_zero(tmp_path):
    status = generate_thumbnails.main(
        ["--gallery-root", str(tmp_path / "missing"), "--thumbnail-root", str(tmp_path / "t"), "--no-progress"]
    )

    assert status == 1


def test_thumbnail_cli_generates(tmp_path, nested_tree):
    thumbs = tmp_path / "t"
    status = generate_thumbnails.main(
        ["--gallery-root", str(nested_tree), "--thumbnail-root", str(thumbs), "--size", "32", "--no-progress"]
    )

    assert status == 0
    assert (thumbs / "A.jpg").exists()
    assert (thumbs / "A" / "B.jpg").exists()


def test_thumbnail_cli_succeeds_despite_folder_failures(tmp_path, gallery_root):
    (gallery_root / "bad").mkdir()
    (gallery_root / "bad" / "x.jpg").write_bytes(b"garbage")

    status = generate_thumbnails.main(
        ["--gallery-root", str(gallery_root), "--thumbnail-root", str(tmp_path / "t"), "--no-progress"]
    )

    assert status == 0


def test_export_writes_page_per_path(tmp_path, nested_tree):
    out = tmp_path / "out"
    status = export_gallery.main(
        [
            "--gallery-root",
            str(nested_tree),
            "--thumbnail-root",
            str(tmp_path / "t"),
            "--config",
            str(tmp_path / "absent.json"),
            "--output",
            str(out),
        ]
    )

    assert status == 0
    assert json.loads((out / "paths.json").read_text(encoding="utf-8")) == ["/", "/A", "/A/B"]
    assert json.loads((out / "config.json").read_text(encoding="utf-8"))["gallery_name"] == "Pluto"
    page = json.loads((out / "A" / "index.json").read_text(encoding="utf-8"))
    assert page["imagesCount"] == 1
    assert page["breadcrumbs"][-1] == {"name": "A", "path": "/A"}
    assert (out / "index.json").exists()
    assert (out / "A" / "B" / "index.json").exists()


def test_export_missing_root_exits_non_zero(tmp_path):
    status = export_gallery.main(["--gallery-root", str(tmp_path / "missing"), "--output", str(tmp_path / "out")])

    assert status == 1
