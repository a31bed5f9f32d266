from pathlib import Path

import pytest

from emojicache.errors import ImageNotFound
from emojicache.lookup import content_type_for, lookup


def test_lookup_finds_sanitized_name(tmp_path):
    (tmp_path / "category-item.png").write_bytes(b"png")

    assert lookup("category:item", tmp_path) == tmp_path / "category-item.png"
    assert lookup("category-item", tmp_path) == tmp_path / "category-item.png"


def test_lookup_prefers_gif_over_png(tmp_path):
    (tmp_path / "foo.png").write_bytes(b"png")
    (tmp_path / "foo.gif").write_bytes(b"gif")

    assert lookup("foo", tmp_path).name == "foo.gif"


def test_lookup_probe_order(tmp_path):
    for ext in ["svg", "apng", "webp", "jpeg", "jpg"]:
        (tmp_path / f"foo.{ext}").write_bytes(b"x")

    assert lookup("foo", tmp_path).name == "foo.jpg"


def test_lookup_missing_raises(tmp_path):
    (tmp_path / "foo.bmp").write_bytes(b"x")

    with pytest.raises(ImageNotFound) as excinfo:
        lookup("foo", tmp_path)
    assert excinfo.value.item_name == "foo"


def test_lookup_ignores_directories(tmp_path):
    (tmp_path / "foo.png").mkdir()

    with pytest.raises(ImageNotFound):
        lookup("foo", tmp_path)


def test_lookup_missing_directory(tmp_path):
    with pytest.raises(ImageNotFound):
        lookup("foo", tmp_path / "nope")


@pytest.mark.parametrize(
    "name, expected",
    [
        ("a.gif", "image/gif"),
        ("a.png", "image/png"),
        ("a.jpg", "image/jpeg"),
        ("a.jpeg", "image/jpeg"),
        ("a.webp", "image/webp"),
        ("a.apng", "image/apng"),
        ("a.svg", "image/svg+xml"),
        ("a.bin", "application/octet-stream"),
    ],
)
def test_content_type_for(name, expected):
    assert content_type_for(Path(name)) == expected


def test_lookup_stays_inside_emoji_dir(tmp_path):
    emoji_dir = tmp_path / "emoji"
    emoji_dir.mkdir()
    (tmp_path / "secret.png").write_bytes(b"x")

    with pytest.raises(ImageNotFound):
        lookup("../secret", emoji_dir)


@pytest.mark.parametrize("item_name", ["..", ".", "a/b", "a\\b"])
def test_lookup_rejects_unsafe_names(tmp_path, item_name):
    with pytest.raises(ImageNotFound):
        lookup(item_name, tmp_path)
