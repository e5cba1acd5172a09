# tests/test_image_store.py

"""Tests for the filesystem image store."""

import io
import re
from unittest.mock import patch

import pytest

from utils.image_store import ImageStore


@pytest.fixture
def store(tmp_path):
    return ImageStore(tmp_path / "uploads")


def test_root_is_created(tmp_path):
    root = tmp_path / "nested" / "uploads"
    ImageStore(root)
    assert root.is_dir()


def test_save_returns_public_path_and_writes_bytes(store):
    path = store.save(io.BytesIO(b"abc"), "Photo.PNG")

    assert re.fullmatch(r"/uploads/\d{13}_[0-9a-f]{32}\.png", path)
    assert store.path_for(path).read_bytes() == b"abc"


def test_save_without_extension(store):
    path = store.save(io.BytesIO(b"abc"), "README")
    assert re.fullmatch(r"/uploads/\d{13}_[0-9a-f]{32}", path)


def test_same_millisecond_uploads_do_not_collide(store):
    with patch("utils.image_store.time.time", return_value=1700000000.123):
        first = store.save(io.BytesIO(b"one"), "a.png")
        second = store.save(io.BytesIO(b"two"), "a.png")

    assert first != second
    assert first.split("/")[-1].startswith("1700000000123_")
    assert store.path_for(first).read_bytes() == b"one"
    assert store.path_for(second).read_bytes() == b"two"


def test_delete_removes_file(store):
    path = store.save(io.BytesIO(b"abc"), "a.jpg")
    assert store.delete(path) is True
    assert not store.path_for(path).exists()


def test_delete_missing_file_is_not_an_error(store):
    assert store.delete("/uploads/nothing-here.png") is False
    assert store.delete(None) is False
    assert store.delete("") is False


def test_path_for_stays_inside_root(store):
    resolved = store.path_for("/uploads/../../etc/passwd")
    assert resolved.parent == store.root
    assert resolved.name == "passwd"


def test_path_for_rejects_empty_name(store):
    with pytest.raises(ValueError):
        store.path_for("/uploads/")


@pytest.mark.parametrize("path", ["", "/uploads/..", "uploads\\"])
def test_path_for_rejects_directory_like_paths(store, path):
    with pytest.raises(ValueError):
        store.path_for(path)


def test_delete_of_directory_path_leaves_root_alone(store):
    with pytest.raises(ValueError):
        store.delete("/uploads/")
    assert store.root.is_dir()
