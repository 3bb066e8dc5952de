import io
from datetime import datetime

import pytest
from fastapi import UploadFile
from starlette.datastructures import Headers

from app.core.errors import StorageError
from app.services.storage import LocalPhotoStorage


def upload(filename, content, content_type):
    return UploadFile(file=io.BytesIO(content), filename=filename, headers=Headers({"content-type": content_type}))


@pytest.fixture
def local_storage(tmp_path):
    return LocalPhotoStorage(str(tmp_path), "/static/uploads/", max_bytes=16)


def test_save_writes_file_under_year_and_month(local_storage, tmp_path):
    url = local_storage.save(upload("Parede.JPG", b"\xff\xd8data", "image/jpeg"), now=datetime(2024, 5, 3))

    assert url.startswith("/static/uploads/2024/05/")
    assert url.endswith(".jpg")
    stored = tmp_path / "2024" / "05" / url.rsplit("/", 1)[-1]
    assert stored.read_bytes() == b"\xff\xd8data"


def test_names_are_unique(local_storage):
    first = local_storage.save(upload("a.png", b"one", "image/png"))
    second = local_storage.save(upload("a.png", b"two", "image/png"))
    assert first != second


@pytest.mark.parametrize("filename,content,content_type,key", [
    ("notes.txt", b"text", "text/plain", "upload.invalid_type"),
    ("fake.jpg", b"text", "application/pdf", "upload.invalid_type"),
    ("big.jpg", b"x" * 17, "image/jpeg", "upload.too_large"),
    ("empty.jpg", b"", "image/jpeg", "upload.empty"),
    ("", b"data", "image/jpeg", "upload.empty"),
])
def test_validation(local_storage, filename, content, content_type, key):
    with pytest.raises(StorageError) as exc:
        local_storage.save(upload(filename, content, content_type))
    assert exc.value.message_key == key


def test_missing_upload(local_storage):
    with pytest.raises(StorageError) as exc:
        local_storage.save(None)
    assert exc.value.message_key == "upload.empty"


def test_delete_removes_saved_file(local_storage, tmp_path):
    url = local_storage.save(upload("a.png", b"one", "image/png"), now=datetime(2024, 5, 3))

    assert local_storage.delete(url) is True
    assert not (tmp_path / "2024" / "05" / url.rsplit("/", 1)[-1]).exists()
    assert local_storage.delete(url) is False


@pytest.mark.parametrize("url", [None, "", "https://cdn.example.com/a.png", "/static/uploads/../../etc/passwd"])
def test_delete_ignores_foreign_urls(local_storage, url):
    assert local_storage.delete(url) is False
